import requests

from mcauth.core.logging import debug, error
from mcauth.core.error import (
    AuthError,
    BadResponse,
    RequestFailed,
    InvalidSessionID,
    InvalidServerID,
    InvalidUUID,
    InvalidCredentials
)

# Matched against the start of the `errorMessage` first, then the `error` field of a Mojang error body.
# The more specific messages come before the generic exception names.
ERR_MAP = {
    'Invalid serverId': InvalidServerID,
    'Invalid profileId': InvalidUUID,
    'Invalid credentials': InvalidCredentials,
    'Invalid token': InvalidSessionID,
    'ForbiddenOperationException': InvalidSessionID
}


def send(method: str, url: str, timeout: float, **kwargs):
    """Perform a request, turning transport failures into ``RequestFailed``."""

    debug(f'{ method } { url }')

    try:
        return requests.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        error(f'Request failed! [{ method } { url }]')
        raise RequestFailed(f'{ method } { url } failed: { e }') from e


def decode(res: requests.Response):
    """Decode a JSON response body."""

    try:
        return res.json()
    except ValueError as e:
        raise BadResponse(f'Response from { res.url } is not valid JSON! [status={ res.status_code }]') from e


def raise_for_error(res: requests.Response):
    """Raise the matching ``AuthError`` for a Mojang error body, or ``RequestFailed`` if there is none."""

    try:
        body = res.json()
    except ValueError:
        body = None

    if not isinstance(body, dict) or 'error' not in body:
        error(f'Unexpected response! [url={ res.url }, status={ res.status_code }]')
        raise RequestFailed(f'Unexpected status { res.status_code } from { res.url }!')

    kind = str(body['error'])
    message = str(body.get('errorMessage') or kind)

    error(f'Mojang rejected the request! [status={ res.status_code }, error={ kind }, message={ message }]')

    for candidate in (message, kind):
        for k, v in ERR_MAP.items():
            if candidate.startswith(k):
                raise v(message, status=res.status_code)

    raise AuthError(message, status=res.status_code)
