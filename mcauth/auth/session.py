import uuid
import functools

from requests.utils import quote

from mcauth.core.config import Config, resolve
from mcauth.core.error import BadResponse
from mcauth.core.helpers import send, decode, raise_for_error
from mcauth.core.logging import info

from mcauth.auth.profile import Profile


def get_access_token(config: Config):
    """
    Gets the access token (session ID) from the configuration file.

    This is obtained through looking at the cookies on a logged in minecraft.net page, or from a previous ``login()``.
    """

    return config.get('session-id')


def get_uuid(username: str, config: Config = None):
    """Gets the UUID of a player, as undashed hex."""

    config = resolve(config)

    return _get_uuid(username, config.url('api-server', ''), config.get('timeout'))


# Keyed on the API base URL too, so differently configured callers never share entries
@functools.cache
def _get_uuid(username: str, api_server: str, timeout: float):
    res = send('GET', f'{ api_server }/users/profiles/minecraft/{ quote(username, safe="") }', timeout)

    if res.status_code != 200:
        raise_for_error(res)

    data = decode(res)

    try:
        return data['id']
    except (KeyError, TypeError) as e:
        raise BadResponse(f'No id in profile lookup for { username !r}!') from e


def get_profile(player_uuid: uuid.UUID | str, config: Config = None):
    """Gets the profile of a player, along with its signed skin and cape properties."""

    config = resolve(config)

    if not isinstance(player_uuid, uuid.UUID):
        player_uuid = uuid.UUID(player_uuid)

    res = send(
        'GET',
        config.url('session-server', f'/session/minecraft/profile/{ player_uuid.hex }'),
        config.get('timeout')
    )

    if res.status_code != 200:
        raise_for_error(res)

    profile = Profile.from_json(decode(res))
    info(f'Fetched profile! [name={ profile.name }, uuid={ profile.uuid }]')

    return profile
