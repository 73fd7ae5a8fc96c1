import uuid

from mcauth.core.config import Config, resolve
from mcauth.core.crypto import SharedSecret
from mcauth.core.helpers import send, decode, raise_for_error
from mcauth.core.logging import info, success, warn

from mcauth.auth.digest import generate_server_hash
from mcauth.auth.profile import Profile, LoginResult

JOIN_PATH = '/session/minecraft/join'
HAS_JOINED_PATH = '/session/minecraft/hasJoined'
LOGIN_PATH = '/authenticate'

AGENT = {
    'name': 'Minecraft',
    'version': 1
}


def _profile_id(player_uuid: uuid.UUID | str):
    if not isinstance(player_uuid, uuid.UUID):
        player_uuid = uuid.UUID(player_uuid)

    return player_uuid.hex


def join(access_token: str, player_uuid: uuid.UUID | str, server_hash: str, config: Config = None):
    """
    Tell the Mojang session servers that this account is joining the server identified by ``server_hash``.
    """

    config = resolve(config)

    res = send(
        'POST',
        config.url('session-server', JOIN_PATH),
        config.get('timeout'),

        headers={
            'Content-Type': 'application/json'
        },

        json={
            'accessToken': access_token,
            'selectedProfile': _profile_id(player_uuid),
            'serverId': server_hash
        }
    )

    if res.status_code != 204:
        raise_for_error(res)

    success(f'Joined session! [uuid={ _profile_id(player_uuid) }]')


def authenticate(access_token: str, player_uuid: uuid.UUID | str, server_id: bytes, shared_secret: SharedSecret,
                 public_key: bytes, config: Config = None):
    """
    Authenticate with the Mojang session servers, telling them that this account is joining a server.

    The ``server_id``, ``shared_secret`` and ``public_key`` are the values from the server's Encryption Request and
    the client's own secret; they are hashed into the ``serverId`` field here.
    """

    join(access_token, player_uuid, generate_server_hash(server_id, shared_secret, public_key), config=config)


def has_joined(username: str, server_hash: str, ip: str = None, config: Config = None):
    """
    Check, from the server side, whether ``username`` has joined the session identified by ``server_hash``.

    Returns the player's profile on success, or ``None`` if the session servers do not know of the join.
    """

    config = resolve(config)

    params = {
        'username': username,
        'serverId': server_hash
    }

    if ip is not None:
        params['ip'] = ip

    res = send('GET', config.url('session-server', HAS_JOINED_PATH), config.get('timeout'), params=params)

    if res.status_code == 204:
        warn(f'Player has not joined! [username={ username }]')
        return None

    if res.status_code != 200:
        raise_for_error(res)

    profile = Profile.from_json(decode(res))
    success(f'Player verified! [name={ profile.name }, uuid={ profile.uuid }]')

    return profile


def login(username: str, password: str, client_token: str = None, config: Config = None):
    """Log in with a Mojang account, returning the access token and selected profile."""

    config = resolve(config)

    if client_token is None:
        client_token = uuid.uuid4().hex

    info(f'Logging in! [username={ username }]')

    res = send(
        'POST',
        config.url('auth-server', LOGIN_PATH),
        config.get('timeout'),

        json={
            'agent': AGENT,
            'username': username,
            'password': password,
            'clientToken': client_token,
            'requestUser': True
        }
    )

    if res.status_code != 200:
        raise_for_error(res)

    result = LoginResult.from_json(decode(res))

    if result.selected_profile is None:
        warn(f'Account has no game profile! [username={ username }]')
    else:
        success(f'Logged in! [name={ result.selected_profile.name }]')

    return result
