import uuid
import hashlib

import pytest

from mcauth.auth.digest import hex_digest
from mcauth.auth.request import join, authenticate, has_joined, login
from mcauth.core.crypto import SharedSecret
from mcauth.core.error import (
    AuthError,
    BadResponse,
    RequestFailed,
    InvalidSessionID,
    InvalidServerID,
    InvalidCredentials
)

NOTCH_ID = '069a79f444e94726a5befca90e38aaf5'


def test_join(http):
    http.reply(204)

    join('token', uuid.UUID(NOTCH_ID), 'abc')

    method, url, kwargs = http.calls[0]
    assert method == 'POST'
    assert url == 'https://sessionserver.mojang.com/session/minecraft/join'
    assert kwargs['json'] == {'accessToken': 'token', 'selectedProfile': NOTCH_ID, 'serverId': 'abc'}


def test_join_invalid_token(http):
    http.reply(403, {'error': 'ForbiddenOperationException', 'errorMessage': 'Invalid token'})

    with pytest.raises(InvalidSessionID) as e:
        join('bad', NOTCH_ID, 'abc')

    assert e.value.status == 403


def test_join_invalid_server_id(http):
    http.reply(403, {'error': 'ForbiddenOperationException', 'errorMessage': 'Invalid serverId'})

    with pytest.raises(InvalidServerID):
        join('token', NOTCH_ID, 'abc')


def test_join_unmapped_error(http):
    http.reply(429, {'error': 'TooManyRequestsException', 'errorMessage': 'Slow down'})

    with pytest.raises(AuthError) as e:
        join('token', NOTCH_ID, 'abc')

    assert type(e.value) is AuthError
    assert str(e.value) == 'Slow down'


def test_join_unexpected_status(http):
    http.reply(500, '<html>')

    with pytest.raises(RequestFailed):
        join('token', NOTCH_ID, 'abc')


def test_authenticate_sends_server_hash(http):
    http.reply(204)

    secret = SharedSecret(bytes(16))
    authenticate('token', NOTCH_ID, b'', secret, b'\x30\x82')

    expected = hex_digest(hashlib.sha1(bytes(16) + b'\x30\x82').digest())
    assert http.calls[0][2]['json']['serverId'] == expected


def test_has_joined(http):
    http.reply(200, {
        'id': NOTCH_ID,
        'name': 'Notch',
        'properties': [{'name': 'textures', 'value': 'e30=', 'signature': 'c2ln'}]
    })

    profile = has_joined('Notch', '-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1', ip='127.0.0.1')

    assert profile.id == NOTCH_ID

    method, url, kwargs = http.calls[0]
    assert method == 'GET'
    assert url == 'https://sessionserver.mojang.com/session/minecraft/hasJoined'
    assert kwargs['params'] == {
        'username': 'Notch',
        'serverId': '-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1',
        'ip': '127.0.0.1'
    }


def test_has_joined_without_ip(http):
    http.reply(200, {'id': NOTCH_ID, 'name': 'Notch'})

    has_joined('Notch', 'abc')

    assert 'ip' not in http.calls[0][2]['params']


def test_has_not_joined(http):
    http.reply(204)

    assert has_joined('Notch', 'abc') is None


def test_has_joined_bad_body(http):
    http.reply(200, {'name': 'Notch'})

    with pytest.raises(BadResponse):
        has_joined('Notch', 'abc')


def test_login(http):
    http.reply(200, {
        'accessToken': 'access',
        'clientToken': 'client',
        'selectedProfile': {'id': NOTCH_ID, 'name': 'Notch'}
    })

    result = login('notch@example.com', 'hunter2', client_token='client')

    assert result.access_token == 'access'
    assert result.selected_profile.uuid == uuid.UUID(NOTCH_ID)

    method, url, kwargs = http.calls[0]
    assert url == 'https://authserver.mojang.com/authenticate'
    assert kwargs['json'] == {
        'agent': {'name': 'Minecraft', 'version': 1},
        'username': 'notch@example.com',
        'password': 'hunter2',
        'clientToken': 'client',
        'requestUser': True
    }


def test_login_generates_client_token(http):
    http.reply(200, {'accessToken': 'access', 'clientToken': 'generated'})

    result = login('notch@example.com', 'hunter2')

    assert len(http.calls[0][2]['json']['clientToken']) == 32
    assert result.selected_profile is None


def test_login_wrong_password(http):
    http.reply(403, {
        'error': 'ForbiddenOperationException',
        'errorMessage': 'Invalid credentials. Invalid username or password.'
    })

    with pytest.raises(InvalidCredentials):
        login('notch@example.com', 'wrong')


def test_has_joined_invalid_token(http):
    http.reply(403, {'error': 'ForbiddenOperationException', 'errorMessage': 'Invalid token'})

    with pytest.raises(InvalidSessionID) as e:
        has_joined('Notch', 'abc')

    assert e.value.status == 403


def test_join_sends_dashed_uuid_undashed(http):
    http.reply(204)

    join('token', '069a79f4-44e9-4726-a5be-fca90e38aaf5', 'abc')

    assert http.calls[0][2]['json']['selectedProfile'] == NOTCH_ID
