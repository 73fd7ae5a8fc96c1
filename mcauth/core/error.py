class MCAuthError(Exception):
    """
    Base Exception class for all mcauth exceptions.

    Used for easily catching all mcauth-related errors.
    """


class AuthError(MCAuthError):
    """
    Base class for authentication-related exceptions.

    Raised directly when Mojang rejects a request with an error that has no dedicated subclass.
    """

    def __init__(self, message: str = '', status: int = None):
        super().__init__(message)
        self.status = status


class InvalidSessionID(AuthError):
    """Thrown when an invalid session ID (access token) is provided."""


class InvalidServerID(AuthError):
    """Thrown when the hex digest of the server ID contains invalid information."""


class InvalidUUID(AuthError):
    """Thrown when the authentication server returns that a profile ID (UUID) is invalid."""


class InvalidCredentials(AuthError):
    """Thrown when a login is rejected because of a wrong username or password."""


class NetworkError(MCAuthError):
    """Base class for network-related exceptions."""


class RequestFailed(NetworkError):
    """Thrown when a request could not be completed, or came back with an unexpected status."""


class BadResponse(NetworkError):
    """Thrown when a response body is not the JSON that was expected."""


class CryptoError(MCAuthError):
    """Base class for key and secret exceptions."""


class InvalidSharedSecret(CryptoError):
    """Thrown when a shared secret is constructed from the wrong number of bytes."""


class InvalidPublicKey(CryptoError):
    """Thrown when a server public key is not a valid DER-encoded RSA key."""
