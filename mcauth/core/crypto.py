import os

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.serialization import load_der_public_key
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.padding import PKCS1v15

from mcauth.core.error import InvalidSharedSecret, InvalidPublicKey

SHARED_SECRET_LENGTH = 16


class SharedSecret(bytes):
    """
    The 16-byte shared secret agreed on during the encryption handshake.

    The length is checked once, when the secret is built, so anything typed as a ``SharedSecret`` is known to be
    well-formed by the time it is hashed or encrypted.
    """

    def __new__(cls, secret: bytes):
        if isinstance(secret, cls):
            return secret

        if len(secret) != SHARED_SECRET_LENGTH:
            raise InvalidSharedSecret(
                f'Shared secret must be { SHARED_SECRET_LENGTH } bytes long, got { len(secret) }!'
            )

        return super().__new__(cls, secret)

    @classmethod
    def generate(cls):
        return cls(os.urandom(SHARED_SECRET_LENGTH))

    def __repr__(self):
        # Keep the secret out of logs and tracebacks
        return 'SharedSecret(<16 bytes>)'


class PublicKey:
    """DER public key encryption utility class."""

    def __init__(self, key: bytes):
        # The raw DER bytes are what goes into the server hash, not a re-serialization
        self.der = bytes(key)

        try:
            self.key = load_der_public_key(self.der, backend=default_backend())
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidPublicKey(f'Could not load DER public key! ({ e })') from e

        if not isinstance(self.key, rsa.RSAPublicKey):
            raise InvalidPublicKey(f'Server public key must be RSA, got { type(self.key).__name__ }!')

    def encrypt(self, data: bytes):
        return self.key.encrypt(
            data,
            PKCS1v15()
        )
