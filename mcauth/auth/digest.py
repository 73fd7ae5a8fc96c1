import hashlib

from mcauth.core.crypto import SharedSecret

SHA1_DIGEST_SIZE = 20


def hex_digest(sha1_hash: bytes):
    """Generate a Minecraft hex digest from a SHA1 hash."""

    assert len(sha1_hash) == SHA1_DIGEST_SIZE, f'expected a { SHA1_DIGEST_SIZE } byte digest, got { len(sha1_hash) }'

    # Data is first converted to a signed number (as Java's `BigInteger(byte[])` does), with the digest
    # function subsequently spitting out its hex representation, minus sign included
    return format(
        int.from_bytes(sha1_hash, byteorder='big', signed=True),
        'x'
    )


def generate_server_hash(server_id: bytes, shared_secret: SharedSecret, public_key: bytes):
    """Generate a hex digest of the SHA1 server hash used in the ``serverId`` field for authentication."""

    shared_secret = SharedSecret(shared_secret)

    server_hash = hashlib.sha1()

    # Order is fixed by the protocol
    server_hash.update(server_id)
    server_hash.update(shared_secret)
    server_hash.update(public_key)

    return hex_digest(server_hash.digest())
