# Author: Bradley R. Kinnard
# node identity keys - secp256k1 key pairs for visors and hypervisors

import secrets
from dataclasses import dataclass
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from utils.helpers import get_logger

logger = get_logger(__name__)


SECRET_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 33  # compressed SEC1 point

NULL_SECRET_KEY = bytes(SECRET_KEY_SIZE)

# order of the secp256k1 group
_CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class KeyDerivationError(ValueError):
    """raised when a secret key cannot yield a public key."""
    pass


@dataclass(frozen=True)
class KeyPair:
    """node identity. public_key is always derived from secret_key."""
    public_key: bytes
    secret_key: bytes

    def public_key_hex(self) -> str:
        return self.public_key.hex()

    def secret_key_hex(self) -> str:
        return self.secret_key.hex()

    def to_dict(self) -> dict[str, Any]:
        return {
            "public_key": self.public_key_hex(),
            "secret_key": self.secret_key_hex(),
        }

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key_hex()})"


def is_null(secret_key: bytes | None) -> bool:
    """true for a missing or all-zero secret key."""
    return secret_key is None or secret_key == NULL_SECRET_KEY


def rand_bytes(n: int) -> bytes:
    """n bytes from the OS CSPRNG."""
    return secrets.token_bytes(n)


def _compress(private_key: ec.EllipticCurvePrivateKey) -> bytes:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.CompressedPoint,
    )


def pubkey_from_seckey(secret_key: bytes) -> bytes:
    """deterministically compute the public key of a secret key."""
    if not isinstance(secret_key, (bytes, bytearray)):
        raise KeyDerivationError(
            f"secret key must be bytes, got {type(secret_key).__name__}"
        )
    if len(secret_key) != SECRET_KEY_SIZE:
        raise KeyDerivationError(
            f"secret key must be {SECRET_KEY_SIZE} bytes, got {len(secret_key)}"
        )

    scalar = int.from_bytes(secret_key, "big")
    if not 0 < scalar < _CURVE_ORDER:
        raise KeyDerivationError("secret key is outside the curve order")

    try:
        private_key = ec.derive_private_key(scalar, ec.SECP256K1())
    except ValueError as e:
        raise KeyDerivationError(f"invalid secret key: {e}") from e

    return _compress(private_key)


def generate_keypair() -> KeyPair:
    """generate a fresh random key pair."""
    private_key = ec.generate_private_key(ec.SECP256K1())
    secret = private_key.private_numbers().private_value.to_bytes(SECRET_KEY_SIZE, "big")

    keypair = KeyPair(public_key=_compress(private_key), secret_key=secret)
    logger.debug(f"generated key pair: {keypair.public_key_hex()}")
    return keypair


def derive_keypair(secret_key: bytes | None) -> KeyPair:
    """
    resolve the identity of a node.

    a null secret key means "generate one"; any other key is authoritative
    and only its public half is computed.
    """
    if is_null(secret_key):
        return generate_keypair()

    return KeyPair(public_key=pubkey_from_seckey(secret_key), secret_key=bytes(secret_key))
