# Author: Bradley R. Kinnard
# crypto module - node identity keys and tls material

from crypto.keys import (
    KeyPair,
    KeyDerivationError,
    derive_keypair,
    generate_keypair,
    pubkey_from_seckey,
    rand_bytes,
    is_null,
)
from crypto.certs import (
    CertificateGenerationError,
    generate_cert,
)

__all__ = [
    # keys
    "KeyPair",
    "KeyDerivationError",
    "derive_keypair",
    "generate_keypair",
    "pubkey_from_seckey",
    "rand_bytes",
    "is_null",
    # certs
    "CertificateGenerationError",
    "generate_cert",
]
