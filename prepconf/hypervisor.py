# Author: Bradley R. Kinnard
# default hypervisor config - identity, web ui cookies and tls

from dataclasses import dataclass, asdict
from typing import Any

from boot.params import BootParams
from config.defaults import (
    HYPERVISOR_DEFAULTS,
    COOKIE_DEFAULTS,
    COOKIE_BLOCK_KEY_SIZE,
    COOKIE_HASH_KEY_SIZE,
)
from crypto.certs import generate_cert
from crypto.keys import derive_keypair, rand_bytes


@dataclass
class CookieConfig:
    """session cookie settings for the hypervisor web ui."""
    hash_key: str = ""
    block_key: str = ""
    expires_duration: str = ""
    path: str = ""
    domain: str = ""

    def fill_defaults(self) -> None:
        """fill any unset field from COOKIE_DEFAULTS. keys are left alone."""
        for name, value in COOKIE_DEFAULTS.items():
            if not getattr(self, name):
                setattr(self, name, value)


@dataclass(frozen=True)
class HypervisorConfig:
    """complete hypervisor config, in written key order."""
    public_key: str
    secret_key: str
    db_path: str
    enable_auth: bool
    cookies: CookieConfig
    dmsg_discovery: str
    dmsg_port: int
    http_addr: str
    enable_tls: bool
    tls_cert_file: str
    tls_key_file: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def new_cookie_config() -> CookieConfig:
    """cookie config with freshly generated signing keys."""
    cookies = CookieConfig(
        hash_key=rand_bytes(COOKIE_HASH_KEY_SIZE).hex(),
        block_key=rand_bytes(COOKIE_BLOCK_KEY_SIZE).hex(),
    )
    cookies.fill_defaults()
    return cookies


def build_hypervisor_config(conf, bp: BootParams) -> HypervisorConfig:
    """
    build the hypervisor config for bp.

    also writes a self-signed cert/key pair to conf.tls_cert and
    conf.tls_key; a failure there fails the build.
    """
    keypair = derive_keypair(bp.local_sk)

    out = HypervisorConfig(
        public_key=keypair.public_key_hex(),
        secret_key=keypair.secret_key_hex(),
        db_path=HYPERVISOR_DEFAULTS["db_path"],
        enable_auth=HYPERVISOR_DEFAULTS["enable_auth"],
        cookies=new_cookie_config(),
        dmsg_discovery=HYPERVISOR_DEFAULTS["dmsg_discovery"],
        dmsg_port=HYPERVISOR_DEFAULTS["dmsg_port"],
        http_addr=HYPERVISOR_DEFAULTS["http_addr"],
        enable_tls=HYPERVISOR_DEFAULTS["enable_tls"],
        tls_cert_file=str(conf.tls_cert),
        tls_key_file=str(conf.tls_key),
    )

    generate_cert(out.tls_cert_file, out.tls_key_file)
    return out
