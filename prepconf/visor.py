# Author: Bradley R. Kinnard
# default visor config - identity, allowed hypervisors and bundled apps

import copy
from dataclasses import dataclass, field, asdict
from typing import Any

from boot.params import BootParams
from config.defaults import (
    VISOR_DEFAULTS,
    SKYCHAT_NAME,
    SKYCHAT_PORT,
    SKYCHAT_ADDR,
    SKYSOCKS_NAME,
    SKYSOCKS_PORT,
    SKYSOCKS_CLIENT_NAME,
    SKYSOCKS_CLIENT_PORT,
    SKYSOCKS_CLIENT_ADDR,
)
from crypto.keys import derive_keypair


@dataclass(frozen=True)
class AppConfig:
    """one bundled app the visor manages."""
    app: str
    auto_start: bool
    port: int
    args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HypervisorEntry:
    """a hypervisor allowed to control this visor."""
    public_key: str


@dataclass(frozen=True)
class VisorConfig:
    """
    complete visor config.

    field order is the key order of the written file.
    """
    version: str
    key_pair: dict[str, str]
    stcp: dict[str, Any]
    dmsg: dict[str, Any]
    dmsg_pty: dict[str, Any]
    transport: dict[str, Any]
    routing: dict[str, Any]
    uptime_tracker: dict[str, Any]
    apps: list[AppConfig]
    hypervisors: list[HypervisorEntry]
    apps_path: str
    local_path: str
    log_level: str
    shutdown_timeout: str
    interfaces: dict[str, Any]
    app_server_addr: str
    restart_check_delay: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def skysocks_args(passcode: str) -> list[str]:
    """proxy server args; empty unless a passcode was supplied."""
    if passcode:
        return ["-passcode", passcode]
    return []


def default_apps(bp: BootParams) -> list[AppConfig]:
    return [
        AppConfig(
            app=SKYCHAT_NAME,
            auto_start=True,
            port=SKYCHAT_PORT,
            args=["-addr", SKYCHAT_ADDR],
        ),
        AppConfig(
            app=SKYSOCKS_NAME,
            auto_start=True,
            port=SKYSOCKS_PORT,
            args=skysocks_args(bp.skysocks_passcode),
        ),
        AppConfig(
            app=SKYSOCKS_CLIENT_NAME,
            auto_start=False,
            port=SKYSOCKS_CLIENT_PORT,
            args=["-addr", SKYSOCKS_CLIENT_ADDR],
        ),
    ]


def build_visor_config(conf, bp: BootParams) -> VisorConfig:
    """build the visor config for bp. conf is unused; visors need no tls."""
    keypair = derive_keypair(bp.local_sk)
    d = copy.deepcopy(VISOR_DEFAULTS)

    return VisorConfig(
        version=d["version"],
        key_pair=keypair.to_dict(),
        stcp=d["stcp"],
        dmsg=d["dmsg"],
        dmsg_pty=d["dmsg_pty"],
        transport=d["transport"],
        routing=d["routing"],
        uptime_tracker=d["uptime_tracker"],
        apps=default_apps(bp),
        hypervisors=[HypervisorEntry(public_key=pk.hex()) for pk in bp.hypervisor_pks],
        apps_path=d["apps_path"],
        local_path=d["local_path"],
        log_level=d["log_level"],
        shutdown_timeout=d["shutdown_timeout"],
        interfaces=d["interfaces"],
        app_server_addr=d["app_server_addr"],
        restart_check_delay=d["restart_check_delay"],
    )
