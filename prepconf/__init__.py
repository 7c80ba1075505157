# Author: Bradley R. Kinnard
# prepconf module - default visor/hypervisor config generation

from prepconf.prepare import (
    PrepareConfig,
    prepare,
    serialize,
    FileSystemError,
    SerializationError,
)
from prepconf.visor import (
    VisorConfig,
    AppConfig,
    HypervisorEntry,
    build_visor_config,
)
from prepconf.hypervisor import (
    HypervisorConfig,
    CookieConfig,
    build_hypervisor_config,
)

__all__ = [
    # prepare
    "PrepareConfig",
    "prepare",
    "serialize",
    "FileSystemError",
    "SerializationError",
    # visor
    "VisorConfig",
    "AppConfig",
    "HypervisorEntry",
    "build_visor_config",
    # hypervisor
    "HypervisorConfig",
    "CookieConfig",
    "build_hypervisor_config",
]
