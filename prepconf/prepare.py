# Author: Bradley R. Kinnard
# config preparation - write a node's default config once, never overwrite

import json
import os
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Any, Callable

from boot.params import BootParams, Mode, parse_mode
from prepconf.hypervisor import build_hypervisor_config
from prepconf.visor import build_visor_config
from utils.helpers import get_logger

logger = get_logger(__name__)


CONFIG_FILE_MODE = 0o644


class FileSystemError(OSError):
    """raised when the target config file cannot be checked, created or written."""
    pass


class SerializationError(ValueError):
    """raised when a built config cannot be encoded as json."""
    pass


@dataclass(frozen=True)
class PrepareConfig:
    """where generated visor/hypervisor configs and tls material go."""
    visor_conf: Path | str
    hypervisor_conf: Path | str
    tls_cert: Path | str
    tls_key: Path | str


Builder = Callable[[PrepareConfig, BootParams], Any]

# mode -> (target path, builder)
_TARGETS: dict[Mode, tuple[Callable[[PrepareConfig], Any], Builder]] = {
    Mode.HYPERVISOR: (attrgetter("hypervisor_conf"), build_hypervisor_config),
    Mode.VISOR: (attrgetter("visor_conf"), build_visor_config),
}


def serialize(out: Any) -> str:
    """encode a built config as tab-indented json, fields in declaration order."""
    try:
        return json.dumps(out.to_dict(), indent="\t")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot serialize {type(out).__name__}: {e}") from e


def _ensure_exists(path: Path, build: Builder, conf: PrepareConfig, bp: BootParams) -> bool:
    """write the output of build to path unless path exists. true if written."""
    try:
        os.stat(path)
        logger.debug(f"config exists, leaving it untouched: {path}")
        return False
    except FileNotFoundError:
        pass
    except OSError as e:
        raise FileSystemError(e.errno, f"cannot check config: {e.strerror}", str(path)) from e

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, CONFIG_FILE_MODE)
    except FileExistsError:
        # created by someone else since the check above
        logger.debug(f"config appeared during prepare, leaving it untouched: {path}")
        return False
    except OSError as e:
        raise FileSystemError(e.errno, f"cannot create config: {e.strerror}", str(path)) from e

    # close is covered too; buffered data may only fail to land there
    try:
        with os.fdopen(fd, "w") as f:
            f.write(serialize(build(conf, bp)))
    except OSError as e:
        raise FileSystemError(e.errno, f"cannot write config: {e.strerror}", str(path)) from e

    logger.info(f"wrote default config: {path}")
    return True


def prepare(conf: PrepareConfig, bp: BootParams) -> bool:
    """
    ensure the config file for bp.mode exists, generating it if absent.

    existing files are never overwritten or merged. on failure the target
    may be left empty or partially written; remove it before retrying.

    returns True if a file was written, False if one already existed.
    raises InvalidModeError before touching the filesystem if bp.mode is
    not a known mode.
    """
    mode = parse_mode(bp.mode)
    target, build = _TARGETS[mode]
    return _ensure_exists(Path(target(conf)), build, conf, bp)
