# Author: Bradley R. Kinnard
# boot parameters - provisioning intent read once at first configuration

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from crypto.keys import KeyDerivationError


class InvalidModeError(ValueError):
    """raised when a mode value is outside the known deployment modes."""
    pass


class Mode(IntEnum):
    """deployment mode. values match the boot-parameter byte encoding."""
    HYPERVISOR = 0
    VISOR = 1


def parse_mode(value: Any) -> Mode:
    """coerce a Mode, byte value or name into a Mode."""
    if isinstance(value, Mode):
        return value
    if isinstance(value, str):
        try:
            return Mode[value.strip().upper()]
        except KeyError:
            raise InvalidModeError(f"invalid mode: {value!r}") from None
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Mode(value)
        except ValueError:
            raise InvalidModeError(f"invalid mode: {value!r}") from None
    raise InvalidModeError(f"invalid mode: {value!r}")


@dataclass(frozen=True)
class BootParams:
    """
    boot parameters for one node.

    mode is kept as given so that bad values surface as InvalidModeError
    at prepare time, not at construction.
    """
    mode: Any
    local_sk: bytes | None = None
    hypervisor_pks: tuple[bytes, ...] = field(default_factory=tuple)
    skysocks_passcode: str = ""

    def __post_init__(self):
        # accept any sequence, store an immutable one
        object.__setattr__(self, "hypervisor_pks", tuple(self.hypervisor_pks))

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BootParams":
        sk = d.get("local_sk")
        try:
            local_sk = bytes.fromhex(sk) if sk else None
        except (TypeError, ValueError) as e:
            raise KeyDerivationError(f"local_sk is not a hex string: {e}") from e

        return cls(
            mode=parse_mode(d["mode"]),
            local_sk=local_sk,
            hypervisor_pks=tuple(bytes.fromhex(pk) for pk in d.get("hypervisor_pks", [])),
            skysocks_passcode=d.get("skysocks_passcode", ""),
        )
