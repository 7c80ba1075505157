# Author: Bradley R. Kinnard
# boot module exports

from boot.params import BootParams, Mode, InvalidModeError, parse_mode

__all__ = [
    "BootParams",
    "Mode",
    "InvalidModeError",
    "parse_mode",
]
