# Author: Bradley R. Kinnard
# utils module exports

from utils.helpers import (
    load_prepare_config,
    load_boot_params,
    get_logger
)

__all__ = [
    "load_prepare_config",
    "load_boot_params",
    "get_logger"
]
