# Author: Bradley R. Kinnard
# utility helpers for skyprep

import json
import logging
from pathlib import Path
from typing import Any

import yaml
import jsonschema

from config.schemas import prepare_config_schema, boot_params_schema


logger = logging.getLogger(__name__)


def _load_document(path: Path) -> Any:
    """load a yaml or json document, picked by file suffix."""
    with open(path, "r") as f:
        if path.suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def load_prepare_config(path: Path | str = "config/prepare.yaml"):
    """load and validate the output-path config for prepare()."""
    from prepconf.prepare import PrepareConfig

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"prepare config not found: {path}")

    data = _load_document(path)
    jsonschema.validate(instance=data, schema=prepare_config_schema)
    logger.info(f"loaded prepare config from {path}")
    return PrepareConfig(
        visor_conf=data["visor_conf"],
        hypervisor_conf=data["hypervisor_conf"],
        tls_cert=data["tls_cert"],
        tls_key=data["tls_key"],
    )


def load_boot_params(path: Path | str):
    """load and validate boot parameters. keys are hex encoded."""
    from boot.params import BootParams

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"boot params not found: {path}")

    data = _load_document(path)
    jsonschema.validate(instance=data, schema=boot_params_schema)
    logger.info(f"loaded boot params from {path}")
    return BootParams.from_dict(data)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """get a configured logger. avoids duplicate handlers."""
    log = logging.getLogger(name)
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)

    return log
