# Author: Bradley R. Kinnard
# tests for input loaders, boot params and logging helpers

import json
import logging

import jsonschema
import pytest
import yaml

from boot.params import BootParams, InvalidModeError, Mode, parse_mode
from crypto.keys import KeyDerivationError
from prepconf.prepare import PrepareConfig
from utils.helpers import get_logger, load_boot_params, load_prepare_config


PK_HEX = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


class TestParseMode:

    @pytest.mark.parametrize("value,expected", [
        (Mode.VISOR, Mode.VISOR),
        (0, Mode.HYPERVISOR),
        (1, Mode.VISOR),
        ("Hypervisor", Mode.HYPERVISOR),
        (" visor ", Mode.VISOR),
    ])
    def test_valid(self, value, expected):
        assert parse_mode(value) is expected

    @pytest.mark.parametrize("value", [2, -1, "", "router", None, True, 1.0])
    def test_invalid(self, value):
        with pytest.raises(InvalidModeError):
            parse_mode(value)


class TestBootParams:

    def test_pks_stored_as_tuple(self):
        bp = BootParams(mode=Mode.VISOR, hypervisor_pks=[b"a", b"b"])
        assert bp.hypervisor_pks == (b"a", b"b")

    def test_from_dict(self):
        bp = BootParams.from_dict({
            "mode": "visor",
            "local_sk": "00" * 31 + "01",
            "hypervisor_pks": [PK_HEX],
            "skysocks_passcode": "pw",
        })
        assert bp.mode is Mode.VISOR
        assert bp.local_sk == (1).to_bytes(32, "big")
        assert bp.hypervisor_pks == (bytes.fromhex(PK_HEX),)
        assert bp.skysocks_passcode == "pw"

    @pytest.mark.parametrize("sk", ["not hex", 42])
    def test_from_dict_bad_secret_key(self, sk):
        with pytest.raises(KeyDerivationError):
            BootParams.from_dict({"mode": "visor", "local_sk": sk})

    def test_from_dict_defaults(self):
        bp = BootParams.from_dict({"mode": 0})
        assert bp.local_sk is None
        assert bp.hypervisor_pks == ()
        assert bp.skysocks_passcode == ""


class TestLoadBootParams:

    def test_json(self, tmp_path):
        path = tmp_path / "boot.json"
        path.write_text(json.dumps({"mode": 1, "hypervisor_pks": [PK_HEX]}))

        bp = load_boot_params(path)
        assert bp.mode is Mode.VISOR
        assert len(bp.hypervisor_pks) == 1

    def test_yaml(self, tmp_path):
        path = tmp_path / "boot.yaml"
        path.write_text(yaml.safe_dump({"mode": "hypervisor", "local_sk": None}))

        assert load_boot_params(path).mode is Mode.HYPERVISOR

    def test_bad_pubkey_rejected(self, tmp_path):
        path = tmp_path / "boot.json"
        path.write_text(json.dumps({"mode": 1, "hypervisor_pks": ["zz"]}))

        with pytest.raises(jsonschema.ValidationError):
            load_boot_params(path)

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_boot_params(tmp_path / "nope.json")


class TestLoadPrepareConfig:

    def test_yaml(self, tmp_path):
        path = tmp_path / "prepare.yaml"
        path.write_text(yaml.safe_dump({
            "visor_conf": "/etc/skywire-visor.json",
            "hypervisor_conf": "/etc/skywire-hypervisor.json",
            "tls_cert": "/etc/cert.pem",
            "tls_key": "/etc/key.pem",
        }))

        conf = load_prepare_config(path)
        assert conf == PrepareConfig(
            visor_conf="/etc/skywire-visor.json",
            hypervisor_conf="/etc/skywire-hypervisor.json",
            tls_cert="/etc/cert.pem",
            tls_key="/etc/key.pem",
        )

    def test_missing_field(self, tmp_path):
        path = tmp_path / "prepare.yaml"
        path.write_text(yaml.safe_dump({"visor_conf": "/etc/v.json"}))

        with pytest.raises(jsonschema.ValidationError):
            load_prepare_config(path)


class TestGetLogger:

    def test_no_duplicate_handlers(self):
        a = get_logger("skyprep.test")
        b = get_logger("skyprep.test")

        assert a is b
        assert len(a.handlers) == 1

    def test_level(self):
        log = get_logger("skyprep.test.debug", level=logging.DEBUG)
        assert log.level == logging.DEBUG
