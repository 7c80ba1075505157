# Author: Bradley R. Kinnard
# pytest configuration and fixtures

"""
Test Configuration

Hypothesis Settings:
- Profiles: dev (default), ci, extensive
- Select with HYPOTHESIS_PROFILE=<name>
- Reproducibility: run with --hypothesis-seed=<seed> to reproduce

To reproduce a failing test:
  pytest tests/test_visor_config.py --hypothesis-seed=12345
"""

import os
from unittest.mock import patch

import pytest
from hypothesis import settings, Phase

from crypto.keys import generate_keypair
from prepconf.prepare import PrepareConfig

# configure hypothesis defaults
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,  # disable deadline in CI (slower machines)
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    print_blob=True,
)

settings.register_profile(
    "dev",
    max_examples=20,
    deadline=None,  # key generation is slow on first use
)

settings.register_profile(
    "extensive",
    max_examples=500,
    deadline=None,
)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def prepare_conf(tmp_path):
    """output paths under a temporary directory."""
    return PrepareConfig(
        visor_conf=tmp_path / "skywire-visor.json",
        hypervisor_conf=tmp_path / "skywire-hypervisor.json",
        tls_cert=tmp_path / "cert.pem",
        tls_key=tmp_path / "key.pem",
    )


@pytest.fixture
def no_certs():
    """stub out tls generation for tests that only look at the config."""
    with patch("prepconf.hypervisor.generate_cert") as gen:
        yield gen


@pytest.fixture
def hypervisor_pks():
    """two distinct hypervisor public keys."""
    return [generate_keypair().public_key, generate_keypair().public_key]
