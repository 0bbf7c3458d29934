"""Test configuration and fixtures for factory-player tests."""

from unittest.mock import MagicMock

import pytest

from factory_player.core import PlayerConfig, get_global_player_config, set_global_player_config


@pytest.fixture(autouse=True)
def restore_global_config():
    """Restore the global player configuration after each test."""
    config = get_global_player_config()
    yield
    set_global_player_config(config)


@pytest.fixture
def config():
    """A non-executing player configuration."""
    return PlayerConfig(execute=False)


@pytest.fixture
def mci_backend():
    """Fake MCI backend returning success."""
    return MagicMock(return_value=0)
