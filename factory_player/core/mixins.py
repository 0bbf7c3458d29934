"""Configuration mixin and global default configuration."""

from .config import PlayerConfig

__all__ = [
    "PlayerConfigMixin",
    "get_global_player_config",
    "set_global_player_config",
]

_global_player_config: PlayerConfig = PlayerConfig()


def get_global_player_config() -> PlayerConfig:
    """Get the global default player configuration."""
    return _global_player_config


def set_global_player_config(config: PlayerConfig) -> None:
    """Set the global default player configuration.

    Players created without an explicit config read this one through
    PlayerConfigMixin.config, so the change applies to them immediately.

    Args:
        config: The new global PlayerConfig instance.
    """
    global _global_player_config
    if not isinstance(config, PlayerConfig):
        raise TypeError(f"Expected PlayerConfig, got {type(config).__name__}")
    _global_player_config = config


class PlayerConfigMixin:
    """Mixin class providing a config property.

    If no config is given at construction time the global default is used.
    """

    def __init__(self, config: PlayerConfig | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._config = config

    @property
    def config(self) -> PlayerConfig:
        if self._config is None:
            return _global_player_config
        return self._config
