"""Tests for get_player_creator() and play_file()."""

from unittest.mock import patch

import pytest

from factory_player.core import Platform, UnsupportedPlatformError
from factory_player.factory import (
    CREATORS,
    UNSUPPORTED_PLATFORM_MESSAGE,
    get_player_creator,
    play_file,
)
from factory_player.platform.linux import LinuxPlayer, LinuxPlayerCreator
from factory_player.platform.windows import WindowsPlayer, WindowsPlayerCreator

from .mock_class import MockPlayerCreator


class TestGetPlayerCreator:
    """Tests for creator selection."""

    def test_creators_mapping(self):
        """Test that exactly Linux and Windows have a creator."""
        assert CREATORS == {
            Platform.WINDOWS: WindowsPlayerCreator,
            Platform.LINUX: LinuxPlayerCreator,
        }

    @pytest.mark.parametrize(
        "platform, creator_class, player_class",
        [
            (Platform.WINDOWS, WindowsPlayerCreator, WindowsPlayer),
            (Platform.LINUX, LinuxPlayerCreator, LinuxPlayer),
        ],
    )
    def test_supported_platforms(self, platform, creator_class, player_class):
        """Test that each supported platform gets its own creator and player."""
        creator = get_player_creator(platform)
        assert type(creator) is creator_class
        assert creator.platform == platform
        assert type(creator.create_player()) is player_class

    def test_detects_platform_when_omitted(self):
        """Test that the host platform is detected when none is given."""
        with patch("factory_player.factory.detect_platform", return_value=Platform.LINUX):
            assert isinstance(get_player_creator(), LinuxPlayerCreator)

    def test_config_forwarded(self, config):
        """Test that the config reaches created players."""
        creator = get_player_creator(Platform.LINUX, config=config)
        assert creator.create_player().config is config

    def test_unsupported_prints_message(self, capsys, caplog):
        """Test that an unsupported platform prints a message and returns None."""
        assert get_player_creator(Platform.UNSUPPORTED) is None
        assert capsys.readouterr().out.splitlines() == [UNSUPPORTED_PLATFORM_MESSAGE]
        assert "No implementation found for platform" in caplog.text

    def test_unsupported_strict_raises(self, capsys):
        """Test that strict mode raises instead of printing."""
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            get_player_creator(Platform.UNSUPPORTED, strict=True)
        assert exc_info.value.platform == Platform.UNSUPPORTED
        assert isinstance(exc_info.value, NotImplementedError)
        assert capsys.readouterr().out == ""


class TestPlayFile:
    """Tests for play_file()."""

    def test_plays_with_created_player(self):
        """Test that a fresh player plays the path."""
        creator = MockPlayerCreator()
        future = play_file(creator, "star.wav")
        assert future.done()
        assert len(creator.created) == 1
        assert creator.created[0].played == ["star.wav"]

    def test_no_creator_skips(self):
        """Test that nothing happens without a creator."""
        assert play_file(None, "star.wav") is None

    def test_unsupported_never_plays(self, capsys):
        """Test that an unsupported platform never builds or plays a player."""
        with (
            patch.object(LinuxPlayerCreator, "create_player") as mock_linux_create,
            patch.object(WindowsPlayerCreator, "create_player") as mock_windows_create,
            patch.object(LinuxPlayer, "__init__", return_value=None) as mock_linux_init,
            patch.object(WindowsPlayer, "__init__", return_value=None) as mock_windows_init,
            patch("factory_player.platform.linux.player.LinuxPlayer._do_play") as mock_linux,
            patch("factory_player.platform.windows.player.WindowsPlayer._do_play") as mock_windows,
        ):
            assert play_file(get_player_creator(Platform.UNSUPPORTED), "star.wav") is None
        mock_linux_create.assert_not_called()
        mock_windows_create.assert_not_called()
        mock_linux_init.assert_not_called()
        mock_windows_init.assert_not_called()
        mock_linux.assert_not_called()
        mock_windows.assert_not_called()
