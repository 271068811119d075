"""Tests pour le lancement du lecteur video."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cinelib.adapters.player import PlayerError, launch_player


class TestLaunchPlayer:
    def test_command_with_arguments(self) -> None:
        with patch("cinelib.adapters.player.subprocess.Popen") as mock_popen:
            mock_popen.return_value = MagicMock(pid=1234)
            proc = launch_player("vlc --fullscreen", Path("/films/heat.mkv"))

        assert proc.pid == 1234
        args = mock_popen.call_args.args[0]
        assert args == ["vlc", "--fullscreen", "/films/heat.mkv"]

    def test_missing_command_raises_player_error(self) -> None:
        with patch(
            "cinelib.adapters.player.subprocess.Popen",
            side_effect=FileNotFoundError("mpv"),
        ):
            with pytest.raises(PlayerError):
                launch_player("mpv", Path("/films/heat.mkv"))

    def test_unbalanced_quotes_raise_player_error(self) -> None:
        with patch("cinelib.adapters.player.subprocess.Popen") as mock_popen:
            with pytest.raises(PlayerError, match="invalide"):
                launch_player('vlc "--fullscreen', Path("/films/heat.mkv"))
        mock_popen.assert_not_called()

    @pytest.mark.parametrize("command", ["", "   "])
    def test_empty_command_does_not_run_the_movie_file(self, command: str) -> None:
        with patch("cinelib.adapters.player.subprocess.Popen") as mock_popen:
            with pytest.raises(PlayerError):
                launch_player(command, Path("/films/heat.mkv"))
        mock_popen.assert_not_called()
