"""
Tests for the input sources.
"""

import io
import os
import sys
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, PAUSE
from main import SnakeGame, _wait_for_any_key, run_session
from players import END_OF_INPUT, KeyboardPlayer, ScriptedPlayer, interpret_key
from services.terminal_display import TerminalDisplay


class TestInterpretKey:
    @pytest.mark.parametrize("key,intent", [
        ("w", UP), ("W", UP),
        ("a", LEFT), ("A", LEFT),
        ("s", DOWN), ("S", DOWN),
        ("d", RIGHT), ("D", RIGHT),
        ("q", QUIT), ("Q", QUIT),
        ("p", PAUSE), ("P", PAUSE),
    ])
    def test_bound_keys(self, key, intent):
        assert interpret_key(key) == intent

    @pytest.mark.parametrize("key", [None, "x", " ", "1", "\x1b", "\x1b[A", "\x00H"])
    def test_unbound_keys(self, key):
        """No key, other letters and escape sequences are no-ops."""
        assert interpret_key(key) is None

    def test_closed_input_means_quit(self):
        assert interpret_key(END_OF_INPUT) == QUIT


class TestScriptedPlayer:
    def test_replays_keys_in_order(self):
        player = ScriptedPlayer(["w", None, "q"])
        assert player.poll() == UP
        assert player.poll() is None
        assert player.poll() == QUIT
        assert player.reads == 3

    def test_exhausted_key(self):
        player = ScriptedPlayer([], exhausted_key="q")
        assert player.read_key() == "q"
        assert player.read_key() == "q"

    def test_exhausted_defaults_to_nothing(self):
        player = ScriptedPlayer(["d"])
        player.read_key()
        assert player.read_key() is None


@pytest.mark.skipif(os.name == "nt", reason="POSIX pipes and select()")
class TestKeyboardPlayerPosix:
    """Reads from a pipe standing in for the terminal."""

    @pytest.fixture
    def pipe(self):
        read_fd, write_fd = os.pipe()
        stream = os.fdopen(read_fd, "r")
        yield stream, write_fd
        stream.close()
        os.close(write_fd)

    def test_no_key_available(self, pipe):
        stream, _ = pipe
        with KeyboardPlayer(stream=stream) as player:
            assert player.read_key() is None
            assert player.poll() is None

    def test_reads_single_keys(self, pipe):
        stream, write_fd = pipe
        os.write(write_fd, b"wQ")
        with KeyboardPlayer(stream=stream) as player:
            assert player.read_key() == "w"
            assert player.poll() == QUIT
            assert player.read_key() is None

    def test_escape_sequence_is_read_whole(self, pipe):
        """Arrow keys are consumed as one unbound key, not as letters."""
        stream, write_fd = pipe
        os.write(write_fd, b"\x1b[Ad")
        player = KeyboardPlayer(stream=stream)
        assert player.read_key() == "\x1b[A"
        assert player.poll() == RIGHT

    def closed_pipe(self, data=b""):
        read_fd, write_fd = os.pipe()
        os.write(write_fd, data)
        os.close(write_fd)
        return os.fdopen(read_fd, "r")

    def test_closed_input_is_reported(self):
        """Once the writer is gone, pending keys come first, then end of input."""
        with self.closed_pipe(b"d") as stream:
            player = KeyboardPlayer(stream=stream)
            assert player.read_key() == "d"
            assert player.read_key() == END_OF_INPUT
            assert player.poll() == QUIT

    def test_start_wait_returns_on_closed_input(self):
        sleeps = []

        def sleep(seconds):
            sleeps.append(seconds)
            if len(sleeps) > 100:
                raise RuntimeError("start wait never returned")

        with self.closed_pipe() as stream:
            _wait_for_any_key(KeyboardPlayer(stream=stream), sleep)
        assert sleeps == []

    def test_session_on_closed_input_quits(self):
        """A session started with stdin at EOF ends instead of spinning."""
        game = SnakeGame(width=10, height=5)
        display = TerminalDisplay(stream=io.StringIO(), clear=False)

        with self.closed_pipe() as stream:
            reason = run_session(game, KeyboardPlayer(stream=stream), display, sleep=lambda s: None)

        assert reason == "quit"
        assert game.moves == 0

    def test_non_tty_leaves_terminal_alone(self, pipe):
        stream, _ = pipe
        with patch("players.keyboard_player.termios") as mock_termios:
            with KeyboardPlayer(stream=stream):
                pass
        mock_termios.tcgetattr.assert_not_called()
        mock_termios.tcsetattr.assert_not_called()

    def test_tty_mode_is_restored(self):
        stream = Mock()
        stream.isatty.return_value = True
        stream.fileno.return_value = 7
        with patch("players.keyboard_player.termios") as mock_termios, \
                patch("players.keyboard_player.tty") as mock_tty:
            mock_termios.tcgetattr.return_value = ["saved"]
            with KeyboardPlayer(stream=stream):
                mock_tty.setcbreak.assert_called_once_with(stream.fileno())
            mock_termios.tcsetattr.assert_called_once_with(
                stream.fileno(), mock_termios.TCSADRAIN, ["saved"]
            )
