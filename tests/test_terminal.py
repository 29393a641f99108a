"""Tests for controlling-terminal access (infra/terminal.py).

``open`` is patched — no test touches the real terminal.
"""

from __future__ import annotations

import io
from unittest.mock import MagicMock, patch

import pytest

from xcute.exceptions import TerminalUnavailableError, XcuteError
from xcute.infra.terminal import open_confirmation_stream, terminal_device


class TestTerminalDevice:
    @patch("xcute.infra.terminal.os.name", "posix")
    def test_posix(self) -> None:
        assert terminal_device() == "/dev/tty"

    @patch("xcute.infra.terminal.os.name", "nt")
    def test_windows(self) -> None:
        assert terminal_device() == "CON"


class TestOpenConfirmationStream:
    @patch("xcute.infra.terminal.open")
    def test_returns_opened_stream(self, mock_open: MagicMock) -> None:
        stream = io.StringIO("y\n")
        mock_open.return_value = stream

        assert open_confirmation_stream() is stream
        assert mock_open.call_args.args[0] == terminal_device()

    @patch("xcute.infra.terminal.open", side_effect=OSError(6, "No such device or address"))
    def test_missing_terminal_raises_typed_error(self, _mock_open: MagicMock) -> None:
        with pytest.raises(TerminalUnavailableError, match="interactive confirmation") as exc_info:
            open_confirmation_stream()

        assert isinstance(exc_info.value, XcuteError)
        assert exc_info.value.hint is not None
        assert "-i" in exc_info.value.hint
