"""Unit tests for the signal handler module in the flattree CLI."""

import signal
from unittest.mock import patch

import pytest

from flattree.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling, signal_handler


@pytest.fixture
def handler():
    """A fresh SignalHandler, so the module singleton is left alone."""
    with patch("signal.signal"):
        yield SignalHandler()


def test_initial_state(handler):
    assert not handler.interrupted()
    assert handler.exit_code() is None


def test_sigpipe(handler):
    with patch("signal.signal") as mock_signal:
        handler.handle_sigpipe(signal.SIGPIPE, None)
    assert handler.sigpipe_received.is_set()
    assert handler.interrupted()
    assert handler.exit_code() == 141
    mock_signal.assert_called_once_with(signal.SIGPIPE, handler.original_sigpipe_handler)


def test_sigint(handler):
    with patch("signal.signal") as mock_signal:
        handler.handle_sigint(signal.SIGINT, None)
    assert handler.sigint_received.is_set()
    assert handler.exit_code() == 130
    mock_signal.assert_called_once_with(signal.SIGINT, handler.original_sigint_handler)


def test_setup_signal_handling():
    with patch("signal.signal") as mock_signal:
        setup_signal_handling()
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_without_signal():
    with patch("flattree.cli.signal_handler.os.dup2") as mock_dup2:
        cleanup()
    mock_dup2.assert_not_called()


def test_cleanup_after_signal():
    with (
        patch.object(signal_handler, "interrupted", return_value=True),
        patch("flattree.cli.signal_handler.os.open", return_value=99),
        patch("flattree.cli.signal_handler.os.dup2") as mock_dup2,
        patch("flattree.cli.signal_handler.sys") as mock_sys,
    ):
        mock_sys.stdout.fileno.return_value = 1
        cleanup()
    mock_dup2.assert_called_once_with(99, 1)
