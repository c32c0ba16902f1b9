"""
Tests for the process-level fault handlers.
"""

from unittest.mock import MagicMock, patch

from schoolbase.main import _handle_loop_exception, _handle_uncaught_exception


class TestLoopExceptionHandler:
    def test_exception_terminates_process(self):
        loop = MagicMock()
        context = {"message": "Task exception was never retrieved", "exception": RuntimeError()}

        with patch("schoolbase.main.os._exit") as exit_mock:
            _handle_loop_exception(loop, context)

        exit_mock.assert_called_once_with(1)
        loop.default_exception_handler.assert_not_called()

    def test_message_only_notice_is_passed_on(self):
        loop = MagicMock()
        context = {"message": "Executing <Handle ...> took 0.2 seconds"}

        with patch("schoolbase.main.os._exit") as exit_mock:
            _handle_loop_exception(loop, context)

        exit_mock.assert_not_called()
        loop.default_exception_handler.assert_called_once_with(context)


class TestUncaughtExceptionHandler:
    def test_exception_terminates_process(self):
        with patch("schoolbase.main.os._exit") as exit_mock:
            _handle_uncaught_exception(ValueError, ValueError("boom"), None)

        exit_mock.assert_called_once_with(1)

    def test_keyboard_interrupt_uses_default_hook(self):
        with (
            patch("schoolbase.main.os._exit") as exit_mock,
            patch("schoolbase.main.sys.__excepthook__") as default_hook,
        ):
            _handle_uncaught_exception(KeyboardInterrupt, KeyboardInterrupt(), None)

        default_hook.assert_called_once()
        exit_mock.assert_not_called()
