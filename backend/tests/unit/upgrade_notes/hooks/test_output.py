"""Unit tests for output sinks."""

import io
from unittest.mock import patch

from upgrade_notes.hooks.output import LoggerOutputSink
from upgrade_notes.hooks.output import StreamOutputSink


class TestStreamOutputSink:
    def test_writes_indented_block(self) -> None:
        stream = io.StringIO()

        StreamOutputSink(stream).write(["first", "", "second"])

        assert stream.getvalue() == "\n first\n\n second\n"

    def test_custom_indent(self) -> None:
        stream = io.StringIO()

        StreamOutputSink(stream, indent="  > ").write(["line"])

        assert stream.getvalue() == "\n  > line\n"


class TestLoggerOutputSink:
    def test_logs_report_as_notice(self) -> None:
        with patch("upgrade_notes.hooks.output.logger") as mock_logger:
            LoggerOutputSink().write(["first", "second"])

        mock_logger.notice.assert_called_once_with("first\nsecond")
