"""Output sinks receiving the rendered reports."""

import sys
from collections.abc import Sequence
from typing import Protocol
from typing import TextIO

from upgrade_notes.utils.logger import setup_logger

logger = setup_logger()


class OutputSink(Protocol):
    def write(self, lines: Sequence[str]) -> None: ...


class StreamOutputSink:
    """Writes each report as an indented block separated by a blank line."""

    def __init__(self, stream: TextIO | None = None, indent: str = " ") -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.indent = indent

    def write(self, lines: Sequence[str]) -> None:
        self.stream.write("\n")
        for line in lines:
            self.stream.write(f"{self.indent}{line}".rstrip() + "\n")
        self.stream.flush()


class LoggerOutputSink:
    def write(self, lines: Sequence[str]) -> None:
        logger.notice("\n".join(lines))
