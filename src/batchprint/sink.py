"""Output sink shared by every renderer.

The sink forwards text to a caller-owned stream and turns I/O failures into
WriteError. It never buffers and never closes the stream.
"""

from typing import TextIO

from .errors import WriteError


class OutputSink:
    """Thin fallible wrapper around a writable text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except (OSError, ValueError) as e:
            raise WriteError(str(e)) from e

    def writeline(self, text: str = "") -> None:
        self.write(text + "\n")

    def writelines(self, lines) -> None:
        for line in lines:
            self.writeline(line)


def as_sink(out) -> OutputSink:
    """Wrap a stream in an OutputSink unless it already is one."""
    if isinstance(out, OutputSink):
        return out
    return OutputSink(out)
