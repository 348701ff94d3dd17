"""Console output adapter — prints lines to stdout."""

import sys
from typing import TextIO

from storefront.output.port import OutputPort


class ConsoleOutput(OutputPort):
    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def write_line(self, line: str = "") -> None:
        # Resolve stdout lazily so redirected streams are honoured
        stream = self._stream or sys.stdout
        stream.write(f"{line}\n")
