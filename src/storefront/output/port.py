"""Output port — abstract interface for where receipts and notices are written.

Checkout programs against the port; adapters are swapped via configuration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class OutputPort(ABC):
    """Abstract line-oriented output sink."""

    @abstractmethod
    def write_line(self, line: str = "") -> None:
        """Write a single line (without trailing newline)."""
        ...

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)
