"""In-memory output adapter — records lines for test assertions."""

from storefront.output.port import OutputPort


class MemoryOutput(OutputPort):
    """Output adapter that keeps every written line in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def reset(self):
        """Clear recorded lines (useful between tests)."""
        self.lines.clear()
