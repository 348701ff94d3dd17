"""Output adapter registry — where receipts and shipment notices go."""

import os

_output_instance = None


def get_output():
    """Return the configured output adapter (singleton).

    Uses ConsoleOutput by default. Set OUTPUT_ADAPTER=memory to record
    lines in memory instead.
    """
    global _output_instance
    if _output_instance is None:
        adapter = os.environ.get("OUTPUT_ADAPTER", "console")
        if adapter == "console":
            from storefront.output.console import ConsoleOutput

            _output_instance = ConsoleOutput()
        elif adapter == "memory":
            from storefront.output.memory import MemoryOutput

            _output_instance = MemoryOutput()
        else:
            raise ValueError(f"Unknown output adapter: {adapter}")
    return _output_instance


def reset_output():
    """Reset the output singleton (useful for testing)."""
    global _output_instance
    _output_instance = None
