"""Route group exports."""

from . import health, pins, reports, tour

__all__ = ["health", "pins", "reports", "tour"]
