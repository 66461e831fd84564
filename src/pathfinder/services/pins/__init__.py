"""Pin file import/export exports."""

from .io import PinLimitError, check_pin_limit, ensure_unique_ids, export_pins, import_pins, next_pin_id

__all__ = [
    "PinLimitError",
    "check_pin_limit",
    "ensure_unique_ids",
    "export_pins",
    "import_pins",
    "next_pin_id",
]
