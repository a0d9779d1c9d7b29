"""Errors raised by the POS core.

Each error carries a short `title` that a UI can use as the dialog caption;
the message itself is meant to be shown to the user as-is.
"""


class PosError(Exception):
    title = "Error"


class InputError(PosError):
    """Free-text input did not parse, or parsed to a value the operation refuses."""

    title = "Input Error"


class SelectionError(PosError):
    """No row selected, or a lookup by name found nothing."""

    title = "Selection Error"


class StockError(PosError):
    title = "Stock Error"


class FileError(PosError):
    """The inventory file could not be read or written."""

    title = "File Error"
