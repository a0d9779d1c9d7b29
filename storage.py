import logging
import os

from config import inventory_path
from errors import FileError

LOGGER = logging.getLogger(__name__)


def split_fields(line):
    parts = line.split(",")
    # trailing empty fields are dropped before counting
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def format_line(name, price, stock):
    return f"{name},{float(price)},{int(stock)}"


class InventoryFile:
    """Flat text file holding one `name,price,stock` record per line.

    No header, no quoting: a name containing a comma will not read back.
    """

    def __init__(self, path=None):
        self.path = path or inventory_path()

    def exists(self):
        return os.path.exists(self.path)

    def read_rows(self):
        """Yield `(name, price, stock)` for every well-formed line.

        Lines without exactly three fields are skipped. A bad number stops the
        read with FileError; rows already yielded stay with the caller.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                for lineno, raw in enumerate(fh, start=1):
                    line = raw.rstrip("\r\n")
                    parts = split_fields(line)
                    if len(parts) != 3:
                        LOGGER.debug("Skipping line %d of %s: %r", lineno, self.path, line)
                        continue

                    name, price_text, stock_text = parts
                    try:
                        price = float(price_text)
                        stock = int(stock_text)
                    except ValueError as exc:
                        raise FileError(
                            f"Error loading inventory from file: line {lineno}: {exc}"
                        ) from exc
                    yield name, price, stock
        except OSError as exc:
            raise FileError(f"Error loading inventory from file: {exc}") from exc

    def write_rows(self, rows):
        # whole file is rewritten every time
        try:
            with open(self.path, "w", encoding="utf-8") as fh:
                for name, price, stock in rows:
                    fh.write(format_line(name, price, stock) + "\n")
        except OSError as exc:
            raise FileError(f"Error saving inventory to file: {exc}") from exc
