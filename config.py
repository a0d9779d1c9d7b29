import logging
import os

# Inventory file lives in the working directory the app is launched from
INVENTORY_FILE = "inventory.txt"

# Used when no inventory file exists yet (name, price, stock)
SAMPLE_PRODUCTS = (
    ("Product 1", 10.0, 20),
    ("Product 2", 15.0, 15),
    ("Product 3", 20.0, 10),
)

RECEIPTS_DIR_NAME = "receipts"

# How checkout finds the inventory row for a cart entry
MATCH_BY_NAME = "name"
MATCH_BY_ID = "id"
DEFAULT_MATCH_BY = MATCH_BY_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def inventory_path(base_dir=None):
    """Return the inventory file path, relative to the current working directory by default."""
    return os.path.join(base_dir or os.getcwd(), INVENTORY_FILE)
