import itertools
import logging

from config import SAMPLE_PRODUCTS
from errors import SelectionError
from models import Product
from storage import InventoryFile
from validators import parse_price, parse_stock

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Ordered product list backed by the inventory file.

    Every mutating call rewrites the file; list order is display order.
    """

    def __init__(self, inventory_file=None):
        self.file = inventory_file or InventoryFile()
        self.products = []
        self._ids = itertools.count(1)

    def __len__(self):
        return len(self.products)

    def _check_name(self, name):
        if "," in name:
            LOGGER.warning("Product name %r contains a comma and will not load back correctly", name)

    def _new_product(self, name, price, stock):
        self._check_name(name)
        return Product(name, price, stock, product_id=next(self._ids))

    def rows(self):
        return [product.as_row() for product in self.products]

    def get(self, index, message="Please select a product."):
        if index is None or not 0 <= index < len(self.products):
            raise SelectionError(message)
        return self.products[index]

    def find_by_name(self, name):
        # first match wins when names are duplicated
        for product in self.products:
            if product.name == name:
                return product
        return None

    def find_by_id(self, product_id):
        for product in self.products:
            if product.product_id == product_id:
                return product
        return None

    def lookup(self, name):
        product = self.find_by_name(name)
        if product is None:
            raise SelectionError("Product not found in inventory.")
        return product

    def add(self, name, price, stock):
        price = parse_price(price)
        stock = parse_stock(stock)

        product = self._new_product(name, price, stock)
        self.products.append(product)
        self.save()
        return product

    def edit(self, index, name, price, stock):
        product = self.get(index, "Please select a product to edit.")
        price = parse_price(price)
        stock = parse_stock(stock)

        self._check_name(name)
        product.name = name
        product.price = price
        product.quantity = stock
        self.save()
        return product

    def delete(self, index):
        product = self.get(index, "Please select a product to delete.")
        del self.products[index]
        self.save()
        return product

    def load_sample_data(self):
        for name, price, stock in SAMPLE_PRODUCTS:
            self.products.append(self._new_product(name, price, stock))

    def load(self):
        """Replace the in-memory list with the file contents.

        A missing file gives the sample products (the file is not written).
        A malformed line raises FileError, keeping the products read before it.
        """
        self.products = []
        if not self.file.exists():
            LOGGER.info("Inventory file %s not found. Adding sample data.", self.file.path)
            self.load_sample_data()
            return self.products

        for name, price, stock in self.file.read_rows():
            self.products.append(self._new_product(name, price, stock))
        LOGGER.info("Loaded %d product(s) from %s", len(self.products), self.file.path)
        return self.products

    def save(self):
        self.file.write_rows(self.rows())
        LOGGER.info("Saved %d product(s) to %s", len(self.products), self.file.path)
