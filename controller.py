import logging
import os

from config import DEFAULT_MATCH_BY, RECEIPTS_DIR_NAME
from errors import FileError, PosError
from models import Cart
from products import InventoryStore
from receipts import ReceiptGenerator, receipt_text
from storage import InventoryFile
from transactions import CheckoutService

LOGGER = logging.getLogger(__name__)


class Outcome:
    """Result of a controller call, ready to be shown by a UI."""

    def __init__(self, ok, message="", title="", receipt_text=None):
        self.ok = ok
        self.message = message
        self.title = title
        self.receipt_text = receipt_text

    @classmethod
    def success(cls, message="", receipt_text=None):
        return cls(True, message, "", receipt_text)

    @classmethod
    def failure(cls, error, receipt_text=None):
        return cls(False, str(error), error.title, receipt_text)

    def __bool__(self):
        return self.ok

    def __repr__(self):
        return f"Outcome(ok={self.ok!r}, title={self.title!r}, message={self.message!r})"


class PosController:
    """Entry point for a presentation layer.

    The UI keeps selection state and collects text input; it passes row
    indexes (None when nothing is selected) and raw text here and renders
    the returned Outcome. Domain errors never escape these methods.
    """

    def __init__(self, inventory_path=None, match_by=DEFAULT_MATCH_BY):
        self.inventory = InventoryStore(InventoryFile(inventory_path))
        self.cart = Cart()
        self.checkout_service = CheckoutService(self.inventory, self.cart, match_by)
        self.last_receipt = None

    def _run(self, action, success_message=""):
        try:
            action()
        except PosError as exc:
            LOGGER.warning("%s: %s", exc.title, exc)
            return Outcome.failure(exc)
        return Outcome.success(success_message)

    # --- VIEWS ---
    def inventory_rows(self):
        return self.inventory.rows()

    def cart_rows(self):
        return self.cart.rows()

    # --- INVENTORY ---
    def start(self):
        return self._run(self.inventory.load)

    def add_product(self, name, price, stock):
        return self._run(lambda: self.inventory.add(name, price, stock))

    def edit_product(self, index, name, price, stock):
        return self._run(lambda: self.inventory.edit(index, name, price, stock))

    def delete_product(self, index):
        return self._run(lambda: self.inventory.delete(index))

    # --- CART ---
    def _add_product_to_cart(self, product, quantity):
        self.cart.add_item(product.name, product.price, product.quantity, quantity,
                           product_id=product.product_id)

    def add_to_cart(self, inventory_index, quantity):
        def action():
            product = self.inventory.get(inventory_index, "Please select a product to add to cart.")
            self._add_product_to_cart(product, quantity)
        return self._run(action)

    def add_to_cart_by_name(self, name, quantity):
        return self._run(lambda: self._add_product_to_cart(self.inventory.lookup(name), quantity))

    def edit_cart(self, index, quantity):
        return self._run(lambda: self.cart.edit_quantity(index, quantity))

    def delete_cart_item(self, index):
        return self._run(lambda: self.cart.remove_item(index),
                         "Product deleted from cart successfully.")

    # --- CHECKOUT ---
    def checkout(self):
        try:
            receipt = self.checkout_service.checkout()
        except FileError as exc:
            # stock and cart are already updated in memory
            LOGGER.warning("%s: %s", exc.title, exc)
            self.last_receipt = exc.receipt
            return Outcome.failure(exc, receipt_text(exc.receipt))

        self.last_receipt = receipt
        return Outcome.success("Checkout completed successfully!", receipt_text(receipt))

    def export_receipt(self, receipts_dir=None, receipt_number=None):
        """Save the last checkout's receipt as a PNG image; the path is the outcome message."""
        if self.last_receipt is None:
            return Outcome(False, "Nothing to export. Complete a checkout first.", "Receipt")

        receipts_dir = receipts_dir or os.path.join(os.getcwd(), RECEIPTS_DIR_NAME)
        try:
            png_path = ReceiptGenerator.generate(self.last_receipt, receipts_dir, receipt_number)
        except OSError as exc:
            return Outcome.failure(FileError(f"Error saving receipt image: {exc}"))
        LOGGER.info("Receipt image written to %s", png_path)
        return Outcome.success(png_path)
