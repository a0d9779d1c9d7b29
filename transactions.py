import logging

from config import DEFAULT_MATCH_BY, MATCH_BY_ID, MATCH_BY_NAME
from errors import FileError
from models import Receipt

LOGGER = logging.getLogger(__name__)


def find_stock_entry(products, item, match_by=DEFAULT_MATCH_BY):
    """Return the inventory product a cart item draws from, or None."""
    if match_by not in (MATCH_BY_NAME, MATCH_BY_ID):
        raise ValueError(f"Unknown match mode: {match_by!r}")

    # entries added without an id fall back to the name
    if match_by == MATCH_BY_ID and item.product_id is not None:
        for product in products:
            if product.product_id == item.product_id:
                return product
        return None

    for product in products:
        if product.name == item.name:
            return product
    return None


def process_checkout(cart, products, match_by=DEFAULT_MATCH_BY):
    """Total the cart into a receipt, take the quantities out of stock and empty the cart.

    Stock is not floored at zero. Cart entries with no inventory row still
    count in the total and are still cleared.
    """
    receipt = Receipt()
    for item in cart.items:
        receipt.add_line(item)

        stocked = find_stock_entry(products, item, match_by)
        if stocked is None:
            LOGGER.warning("No inventory entry for cart item %r; stock unchanged", item.name)
            continue
        stocked.quantity = stocked.quantity - item.quantity

    cart.clear()
    return receipt

#Check-out service
class CheckoutService:
    def __init__(self, inventory, cart, match_by=DEFAULT_MATCH_BY):
        self.inventory = inventory
        self.cart = cart
        self.match_by = match_by

    def checkout(self):
        if len(self.cart.items) == 0:
            LOGGER.info("Checking out an empty cart")

        receipt = process_checkout(self.cart, self.inventory.products, self.match_by)
        LOGGER.info("Checkout of %d line(s), total %r", len(receipt.lines), receipt.total)

        # no rollback: stock stays decremented and the cart stays empty
        try:
            self.inventory.save()
        except FileError as exc:
            exc.receipt = receipt
            raise
        return receipt
