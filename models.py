from errors import SelectionError, StockError
from validators import parse_count, parse_quantity

#product model
class Product:
    # quantity is stock on hand in the inventory, requested amount in the cart
    def __init__(self, name, price, quantity, product_id=None):
        self.product_id = product_id
        self.name = name
        self.price = price
        self.quantity = quantity

    def as_row(self):
        return (self.name, self.price, self.quantity)

    def __repr__(self):
        return (f"Product(name={self.name!r}, price={self.price!r}, "
                f"quantity={self.quantity!r}, product_id={self.product_id!r})")

#cart model
class Cart:
    def __init__(self):
        self.items = []

    def __len__(self):
        return len(self.items)

    def _get(self, index, message):
        if index is None or not 0 <= index < len(self.items):
            raise SelectionError(message)
        return self.items[index]

    def add_item(self, product_name, unit_price, available_stock, requested_quantity, product_id=None):
        """Append a new cart entry; stock is only checked against `available_stock`, not decremented."""
        quantity = parse_quantity(requested_quantity)
        if quantity > parse_count(available_stock):
            raise StockError("Insufficient stock available.")

        # one entry per add, repeated adds are not merged
        item = Product(product_name, unit_price, quantity, product_id)
        self.items.append(item)
        return item

    def edit_quantity(self, index, new_quantity):
        item = self._get(index, "Please select a product in the cart to edit.")
        item.quantity = parse_quantity(new_quantity)
        return item

    def remove_item(self, index):
        """Remove the first entry sharing the selected entry's name.

        With duplicate names this can be an earlier row than the one at `index`.
        """
        selected = self._get(index, "Please select a product in the cart to delete.")
        for position, item in enumerate(self.items):
            if item.name == selected.name:
                del self.items[position]
                return item
        raise SelectionError("Product not found in cart.")

    def clear(self):
        self.items = []

    def rows(self):
        return [item.as_row() for item in self.items]

#receipt line model
class ReceiptLine:
    def __init__(self, name, price, quantity):
        self.name = name
        self.price = price
        self.quantity = quantity

    @property
    def line_total(self):
        return self.price * self.quantity

#receipt model
class Receipt:
    def __init__(self):
        self.lines = []
        self.total = 0.0

    def add_line(self, item):
        line = ReceiptLine(item.name, item.price, item.quantity)
        self.lines.append(line)
        # accumulated left to right, in cart order
        self.total += line.line_total
        return line
