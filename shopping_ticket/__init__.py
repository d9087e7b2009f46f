"""
Shopping cart discounts and fixed-width text tickets.

Items are added to a ``Cart`` with validation on insert; each item's
discount depends on its type and quantity, and ``format_ticket`` renders
the cart as an aligned text table with a grand total.

Typical usage example:

from shopping_ticket import Cart, ItemType
cart = Cart()
cart.add_item("Apple", 0.99, 5, ItemType.NEW)
print(cart.format_ticket())
"""

__version__ = "0.1.0"
__author__ = "AI Innovation Hub"

from .src.cart import Cart
from .src.discount import calculate_discount
from .src.errors import CartFileError, InvalidArgumentError
from .src.models import Item, ItemType
from .src.ticket import format_ticket

__all__ = [
    "Cart",
    "Item",
    "ItemType",
    "calculate_discount",
    "format_ticket",
    "InvalidArgumentError",
    "CartFileError",
]
