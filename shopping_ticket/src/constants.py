"""
Shared constants for shopping-ticket.

Centralizes item limits, discount rules and ticket layout values used
across multiple modules.
"""

from .models import ItemType

# Item limits checked on insertion
TITLE_MAX_LENGTH = 32
MIN_PRICE = 0.01
MIN_QUANTITY = 1

# Discount rules
MAX_DISCOUNT = 80          # Percent, applies after the bulk bonus
BULK_STEP = 10             # Every full BULK_STEP items adds 1%
SECOND_FREE_DISCOUNT = 50  # Only when more than one item is bought
SALE_DISCOUNT = 70

# Ticket text
NO_ITEMS_TEXT = "No items."
NO_DISCOUNT_TEXT = "-"
SEPARATOR_CHAR = "-"

# Sample cart printed by the ``demo`` command
DEMO_ITEMS = [
    ("Apple", 0.99, 5, ItemType.NEW),
    ("Banana", 20.00, 4, ItemType.SECOND_FREE),
    ("A long piece of toilet paper", 17.20, 1, ItemType.SALE),
    ("Nails", 2.00, 500, ItemType.REGULAR),
]
