"""
Discount rules.

For NEW items the discount is always 0%. SECOND_FREE items get 50% when
more than one is bought and SALE items get 70%. Every item that is not
NEW also earns one extra percent per full ten items, capped at 80% overall.
"""

from .constants import (
    BULK_STEP,
    MAX_DISCOUNT,
    SALE_DISCOUNT,
    SECOND_FREE_DISCOUNT,
)
from .models import ItemType


def calculate_discount(item_type: ItemType, quantity: int) -> int:
    """
    Calculate the discount percent for an item line.

    Args:
        item_type: Pricing category of the item
        quantity: Number of items bought, at least 1

    Returns:
        Discount percent between 0 and 80
    """
    if item_type is ItemType.NEW:
        return 0

    if item_type is ItemType.SECOND_FREE:
        discount = SECOND_FREE_DISCOUNT if quantity > 1 else 0
    elif item_type is ItemType.SALE:
        discount = SALE_DISCOUNT
    else:
        discount = 0

    discount += quantity // BULK_STEP
    return min(discount, MAX_DISCOUNT)
