"""
Shopping cart.

Holds validated items in the order they were added. Items are never removed
or changed once accepted; the ticket is recomputed from the current contents
on every request.

Not safe for concurrent mutation: callers sharing a cart between threads
must serialize ``add_item`` and ticket generation themselves.
"""

import math
from typing import Iterator, List, Optional, Tuple

from ..utils.logger_setup import get_logger
from .constants import MIN_PRICE, MIN_QUANTITY, TITLE_MAX_LENGTH
from .errors import InvalidArgumentError
from .models import Item, ItemType
from .ticket import format_ticket

logger = get_logger(__name__)


class Cart:
    """Ordered collection of shopping items."""

    def __init__(self):
        self._items: List[Item] = []

    def add_item(self, title: Optional[str], price: float, quantity: int, item_type: ItemType) -> None:
        """
        Add a new item to the end of the cart.

        Checks run in order (title, price, quantity, type) and the first failure
        is reported; the cart is left untouched in that case.

        Args:
            title: Item title, 1 to 32 characters
            price: Unit price in USD, finite and at least 0.01
            quantity: Whole number of items, at least 1
            item_type: Pricing category

        Raises:
            InvalidArgumentError: If a value is out of range
        """
        if not isinstance(title, str) or not title or len(title) > TITLE_MAX_LENGTH:
            logger.debug(f"Rejected item title: {title!r}")
            raise InvalidArgumentError(
                "title", f"must be 1 to {TITLE_MAX_LENGTH} characters long"
            )
        if isinstance(price, bool) or not isinstance(price, (int, float)) \
                or not math.isfinite(price) or price < MIN_PRICE:
            logger.debug(f"Rejected price {price} for '{title}'")
            raise InvalidArgumentError("price", f"must be a finite amount of at least {MIN_PRICE}")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < MIN_QUANTITY:
            logger.debug(f"Rejected quantity {quantity} for '{title}'")
            raise InvalidArgumentError("quantity", f"must be a whole number of at least {MIN_QUANTITY}")
        if not isinstance(item_type, ItemType):
            logger.debug(f"Rejected item type {item_type!r} for '{title}'")
            raise InvalidArgumentError("type", f"must be one of {', '.join(t.name for t in ItemType)}")

        item = Item(title=title, price=price, quantity=quantity, item_type=item_type)
        logger.debug(f"Adding item #{len(self._items) + 1}: '{title}' {quantity} x {price} ({item_type.name})")
        self._items.append(item)

    @property
    def items(self) -> Tuple[Item, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)

    def format_ticket(self) -> str:
        """Format the cart contents as a ticket."""
        return format_ticket(self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))
