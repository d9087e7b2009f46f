"""Cart line items and their pricing categories."""

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    """Pricing category of an item."""
    NEW = "NEW"
    REGULAR = "REGULAR"
    SECOND_FREE = "SECOND_FREE"
    SALE = "SALE"

    @classmethod
    def parse(cls, value: str) -> 'ItemType':
        """
        Look up an item type by name, ignoring case and surrounding spaces.

        Raises:
            ValueError: If the name is not a known item type
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown item type '{value}'. Use one of: {names}") from None


@dataclass(frozen=True)
class Item:
    """A single cart line: what was bought, at which price and how many."""
    title: str
    price: float
    quantity: int
    item_type: ItemType
