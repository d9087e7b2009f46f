"""
Ticket formatting.

Renders the cart as a fixed-width text table:

    # Item       Price Quan. Discount Total
    ---------------------------------------
    1 Some title  $.30     2        -  $.60
    ---------------------------------------
    1                                  $.60

Every cell is padded to the widest value of its column and followed by a
single space, so each line ends with one trailing space. Lines are joined
with ``\\n`` and the ticket has no final newline. An empty cart renders as
``No items.``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Sequence, Tuple

from ..utils.money import format_money
from ..utils.text_align import Alignment, append_formatted
from .constants import NO_DISCOUNT_TEXT, NO_ITEMS_TEXT, SEPARATOR_CHAR
from .discount import calculate_discount
from .models import Item

if TYPE_CHECKING:
    from .cart import Cart


@dataclass(frozen=True)
class TicketLine:
    """One priced cart line, before rendering."""
    index: int
    item: Item
    discount: int
    total: float

    @classmethod
    def price(cls, index: int, item: Item) -> 'TicketLine':
        """Apply the discount for the item and compute the line total."""
        discount = calculate_discount(item.item_type, item.quantity)
        total = item.price * item.quantity * (100.0 - discount) / 100.0
        return cls(index=index, item=item, discount=discount, total=total)


@dataclass(frozen=True)
class Column:
    """Ticket column: header text, alignment and how to read its cell."""
    name: str
    alignment: Alignment
    value: Callable[[TicketLine], str]


def _discount_text(line: TicketLine) -> str:
    return NO_DISCOUNT_TEXT if line.discount == 0 else f"{line.discount}%"


COLUMNS: Tuple[Column, ...] = (
    Column("#", Alignment.RIGHT, lambda line: str(line.index)),
    Column("Item", Alignment.LEFT, lambda line: line.item.title),
    Column("Price", Alignment.RIGHT, lambda line: format_money(line.item.price)),
    Column("Quan.", Alignment.RIGHT, lambda line: str(line.item.quantity)),
    Column("Discount", Alignment.RIGHT, _discount_text),
    Column("Total", Alignment.RIGHT, lambda line: format_money(line.total)),
)


def price_items(items: Iterable[Item]) -> List[TicketLine]:
    """Price every item, numbering lines from 1 in cart order."""
    return [TicketLine.price(index, item) for index, item in enumerate(items, 1)]


def column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    """Width of each column: the longest value found in it."""
    widths = [0] * len(COLUMNS)
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))
    return widths


def render_row(row: Sequence[str], widths: Sequence[int]) -> str:
    """Align every cell of a row to its column width."""
    parts: List[str] = []
    for column, value, width in zip(COLUMNS, row, widths):
        append_formatted(parts, value, column.alignment, width)
    return ''.join(parts)


def format_items(items: Sequence[Item]) -> str:
    """
    Format a sequence of items as a ticket.

    Args:
        items: Cart items in insertion order

    Returns:
        Ticket text, or ``No items.`` when there is nothing to list
    """
    if not items:
        return NO_ITEMS_TEXT

    lines = price_items(items)
    # Sum the raw line totals, rounding only when the total is formatted
    total = sum(line.total for line in lines)

    header = [column.name for column in COLUMNS]
    body = [[column.value(line) for column in COLUMNS] for line in lines]
    footer = [str(len(lines))] + [''] * (len(COLUMNS) - 2) + [format_money(total)]

    widths = column_widths([header, *body, footer])
    separator = SEPARATOR_CHAR * (sum(widths) + len(widths) - 1)

    output = [render_row(header, widths), separator]
    output.extend(render_row(row, widths) for row in body)
    output.append(separator)
    output.append(render_row(footer, widths))
    return '\n'.join(output)


def format_ticket(cart: 'Cart') -> str:
    """Format the current contents of a cart as a ticket."""
    return format_items(cart.items)
