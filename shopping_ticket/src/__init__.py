"""Core functionality modules."""

from .cart import Cart
from .cart_file import CartDocument, CartEntry, dump_cart, load_cart, parse_cart
from .cli import cli, main
from .config import Config, ConfigManager, LoggingConfig, CartConfig
from .discount import calculate_discount
from .errors import CartFileError, InvalidArgumentError
from .models import Item, ItemType
from .ticket import COLUMNS, Column, TicketLine, format_items, format_ticket

__all__ = [
    # Cart
    "Cart",
    "Item",
    "ItemType",
    # Cart files
    "CartDocument",
    "CartEntry",
    "dump_cart",
    "load_cart",
    "parse_cart",
    # CLI
    "cli",
    "main",
    # Config
    "Config",
    "ConfigManager",
    "LoggingConfig",
    "CartConfig",
    # Discounts
    "calculate_discount",
    # Errors
    "CartFileError",
    "InvalidArgumentError",
    # Ticket
    "COLUMNS",
    "Column",
    "TicketLine",
    "format_items",
    "format_ticket",
]
