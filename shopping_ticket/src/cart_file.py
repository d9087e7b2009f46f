"""
YAML cart files.

A cart file lists the items to add, in order:

    items:
      - title: Apple
        price: 0.99
        quantity: 5
        type: NEW

The document shape is checked with pydantic; item limits are left to
``Cart.add_item`` so they are enforced in one place.
"""

from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.logger_setup import get_logger
from .cart import Cart
from .errors import CartFileError, InvalidArgumentError
from .models import ItemType

logger = get_logger(__name__)


class CartEntry(BaseModel):
    """A single item entry of a cart file."""
    title: str = Field(..., description="Item title")
    price: float = Field(..., allow_inf_nan=False, description="Unit price in USD")
    quantity: int = Field(..., description="Number of items")
    type: ItemType = Field(default=ItemType.REGULAR, description="Pricing category")

    @field_validator('type', mode='before')
    @classmethod
    def parse_type(cls, v):
        """Accept item type names in any case."""
        if isinstance(v, str):
            return ItemType.parse(v)
        return v


class CartDocument(BaseModel):
    """Top-level cart file structure."""
    items: List[CartEntry] = Field(default_factory=list)


def build_cart(document: CartDocument) -> Cart:
    """
    Create a cart from a parsed document.

    Raises:
        InvalidArgumentError: If an entry breaks an item limit; the message
            names the 1-based entry position
    """
    cart = Cart()
    for position, entry in enumerate(document.items, 1):
        try:
            cart.add_item(entry.title, entry.price, entry.quantity, entry.type)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(e.field, f"item {position}: {e.message}") from e
    return cart


def parse_cart(text: str, source: str = "<string>") -> Cart:
    """
    Build a cart from YAML text.

    Args:
        text: YAML document
        source: Name used in error messages

    Returns:
        Cart holding the listed items

    Raises:
        CartFileError: If the YAML is malformed or has the wrong shape
        InvalidArgumentError: If an item breaks an item limit
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CartFileError(source, f"invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CartFileError(source, "expected a mapping with an 'items' list")

    try:
        document = CartDocument.model_validate(data)
    except ValidationError as e:
        raise CartFileError(source, f"invalid cart structure: {e}") from e

    cart = build_cart(document)
    logger.info(f"Loaded {len(cart)} item(s) from {source}")
    return cart


def load_cart(path: Union[str, Path]) -> Cart:
    """
    Load a cart from a YAML file.

    Raises:
        CartFileError: If the file cannot be read or parsed
        InvalidArgumentError: If an item breaks an item limit
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise CartFileError(str(path), f"cannot read file: {e.strerror or e}") from e

    return parse_cart(text, source=str(path))


def dump_cart(cart: Cart) -> str:
    """Render a cart as YAML in the cart file format."""
    data = {
        'items': [
            {
                'title': item.title,
                'price': item.price,
                'quantity': item.quantity,
                'type': item.item_type.name,
            }
            for item in cart
        ]
    }
    return yaml.dump(data, default_flow_style=False, sort_keys=False)
