"""Tests for loading carts from YAML."""

import pytest

from shopping_ticket import CartFileError, InvalidArgumentError, ItemType
from shopping_ticket.src.cart_file import dump_cart, load_cart, parse_cart

SAMPLE_CART = """
items:
  - title: Some title
    price: 0.3
    quantity: 2
    type: regular
  - title: Some very long ti...
    price: 100
    quantity: 2
    type: SALE
"""


def test_parse_cart():
    cart = parse_cart(SAMPLE_CART)

    assert len(cart) == 2
    assert cart.items[0].title == "Some title"
    assert cart.items[0].item_type is ItemType.REGULAR
    assert cart.items[1].price == 100.0
    assert cart.items[1].item_type is ItemType.SALE


def test_type_defaults_to_regular():
    cart = parse_cart("items:\n  - {title: Nails, price: 2.0, quantity: 500}\n")
    assert cart.items[0].item_type is ItemType.REGULAR


def test_empty_document_gives_empty_cart():
    assert len(parse_cart("")) == 0
    assert parse_cart("items: []").format_ticket() == "No items."


def test_item_limits_reported_with_position():
    text = "items:\n  - {title: Ok, price: 1, quantity: 1}\n  - {title: Bad, price: 0, quantity: 1}\n"
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_cart(text)

    assert exc_info.value.field == "price"
    assert "item 2" in str(exc_info.value)


def test_unknown_item_type_rejected():
    with pytest.raises(CartFileError, match="invalid cart structure"):
        parse_cart("items:\n  - {title: X, price: 1, quantity: 1, type: CLEARANCE}\n")


def test_wrong_shape_rejected():
    with pytest.raises(CartFileError):
        parse_cart("- just\n- a list\n")
    with pytest.raises(CartFileError):
        parse_cart("items:\n  - {title: X, price: cheap, quantity: 1}\n")


def test_malformed_yaml_rejected():
    with pytest.raises(CartFileError, match="invalid YAML"):
        parse_cart("items: [unclosed", source="broken.yaml")


def test_load_cart_from_file(tmp_path):
    cart_file = tmp_path / "cart.yaml"
    cart_file.write_text(SAMPLE_CART, encoding="utf-8")

    cart = load_cart(cart_file)
    lines = cart.format_ticket().split("\n")
    assert lines[-1].endswith("$60.60 ")


def test_load_missing_file(tmp_path):
    with pytest.raises(CartFileError, match="cannot read file"):
        load_cart(tmp_path / "missing.yaml")


def test_dump_cart_reloads_same_items():
    cart = parse_cart(SAMPLE_CART)
    reloaded = parse_cart(dump_cart(cart))

    assert reloaded.items == cart.items
    assert "type: SALE" in dump_cart(cart)


def test_non_finite_price_rejected():
    for price in (".nan", ".inf"):
        with pytest.raises(CartFileError, match="invalid cart structure"):
            parse_cart(f"items:\n  - {{title: X, price: {price}, quantity: 1}}\n")
