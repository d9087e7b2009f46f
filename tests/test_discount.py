"""Tests for the discount rules."""

from shopping_ticket import ItemType, calculate_discount


def test_new_items_never_discounted():
    """NEW items get 0% whatever the quantity, bulk bonus included."""
    for quantity in (1, 9, 10, 100, 1000):
        assert calculate_discount(ItemType.NEW, quantity) == 0, f"quantity={quantity}"


def test_second_free_needs_more_than_one_item():
    """SECOND_FREE gives 50% only from the second item on."""
    assert calculate_discount(ItemType.SECOND_FREE, 1) == 0
    assert calculate_discount(ItemType.SECOND_FREE, 2) == 50
    assert calculate_discount(ItemType.SECOND_FREE, 10) == 51


def test_sale_discount():
    """SALE items get 70% plus the bulk bonus."""
    assert calculate_discount(ItemType.SALE, 1) == 70
    assert calculate_discount(ItemType.SALE, 10) == 71
    assert calculate_discount(ItemType.SALE, 100) == 80


def test_regular_bulk_bonus():
    """Every full ten items adds one percent."""
    cases = [
        (1, 0),
        (9, 0),
        (10, 1),
        (19, 1),
        (20, 2),
        (21, 2),
    ]
    for quantity, expected in cases:
        actual = calculate_discount(ItemType.REGULAR, quantity)
        assert actual == expected, f"quantity={quantity}: {actual} != {expected}"


def test_discount_capped_at_80():
    """Large quantities stop at 80%."""
    assert calculate_discount(ItemType.REGULAR, 1000) == 80
    assert calculate_discount(ItemType.SECOND_FREE, 1000) == 80
    assert calculate_discount(ItemType.SALE, 1000) == 80


def test_bulk_bonus_is_monotonic():
    """Non-NEW discounts never shrink as quantity grows, one step per ten items."""
    for item_type in (ItemType.REGULAR, ItemType.SECOND_FREE, ItemType.SALE):
        previous = calculate_discount(item_type, 10)
        for quantity in range(11, 1500):
            current = calculate_discount(item_type, quantity)
            assert current >= previous, f"{item_type.name} dropped at {quantity}"
            if quantity % 10 == 0 and previous < 80:
                assert current == previous + 1, f"{item_type.name} at {quantity}"
            elif quantity % 10 != 0:
                assert current == previous, f"{item_type.name} at {quantity}"
            assert current <= 80
            previous = current
