"""Currency formatting for ticket cells."""

CURRENCY_SYMBOL = "$"


def format_money(amount: float) -> str:
    """
    Format an amount as dollars with exactly two decimals.

    Mirrors the ``$#.00`` pattern: no thousands separator, ``.`` as the
    decimal point and no zero before it for amounts under one dollar
    (``0.3`` becomes ``$.30``).

    Args:
        amount: Non-negative amount

    Returns:
        Formatted amount
    """
    text = f"{amount:.2f}"
    if text.startswith("0."):
        text = text[1:]
    return f"{CURRENCY_SYMBOL}{text}"
