"""Reward points calculation."""

import math

from receipt_points.domain.entities import Receipt

ROUND_DOLLAR_BONUS = 50
QUARTER_MULTIPLE_BONUS = 25
ITEM_PAIR_BONUS = 5
ITEM_PRICE_MULTIPLIER = 0.2
ODD_DAY_BONUS = 6
AFTERNOON_BONUS = 10

QUARTER_CENTS = ("00", "25", "50", "75")
ODD_DIGITS = "13579"
AFTERNOON_HOURS = ("14", "15")


def calculate_points(receipt: Receipt) -> int:
    """Calculate the reward points earned by a receipt.

    The receipt must already have passed validation: amounts are parsed
    without further checks.

    Rules (all summed):
        - 1 point per ASCII letter or digit in the retailer name
        - 50 points if the total has no cents
        - 25 points if the cents are a multiple of 25 (includes no cents,
          so a round total earns both bonuses)
        - 5 points per pair of items
        - ceil(price * 0.2) for each item whose trimmed description length
          is a multiple of 3
        - 6 points if the purchase date ends in an odd digit
        - 10 points if the purchase hour is 14 or 15

    Args:
        receipt: Validated receipt entity

    Returns:
        Non-negative points total
    """
    points = sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())

    cents = receipt.total[-2:]
    if cents == "00":
        points += ROUND_DOLLAR_BONUS
    if cents in QUARTER_CENTS:
        points += QUARTER_MULTIPLE_BONUS

    points += ITEM_PAIR_BONUS * (len(receipt.items) // 2)

    for item in receipt.items:
        if len(item.short_description.strip(" \t\n\r")) % 3 == 0:
            points += math.ceil(float(item.price) * ITEM_PRICE_MULTIPLIER)

    # Checks the final character of the date string, not the calendar day
    if receipt.purchase_date[-1] in ODD_DIGITS:
        points += ODD_DAY_BONUS

    if receipt.purchase_time[:2] in AFTERNOON_HOURS:
        points += AFTERNOON_BONUS

    return points
