"""
Splitter Module

This module holds the bill allocation logic for the restaurant bill
splitter application.

Features:
    - Subtotal and tip calculation
    - Roster resolution (explicit persons or scanned from personal items)
    - Per-person amounts with proportional tip
    - Reconciliation so per-person amounts add up to the total
    - Decimal-safe rounding to the nearest 0.1

Data Model:
    Input - BillInput (see bill.py):
        - date: string (YYYY-MM-DD)
        - location: string
        - tip_percentage: number (15 means 15%)
        - items: list of SharedItem / PersonalItem
        - persons: optional list of names

    Output - BillOutput (see bill.py):
        - date: display string (YYYY年M月D日)
        - location: string
        - sub_total, tip, total_amount: float
        - items: list of PersonItem (name, amount)

Functions:
    split_bill: Split a bill into per-person amounts.
    format_date: Convert YYYY-MM-DD into the display date.
    calculate_sub_total: Sum all item prices.
    calculate_tip: Tip on a subtotal, rounded to the nearest 0.1.
    resolve_persons: Work out the roster for a bill.
    calculate_person_amount: Amount owed by one roster member.
    calculate_items: Amounts owed by every roster member.
    adjust_amounts: Push rounding drift onto the first roster member.
"""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from bill import BillInput, BillItem, BillOutput, PersonalItem, PersonItem, SharedItem


logger = logging.getLogger("bill_splitter.splitter")

# Amounts are rounded to 10 cents, not to the cent
TENTH = Decimal("0.1")

# Drift below this is left alone by adjust_amounts
ADJUST_THRESHOLD = Decimal("0.01")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _to_decimal(value) -> Decimal:
    """Convert a number to Decimal through its string form to avoid float noise."""
    return Decimal(str(value))


def round_tenth(value: Decimal) -> Decimal:
    """
    Round a Decimal to the nearest 0.1.

    Uses ROUND_HALF_UP, so ties move away from zero (2.25 -> 2.3,
    -2.25 -> -2.3). Every rounding in this module goes through here.

    Args:
        value: Decimal value to round.

    Returns:
        Decimal: Value quantized to one decimal place.
    """
    return value.quantize(TENTH, rounding=ROUND_HALF_UP)


def _strip_leading_zeros(token: str) -> str:
    # "03" -> "3"; tokens without leading digits are kept as they are
    match = _LEADING_INT.match(token)
    if match is None:
        return token
    return str(int(match.group(1)))


def format_date(date: str) -> str:
    """
    Convert a YYYY-MM-DD date into the display format YYYY年M月D日.

    Month and day lose their leading zeros. The calendar is not checked,
    so "2024-13-40" becomes "2024年13月40日". Malformed input does not
    raise: missing parts render empty and non-numeric parts are kept
    verbatim.

    Args:
        date: Date string, e.g. "2024-03-21".

    Returns:
        str: Display date, e.g. "2024年3月21日".
    """
    parts = date.split("-")
    parts += [""] * (3 - len(parts))
    year, month, day = parts[:3]
    return f"{year}年{_strip_leading_zeros(month)}月{_strip_leading_zeros(day)}日"


def _sum_prices(items: list[BillItem]) -> Decimal:
    return sum((_to_decimal(item.price) for item in items), Decimal("0"))


def _tip_amount(sub_total: Decimal, tip_percentage: Decimal) -> Decimal:
    return round_tenth(sub_total * tip_percentage / Decimal("100"))


def calculate_sub_total(items: list[BillItem]) -> float:
    """
    Sum the price of every item, shared or personal.

    Args:
        items: Bill items.

    Returns:
        float: Unrounded subtotal (0 for an empty bill).
    """
    return float(_sum_prices(items))


def calculate_tip(sub_total: float, tip_percentage: float) -> float:
    """
    Calculate the tip on a subtotal, rounded to the nearest 0.1.

    Args:
        sub_total: Amount the tip applies to.
        tip_percentage: Tip in percentage points (15 means 15%).

    Returns:
        float: Rounded tip, e.g. calculate_tip(33.33, 10) == 3.3.
    """
    return float(_tip_amount(_to_decimal(sub_total), _to_decimal(tip_percentage)))


def resolve_persons(items: list[BillItem], persons: Optional[list[str]] = None) -> list[str]:
    """
    Work out the roster of people the bill is split between.

    A non-empty persons list is used as given: same order, duplicates
    kept. Otherwise the roster is every distinct person that has a
    personal item, sorted by name. Shared items never add anyone, so a
    bill with only shared items and no persons has an empty roster.

    Args:
        items: Bill items.
        persons: Optional explicit roster.

    Returns:
        list[str]: Roster in allocation order.
    """
    if persons:
        return list(persons)

    names = {item.person for item in items if isinstance(item, PersonalItem)}
    return sorted(names)


def calculate_person_amount(
    items: list[BillItem],
    tip_percentage: float,
    name: str,
    persons: int
) -> Decimal:
    """
    Calculate what one roster member owes, tip included.

    The person pays all of their personal items plus an equal slice of
    the shared items (shared total / roster size), and a tip computed on
    that personal subtotal. The result is rounded to the nearest 0.1.

    Args:
        items: Bill items.
        tip_percentage: Tip in percentage points.
        name: Roster member to calculate for.
        persons: Roster size, used as the shared-cost divisor.

    Returns:
        Decimal: Rounded amount owed.
    """
    personal_amount = Decimal("0")
    shared_amount = Decimal("0")

    for item in items:
        if isinstance(item, SharedItem):
            shared_amount += _to_decimal(item.price)
        elif item.person == name:
            personal_amount += _to_decimal(item.price)

    shared_per_person = shared_amount / Decimal(persons) if persons > 0 else Decimal("0")

    person_sub_total = personal_amount + shared_per_person
    person_tip = person_sub_total * _to_decimal(tip_percentage) / Decimal("100")

    return round_tenth(person_sub_total + person_tip)


def calculate_items(
    items: list[BillItem],
    tip_percentage: float,
    persons: Optional[list[str]] = None
) -> list[PersonItem]:
    """
    Calculate the amount owed by every roster member.

    Args:
        items: Bill items.
        tip_percentage: Tip in percentage points.
        persons: Optional explicit roster (see resolve_persons).

    Returns:
        list[PersonItem]: One entry per roster member, in roster order.
    """
    names = resolve_persons(items, persons)
    persons_count = len(names)

    return [
        PersonItem(
            name=name,
            amount=float(calculate_person_amount(items, tip_percentage, name, persons_count))
        )
        for name in names
    ]


def adjust_amounts(total_amount: float, items: list[PersonItem]) -> list[PersonItem]:
    """
    Make per-person amounts add up to the bill total.

    Each person's amount is rounded on its own, so their sum can drift
    from total_amount. The rounded difference is added in full to the
    first person in the roster; nobody else is touched.

    Args:
        total_amount: Bill total (subtotal + tip).
        items: Per-person amounts from calculate_items.

    Returns:
        list[PersonItem]: New list with the first entry corrected if
            the drift is above 0.01. The input list is not modified.

    Notes:
        - An empty roster is returned unchanged
    """
    if not items:
        return []

    current_total = sum((_to_decimal(item.amount) for item in items), Decimal("0"))
    difference = round_tenth(_to_decimal(total_amount) - current_total)

    adjusted = [PersonItem(name=item.name, amount=item.amount) for item in items]

    if abs(difference) > ADJUST_THRESHOLD:
        first = adjusted[0]
        first.amount = float(round_tenth(_to_decimal(first.amount) + difference))
        logger.debug("Adjusted %s by %s to match total %s", first.name, difference, total_amount)

    return adjusted


def split_bill(bill: BillInput) -> BillOutput:
    """
    Split a bill into per-person amounts.

    Steps:
        1. Format the date for display
        2. Sum all item prices into the subtotal
        3. Compute the tip on the subtotal (nearest 0.1)
        4. Total = subtotal + tip
        5. Compute each roster member's amount
        6. Adjust the first member so amounts add up to the total

    Args:
        bill: Parsed bill input.

    Returns:
        BillOutput: Totals and per-person amounts.

    Notes:
        - Does NOT validate the input; the loader does that
        - A bill with only shared items and no persons yields no
          per-person entries even though the total is positive
    """
    date = format_date(bill.date)
    sub_total = _sum_prices(bill.items)
    tip = _tip_amount(sub_total, _to_decimal(bill.tip_percentage))
    total_amount = sub_total + tip

    items = calculate_items(bill.items, bill.tip_percentage, bill.persons)
    items = adjust_amounts(float(total_amount), items)

    logger.debug(
        "Split bill %s at %s: subtotal=%s tip=%s total=%s persons=%s",
        bill.date,
        bill.location,
        sub_total,
        tip,
        total_amount,
        len(items),
    )

    return BillOutput(
        date=date,
        location=bill.location,
        sub_total=float(sub_total),
        tip=float(tip),
        total_amount=float(total_amount),
        items=items
    )
