# app/rules/ruleset.py
import math
import re
from typing import Callable, List, Optional, Tuple

from ..schemas import Receipt
from ..utils.parsing import parse_amount, parse_date, parse_time

# -----------------------------
# Tunables
# -----------------------------
POINTS = {
    "round_total": 50,
    "quarter_total": 25,
    "item_pair": 5,
    "odd_day": 6,
    "afternoon": 10,
}

DESCRIPTION_MULTIPLE = 3
PRICE_MULTIPLIER = 0.2
AFTERNOON_HOURS = (14, 16)  # [start, end)

ALNUM_RE = re.compile(r"[a-zA-Z0-9]")

# Each rule returns its contribution, or None when it doesn't apply.
Rule = Callable[[Receipt], Optional[int]]

# -----------------------------
# Rules
# -----------------------------
def retailer_name(receipt: Receipt) -> Optional[int]:
    return len(ALNUM_RE.findall(receipt.retailer))

def round_total(receipt: Receipt) -> Optional[int]:
    total = parse_amount(receipt.total)
    if total is None or total != int(total):
        return None
    return POINTS["round_total"]

def quarter_total(receipt: Receipt) -> Optional[int]:
    total = parse_amount(receipt.total)
    if total is None:
        return None
    cents = total * 100
    if not math.isfinite(cents) or int(cents) % 25 != 0:
        return None
    return POINTS["quarter_total"]

def item_pairs(receipt: Receipt) -> Optional[int]:
    return (len(receipt.items) // 2) * POINTS["item_pair"]

def item_descriptions(receipt: Receipt) -> Optional[int]:
    total = 0
    for item in receipt.items:
        price = parse_amount(item.price)
        if price is None:
            continue
        if len(item.short_description.strip()) % DESCRIPTION_MULTIPLE == 0:
            total += math.ceil(price * PRICE_MULTIPLIER)
    return total

def odd_purchase_day(receipt: Receipt) -> Optional[int]:
    d = parse_date(receipt.purchase_date)
    if d is None or d.day % 2 != 1:
        return None
    return POINTS["odd_day"]

def afternoon_purchase(receipt: Receipt) -> Optional[int]:
    t = parse_time(receipt.purchase_time)
    start, end = AFTERNOON_HOURS
    if t is None or not (start <= t.hour < end):
        return None
    return POINTS["afternoon"]

DEFAULT_RULES: List[Tuple[str, Rule]] = [
    ("retailer_name", retailer_name),
    ("round_total", round_total),
    ("quarter_total", quarter_total),
    ("item_pairs", item_pairs),
    ("item_descriptions", item_descriptions),
    ("odd_purchase_day", odd_purchase_day),
    ("afternoon_purchase", afternoon_purchase),
]
