# app/services/validation.py
import re

from ..schemas import Item, Receipt
from ..utils.parsing import parse_amount

# ASCII classes: \w is [A-Za-z0-9_]; whitespace excludes \v
RETAILER_RE = re.compile(r"[\w\t\n\f\r \-&]+", re.ASCII)
DESCRIPTION_RE = re.compile(r"[\w\t\n\f\r \-]+", re.ASCII)

def is_valid_item(item: Item) -> bool:
    if not item.short_description or not DESCRIPTION_RE.fullmatch(item.short_description):
        return False
    price = parse_amount(item.price)
    if price is None or price <= 0:
        return False
    return True

def is_valid_receipt(receipt: Receipt) -> bool:
    """
    Structural check run before scoring.
    - purchase date, time and total are deliberately not checked; the scoring
      rules treat them as optional.
    """
    if not receipt.retailer or not RETAILER_RE.fullmatch(receipt.retailer):
        return False
    if not receipt.items:
        return False
    return all(is_valid_item(item) for item in receipt.items)
