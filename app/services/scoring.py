# scoring.py
from __future__ import annotations
from typing import Dict, List, Tuple

from ..rules.ruleset import DEFAULT_RULES, Rule
from ..schemas import Receipt

def score_breakdown(receipt: Receipt, rules: List[Tuple[str, Rule]] | None = None) -> Dict[str, int]:
    """
    Returns {rule_name: points} for every rule.
    - only call with receipts that passed is_valid_receipt
    - a rule that can't parse its field contributes 0
    """
    breakdown: Dict[str, int] = {}
    for name, rule in (DEFAULT_RULES if rules is None else rules):
        breakdown[name] = rule(receipt) or 0
    return breakdown

def calculate_points(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
