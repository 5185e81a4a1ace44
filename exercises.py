"""Collection processing exercises over an employee dataset.

Every function is stateless: the dataset is passed in explicitly and a plain
value comes back.
"""
from __future__ import annotations

import logging
import re
from collections import Counter, defaultdict
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from models import Employee

logger = logging.getLogger(__name__)

CHESSBOARD_ROWS = (6432, 8997, 8500, 7036, 9395, 9372, 9715, 9634)
CHESSBOARD_COLUMNS = (6199, 9519, 6745, 8864, 8788, 7322, 7341, 7395)


# -------------------------
# Dataset exercises
# -------------------------
def find_duplicate_name(employees: Sequence[Employee]) -> Optional[str]:
    """Return the full name of the first employee sharing first name and
    surname with another, unequal record, or ``None``."""
    for first in employees:
        for second in employees:
            if (
                first != second
                and first.first_name == second.first_name
                and first.surname == second.surname
            ):
                return first.full_name
    return None


def count_neighbourhood_groups(
    employees: Sequence[Employee],
    prefix_length: int = 2,
    min_size: int = 5,
) -> int:
    groups: Dict[str, int] = Counter(
        e.home_address.post_code[:prefix_length] for e in employees
    )
    logger.debug("Grouped %d employees into %d post code areas", len(employees), len(groups))
    return sum(1 for size in groups.values() if size >= min_size)


def count_distinct_addresses(employees: Sequence[Employee]) -> int:
    addresses = {
        address
        for e in employees
        for address in (e.home_address, e.correspondence_address)
        if address is not None
    }
    return len(addresses)


def format_pounds(amount) -> str:
    # no mandatory integer digit: 0.5 is "£.50"
    text = f"{Decimal(amount):,.2f}"
    if text.startswith("0."):
        text = text[1:]
    return f"£{text}"


def company_payroll_totals(
    employees: Sequence[Employee],
    descending: bool = False,
) -> List[str]:
    """Total annual salary per company, ordered by amount.

    Salaries are truncated to whole pounds before summing. Employees without
    a company are left out.
    """
    totals: Dict[str, int] = defaultdict(int)
    for e in employees:
        if e.company is None:
            continue
        totals[e.company.name] += int(e.salary)

    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=descending)
    return [f"{name} - {format_pounds(total)}" for name, total in ordered]


# -------------------------
# Dataset-free exercises
# -------------------------
def count_words(text: str, separator: str = "\n") -> List[str]:
    # trailing empty tokens are dropped, but empty text is one empty token
    tokens = re.compile(separator).split(text)
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    if text and tokens == [""]:
        tokens = []

    counts = Counter(tokens)
    return sorted(f"{word} - {count}" for word, count in counts.items())


def chessboard_value(
    rows: Sequence[int] = CHESSBOARD_ROWS,
    columns: Sequence[int] = CHESSBOARD_COLUMNS,
) -> int:
    """Sum of ``row * column`` over every square of the board."""
    if len(rows) != len(columns):
        raise ValueError("rows and columns must have the same length")
    return sum(row * column for row in rows for column in columns)
