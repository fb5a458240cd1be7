"""
Expected Family Contribution

Simplified progressive approximation of the federal methodology: each income
bracket contributes a fixed base plus a marginal rate on the excess over the
bracket floor.
"""

from typing import Optional, Tuple

from app.domain.models import round_half_up


# (upper bound inclusive, base contribution, marginal rate, bracket floor)
EFC_BRACKETS: Tuple[Tuple[float, float, float, float], ...] = (
    (30000, 0, 0.05, 0),
    (50000, 1500, 0.12, 30000),
    (75000, 3900, 0.22, 50000),
    (100000, 9400, 0.25, 75000),
    (150000, 15650, 0.30, 100000),
    (float("inf"), 30650, 0.35, 150000),
)

DEPENDENT_DIVISOR_RATE = 0.75


def calculate_efc(family_income: Optional[float], dependents: int = 1) -> int:
    """
    Estimate the yearly family contribution.

    Unknown, zero or negative income contributes nothing. The bracket result
    is divided by max(1, dependents * 0.75) and rounded to whole units.

    Example: 60000 with one dependent is 3900 + 10000 * 0.22 = 6100.
    """
    if not family_income or family_income <= 0:
        return 0

    efc = 0.0
    for upper, base, rate, floor in EFC_BRACKETS:
        if family_income <= upper:
            efc = base + (family_income - floor) * rate
            break

    efc = efc / max(1, dependents * DEPENDENT_DIVISOR_RATE)
    return round_half_up(efc)
