"""
Academic Merit Score

Blends GPA, SAT, ACT and special talents into a 0-100 signal. Each signal is
bucketed into points, the points are averaged over the signals present and
scaled back up so a single strong signal can still reach the top of the range.
"""

from typing import Tuple

from app.domain.models import StudentFinancialProfile, round_half_up


# (minimum value, points) checked from the top; below the last bucket the
# floor points apply.
GPA_POINTS: Tuple[Tuple[float, int], ...] = (
    (4.0, 40), (3.8, 36), (3.5, 30), (3.0, 22), (2.5, 12),
)
GPA_FLOOR_POINTS = 5

SAT_POINTS: Tuple[Tuple[float, int], ...] = (
    (1500, 35), (1400, 30), (1300, 24), (1200, 18), (1100, 12),
)
ACT_POINTS: Tuple[Tuple[float, int], ...] = (
    (33, 35), (30, 30), (27, 24), (24, 18), (21, 12),
)
TEST_FLOOR_POINTS = 6

POINTS_PER_TALENT = 8
MAX_TALENT_POINTS = 25

# Scaling applied to the per-factor average, keyed by factor count
FACTOR_MULTIPLIERS = {1: 2.5, 2: 1.5}
DEFAULT_FACTOR_MULTIPLIER = 1.25

# Share of the merit base awarded, by minimum merit score
MERIT_AID_FACTORS: Tuple[Tuple[int, float], ...] = (
    (90, 0.7), (75, 0.5), (60, 0.35), (45, 0.2),
)
MERIT_AID_FLOOR_FACTOR = 0.12


def _bucket_points(value: float, buckets: Tuple[Tuple[float, int], ...], floor: int) -> int:
    for threshold, points in buckets:
        if value >= threshold:
            return points
    return floor


def calculate_merit_score(profile: StudentFinancialProfile) -> int:
    """
    Calculate the 0-100 merit score.

    SAT and ACT both present count as one factor so a student who reports
    both tests is not rewarded twice. No signals at all scores 0.
    """
    points = 0
    factors = 0

    if profile.gpa is not None:
        factors += 1
        points += _bucket_points(profile.gpa, GPA_POINTS, GPA_FLOOR_POINTS)

    if profile.sat_score is not None:
        factors += 1
        points += _bucket_points(profile.sat_score, SAT_POINTS, TEST_FLOOR_POINTS)

    if profile.act_score is not None:
        factors += 1
        points += _bucket_points(profile.act_score, ACT_POINTS, TEST_FLOOR_POINTS)

    if profile.special_talents:
        factors += 1
        points += min(MAX_TALENT_POINTS, len(profile.special_talents) * POINTS_PER_TALENT)

    if factors == 0:
        return 0

    if profile.sat_score is not None and profile.act_score is not None:
        factors -= 1

    multiplier = FACTOR_MULTIPLIERS.get(factors, DEFAULT_FACTOR_MULTIPLIER)
    return min(100, round_half_up(points / factors * multiplier))


def merit_aid_factor(merit_score: float) -> float:
    """Fraction of the merit base a student with this score can expect."""
    for threshold, factor in MERIT_AID_FACTORS:
        if merit_score >= threshold:
            return factor
    return MERIT_AID_FLOOR_FACTOR
