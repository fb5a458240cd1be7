"""
Prediction Confidence

Confidence grows with how much of the university and profile data was
actually known rather than defaulted.
"""

from app.domain.financial_aid.defaults import known_amount
from app.domain.models import StudentFinancialProfile, UniversityRecord


BASE_CONFIDENCE = 50
MAX_CONFIDENCE = 95


def calculate_confidence(
    university: UniversityRecord,
    profile: StudentFinancialProfile,
) -> int:
    """Return a 50-95 confidence score."""
    score = BASE_CONFIDENCE

    # University aid data
    if known_amount(university.avg_financial_aid_package) is not None:
        score += 10
    if known_amount(university.percentage_receiving_aid) is not None:
        score += 10
    if university.need_blind_admission is not None:
        score += 5
    if university.scholarships_international is not None:
        score += 5

    # Profile completeness
    if profile.gpa is not None:
        score += 4
    if known_amount(profile.sat_score) is not None or known_amount(profile.act_score) is not None:
        score += 4
    if profile.family_income is not None:
        score += 8
    if profile.international_student is not None:
        score += 2
    if profile.in_state is not None:
        score += 2

    return min(MAX_CONFIDENCE, score)
