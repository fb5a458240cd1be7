"""
Default Resolution for the Financial Aid Predictor

University and profile records are often partially populated. Every formula
input that may be missing is resolved here, against one table of defaults,
so the fallbacks are auditable in a single place.

A monetary or percentage attribute counts as known only when it is a positive
finite number; zero and negative values fall back to the default.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.domain.models import StudentFinancialProfile, UniversityRecord


class Residency(Enum):
    """Tuition class a student is billed under."""
    INTERNATIONAL = "international"
    IN_STATE = "in_state"
    OUT_OF_STATE = "out_of_state"


@dataclass(frozen=True)
class AidDefaults:
    """Fallback values used when a record does not supply a field."""
    tuition_international: float = 50000
    tuition_in_state: float = 25000
    tuition_out_of_state: float = 40000
    cost_of_living: float = 15000
    percentage_receiving_aid: float = 50
    dependents: int = 1

    # Share of gross tuition used as the merit base without an aid package
    merit_base_tuition_share: float = 0.3

    # Scholarship bases
    international_scholarship_base: float = 10000
    international_scholarship_cap: float = 20000
    domestic_scholarship_base: float = 15000


AID_DEFAULTS = AidDefaults()


def known_amount(value: Optional[float]) -> Optional[float]:
    """Return the value when it is a usable positive amount, else None."""
    if value is None or value <= 0:
        return None
    return float(value)


def resolve_residency(profile: StudentFinancialProfile) -> Residency:
    """International wins over in-state; unknown flags mean out-of-state."""
    if profile.international_student:
        return Residency.INTERNATIONAL
    if profile.in_state:
        return Residency.IN_STATE
    return Residency.OUT_OF_STATE


def resolve_gross_tuition(
    university: UniversityRecord,
    profile: StudentFinancialProfile,
    defaults: AidDefaults = AID_DEFAULTS,
) -> float:
    """
    Sticker tuition for the student's residency class.

    International: tuition_international, then tuition_out_of_state.
    In-state: tuition_in_state. Out-of-state: tuition_out_of_state.
    """
    residency = resolve_residency(profile)

    if residency is Residency.INTERNATIONAL:
        return (
            known_amount(university.tuition_international)
            or known_amount(university.tuition_out_of_state)
            or defaults.tuition_international
        )
    if residency is Residency.IN_STATE:
        return known_amount(university.tuition_in_state) or defaults.tuition_in_state
    return known_amount(university.tuition_out_of_state) or defaults.tuition_out_of_state


def resolve_cost_of_living(
    university: UniversityRecord,
    defaults: AidDefaults = AID_DEFAULTS,
) -> float:
    return known_amount(university.cost_of_living_est) or defaults.cost_of_living


def resolve_aid_package(university: UniversityRecord) -> Optional[float]:
    """Average aid package, or None so callers can pick their own fallback."""
    return known_amount(university.avg_financial_aid_package)


def resolve_percentage_receiving_aid(
    university: UniversityRecord,
    defaults: AidDefaults = AID_DEFAULTS,
) -> float:
    percentage = known_amount(university.percentage_receiving_aid)
    if percentage is None:
        return defaults.percentage_receiving_aid
    return min(100.0, percentage)


def resolve_dependents(
    profile: StudentFinancialProfile,
    defaults: AidDefaults = AID_DEFAULTS,
) -> int:
    if profile.dependents is None or profile.dependents < 1:
        return defaults.dependents
    return profile.dependents
