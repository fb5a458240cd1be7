"""
Domain Models for the University Discovery backend

Plain dataclasses consumed by the prediction and matching cores, plus the
Pydantic schemas used to store and return student financial profiles.

Rows arrive from storage as loosely typed dictionaries. The dataclasses keep a
field only when it has the expected type; anything else is treated as absent
so the scoring formulas can fall back to their documented defaults.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator


# =============================================================================
# Value helpers
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def to_number_or_none(value: Any) -> Optional[float]:
    """Parse user-supplied numeric input; blank or unparseable becomes None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def to_bool_or_none(value: Any) -> Optional[bool]:
    """Parse a tri-state flag; None/blank stays unknown."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return bool(value)


def to_string_list(value: Any) -> List[str]:
    """Accept a list or a comma-separated string; drop blanks."""
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [
            entry.strip() for entry in value
            if isinstance(entry, str) and entry.strip()
        ]
    return []


def number_field(value: Any) -> Optional[float]:
    """Strict numeric field: real numbers only (bools are not numbers here)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


def bool_field(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def text_field(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def text_tuple_field(value: Any) -> Optional[Tuple[str, ...]]:
    """List of strings; non-string entries dropped, non-lists treated as absent."""
    if not isinstance(value, (list, tuple, set, frozenset)):
        return None
    return tuple(entry for entry in value if isinstance(entry, str))


def _identifier(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


# =============================================================================
# Core input records
# =============================================================================

@dataclass(frozen=True)
class UniversityRecord:
    """
    University attributes read by the aid predictor and the matcher.

    Every attribute is optional. ``raw`` keeps the original row so ranked
    results can echo the full record back to the caller.
    """
    id: Optional[str] = None
    name: Optional[str] = None

    # Tuition per residency class
    tuition_international: Optional[float] = None
    tuition_out_of_state: Optional[float] = None
    tuition_in_state: Optional[float] = None
    avg_tuition_per_year: Optional[float] = None
    cost_of_living_est: Optional[float] = None

    # Aid policy
    avg_financial_aid_package: Optional[float] = None
    percentage_receiving_aid: Optional[float] = None  # 0-100
    need_blind_admission: Optional[bool] = None
    scholarships_international: Optional[bool] = None
    type: Optional[str] = None  # e.g. "public", "private"

    # Admissions
    min_gpa: Optional[float] = None
    required_tests: Optional[Tuple[str, ...]] = None

    # Location / outcomes
    country: Optional[str] = None
    post_grad_visa_strength: Optional[float] = None
    post_study_work_visa_months: Optional[float] = None
    ranking_global: Optional[float] = None
    ranking_world: Optional[float] = None

    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False, hash=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "UniversityRecord":
        """Build from a storage row, dropping wrong-typed values."""
        return cls(
            id=_identifier(record.get("id")),
            name=text_field(record.get("name")),
            tuition_international=number_field(record.get("tuition_international")),
            tuition_out_of_state=number_field(record.get("tuition_out_of_state")),
            tuition_in_state=number_field(record.get("tuition_in_state")),
            avg_tuition_per_year=number_field(record.get("avg_tuition_per_year")),
            cost_of_living_est=number_field(record.get("cost_of_living_est")),
            avg_financial_aid_package=number_field(record.get("avg_financial_aid_package")),
            percentage_receiving_aid=number_field(record.get("percentage_receiving_aid")),
            need_blind_admission=bool_field(record.get("need_blind_admission")),
            scholarships_international=bool_field(record.get("scholarships_international")),
            type=text_field(record.get("type")),
            min_gpa=number_field(record.get("min_gpa")),
            required_tests=text_tuple_field(record.get("required_tests")),
            country=text_field(record.get("country")),
            post_grad_visa_strength=number_field(record.get("post_grad_visa_strength")),
            post_study_work_visa_months=number_field(record.get("post_study_work_visa_months")),
            ranking_global=number_field(record.get("ranking_global")),
            ranking_world=number_field(record.get("ranking_world")),
            raw=dict(record),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the original row (or the typed fields when built directly)."""
        if self.raw:
            return dict(self.raw)
        data = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if name != "raw"
        }
        if data["required_tests"] is not None:
            data["required_tests"] = list(data["required_tests"])
        return data


@dataclass(frozen=True)
class StudentFinancialProfile:
    """
    Student academic and financial signals.

    The residency flags are tri-state: None means the student has not said,
    which is not the same as False.
    """
    student_id: Optional[str] = None
    gpa: Optional[float] = None  # 0.0-4.0
    sat_score: Optional[float] = None  # 400-1600
    act_score: Optional[float] = None  # 1-36
    family_income: Optional[float] = None
    international_student: Optional[bool] = None
    in_state: Optional[bool] = None
    first_generation: Optional[bool] = None
    special_talents: Tuple[str, ...] = ()
    dependents: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "StudentFinancialProfile":
        """Build from a storage row or request payload."""
        talents = text_tuple_field(record.get("special_talents")) or ()
        dependents = number_field(record.get("dependents"))
        return cls(
            student_id=_identifier(record.get("user_id", record.get("student_id"))),
            gpa=number_field(record.get("gpa")),
            sat_score=number_field(record.get("sat_score")),
            act_score=number_field(record.get("act_score")),
            family_income=number_field(record.get("family_income")),
            international_student=bool_field(record.get("international_student")),
            in_state=bool_field(record.get("in_state")),
            first_generation=bool_field(record.get("first_generation")),
            special_talents=talents,
            dependents=int(dependents) if dependents is not None else None,
        )


def as_university(value: Any) -> UniversityRecord:
    """Accept either a UniversityRecord or a raw mapping."""
    if isinstance(value, UniversityRecord):
        return value
    return UniversityRecord.from_record(value)


def as_universities(values: Iterable[Any]) -> List[UniversityRecord]:
    return [as_university(value) for value in values]


def as_profile(value: Any) -> StudentFinancialProfile:
    """Accept either a StudentFinancialProfile or a raw mapping."""
    if isinstance(value, StudentFinancialProfile):
        return value
    return StudentFinancialProfile.from_record(value)


# =============================================================================
# Financial profile storage schemas
# =============================================================================

class FinancialProfileUpdate(BaseModel):
    """
    Upsert payload for a student's financial profile.

    Form inputs arrive as strings ("3.7", "true", "chess, debate"), so each
    field is normalized before validation. Blank values clear the field.
    """
    gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    sat_score: Optional[int] = Field(None, ge=400, le=1600)
    act_score: Optional[int] = Field(None, ge=1, le=36)
    family_income: Optional[int] = Field(None, ge=0)
    international_student: Optional[bool] = None
    in_state: Optional[bool] = None
    first_generation: Optional[bool] = None
    special_talents: List[str] = Field(default_factory=list)

    @field_validator("gpa", mode="before")
    @classmethod
    def parse_gpa(cls, v: Any) -> Optional[float]:
        return to_number_or_none(v)

    @field_validator("sat_score", "act_score", mode="before")
    @classmethod
    def parse_test_score(cls, v: Any) -> Optional[int]:
        number = to_number_or_none(v)
        return int(number) if number is not None else None

    @field_validator("family_income", mode="before")
    @classmethod
    def parse_income(cls, v: Any) -> Optional[int]:
        # Stored in whole currency units
        number = to_number_or_none(v)
        return round_half_up(number) if number is not None else None

    @field_validator("international_student", "in_state", "first_generation", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> Optional[bool]:
        return to_bool_or_none(v)

    @field_validator("special_talents", mode="before")
    @classmethod
    def parse_talents(cls, v: Any) -> List[str]:
        return to_string_list(v)


class FinancialProfile(FinancialProfileUpdate):
    """Stored financial profile, keyed on the student's user id."""
    user_id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @computed_field  # type: ignore[misc]
    @property
    def is_complete(self) -> bool:
        """Enough is known for a confident prediction."""
        return (
            self.gpa is not None
            and self.family_income is not None
            and self.international_student is not None
            and self.in_state is not None
        )

    @classmethod
    def empty(cls, user_id: str) -> "FinancialProfile":
        """Placeholder returned when the student has not saved a profile yet."""
        return cls(user_id=user_id)

    def to_student_profile(self) -> StudentFinancialProfile:
        return StudentFinancialProfile(
            student_id=self.user_id,
            gpa=self.gpa,
            sat_score=self.sat_score,
            act_score=self.act_score,
            family_income=self.family_income,
            international_student=self.international_student,
            in_state=self.in_state,
            first_generation=self.first_generation,
            special_talents=tuple(self.special_talents),
        )
