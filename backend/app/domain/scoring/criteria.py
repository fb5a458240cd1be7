"""
Matching Criteria

Typed view of the criteria object sent by the matching UI. Each of the four
modules can be toggled independently; a disabled or absent module has no
effect on the score.

The wire format is camelCase and loosely typed. Parsing never fails: a filter
of the wrong type is dropped and its comparison simply does not run.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from app.domain.models import number_field, text_tuple_field


def _section(raw: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else None


def _filters(section: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if section is None:
        return {}
    filters = section.get("filters")
    return filters if isinstance(filters, Mapping) else {}


def _enabled(section: Optional[Mapping[str, Any]]) -> bool:
    return section is not None and section.get("enabled") is True


@dataclass(frozen=True)
class AcademicsCriteria:
    enabled: bool = False
    min_gpa: Optional[float] = None
    # "no-test", "requires-test", or a specific test name such as "sat"
    test_policy: Optional[str] = None

    @classmethod
    def from_dict(cls, section: Optional[Mapping[str, Any]]) -> "AcademicsCriteria":
        filters = _filters(section)
        policy = filters.get("testPolicy")
        if not isinstance(policy, str) or not policy.strip():
            policy = None
        return cls(
            enabled=_enabled(section),
            min_gpa=number_field(filters.get("minGpa")),
            test_policy=policy.strip().lower() if policy else None,
        )


@dataclass(frozen=True)
class FinancialsCriteria:
    enabled: bool = False
    max_budget: Optional[float] = None

    @classmethod
    def from_dict(cls, section: Optional[Mapping[str, Any]]) -> "FinancialsCriteria":
        filters = _filters(section)
        return cls(
            enabled=_enabled(section),
            max_budget=number_field(filters.get("maxBudget")),
        )


@dataclass(frozen=True)
class LifestyleCriteria:
    enabled: bool = False
    countries: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, section: Optional[Mapping[str, Any]]) -> "LifestyleCriteria":
        filters = _filters(section)
        return cls(
            enabled=_enabled(section),
            countries=text_tuple_field(filters.get("countries")) or (),
        )


@dataclass(frozen=True)
class FutureCriteria:
    enabled: bool = False
    min_visa_months: Optional[float] = None

    @classmethod
    def from_dict(cls, section: Optional[Mapping[str, Any]]) -> "FutureCriteria":
        filters = _filters(section)
        return cls(
            enabled=_enabled(section),
            min_visa_months=number_field(filters.get("minVisaMonths")),
        )


@dataclass(frozen=True)
class MatchingCriteria:
    """Student criteria grouped into four independently toggled modules."""
    academics: AcademicsCriteria = field(default_factory=AcademicsCriteria)
    financials: FinancialsCriteria = field(default_factory=FinancialsCriteria)
    lifestyle: LifestyleCriteria = field(default_factory=LifestyleCriteria)
    future: FutureCriteria = field(default_factory=FutureCriteria)

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "MatchingCriteria":
        """Parse the request body; anything unusable becomes a disabled module."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            academics=AcademicsCriteria.from_dict(_section(raw, "academics")),
            financials=FinancialsCriteria.from_dict(_section(raw, "financials")),
            lifestyle=LifestyleCriteria.from_dict(_section(raw, "lifestyle")),
            future=FutureCriteria.from_dict(_section(raw, "future")),
        )


def as_criteria(value: Any) -> MatchingCriteria:
    """Accept MatchingCriteria, a raw mapping, or None."""
    if isinstance(value, MatchingCriteria):
        return value
    return MatchingCriteria.from_dict(value)
