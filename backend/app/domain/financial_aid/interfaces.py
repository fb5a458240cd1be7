"""
Financial Aid Interfaces

Data models and the component protocol for the aid predictor.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from app.domain.financial_aid.defaults import AID_DEFAULTS, AidDefaults
from app.domain.models import StudentFinancialProfile, UniversityRecord


@dataclass(frozen=True)
class AidContext:
    """
    Everything an aid component needs, resolved once per prediction.

    demonstrated_need is 0 when family income is unknown.
    """
    university: UniversityRecord
    profile: StudentFinancialProfile
    gross_tuition: float
    cost_of_living: float
    efc: int
    demonstrated_need: float
    merit_score: int
    defaults: AidDefaults = AID_DEFAULTS

    @property
    def income_known(self) -> bool:
        return self.profile.family_income is not None


@dataclass(frozen=True)
class AidBreakdown:
    merit_based: int
    need_based: int
    scholarships: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "merit_based": self.merit_based,
            "need_based": self.need_based,
            "scholarships": self.scholarships,
        }


@dataclass(frozen=True)
class CostScenarios:
    """Net tuition if aid comes in 25% higher, as estimated, or 25% lower."""
    optimistic: int
    realistic: int
    conservative: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "optimistic": self.optimistic,
            "realistic": self.realistic,
            "conservative": self.conservative,
        }


@dataclass(frozen=True)
class PredictionMethodology:
    merit_score: int
    demonstrated_need: int
    efc: Optional[int]

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {
            "merit_score": self.merit_score,
            "demonstrated_need": self.demonstrated_need,
            "efc": self.efc,
        }


@dataclass(frozen=True)
class PredictionResult:
    """
    Itemized cost estimate for one student at one university.

    All amounts are whole currency units. Derived on every call, never stored.
    """
    gross_tuition: int
    estimated_aid: int
    net_cost: int
    cost_of_living: int
    total_out_of_pocket: int
    aid_breakdown: AidBreakdown
    confidence_score: int  # 0-95
    scenarios: CostScenarios
    methodology: PredictionMethodology

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "gross_tuition": self.gross_tuition,
            "estimated_aid": self.estimated_aid,
            "net_cost": self.net_cost,
            "cost_of_living": self.cost_of_living,
            "total_out_of_pocket": self.total_out_of_pocket,
            "aid_breakdown": self.aid_breakdown.to_dict(),
            "confidence_score": self.confidence_score,
            "scenarios": self.scenarios.to_dict(),
            "methodology": self.methodology.to_dict(),
        }


@dataclass(frozen=True)
class BatchPrediction:
    university_id: Optional[str]
    university_name: Optional[str]
    prediction: PredictionResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "university_id": self.university_id,
            "university_name": self.university_name,
            "prediction": self.prediction.to_dict(),
        }


@runtime_checkable
class AidComponent(Protocol):
    """
    Protocol for one source of aid (need, merit, scholarships).

    Each component returns a non-negative amount before overlap correction.
    """

    @property
    def name(self) -> str:
        ...

    def calculate(self, context: AidContext) -> float:
        ...


class BaseAidComponent(ABC):
    """Base class for aid components."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def calculate(self, context: AidContext) -> float:
        pass
