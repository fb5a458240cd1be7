"""
Scoring Interfaces for the matching engine

Defines protocols and data models for the scoring engine.
Follows Interface Segregation and Dependency Inversion principles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, runtime_checkable

from app.domain.models import UniversityRecord
from app.domain.scoring.criteria import MatchingCriteria


@dataclass(frozen=True)
class ModuleOutcome:
    """Penalty and explanation lines produced by one criteria module."""
    penalty: int = 0
    explanations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoreResult:
    """
    Compatibility of one university with the student's criteria.

    score is an integer in [0, 100]; explanations has one entry per module
    (academics may add a second).
    """
    score: int
    explanations: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "explanations": list(self.explanations)}


@dataclass(frozen=True)
class RankedUniversity:
    """University with its score, ready to be returned by the match endpoint."""
    university: UniversityRecord
    score: int
    explanations: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """University row merged with score and explanations."""
        return {
            **self.university.to_dict(),
            "score": self.score,
            "explanations": list(self.explanations),
        }


@runtime_checkable
class CriteriaModule(Protocol):
    """
    Protocol for criteria modules.

    Each module inspects its own part of the criteria and returns a fixed
    penalty when the university fails a filter.
    """

    @property
    def name(self) -> str:
        """Module name for transparency."""
        ...

    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        ...


class BaseCriteriaModule(ABC):
    """Base class for criteria modules with common functionality."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def disabled_outcome(self) -> ModuleOutcome:
        """Neutral outcome for a module the student switched off."""
        return ModuleOutcome(explanations=[f"{self.label}: not applied (module disabled)"])

    @abstractmethod
    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        pass
