"""
Match Scorer

Central scoring engine for criteria-based university matching.
Starts every university at 100 and subtracts fixed penalties per module.
"""

import logging
import math
from typing import Any, Iterable, List

from app.domain.models import UniversityRecord, as_university
from app.domain.scoring.criteria import MatchingCriteria, as_criteria
from app.domain.scoring.interfaces import (
    CriteriaModule,
    RankedUniversity,
    ScoreResult,
)
from app.domain.scoring.modules import (
    AcademicsModule,
    FinancialsModule,
    FutureModule,
    LifestyleModule,
)


logger = logging.getLogger(__name__)


DEFAULT_TOP_N = 10


class MatchScorer:
    """
    University match scoring engine.

    Follows Single Responsibility - only calculates and ranks scores.
    Uses Strategy pattern for pluggable criteria modules.
    """

    MAX_SCORE = 100
    MIN_SCORE = 0

    # Universities scoring below this are excluded from matches entirely
    MIN_MATCH_SCORE = 1

    def __init__(self, modules: List[CriteriaModule] | None = None):
        """
        Initialize scorer with criteria modules.

        Args:
            modules: Criteria modules, evaluated in order. If None, uses defaults.
        """
        self._modules = modules or self._default_modules()

    def _default_modules(self) -> List[CriteriaModule]:
        """Get default criteria modules."""
        return [
            AcademicsModule(),
            FinancialsModule(),
            LifestyleModule(),
            FutureModule(),
        ]

    def score(self, university: Any, criteria: Any) -> ScoreResult:
        """
        Score a single university against the student's criteria.

        Args:
            university: UniversityRecord or raw university row
            criteria: MatchingCriteria, raw criteria mapping, or None

        Returns:
            ScoreResult with an integer score in [0, 100] and explanations
        """
        record = as_university(university)
        parsed = as_criteria(criteria)

        total = self.MAX_SCORE
        explanations: List[str] = []

        for module in self._modules:
            outcome = module.evaluate(record, parsed)
            total -= outcome.penalty
            explanations.extend(outcome.explanations)

        score = int(max(self.MIN_SCORE, min(self.MAX_SCORE, total)))
        return ScoreResult(score=score, explanations=explanations)

    def score_universities(
        self,
        criteria: Any,
        universities: Iterable[Any],
    ) -> List[RankedUniversity]:
        """Score every university, in input order, without filtering."""
        parsed = as_criteria(criteria)
        ranked = []
        for raw in universities:
            record = as_university(raw)
            result = self.score(record, parsed)
            ranked.append(RankedUniversity(
                university=record,
                score=result.score,
                explanations=result.explanations,
            ))
        return ranked

    def match_universities(
        self,
        criteria: Any,
        universities: Iterable[Any],
        top_n: int = DEFAULT_TOP_N,
    ) -> List[RankedUniversity]:
        """
        Rank the catalog for the student.

        Universities scoring 0 are dropped. The rest are sorted by score
        descending, then by avg_tuition_per_year ascending (missing tuition
        last). A non-positive top_n returns nothing.

        Args:
            criteria: MatchingCriteria or raw criteria mapping
            universities: Full catalog (rows or records)
            top_n: Maximum number of matches to return

        Returns:
            At most top_n RankedUniversity entries
        """
        if top_n <= 0:
            return []

        scored = self.score_universities(criteria, universities)
        matches = [s for s in scored if s.score >= self.MIN_MATCH_SCORE]
        matches.sort(key=self._sort_key)

        logger.info(
            f"[MATCHING] {len(matches)}/{len(scored)} universities matched, returning top {top_n}"
        )
        return matches[:top_n]

    @staticmethod
    def _sort_key(ranked: RankedUniversity):
        tuition = ranked.university.avg_tuition_per_year
        return (-ranked.score, tuition if tuition is not None else math.inf)


# Shared default instance
_default_scorer = MatchScorer()


def score_university(university: Any, criteria: Any) -> ScoreResult:
    """Score with the default module set."""
    return _default_scorer.score(university, criteria)


def match_universities(
    criteria: Any,
    universities: Iterable[Any],
    top_n: int = DEFAULT_TOP_N,
) -> List[RankedUniversity]:
    """Rank a catalog with the default module set."""
    return _default_scorer.match_universities(criteria, universities, top_n)
