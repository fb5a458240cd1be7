# Scoring module for university matching
from app.domain.scoring.criteria import (
    MatchingCriteria,
    AcademicsCriteria,
    FinancialsCriteria,
    LifestyleCriteria,
    FutureCriteria,
)
from app.domain.scoring.interfaces import (
    ModuleOutcome,
    ScoreResult,
    RankedUniversity,
    CriteriaModule,
    BaseCriteriaModule,
)
from app.domain.scoring.match_scorer import (
    DEFAULT_TOP_N,
    MatchScorer,
    match_universities,
    score_university,
)

__all__ = [
    "MatchingCriteria",
    "AcademicsCriteria",
    "FinancialsCriteria",
    "LifestyleCriteria",
    "FutureCriteria",
    "ModuleOutcome",
    "ScoreResult",
    "RankedUniversity",
    "CriteriaModule",
    "BaseCriteriaModule",
    "DEFAULT_TOP_N",
    "MatchScorer",
    "match_universities",
    "score_university",
]
