"""
API Dependencies

FastAPI dependency injection for the domain engines and data access.
Routers should import from api.dependencies, not db.dependencies directly.
"""

from typing import Annotated

from fastapi import Depends

from app.config.settings import Settings, get_settings
from app.domain.financial_aid import FinancialAidPredictor
from app.domain.scoring import MatchScorer


# Both engines are stateless, so one instance serves every request
_predictor = FinancialAidPredictor()
_scorer = MatchScorer()


def get_predictor() -> FinancialAidPredictor:
    """Shared financial aid predictor."""
    return _predictor


def get_scorer() -> MatchScorer:
    """Shared match scorer."""
    return _scorer


PredictorDep = Annotated[FinancialAidPredictor, Depends(get_predictor)]
ScorerDep = Annotated[MatchScorer, Depends(get_scorer)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# =============================================================================
# Re-export DB dependencies for a single import source
# =============================================================================
from app.infrastructure.db.dependencies import (  # noqa: E402, F401
    CatalogServiceDep,
    FinancialProfileRepoDep,
    UniversityRepoDep,
    get_catalog_service,
    get_financial_profile_repository,
    get_university_repository,
)
