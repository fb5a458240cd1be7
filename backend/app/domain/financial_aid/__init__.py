# Financial aid prediction module
from app.domain.financial_aid.interfaces import (
    AidBreakdown,
    AidComponent,
    AidContext,
    BaseAidComponent,
    BatchPrediction,
    CostScenarios,
    PredictionMethodology,
    PredictionResult,
)
from app.domain.financial_aid.defaults import AID_DEFAULTS, AidDefaults, Residency
from app.domain.financial_aid.efc import calculate_efc
from app.domain.financial_aid.merit import calculate_merit_score
from app.domain.financial_aid.predictor import (
    FinancialAidPredictor,
    predict_financial_aid,
    predict_financial_aid_batch,
)

__all__ = [
    "AidBreakdown",
    "AidComponent",
    "AidContext",
    "BaseAidComponent",
    "BatchPrediction",
    "CostScenarios",
    "PredictionMethodology",
    "PredictionResult",
    "AID_DEFAULTS",
    "AidDefaults",
    "Residency",
    "calculate_efc",
    "calculate_merit_score",
    "FinancialAidPredictor",
    "predict_financial_aid",
    "predict_financial_aid_batch",
]
