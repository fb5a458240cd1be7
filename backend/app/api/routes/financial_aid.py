"""
Financial Aid Routes

Net cost predictions for one or several universities.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.api.dependencies import (
    FinancialProfileRepoDep,
    PredictorDep,
    SettingsDep,
    UniversityRepoDep,
)
from app.api.redaction import redact_sensitive
from app.domain.models import FinancialProfile, StudentFinancialProfile
from app.infrastructure.db.repositories import FinancialProfileRepository
from app.infrastructure.exceptions import ValidationError


logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request Models
# ============================================================================

class PredictRequest(BaseModel):
    """Predict for a stored university or for inline university data."""
    student_id: str = Field(..., min_length=1)
    university_id: Optional[str] = None
    university_data: Optional[Dict[str, Any]] = None


class PredictBatchRequest(BaseModel):
    """Predict for several stored universities."""
    student_id: str = Field(..., min_length=1)
    university_ids: List[str] = Field(..., min_length=1)


# ============================================================================
# Helpers
# ============================================================================

async def load_student_profile(
    repo: FinancialProfileRepository,
    student_id: str,
) -> StudentFinancialProfile:
    """
    Load the student's financial profile.

    A student without a saved profile is predicted with an empty one; the
    result then carries the lowest confidence score.
    """
    profile = await repo.get(student_id)
    if profile is None:
        logger.info(f"[AID] No financial profile for {student_id}, using empty profile")
        profile = FinancialProfile.empty(student_id)
    return profile.to_student_profile()


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/financial-aid/predict")
async def predict_financial_aid(
    request: PredictRequest,
    universities: UniversityRepoDep,
    profiles: FinancialProfileRepoDep,
    predictor: PredictorDep,
):
    """Predict tuition, aid and net cost for one university."""
    if request.university_data is not None:
        university = request.university_data
    elif request.university_id:
        university = await universities.get_by_id(request.university_id)
    else:
        raise ValidationError(
            "Either university_id or university_data is required",
            details={"fields": ["university_id", "university_data"]},
        )

    profile = await load_student_profile(profiles, request.student_id)
    prediction = predictor.predict(university, profile)

    return redact_sensitive({
        "university_id": university.get("id", request.university_id),
        "university_name": university.get("name"),
        "prediction": prediction.to_dict(),
    })


@router.post("/financial-aid/predict-batch")
async def predict_financial_aid_batch(
    request: PredictBatchRequest,
    universities: UniversityRepoDep,
    profiles: FinancialProfileRepoDep,
    predictor: PredictorDep,
    settings: SettingsDep,
):
    """Predict for up to PREDICT_BATCH_MAX_UNIVERSITIES universities."""
    limit = settings.predict_batch_max_universities
    if len(request.university_ids) > limit:
        raise ValidationError(
            f"At most {limit} universities can be predicted at once",
            details={"max_universities": limit, "received": len(request.university_ids)},
        )

    rows = await universities.get_by_ids(request.university_ids)
    profile = await load_student_profile(profiles, request.student_id)
    results = predictor.predict_batch(rows, profile)

    return redact_sensitive([item.to_dict() for item in results])
