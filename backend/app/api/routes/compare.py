"""
Compare Routes

Side-by-side view: aid prediction and, optionally, match score for each
selected university.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.api.dependencies import (
    FinancialProfileRepoDep,
    PredictorDep,
    ScorerDep,
    SettingsDep,
    UniversityRepoDep,
)
from app.api.redaction import redact_sensitive
from app.api.routes.financial_aid import load_student_profile
from app.domain.models import as_universities
from app.domain.scoring import MatchingCriteria
from app.infrastructure.exceptions import ValidationError


router = APIRouter()


class CompareRequest(BaseModel):
    student_id: str = Field(..., min_length=1)
    university_ids: List[str] = Field(..., min_length=1)
    criteria: Optional[Dict[str, Any]] = None


@router.post("/compare")
async def compare_universities(
    request: CompareRequest,
    universities: UniversityRepoDep,
    profiles: FinancialProfileRepoDep,
    predictor: PredictorDep,
    scorer: ScorerDep,
    settings: SettingsDep,
):
    """Predict (and score, when criteria are given) each university in request order."""
    limit = settings.predict_batch_max_universities
    if len(request.university_ids) > limit:
        raise ValidationError(
            f"At most {limit} universities can be compared at once",
            details={"max_universities": limit, "received": len(request.university_ids)},
        )

    records = as_universities(await universities.get_by_ids(request.university_ids))
    profile = await load_student_profile(profiles, request.student_id)
    criteria = MatchingCriteria.from_dict(request.criteria) if request.criteria is not None else None

    predictions = predictor.predict_batch(records, profile)

    results = []
    for record, item in zip(records, predictions):
        match = scorer.score(record, criteria).to_dict() if criteria is not None else None
        results.append({
            "university": record.to_dict(),
            "prediction": item.prediction.to_dict(),
            "match": match,
        })

    return redact_sensitive(results)
