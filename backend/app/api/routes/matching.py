"""
Matching Routes

Ranks the university catalog against the student's criteria.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body

from app.api.dependencies import CatalogServiceDep, ScorerDep, SettingsDep
from app.domain.models import number_field
from app.domain.scoring import MatchingCriteria
from app.infrastructure.exceptions import ValidationError


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/matching")
async def match_universities(
    catalog: CatalogServiceDep,
    scorer: ScorerDep,
    settings: SettingsDep,
    payload: Any = Body(...),
):
    """
    Return the best matching universities.

    The body is the criteria object (academics, financials, lifestyle,
    future) plus an optional ``topN``. Unknown or wrong-typed filters are
    ignored rather than rejected.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Invalid criteria object")

    criteria = MatchingCriteria.from_dict(payload)

    top_n = number_field(payload.get("topN"))
    top_n = int(top_n) if top_n is not None else settings.match_default_top_n

    universities = await catalog.get_catalog()
    matches = scorer.match_universities(criteria, universities, top_n)

    return [match.to_dict() for match in matches]
