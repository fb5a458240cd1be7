"""
Financial Profile Routes

Read and upsert a student's financial profile.
"""

from fastapi import APIRouter

from app.api.dependencies import FinancialProfileRepoDep
from app.domain.models import FinancialProfile, FinancialProfileUpdate


router = APIRouter()


@router.get("/financial-profile/{student_id}", response_model=FinancialProfile)
async def get_financial_profile(
    student_id: str,
    profiles: FinancialProfileRepoDep,
):
    """Get the student's profile, or an empty one if none was saved."""
    profile = await profiles.get(student_id)
    return profile or FinancialProfile.empty(student_id)


@router.put("/financial-profile/{student_id}", response_model=FinancialProfile)
async def upsert_financial_profile(
    student_id: str,
    request: FinancialProfileUpdate,
    profiles: FinancialProfileRepoDep,
):
    """Create or replace the student's profile."""
    return await profiles.upsert(student_id, request)
