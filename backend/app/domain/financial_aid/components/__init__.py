# Aid components submodule
from app.domain.financial_aid.components.need_based import NeedBasedAid
from app.domain.financial_aid.components.merit_based import MeritBasedAid
from app.domain.financial_aid.components.scholarships import Scholarships

__all__ = [
    "NeedBasedAid",
    "MeritBasedAid",
    "Scholarships",
]
