"""
Merit-Based Aid Component

Scales the school's typical aid package by the student's merit score.
"""

from app.domain.financial_aid.defaults import resolve_aid_package
from app.domain.financial_aid.interfaces import AidContext, BaseAidComponent
from app.domain.financial_aid.merit import merit_aid_factor


class MeritBasedAid(BaseAidComponent):
    """
    Merit-based aid.

    Base is the average aid package, or 30% of gross tuition when the school
    does not publish one. International students at schools without
    international scholarships keep 40%; in-state students at public schools
    get 15% more.
    """

    INTERNATIONAL_WITHOUT_SCHOLARSHIPS = 0.4
    PUBLIC_IN_STATE_BONUS = 1.15

    @property
    def name(self) -> str:
        return "merit_based"

    def calculate(self, context: AidContext) -> float:
        if context.merit_score <= 0:
            return 0.0

        university = context.university
        profile = context.profile

        base = resolve_aid_package(university)
        if base is None:
            base = context.gross_tuition * context.defaults.merit_base_tuition_share

        aid = base * merit_aid_factor(context.merit_score)

        if profile.international_student and not university.scholarships_international:
            aid *= self.INTERNATIONAL_WITHOUT_SCHOLARSHIPS

        if profile.in_state and university.type == "public":
            aid *= self.PUBLIC_IN_STATE_BONUS

        return aid
