"""
Scholarship Component

External and institutional scholarships, weighted by merit score.
"""

from app.domain.financial_aid.defaults import resolve_aid_package
from app.domain.financial_aid.interfaces import AidContext, BaseAidComponent


class Scholarships(BaseAidComponent):
    """
    Scholarship estimate.

    International students only receive scholarships at schools that offer
    them internationally: 30% of the aid package (10000 when unknown), capped
    at 20000. Domestic students draw on 20% of the aid package (15000 when
    unknown), 30% more for first-generation students.
    """

    INTERNATIONAL_PACKAGE_SHARE = 0.3
    DOMESTIC_PACKAGE_SHARE = 0.2
    FIRST_GEN_MULTIPLIER = 1.3

    @property
    def name(self) -> str:
        return "scholarships"

    def calculate(self, context: AidContext) -> float:
        university = context.university
        profile = context.profile
        defaults = context.defaults
        merit_share = context.merit_score / 100
        package = resolve_aid_package(university)

        if profile.international_student:
            if not university.scholarships_international:
                return 0.0
            base = (
                package * self.INTERNATIONAL_PACKAGE_SHARE
                if package is not None
                else defaults.international_scholarship_base
            )
            return min(defaults.international_scholarship_cap, base) * merit_share

        base = package if package is not None else defaults.domestic_scholarship_base
        amount = base * self.DOMESTIC_PACKAGE_SHARE * merit_share

        if profile.first_generation:
            amount *= self.FIRST_GEN_MULTIPLIER

        return amount
