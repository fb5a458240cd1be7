"""
Need-Based Aid Component

Covers part of the demonstrated need. Need-blind schools meet almost all of
it; other schools meet 60-80% depending on how many students receive aid.
"""

from app.domain.financial_aid.defaults import resolve_percentage_receiving_aid
from app.domain.financial_aid.interfaces import AidContext, BaseAidComponent


class NeedBasedAid(BaseAidComponent):
    """
    Need-based aid.

    - Need-blind: 95% of demonstrated need
    - Otherwise: need * (0.6 + 0.2 * share receiving aid)
    - First-generation students: an extra 8% of need
    """

    NEED_BLIND_COVERAGE = 0.95
    BASE_COVERAGE = 0.6
    AID_SHARE_COVERAGE = 0.2
    FIRST_GEN_BONUS = 0.08

    @property
    def name(self) -> str:
        return "need_based"

    def calculate(self, context: AidContext) -> float:
        if not context.income_known:
            return 0.0

        need = context.demonstrated_need

        if context.university.need_blind_admission:
            aid = need * self.NEED_BLIND_COVERAGE
        else:
            share = resolve_percentage_receiving_aid(context.university, context.defaults) / 100
            aid = need * (self.BASE_COVERAGE + share * self.AID_SHARE_COVERAGE)

        if context.profile.first_generation:
            aid += need * self.FIRST_GEN_BONUS

        return aid
