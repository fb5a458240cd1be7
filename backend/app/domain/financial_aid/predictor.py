"""
Financial Aid Predictor

Estimates tuition, aid and net cost for one student at one university.

Pipeline:
1. Resolve gross tuition and cost of living (with defaults)
2. Estimate EFC and demonstrated need from family income
3. Compute the merit score
4. Sum need-based, merit-based and scholarship components
5. Scale components down if together they exceed 95% of tuition
6. Derive net cost, scenarios and confidence

Stateless and deterministic: safe to share one instance across requests.
"""

import logging
from typing import Any, Dict, List, Optional

from app.domain.financial_aid.components import (
    MeritBasedAid,
    NeedBasedAid,
    Scholarships,
)
from app.domain.financial_aid.confidence import calculate_confidence
from app.domain.financial_aid.defaults import (
    AID_DEFAULTS,
    AidDefaults,
    resolve_cost_of_living,
    resolve_dependents,
    resolve_gross_tuition,
)
from app.domain.financial_aid.efc import calculate_efc
from app.domain.financial_aid.interfaces import (
    AidBreakdown,
    AidComponent,
    AidContext,
    BatchPrediction,
    CostScenarios,
    PredictionMethodology,
    PredictionResult,
)
from app.domain.financial_aid.merit import calculate_merit_score
from app.domain.models import as_profile, as_university, round_half_up
from app.infrastructure.exceptions import InvalidInputError


logger = logging.getLogger(__name__)


class FinancialAidPredictor:
    """
    Rule-based net cost estimator.

    Uses Strategy pattern for pluggable aid components; the overlap cap and
    scenario spreads apply to whatever components are configured.
    """

    # Combined aid never exceeds this share of gross tuition
    AID_CAP_RATIO = 0.95

    OPTIMISTIC_AID_MULTIPLIER = 1.25
    CONSERVATIVE_AID_MULTIPLIER = 0.75

    def __init__(
        self,
        components: Optional[List[AidComponent]] = None,
        defaults: AidDefaults = AID_DEFAULTS,
    ):
        """
        Initialize predictor with aid components.

        Args:
            components: Aid components. If None, uses need, merit and scholarships.
            defaults: Fallback values for missing record fields.
        """
        self._components = components or self._default_components()
        self._defaults = defaults

    def _default_components(self) -> List[AidComponent]:
        return [
            NeedBasedAid(),
            MeritBasedAid(),
            Scholarships(),
        ]

    def predict(self, university: Any, profile: Any) -> PredictionResult:
        """
        Predict the aid package for one university.

        Args:
            university: UniversityRecord or raw university row
            profile: StudentFinancialProfile or raw profile row

        Returns:
            PredictionResult with every amount rounded to whole units

        Raises:
            InvalidInputError: If university or profile is None
        """
        if university is None:
            raise InvalidInputError("University data is required", argument="university")
        if profile is None:
            raise InvalidInputError("User profile is required", argument="profile")

        context = self._build_context(as_university(university), as_profile(profile))

        amounts = {
            component.name: component.calculate(context)
            for component in self._components
        }
        amounts = self._apply_overlap_cap(amounts, context.gross_tuition)
        total_aid = sum(amounts.values())

        gross = context.gross_tuition
        net_cost = max(0.0, gross - total_aid)
        total_out_of_pocket = net_cost + context.cost_of_living

        scenarios = CostScenarios(
            optimistic=round_half_up(max(0.0, gross - total_aid * self.OPTIMISTIC_AID_MULTIPLIER)),
            realistic=round_half_up(net_cost),
            conservative=round_half_up(max(0.0, gross - total_aid * self.CONSERVATIVE_AID_MULTIPLIER)),
        )

        logger.debug(
            "[AID] %s: gross=%.0f aid=%.0f merit=%d",
            context.university.name or context.university.id,
            gross,
            total_aid,
            context.merit_score,
        )

        return PredictionResult(
            gross_tuition=round_half_up(gross),
            estimated_aid=round_half_up(total_aid),
            net_cost=round_half_up(net_cost),
            cost_of_living=round_half_up(context.cost_of_living),
            total_out_of_pocket=round_half_up(total_out_of_pocket),
            aid_breakdown=AidBreakdown(
                merit_based=round_half_up(amounts.get("merit_based", 0.0)),
                need_based=round_half_up(amounts.get("need_based", 0.0)),
                scholarships=round_half_up(amounts.get("scholarships", 0.0)),
            ),
            confidence_score=calculate_confidence(context.university, context.profile),
            scenarios=scenarios,
            methodology=PredictionMethodology(
                merit_score=context.merit_score,
                demonstrated_need=round_half_up(context.demonstrated_need),
                efc=context.efc if context.profile.family_income else None,
            ),
        )

    def predict_batch(self, universities: Any, profile: Any) -> List[BatchPrediction]:
        """
        Predict for several universities, preserving input order.

        All-or-nothing: an error for one university aborts the whole batch.

        Raises:
            InvalidInputError: If universities is not a list
        """
        if not isinstance(universities, (list, tuple)):
            raise InvalidInputError("Universities must be a list", argument="universities")

        results: List[BatchPrediction] = []
        for raw in universities:
            if raw is None:
                raise InvalidInputError("University data is required", argument="university")
            university = as_university(raw)
            results.append(BatchPrediction(
                university_id=university.id,
                university_name=university.name,
                prediction=self.predict(university, profile),
            ))
        return results

    def _build_context(self, university, profile) -> AidContext:
        gross_tuition = resolve_gross_tuition(university, profile, self._defaults)

        efc = 0
        demonstrated_need = 0.0
        if profile.family_income is not None:
            efc = calculate_efc(profile.family_income, resolve_dependents(profile, self._defaults))
            demonstrated_need = max(0.0, gross_tuition - efc)

        return AidContext(
            university=university,
            profile=profile,
            gross_tuition=gross_tuition,
            cost_of_living=resolve_cost_of_living(university, self._defaults),
            efc=efc,
            demonstrated_need=demonstrated_need,
            merit_score=calculate_merit_score(profile),
            defaults=self._defaults,
        )

    def _apply_overlap_cap(
        self,
        amounts: Dict[str, float],
        gross_tuition: float,
    ) -> Dict[str, float]:
        """
        Scale components proportionally when they exceed the aid cap.

        Need and merit awards overlap in practice, so the combined estimate
        is held to AID_CAP_RATIO of gross tuition.
        """
        cap = gross_tuition * self.AID_CAP_RATIO
        total = sum(amounts.values())

        if total <= cap:
            return amounts

        ratio = cap / total
        return {name: amount * ratio for name, amount in amounts.items()}


# Shared default instance
_default_predictor = FinancialAidPredictor()


def predict_financial_aid(university: Any, profile: Any) -> PredictionResult:
    """Predict with the default component set."""
    return _default_predictor.predict(university, profile)


def predict_financial_aid_batch(universities: Any, profile: Any) -> List[BatchPrediction]:
    """Batch predict with the default component set."""
    return _default_predictor.predict_batch(universities, profile)
