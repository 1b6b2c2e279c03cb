"""Trip plans router: economic / medium / luxury estimates."""

import logging

from fastapi import APIRouter

from tripwase.config import settings
from tripwase.data.currency import format_price
from tripwase.schemas.plans import PlanRequest
from tripwase.services.plan_synthesizer import convert_plans, plan_synthesizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def generate_plans(req: PlanRequest):
    """Generate the three tiered plans, optionally shown in another currency."""
    plan_input = req.to_domain(settings.default_currency)
    plans = plan_synthesizer.generate_three_plans(plan_input)

    if req.display_currency and req.display_currency != plan_input.currency:
        plans = convert_plans(plans, req.display_currency)
        logger.info(f"Plans for {plan_input.destination} converted to {req.display_currency}")

    return {
        "destination": plan_input.destination,
        "origin": plan_input.origin,
        "budget": plan_input.budget,
        "budget_label": format_price(plan_input.budget, plan_input.currency),
        "currency": plans[0].currency,
        "plans": [
            {**p.to_dict(), "total_label": format_price(p.total_cost, p.currency)}
            for p in plans
        ],
    }
