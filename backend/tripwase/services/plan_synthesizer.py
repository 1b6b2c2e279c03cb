"""Plan synthesizer: three budget-tiered trip plans from trip parameters.

Costs come from the fixed rate table in data/plan_tiers.py; nothing here
queries real inventory. The traveler's budget is echoed back but never
scales or clamps the generated costs.
"""

import logging
import math
import time
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time as dt_time

from tripwase.data.currency import convert_currency
from tripwase.data.plan_tiers import PLAN_TIERS, REFERENCE_TIER, TierRates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanInput:
    destination: str
    origin: str
    start_date: date | datetime
    end_date: date | datetime
    travelers: int = 1
    budget: float = 0.0
    currency: str = "USD"
    interests: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CostBreakdown:
    accommodation: float
    transportation: float
    food: float
    activities: float

    @property
    def total(self) -> float:
        return self.accommodation + self.transportation + self.food + self.activities

    def to_dict(self) -> dict:
        return {
            "accommodation": self.accommodation,
            "transportation": self.transportation,
            "food": self.food,
            "activities": self.activities,
            "total": self.total,
        }


@dataclass(frozen=True)
class AccommodationDetails:
    name: str
    type: str
    price_per_night: float
    stars: int
    location: str
    features: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TransportationDetails:
    carrier: str
    departure: str
    arrival: str
    price: float


@dataclass
class TripPlan:
    """One tier's cost estimate. Savings are relative to the medium tier."""

    id: str
    tier: str
    name: str
    description: str
    duration: int
    travelers: int
    currency: str
    breakdown: CostBreakdown
    accommodation: AccommodationDetails
    transportation: TransportationDetails
    highlights: list[str] = field(default_factory=list)
    included: list[str] = field(default_factory=list)
    not_included: list[str] = field(default_factory=list)
    recommended: bool = False
    savings: float = 0.0

    @property
    def total_cost(self) -> float:
        return self.breakdown.total

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tier": self.tier,
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "travelers": self.travelers,
            "currency": self.currency,
            "total_cost": self.total_cost,
            "savings": self.savings,
            "breakdown": self.breakdown.to_dict(),
            "accommodation": {
                "name": self.accommodation.name,
                "type": self.accommodation.type,
                "price_per_night": self.accommodation.price_per_night,
                "stars": self.accommodation.stars,
                "location": self.accommodation.location,
                "features": list(self.accommodation.features),
            },
            "transportation": {
                "carrier": self.transportation.carrier,
                "departure": self.transportation.departure,
                "arrival": self.transportation.arrival,
                "price": self.transportation.price,
            },
            "highlights": list(self.highlights),
            "included": list(self.included),
            "not_included": list(self.not_included),
            "recommended": self.recommended,
        }


def _as_naive_datetime(value: date | datetime) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, dt_time())
    # Mixed aware/naive ends compare on wall-clock time
    return value.replace(tzinfo=None) if value.tzinfo is not None else value


def trip_duration(start: date | datetime, end: date | datetime) -> int:
    """Whole days between two dates, rounded up. Never less than 1.

    Plain dates count from midnight. Two aware datetimes subtract exactly;
    otherwise both ends are taken as naive wall-clock times.
    """
    both_aware = (
        isinstance(start, datetime) and start.tzinfo is not None
        and isinstance(end, datetime) and end.tzinfo is not None
    )
    if both_aware:
        delta = end - start
    else:
        delta = _as_naive_datetime(end) - _as_naive_datetime(start)
    days = math.ceil(delta.total_seconds() / 86400)
    return days if days > 0 else 1


class PlanSynthesizer:
    """Builds exactly one plan per tier from a single rate table."""

    def __init__(self, tiers: tuple[TierRates, ...] = PLAN_TIERS):
        self.tiers = tiers

    def generate_three_plans(self, plan_input: PlanInput) -> list[TripPlan]:
        duration = trip_duration(plan_input.start_date, plan_input.end_date)
        stamp = int(time.time() * 1000)

        plans = [self._build_plan(rates, plan_input, duration, stamp) for rates in self.tiers]

        reference = next(p for p in plans if p.tier == REFERENCE_TIER)
        for plan in plans:
            plan.savings = reference.total_cost - plan.total_cost

        logger.info(
            f"Generated {len(plans)} plans for {plan_input.destination} "
            f"({duration} days, {plan_input.travelers} travelers): "
            + ", ".join(f"{p.tier}={p.total_cost:.0f}" for p in plans)
        )
        return plans

    def _build_plan(
        self, rates: TierRates, plan_input: PlanInput, duration: int, stamp: int
    ) -> TripPlan:
        travelers = plan_input.travelers
        breakdown = CostBreakdown(
            accommodation=rates.night_rate * duration,
            transportation=rates.transport_flat,
            food=rates.food_rate * duration * travelers,
            activities=rates.activity_rate * travelers,
        )
        return TripPlan(
            id=f"{rates.tier}_{stamp}",
            tier=rates.tier,
            name=rates.plan_name,
            description=rates.description,
            duration=duration,
            travelers=travelers,
            currency=plan_input.currency,
            breakdown=breakdown,
            accommodation=AccommodationDetails(
                name=f"{rates.accommodation_type} {plan_input.destination}",
                type=rates.accommodation_type,
                price_per_night=rates.night_rate,
                stars=rates.stars,
                location=f"{rates.area_label} {plan_input.destination}",
                features=list(rates.accommodation_features),
            ),
            transportation=TransportationDetails(
                carrier=rates.carrier,
                departure=plan_input.origin,
                arrival=plan_input.destination,
                price=rates.transport_flat,
            ),
            highlights=list(rates.highlights),
            included=list(rates.included),
            not_included=list(rates.not_included),
            recommended=rates.recommended,
        )


def _copy_plan(plan: TripPlan) -> TripPlan:
    return replace(
        plan,
        accommodation=replace(plan.accommodation, features=list(plan.accommodation.features)),
        highlights=list(plan.highlights),
        included=list(plan.included),
        not_included=list(plan.not_included),
    )


def convert_plans(plans: list[TripPlan], to_currency: str) -> list[TripPlan]:
    """Re-express every money field of the plans in another currency."""
    converted = []
    for plan in plans:
        copy = _copy_plan(plan)
        if plan.currency == to_currency:
            converted.append(copy)
            continue

        def conv(amount: float) -> float:
            return convert_currency(amount, plan.currency, to_currency)

        b = plan.breakdown
        converted.append(replace(
            copy,
            currency=to_currency,
            breakdown=CostBreakdown(
                accommodation=conv(b.accommodation),
                transportation=conv(b.transportation),
                food=conv(b.food),
                activities=conv(b.activities),
            ),
            accommodation=replace(
                copy.accommodation,
                price_per_night=conv(plan.accommodation.price_per_night),
            ),
            transportation=replace(plan.transportation, price=conv(plan.transportation.price)),
            savings=conv(plan.savings),
        ))

    # Components are rounded individually, so re-derive savings from the new totals
    reference = next((p for p in converted if p.tier == REFERENCE_TIER), None)
    if reference is not None:
        for plan in converted:
            plan.savings = round(reference.total_cost - plan.total_cost, 2)
    return converted


plan_synthesizer = PlanSynthesizer()
