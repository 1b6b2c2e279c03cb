from datetime import date, datetime, timedelta, timezone

import pytest

from tripwase.data.plan_tiers import ECONOMIC, LUXURY, MEDIUM, PLAN_TIERS
from tripwase.services.plan_synthesizer import (
    PlanInput,
    convert_plans,
    plan_synthesizer,
    trip_duration,
)


def make_input(days=5, travelers=2, **kw) -> PlanInput:
    defaults = dict(
        destination="Lisbon",
        origin="Santo Domingo",
        start_date=date(2026, 6, 1),
        end_date=date(2026, 6, 1) + timedelta(days=days),
        travelers=travelers,
        budget=2000,
        currency="USD",
    )
    defaults.update(kw)
    return PlanInput(**defaults)


def by_tier(plans):
    return {p.tier: p for p in plans}


class TestDuration:
    def test_whole_days(self):
        assert trip_duration(date(2026, 6, 1), date(2026, 6, 6)) == 5

    def test_partial_day_rounds_up(self):
        assert trip_duration(datetime(2026, 6, 1, 10), datetime(2026, 6, 3, 9)) == 2

    @pytest.mark.parametrize("end", [date(2026, 6, 1), date(2026, 5, 20)])
    def test_non_positive_clamps_to_one(self, end):
        assert trip_duration(date(2026, 6, 1), end) == 1

    def test_date_and_datetime_mixed(self):
        assert trip_duration(date(2026, 6, 1), datetime(2026, 6, 6, 12)) == 6
        assert trip_duration(datetime(2026, 6, 1, 12), date(2026, 6, 6)) == 5

    def test_naive_and_aware_mixed(self):
        start = datetime(2026, 6, 1, 9)
        end = datetime(2026, 6, 4, 9, tzinfo=timezone.utc)
        assert trip_duration(start, end) == 3
        assert trip_duration(end, start) == 1

    def test_both_aware_subtract_exactly(self):
        start = datetime(2026, 6, 1, 23, tzinfo=timezone(timedelta(hours=-5)))
        end = datetime(2026, 6, 3, 4, tzinfo=timezone.utc)
        assert trip_duration(start, end) == 1

    def test_mixed_dates_generate_plans(self):
        plans = plan_synthesizer.generate_three_plans(
            make_input(start_date=date(2026, 6, 1), end_date=datetime(2026, 6, 6, 12))
        )
        assert all(p.duration == 6 for p in plans)


class TestGenerateThreePlans:
    def test_regression_totals(self):
        plans = by_tier(plan_synthesizer.generate_three_plans(make_input(days=5, travelers=2)))
        assert plans[ECONOMIC].total_cost == 1025
        assert plans[MEDIUM].total_cost == 1975
        assert plans[LUXURY].total_cost == 5100

    def test_one_plan_per_tier(self):
        plans = plan_synthesizer.generate_three_plans(make_input())
        assert [p.tier for p in plans] == [ECONOMIC, MEDIUM, LUXURY]

    def test_savings_relative_to_medium(self):
        plans = by_tier(plan_synthesizer.generate_three_plans(make_input(days=5, travelers=2)))
        assert plans[MEDIUM].savings == 0
        assert plans[ECONOMIC].savings == 1975 - 1025
        assert plans[LUXURY].savings == 1975 - 5100

    def test_breakdown(self):
        economic = by_tier(plan_synthesizer.generate_three_plans(make_input(days=5, travelers=2)))[ECONOMIC]
        assert economic.breakdown.to_dict() == {
            "accommodation": 175,
            "transportation": 300,
            "food": 250,
            "activities": 300,
            "total": 1025,
        }

    @pytest.mark.parametrize("days,travelers", [(1, 1), (3, 4), (14, 2), (30, 6)])
    def test_tiers_strictly_ordered(self, days, travelers):
        plans = plan_synthesizer.generate_three_plans(make_input(days=days, travelers=travelers))
        totals = [p.total_cost for p in plans]
        nightly = [p.accommodation.price_per_night for p in plans]
        assert totals[0] < totals[1] < totals[2]
        assert nightly[0] < nightly[1] < nightly[2]

    def test_rate_table_is_strictly_ordered(self):
        for lower, higher in zip(PLAN_TIERS, PLAN_TIERS[1:]):
            assert lower.night_rate < higher.night_rate
            assert lower.food_rate < higher.food_rate
            assert lower.activity_rate < higher.activity_rate
            assert lower.transport_flat < higher.transport_flat
            assert lower.stars < higher.stars

    def test_reversed_dates_use_one_day(self):
        plans = plan_synthesizer.generate_three_plans(
            make_input(start_date=date(2026, 6, 10), end_date=date(2026, 6, 1), travelers=1)
        )
        economic = by_tier(plans)[ECONOMIC]
        assert economic.duration == 1
        assert economic.total_cost == 35 + 300 + 25 + 150

    def test_budget_does_not_change_costs(self):
        cheap = plan_synthesizer.generate_three_plans(make_input(budget=10))
        rich = plan_synthesizer.generate_three_plans(make_input(budget=1_000_000))
        assert [p.total_cost for p in cheap] == [p.total_cost for p in rich]

    def test_deterministic_costs(self):
        runs = [plan_synthesizer.generate_three_plans(make_input()) for _ in range(3)]
        totals = [[p.total_cost for p in plans] for plans in runs]
        assert totals[0] == totals[1] == totals[2]

    def test_presentation_fields(self):
        plans = by_tier(plan_synthesizer.generate_three_plans(make_input(currency="EUR")))
        luxury = plans[LUXURY]
        assert luxury.accommodation.stars == 5
        assert "Lisbon" in luxury.accommodation.name
        assert luxury.transportation.departure == "Santo Domingo"
        assert luxury.currency == "EUR"
        assert luxury.highlights
        assert plans[MEDIUM].recommended is True
        assert not plans[ECONOMIC].recommended and not luxury.recommended
        assert plans[ECONOMIC].id.startswith("economic_")

    def test_to_dict(self):
        data = plan_synthesizer.generate_three_plans(make_input())[1].to_dict()
        assert data["tier"] == MEDIUM
        assert data["total_cost"] == 1975
        assert data["savings"] == 0
        assert data["accommodation"]["price_per_night"] == 85


class TestConvertPlans:
    def test_same_currency_is_a_copy(self):
        plans = plan_synthesizer.generate_three_plans(make_input())
        converted = convert_plans(plans, "USD")
        assert [p.total_cost for p in converted] == [p.total_cost for p in plans]
        assert converted[0] is not plans[0]

    def test_conversion_keeps_order_and_savings(self):
        plans = plan_synthesizer.generate_three_plans(make_input())
        converted = by_tier(convert_plans(plans, "DOP"))
        assert all(p.currency == "DOP" for p in converted.values())
        assert converted[ECONOMIC].total_cost < converted[MEDIUM].total_cost < converted[LUXURY].total_cost
        assert converted[MEDIUM].savings == 0
        assert converted[ECONOMIC].savings == pytest.approx(
            converted[MEDIUM].total_cost - converted[ECONOMIC].total_cost
        )
        assert converted[ECONOMIC].total_cost > 1025

    def test_originals_untouched(self):
        plans = plan_synthesizer.generate_three_plans(make_input())
        convert_plans(plans, "EUR")
        assert plans[0].currency == "USD"
        assert plans[0].total_cost == 1025

    @pytest.mark.parametrize("currency", ["USD", "EUR"])
    def test_lists_are_not_shared(self, currency):
        plans = plan_synthesizer.generate_three_plans(make_input())
        converted = convert_plans(plans, currency)
        for original, copy in zip(plans, converted):
            assert copy.highlights is not original.highlights
            assert copy.included is not original.included
            assert copy.not_included is not original.not_included
            assert copy.accommodation.features is not original.accommodation.features

        converted[0].highlights.append("Late checkout")
        converted[0].accommodation.features.append("Balcony")
        assert "Late checkout" not in plans[0].highlights
        assert "Balcony" not in plans[0].accommodation.features
