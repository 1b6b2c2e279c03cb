"""Static plan tier rate table.

Used for:
- Cost breakdowns of the three generated trip plans (plan synthesizer)
- Presentation strings attached to each plan (names, highlights, inclusions)

Tiers must stay strictly ordered: every rate of a later tier exceeds the
same rate of the tier before it.
"""

from dataclasses import dataclass

ECONOMIC = "economic"
MEDIUM = "medium"
LUXURY = "luxury"

# Savings of every plan are measured against this tier
REFERENCE_TIER = MEDIUM


@dataclass(frozen=True)
class TierRates:
    tier: str
    night_rate: float           # accommodation, per night (whole party)
    food_rate: float            # per person per day
    activity_rate: float        # per person, whole trip
    transport_flat: float       # whole trip
    stars: int

    # Presentation
    plan_name: str
    description: str
    accommodation_type: str     # also prefixes the synthesized lodging name
    area_label: str             # "{area_label} {destination}"
    carrier: str
    accommodation_features: tuple[str, ...]
    highlights: tuple[str, ...]
    included: tuple[str, ...]
    not_included: tuple[str, ...]
    recommended: bool = False


PLAN_TIERS: tuple[TierRates, ...] = (
    TierRates(
        tier=ECONOMIC,
        night_rate=35,
        food_rate=25,
        activity_rate=150,
        transport_flat=300,
        stars=2,
        plan_name="Adventurer Plan",
        description=(
            "For travelers who want adventure without overspending. "
            "Comfortable lodging and authentic experiences."
        ),
        accommodation_type="Hostel",
        area_label="Downtown",
        carrier="Budget Airline",
        accommodation_features=("Free WiFi", "Breakfast included", "Central location"),
        highlights=(
            "Well-located hostels and guesthouses",
            "Public and low-cost transport",
            "Authentic local food",
            "Free and low-cost activities",
            "Maximum flexibility",
        ),
        included=(
            "Accommodation",
            "Round-trip transport",
            "Daily breakfast",
            "Basic travel insurance",
            "City map and guide",
        ),
        not_included=(
            "Airport transfers",
            "Main meals",
            "Premium activities",
            "Tips",
            "Personal expenses",
        ),
    ),
    TierRates(
        tier=MEDIUM,
        night_rate=85,
        food_rate=45,
        activity_rate=300,
        transport_flat=500,
        stars=3,
        plan_name="Balanced Plan",
        description=(
            "The most popular option. A balance of comfort and price, "
            "with quality hotels and featured activities."
        ),
        accommodation_type="Hotel",
        area_label="Tourist district of",
        carrier="National Airline",
        accommodation_features=("Free WiFi", "Breakfast included", "Gym", "Pool", "Spa"),
        highlights=(
            "Central 3-4 star hotels",
            "Direct economy flights",
            "Local and tourist restaurants",
            "Main tours included",
            "Full travel insurance",
        ),
        included=(
            "3-star hotel accommodation",
            "Round-trip flight",
            "Daily breakfast",
            "Airport transfers",
            "City tour",
            "Full travel insurance",
        ),
        not_included=(
            "Meals not listed",
            "Optional activities",
            "Alcoholic drinks",
            "Tips",
            "Personal shopping",
        ),
        recommended=True,
    ),
    TierRates(
        tier=LUXURY,
        night_rate=220,
        food_rate=120,
        activity_rate=800,
        transport_flat=1200,
        stars=5,
        plan_name="Premium Plan",
        description=(
            "The most refined experience. Luxury hotels, exceptional "
            "dining and premium services."
        ),
        accommodation_type="Luxury Resort",
        area_label="Exclusive area of",
        carrier="Premium Airline",
        accommodation_features=(
            "Premium WiFi",
            "All meals included",
            "Full spa",
            "Private beach",
            "24/7 concierge",
        ),
        highlights=(
            "Exclusive 5-star hotels",
            "Business class flights",
            "Gourmet restaurants",
            "Private guided tours",
            "24/7 concierge",
        ),
        included=(
            "Luxury resort suite",
            "Business class flight",
            "All gourmet meals",
            "Private transfers",
            "Private tours",
            "Spa treatments",
            "Premium insurance",
            "Personal concierge",
        ),
        not_included=(
            "Luxury shopping",
            "Unscheduled special excursions",
            "Specialized medical services",
        ),
    ),
)


def get_tier(tier: str) -> TierRates | None:
    return next((t for t in PLAN_TIERS if t.tier == tier), None)
