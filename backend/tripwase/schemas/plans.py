from datetime import date

from pydantic import BaseModel, Field

from tripwase.services.plan_synthesizer import PlanInput


class PlanRequest(BaseModel):
    destination: str
    origin: str
    start_date: date
    end_date: date
    travelers: int = Field(default=1, ge=1)
    budget: float = 0.0
    currency: str | None = None
    interests: list[str] = []
    display_currency: str | None = None

    def to_domain(self, default_currency: str = "USD") -> PlanInput:
        return PlanInput(
            destination=self.destination,
            origin=self.origin,
            start_date=self.start_date,
            end_date=self.end_date,
            travelers=self.travelers,
            budget=self.budget,
            currency=self.currency or default_currency,
            interests=list(self.interests),
        )
