from typing import Annotated, Literal

from pydantic import BaseModel, Field

from tripwase.schemas.catalog import CatalogSchema

CatalogKind = Literal["lodging", "voyage", "attraction"]


class ProfileRequest(BaseModel):
    favorites: CatalogSchema


class RecommendationRequest(BaseModel):
    favorites: CatalogSchema
    catalog: CatalogSchema
    limits: dict[CatalogKind, Annotated[int, Field(ge=0)]] | None = None
    top_limit: int | None = Field(default=None, ge=0)
