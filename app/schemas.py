
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, List

# Wire names are camelCase; missing or null fields fall back to empty values
# so the validator, not the decoder, rejects them.
class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_item(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def _null_text(cls, v: Any) -> Any:
        return "" if v is None else v

class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate")
    purchase_time: str = Field("", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def _null_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, v: Any) -> Any:
        return [] if v is None else v

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
