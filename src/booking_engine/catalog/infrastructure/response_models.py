import datetime as dt
from decimal import Decimal

from pydantic import Field, field_validator

from booking_engine.shared.utils import WireModel, to_decimal


class TaxRuleModel(WireModel):
    name: str = Field(..., min_length=1)
    rate_percent: Decimal = Field(..., ge=0, description="税率（パーセント）")

    @field_validator("rate_percent", mode="before")
    @classmethod
    def convert_rate_to_decimal(cls, v):
        return to_decimal(v)


class ScheduleOptionModel(WireModel):
    date: dt.date
    time_slots: list[str] = Field(default_factory=list)
    boarding_points: list[str] = Field(default_factory=list)
    dropping_points: list[str] = Field(default_factory=list)


class AddOnModel(WireModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)


class ServiceOfferingResponse(WireModel):
    """カタログ API のサービス定義レスポンス"""

    id: str = Field(..., min_length=1)
    kind: str = Field(..., min_length=1, examples=["seat-transport", "cargo", "tour"])
    name: str = ""
    base_price: Decimal = Field(..., ge=0, description="単価")
    currency: str = Field(default="NPR", pattern="^[A-Z]{3}$")
    tax_rules: list[TaxRuleModel] | None = None
    schedule_options: list[ScheduleOptionModel] = Field(default_factory=list)
    max_roster_size: int | None = Field(default=None, ge=1)
    add_ons: list[AddOnModel] = Field(default_factory=list)

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)
