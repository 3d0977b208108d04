import datetime as dt
from decimal import Decimal
from typing import TypedDict

from booking_engine.catalog.domain.entity import ServiceOffering
from booking_engine.catalog.domain.enum import ServiceKind
from booking_engine.catalog.domain.value_object import (
    AddOn,
    ScheduleOption,
    ServiceId,
    TaxRule,
)
from booking_engine.shared.domain import Currency, Money

DEFAULT_MAX_ROSTER_SIZE = 6

# 旧来の種別名も受け付ける
_KIND_ALIASES: dict[str, ServiceKind] = {
    "bus": ServiceKind.SEAT_TRANSPORT,
    "seat-transport": ServiceKind.SEAT_TRANSPORT,
    "cargo": ServiceKind.CARGO,
    "tour": ServiceKind.TOUR,
}


class TaxRuleDetails(TypedDict):
    name: str
    rate_percent: Decimal


class ScheduleDetails(TypedDict):
    date: dt.date
    time_slots: list[str]
    boarding_points: list[str]
    dropping_points: list[str]


class AddOnDetails(TypedDict):
    name: str
    price: Decimal


class OfferingDetails(TypedDict):
    """サービス定義の入力データ構造"""

    id: str
    kind: str
    name: str
    base_price: Decimal
    currency: str
    tax_rules: list[TaxRuleDetails] | None
    schedule_options: list[ScheduleDetails]
    max_roster_size: int | None
    add_ons: list[AddOnDetails]


class ServiceOfferingFactory:
    """サービス定義のファクトリ

    - 取得時に一度だけ既定値を補完する（税率未指定なら VAT 13%、定員未指定なら 6）
    - プリミティブ型から Value Object への変換
    """

    def create(self, details: OfferingDetails) -> ServiceOffering:
        kind = _KIND_ALIASES.get(details["kind"].lower())
        if kind is None:
            raise ValueError(f"Unknown service kind: {details['kind']}")

        tax_rules = details["tax_rules"]
        if tax_rules is None:
            rules: tuple[TaxRule, ...] = (TaxRule.vat(),)
        else:
            rules = tuple(
                TaxRule(name=rule["name"], rate_percent=rule["rate_percent"])
                for rule in tax_rules
            )

        schedule_options = tuple(
            ScheduleOption(
                date=option["date"],
                time_slots=tuple(option["time_slots"]),
                boarding_points=tuple(option["boarding_points"]),
                dropping_points=tuple(option["dropping_points"]),
            )
            for option in details["schedule_options"]
        )

        return ServiceOffering(
            id=ServiceId(details["id"]),
            kind=kind,
            name=details["name"],
            base_price=Money(
                amount=details["base_price"],
                currency=Currency(details["currency"]),
            ),
            tax_rules=rules,
            schedule_options=schedule_options,
            max_roster_size=details["max_roster_size"] or DEFAULT_MAX_ROSTER_SIZE,
            add_ons=tuple(
                AddOn(name=add_on["name"], price=add_on["price"])
                for add_on in details["add_ons"]
            ),
        )
