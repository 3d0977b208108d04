from __future__ import annotations

from datetime import date

from booking_engine.catalog.domain.enum import ServiceKind
from booking_engine.catalog.domain.value_object import (
    AddOn,
    ScheduleOption,
    ServiceId,
    TaxRule,
)
from booking_engine.shared.domain import Currency, Entity, Money


class ServiceOffering(Entity[ServiceId]):
    """予約対象のサービス定義

    取得時に一度だけ正規化され、予約セッション中は変更されない。
    """

    def __init__(
        self,
        id: ServiceId,
        kind: ServiceKind,
        name: str,
        base_price: Money,
        tax_rules: tuple[TaxRule, ...],
        schedule_options: tuple[ScheduleOption, ...],
        max_roster_size: int,
        add_ons: tuple[AddOn, ...] = (),
    ) -> None:
        super().__init__(id)
        if max_roster_size < 1:
            raise ValueError(f"max_roster_size must be at least 1: {max_roster_size}")
        self._kind = kind
        self._name = name
        self._base_price = base_price
        self._tax_rules = tax_rules
        self._schedule_options = schedule_options
        self._max_roster_size = max_roster_size
        self._add_ons = add_ons

    @property
    def kind(self) -> ServiceKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def base_price(self) -> Money:
        return self._base_price

    @property
    def currency(self) -> Currency:
        return self._base_price.currency

    @property
    def tax_rules(self) -> tuple[TaxRule, ...]:
        return self._tax_rules

    @property
    def schedule_options(self) -> tuple[ScheduleOption, ...]:
        return self._schedule_options

    @property
    def max_roster_size(self) -> int:
        return self._max_roster_size

    @property
    def add_ons(self) -> tuple[AddOn, ...]:
        return self._add_ons

    def schedule_for(self, travel_date: date) -> ScheduleOption | None:
        """指定日の予約枠を返す"""
        for option in self._schedule_options:
            if option.date == travel_date:
                return option
        return None

    def find_add_on(self, name: str) -> AddOn | None:
        for add_on in self._add_ons:
            if add_on.name == name:
                return add_on
        return None
