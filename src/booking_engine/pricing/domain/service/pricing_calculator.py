from decimal import Decimal, InvalidOperation

from booking_engine.catalog.domain import ServiceOffering
from booking_engine.pricing.domain.value_object import (
    AddOnLine,
    PricingBreakdown,
    PricingOptions,
    TaxLine,
)
from booking_engine.shared.domain.value_object import quantize

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_pricing(
    offering: ServiceOffering,
    quantity: int | Decimal,
    options: PricingOptions | None = None,
) -> PricingBreakdown:
    """サービス定義と数量から料金内訳を計算する

    副作用を持たない純粋関数。同じ入力には常に同じ内訳を返す。

    計算順序:
        1. 基本料金 = 単価 × 数量
        2. 緊急度の倍率を基本料金に適用（課税前）
        3. 課税対象 = 基本料金 + 追加サービス
        4. 税目ごとに 課税対象 × 税率 / 100
        5. 合計 = 課税対象 + 税額 - 割引（0 未満にはしない）

    Args:
        offering: サービス定義
        quantity: 名簿の人数（座席・ツアー）または数量（貨物の重量など）
        options: 緊急度・追加サービス・割引

    Returns:
        PricingBreakdown: 0.01 単位に丸めた内訳
    """
    options = options or PricingOptions()
    amount = _validate_quantity(offering, quantity)

    multiplier = options.urgency.multiplier
    base = quantize(offering.base_price.amount * amount * multiplier)

    add_on_lines = tuple(
        AddOnLine(name=name, amount=quantize(_resolve_add_on(offering, name)))
        for name in options.add_ons
    )
    taxable = base + sum((line.amount for line in add_on_lines), ZERO)

    taxes = tuple(
        TaxLine(
            name=rule.name,
            rate_percent=rule.rate_percent,
            amount=quantize(taxable * rule.rate_percent / HUNDRED),
        )
        for rule in offering.tax_rules
    )
    subtotal = taxable + sum((line.amount for line in taxes), ZERO)

    discount = (
        quantize(options.discount.apply_to(subtotal)) if options.discount else ZERO
    )
    total = subtotal - discount
    floored = total < 0

    return PricingBreakdown(
        currency=offering.currency,
        base=base,
        urgency_multiplier=multiplier,
        add_ons=add_on_lines,
        taxes=taxes,
        discount=discount,
        total=ZERO if floored else quantize(total),
        total_floored=floored,
    )


def _validate_quantity(offering: ServiceOffering, quantity: int | Decimal) -> Decimal:
    if isinstance(quantity, bool):
        raise ValueError(f"Invalid quantity: {quantity!r}")
    if offering.kind.uses_roster:
        if not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"Roster size must be a positive integer: {quantity!r}")
        return Decimal(quantity)
    try:
        amount = Decimal(str(quantity))
    except InvalidOperation as e:
        raise ValueError(f"Invalid cargo quantity: {quantity!r}") from e
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Cargo quantity must be positive: {quantity!r}")
    return amount


def _resolve_add_on(offering: ServiceOffering, name: str) -> Decimal:
    add_on = offering.find_add_on(name)
    if add_on is None:
        raise ValueError(f"Unknown add-on for {offering.id}: {name}")
    return add_on.price
