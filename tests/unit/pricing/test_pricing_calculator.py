from decimal import Decimal

import pytest

from booking_engine.catalog.domain import AddOn, ServiceKind, TaxRule
from booking_engine.pricing.domain import (
    PricingOptions,
    PromotionalDiscount,
    Urgency,
    compute_pricing,
)


class TestComputePricing:
    def test_two_travellers_with_vat(self, create_offering):
        breakdown = compute_pricing(create_offering(), 2)

        assert breakdown.base == Decimal("1600.00")
        assert breakdown.tax("VAT") == Decimal("208.00")
        assert breakdown.discount == Decimal("0")
        assert breakdown.total == Decimal("1808.00")
        assert breakdown.total_floored is False

    def test_one_traveller_with_vat(self, create_offering):
        breakdown = compute_pricing(create_offering(), 1)

        assert breakdown.base == Decimal("800.00")
        assert breakdown.tax("VAT") == Decimal("104.00")
        assert breakdown.total == Decimal("904.00")

    def test_cargo_urgency_applies_before_tax(self, create_offering):
        offering = create_offering(kind=ServiceKind.CARGO, base_price=Decimal("10000"))

        breakdown = compute_pricing(
            offering, Decimal("2.5"), PricingOptions(urgency=Urgency.EXPRESS)
        )

        assert breakdown.urgency_multiplier == Decimal("1.5")
        assert breakdown.base == Decimal("37500.00")
        assert breakdown.tax("VAT") == Decimal("4875.00")
        assert breakdown.total == Decimal("42375.00")

    def test_urgency_applies_to_roster_kinds(self, create_offering):
        breakdown = compute_pricing(
            create_offering(), 1, PricingOptions(urgency=Urgency.URGENT)
        )
        assert breakdown.base == Decimal("1600.00")
        assert breakdown.total == Decimal("1808.00")

    def test_zero_rate_tax_is_listed(self, create_offering):
        offering = create_offering(
            tax_rules=(TaxRule.vat(), TaxRule(name="Tourism", rate_percent=Decimal("0")))
        )

        breakdown = compute_pricing(offering, 1)

        assert [line.name for line in breakdown.taxes] == ["VAT", "Tourism"]
        assert breakdown.tax("Tourism") == Decimal("0.00")
        assert breakdown.total == Decimal("904.00")

    def test_untaxed_offering(self, create_offering):
        breakdown = compute_pricing(create_offering(tax_rules=()), 3)
        assert breakdown.taxes == ()
        assert breakdown.total == Decimal("2400.00")

    def test_add_ons_are_taxed(self, create_offering):
        offering = create_offering(add_ons=(AddOn(name="Insurance", price=Decimal("200")),))

        breakdown = compute_pricing(offering, 1, PricingOptions(add_ons=("Insurance",)))

        assert breakdown.add_on_total == Decimal("200.00")
        assert breakdown.tax("VAT") == Decimal("130.00")
        assert breakdown.total == Decimal("1130.00")

    def test_unknown_add_on_raises(self, create_offering):
        with pytest.raises(ValueError, match="Unknown add-on"):
            compute_pricing(create_offering(), 1, PricingOptions(add_ons=("Lunch",)))

    def test_percent_discount(self, create_offering):
        options = PricingOptions(
            discount=PromotionalDiscount(code="DASHAIN10", percent=Decimal("10"))
        )

        breakdown = compute_pricing(create_offering(), 2, options)

        assert breakdown.discount == Decimal("180.80")
        assert breakdown.total == Decimal("1627.20")

    def test_discount_exceeding_subtotal_floors_total(self, create_offering):
        options = PricingOptions(
            discount=PromotionalDiscount(code="FREE", amount=Decimal("5000"))
        )

        breakdown = compute_pricing(create_offering(), 1, options)

        assert breakdown.total == Decimal("0")
        assert breakdown.total_floored is True
        assert breakdown.discount == Decimal("5000.00")

    def test_discount_equal_to_subtotal_is_not_floored(self, create_offering):
        options = PricingOptions(
            discount=PromotionalDiscount(code="EXACT", amount=Decimal("904"))
        )

        breakdown = compute_pricing(create_offering(), 1, options)

        assert breakdown.total == Decimal("0.00")
        assert breakdown.total_floored is False

    def test_rounding_half_up(self, create_offering):
        offering = create_offering(base_price=Decimal("10.05"))
        breakdown = compute_pricing(offering, 1)
        # 10.05 × 13% = 1.3065
        assert breakdown.tax("VAT") == Decimal("1.31")

    def test_total_money_carries_currency(self, create_offering):
        money = compute_pricing(create_offering(), 2).total_money()
        assert str(money) == "1808.00 NPR"

    @pytest.mark.parametrize("quantity", [0, -1, True, Decimal("1.5")])
    def test_invalid_roster_quantity_raises(self, create_offering, quantity):
        with pytest.raises(ValueError):
            compute_pricing(create_offering(), quantity)

    @pytest.mark.parametrize(
        "quantity", [0, Decimal("-2"), False, Decimal("Infinity"), Decimal("NaN")]
    )
    def test_invalid_cargo_quantity_raises(self, create_offering, quantity):
        with pytest.raises(ValueError):
            compute_pricing(create_offering(kind=ServiceKind.CARGO), quantity)


class TestPricingProperties:
    def test_deterministic(self, create_offering):
        offering = create_offering(add_ons=(AddOn(name="Meal", price=Decimal("99.99")),))
        options = PricingOptions(
            urgency=Urgency.EXPRESS,
            add_ons=("Meal",),
            discount=PromotionalDiscount(code="P", percent=Decimal("7.5")),
        )

        first = compute_pricing(offering, 3, options)
        second = compute_pricing(offering, 3, options)

        assert first == second
        assert repr(first) == repr(second)

    def test_total_is_never_negative(self, create_offering):
        offering = create_offering()
        for amount in ("0", "1", "903.99", "904", "904.01", "100000"):
            for size in range(1, offering.max_roster_size + 1):
                options = PricingOptions(
                    discount=PromotionalDiscount(code="X", amount=Decimal(amount))
                )
                assert compute_pricing(offering, size, options).total >= 0

    @pytest.mark.parametrize("urgency", list(Urgency))
    def test_base_scales_with_roster_size(self, create_offering, urgency):
        offering = create_offering()
        for size in range(1, offering.max_roster_size + 1):
            breakdown = compute_pricing(offering, size, PricingOptions(urgency=urgency))
            expected = offering.base_price.amount * size * urgency.multiplier
            assert breakdown.base == expected
