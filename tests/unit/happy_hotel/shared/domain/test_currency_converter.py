from decimal import Decimal

from happy_hotel.shared.domain.service import CurrencyConverter


class TestCurrencyConverter:
    def test_to_euro_uses_fixed_rate(self):
        assert CurrencyConverter().to_euro(Decimal("4500.0")) == Decimal("3600")

    def test_to_euro_zero(self):
        assert CurrencyConverter().to_euro(Decimal("0")) == Decimal("0")
