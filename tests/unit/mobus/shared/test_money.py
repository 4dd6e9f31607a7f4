import typing
from decimal import Decimal

import pytest

from mobus.shared.domain import Currency, Money


class TestMoney:
    def test_multiply_by_seat_count(self):
        price = Money.usd(Decimal("45.00"))
        assert price.multiply(3) == Money.usd(Decimal("135.00"))

    def test_multiply_by_zero(self):
        assert Money.usd("38").multiply(0) == Money.zero(Currency.usd())

    def test_negative_multiplier_raises_error(self):
        with pytest.raises(ValueError, match="Multiplier cannot be negative"):
            Money.usd("10").multiply(-1)

    def test_add_same_currency(self):
        total = Money.usd("45.00").add(Money.usd("38.00"))
        assert total.amount == Decimal("83.00")
        assert total.currency == Currency("USD")

    def test_add_different_currency_raises_error(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money.usd("10").add(Money(amount=Decimal("10"), currency=Currency("JPY")))

    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.usd("-1")

    def test_currency_code_is_normalized(self):
        assert Currency("usd").code == "USD"

    def test_invalid_currency_code_raises_error(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            Currency("US")

    def test_annotations_resolve_to_classes(self):
        assert typing.get_type_hints(Money.add) == {"other": Money, "return": Money}
        assert typing.get_type_hints(Money.zero) == {"currency": Currency, "return": Money}
        assert typing.get_type_hints(Currency.usd) == {"return": Currency}
