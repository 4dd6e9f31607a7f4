from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報を含む）

    Value Object として不変性を保証。
    金額の演算メソッドを提供。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, times: int) -> Money:
        """金額を整数倍する（座席単価 × 座席数など）"""
        if times < 0:
            raise ValueError("Multiplier cannot be negative")
        return Money(amount=self.amount * times, currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        """米ドルで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.usd())
