from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法"""

    CASH = "cash"
    CARD = "card"
    MOBILE_MONEY = "mobile_money"
    PAYPAL = "paypal"
