from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス"""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
