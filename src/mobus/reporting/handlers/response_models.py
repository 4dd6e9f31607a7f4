from pydantic import BaseModel

from mobus.reporting.applications import OperatorRevenue


class RevenueData(BaseModel):
    """売上集計のレスポンスモデル"""

    operator_id: str
    total_bookings: int
    paid_bookings: int
    total_revenue: str
    currency: str


def to_revenue_data(revenue: OperatorRevenue) -> RevenueData:
    return RevenueData(
        operator_id=str(revenue.operator_id),
        total_bookings=revenue.total_bookings,
        paid_bookings=revenue.paid_bookings,
        total_revenue=str(revenue.total_revenue.amount),
        currency=str(revenue.total_revenue.currency),
    )
