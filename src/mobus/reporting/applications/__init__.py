from .operator_revenue import OperatorRevenue, OperatorRevenueService

__all__ = ["OperatorRevenue", "OperatorRevenueService"]
