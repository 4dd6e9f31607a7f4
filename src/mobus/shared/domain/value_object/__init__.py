from .currency import Currency
from .money import Money
from .travel_date import TravelDate

__all__ = ["Currency", "Money", "TravelDate"]
