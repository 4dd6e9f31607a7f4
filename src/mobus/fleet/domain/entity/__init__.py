from .bus import Bus
from .route import Route

__all__ = ["Bus", "Route"]
