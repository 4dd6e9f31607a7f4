from .search_routes import RouteAvailability, RouteSearchService

__all__ = ["RouteAvailability", "RouteSearchService"]
