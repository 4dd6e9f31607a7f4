from .aggregate import AggregateRoot

__all__ = ["AggregateRoot"]
