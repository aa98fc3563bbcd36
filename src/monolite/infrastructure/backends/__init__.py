"""Cache store backends."""

from monolite.infrastructure.backends.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
