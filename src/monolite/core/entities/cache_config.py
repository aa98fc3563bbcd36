"""Cache configuration entities."""

from dataclasses import dataclass, field

from monolite.exceptions import ConfigurationError


@dataclass(frozen=True)
class CacheConfig:
    """Settings for a single cache write.

    Attributes:
        ttl: Time-to-live in seconds.
        tags: Tags the entry is registered under for invalidation.
    """

    ttl: float = 60
    tags: list[str] = field(default_factory=list)


@dataclass
class CacheSettings:
    """Cache behavior for the resource services.

    Per-resource TTLs are in seconds. ``stale_ttl`` is how long the
    fallback copy used by stale-on-error endpoints is retained after a
    successful fetch.
    """

    enabled: bool = True
    default_ttl: float = 60

    banners_ttl: float = 300
    categories_ttl: float = 600
    products_ttl: float = 300
    search_ttl: float = 60
    variations_ttl: float = 300

    # Stale-on-error fallback
    stale_on_error: bool = True
    stale_ttl: float = 86400

    def __post_init__(self) -> None:
        """Reject negative durations."""
        for name in (
            "default_ttl",
            "banners_ttl",
            "categories_ttl",
            "products_ttl",
            "search_ttl",
            "variations_ttl",
            "stale_ttl",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")
