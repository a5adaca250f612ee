"""Dataclass-based domain configuration.

The bookstore keeps its thresholds and presentation settings as frozen
dataclasses. Defaults work out of the box; ``from_env`` layers environment
overrides on top.
"""

import os
from dataclasses import dataclass, field
from datetime import date


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InventoryConfig:
    """Inventory management thresholds."""

    max_book_age_years: int = 10
    current_year: int | None = None  # None -> today's year
    low_stock_threshold: int = 5


@dataclass(frozen=True)
class LoggingConfig:
    """Log level and line format."""

    level: str = "INFO"
    format: str = "%(prefix)s: %(message)s"


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BookstoreConfig:
    """Complete configuration for the bookstore.

    Usage::

        config = BookstoreConfig.from_env()
        inventory.remove_older_than(
            config.inventory.max_book_age_years,
            config.resolve_current_year(),
        )
    """

    store_name: str = "Quantum book store"
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "BookstoreConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "BOOKSTORE_") -> "BookstoreConfig":
        """Create config from environment variables.

        Example: BOOKSTORE_MAX_BOOK_AGE_YEARS=5 BOOKSTORE_LOG_LEVEL=DEBUG
        """
        overrides = {}
        store_name = os.getenv(f"{prefix}STORE_NAME")
        if store_name:
            overrides["store_name"] = store_name

        inventory = {}
        for key in ("max_book_age_years", "current_year", "low_stock_threshold"):
            raw = os.getenv(f"{prefix}{key.upper()}")
            if raw:
                inventory[key] = _parse_int(f"{prefix}{key.upper()}", raw)
        if inventory:
            overrides["inventory"] = InventoryConfig(**inventory)

        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            overrides["logging"] = LoggingConfig(level=level.upper())

        return cls(**overrides)

    def resolve_current_year(self) -> int:
        """Return the configured year, falling back to today's."""
        if self.inventory.current_year is not None:
            return self.inventory.current_year
        return date.today().year


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
