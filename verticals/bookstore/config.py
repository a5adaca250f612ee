"""Bookstore configuration.

Re-exports BookstoreConfig from the patterns module and builds the
process-wide instance from the environment.
"""

from patterns.domain_config import BookstoreConfig

# Environment-aware configuration instance
config = BookstoreConfig.from_env()
