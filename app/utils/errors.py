class ConfigurationError(RuntimeError):
    """Required startup configuration is missing or unusable."""


class PersistenceError(RuntimeError):
    """The datastore was unavailable or rejected a read/write."""
