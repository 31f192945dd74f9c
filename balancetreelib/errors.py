"""Exception types for BalanceTreeLib.

Lookups that simply miss (``find``, ``delete``) never raise; these
exceptions cover checked preconditions only.
"""


class BalanceTreeError(Exception):
    """Base class for all BalanceTreeLib errors."""
    pass


class ValueNotFoundError(BalanceTreeError, LookupError):
    """Raised when an operation requires a value that is not in the tree."""

    def __init__(self, value):
        super().__init__(f"Value not present in tree: {value!r}")
        self.value = value


class EmptyTreeError(BalanceTreeError, ValueError):
    """Raised when an operation needs at least one node."""
    pass


class ConfigError(BalanceTreeError, ValueError):
    """Raised when a configuration object fails validation."""

    def __init__(self, errors):
        super().__init__("; ".join(errors))
        self.errors = list(errors)
