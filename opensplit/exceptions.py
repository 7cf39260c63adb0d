"""Exception hierarchy for the settlement engine."""


class OpenSplitError(Exception):
    """Base exception for all opensplit errors."""


class ConfigError(OpenSplitError):
    """Invalid settlement configuration."""


class InvalidExpenseError(OpenSplitError, ValueError):
    """Expense that cannot be split, e.g. one without receivers."""
