"""
Domain exceptions for the Tibber price alert service.
Only startup failures are raised; tick failures travel as result values.
"""


class TibberAlertException(Exception):
    """Base exception for all Tibber price alert errors."""
    pass


class ConfigurationError(TibberAlertException):
    """Raised when required settings are missing at startup."""
    pass
