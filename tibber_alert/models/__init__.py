"""
Data models package for the Tibber price alert service.
Contains Pydantic models for price data and notifications, and result values.
"""

from .price import NotificationRequest, NotificationResult, PriceRecord
from .result import Err, ErrorKind, Ok, Result

__all__ = [
    "PriceRecord",
    "NotificationRequest",
    "NotificationResult",
    "Ok",
    "Err",
    "ErrorKind",
    "Result",
]
