"""
Result values returned across the service boundaries.

Every call to the Tibber API and every evaluation step returns either an
``Ok`` carrying the value or an ``Err`` carrying the kind of failure, so a
caller has to handle the failure branch explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of tick-scoped failures."""
    TRANSPORT = "TRANSPORT"        # network failure, no response
    HTTP = "HTTP"                  # response with a non-success status
    PARSE = "PARSE"                # response body is not a JSON object
    GRAPHQL = "GRAPHQL"            # response carries a top-level "errors" field
    DATA_SHAPE = "DATA_SHAPE"      # expected nested fields are missing
    NO_DATA = "NO_DATA"            # nothing to work with (empty list, no cheapest hour)
    EVALUATION = "EVALUATION"      # the result could not be interpreted
    UNEXPECTED = "UNEXPECTED"      # any other exception


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    reason: str
    detail: Any = None

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
