"""Error hierarchy for listiller.

Every public error class inherits from ListillerError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Error codes are defined as a :class:`str` enum so that they serialise
naturally to JSON and can be matched with simple ``==`` comparisons.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error listiller can raise."""

    USAGE_ERROR = "USAGE_ERROR"
    SORT_DATA_ERROR = "SORT_DATA_ERROR"
    STATE_ERROR = "STATE_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ListillerError(Exception):
    """Base exception for all listiller errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Diff errors
# ---------------------------------------------------------------------------

class ListillerUsageError(ListillerError):
    """A caller-supplied ``component_id`` contains the reserved separator.

    Raised synchronously while the diff cycle is running; the whole cycle
    is aborted.  The id-generation logic of the listilled source must be
    fixed, there is nothing to recover at runtime.

    Context keys: ``component_id``, ``key``, ``separator``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.USAGE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Client errors
# ---------------------------------------------------------------------------

class ListillerSortDataError(ListillerError):
    """A rendered sort attribute could not be decoded.

    Context keys: ``value``, ``reason``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.SORT_DATA_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class ListillerStateError(ListillerError):
    """The client reconciler was driven through an invalid transition.

    Context keys: ``current_state``, ``requested_state``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.STATE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
