"""Subtitle pack error hierarchy."""


class SubPackError(Exception):
    """Base class for all subpack errors."""


class InvalidArgumentError(SubPackError, ValueError):
    """Raised when a caller violates an operation's contract.

    Examples are a non-positive scale factor or an entry whose start time
    is after its end time.
    """
