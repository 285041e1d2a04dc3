class GeoJSONCoreError(ValueError):
    """Base class for coordinate and geometry validation errors.

    Every error names the offending field (or parameter) and the reason the
    value was rejected."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f'{field}: {reason}')


class InvalidArgumentError(GeoJSONCoreError):
    """An argument was missing or structurally unusable."""


class OutOfRangeError(GeoJSONCoreError):
    """An argument was present but its value was not acceptable."""


class NullFieldError(InvalidArgumentError):
    """A required string field was not supplied."""

    def __init__(self, field: str):
        super().__init__(field, 'value is required')


class CardinalityViolationError(InvalidArgumentError):
    """A numeric position received neither 2 nor 3 values."""

    def __init__(self, field: str, received: int):
        self.received = received
        super().__init__(
            field, f'expected 2 or 3 coordinates but received {received}'
        )


class InsufficientPointsError(InvalidArgumentError):
    """A polygon builder received too few boundary points."""

    def __init__(self, field: str, received: int, minimum: int):
        self.received = received
        self.minimum = minimum
        super().__init__(
            field,
            f'must have at least {minimum} points for a polygon '
            f'but received {received}',
        )


class EmptyFieldError(OutOfRangeError):
    """A required string field was empty or whitespace only."""

    def __init__(self, field: str):
        super().__init__(field, 'may not be empty')


class ParseFailureError(OutOfRangeError):
    """A string could not be parsed as a floating-point literal."""


class RangeViolationError(OutOfRangeError):
    """A parsed latitude or longitude fell outside its valid range."""
