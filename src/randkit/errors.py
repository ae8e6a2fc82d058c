"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyRange',
    'EmptyRangeError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidWeight',
    'InvalidWeightError',
    'SourceExhausted',
    'SourceExhaustedError',
]


# --- Source Errors ---


class EmptyRange(msgspec.Struct, frozen=True, gc=False):
    """Closed draw range has no values - struct variant."""

    lower: float
    upper: float

    def to_exception(self) -> EmptyRangeError:
        """Convert to exception for raise-based code."""
        return EmptyRangeError(self.lower, self.upper)


class EmptyRangeError(Exception):
    """Closed draw range has no values - exception variant."""

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f'Empty range [{lower}, {upper}]')

    def to_struct(self) -> EmptyRange:
        """Convert to struct for value-based code."""
        return EmptyRange(self.lower, self.upper)


class SourceExhausted(msgspec.Struct, frozen=True, gc=False):
    """Scripted source ran out of values - struct variant."""

    kind: str
    consumed: int

    def to_exception(self) -> SourceExhaustedError:
        """Convert to exception for raise-based code."""
        return SourceExhaustedError(self.kind, self.consumed)


class SourceExhaustedError(Exception):
    """Scripted source ran out of values - exception variant."""

    def __init__(self, kind: str, consumed: int) -> None:
        self.kind = kind
        self.consumed = consumed
        super().__init__(f'Scripted source exhausted: no {kind} value left after {consumed} draws')

    def to_struct(self) -> SourceExhausted:
        """Convert to struct for value-based code."""
        return SourceExhausted(self.kind, self.consumed)


# --- Contract Violations ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Sub-range lies outside the sequence - struct variant."""

    start: int
    end: int
    count: int

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.start, self.end, self.count)


class InvalidRangeError(Exception):
    """Sub-range lies outside the sequence - exception variant."""

    def __init__(self, start: int, end: int, count: int) -> None:
        self.start = start
        self.end = end
        self.count = count
        super().__init__(f'Invalid range [{start}, {end}) for sequence of length {count}')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for value-based code."""
        return InvalidRange(self.start, self.end, self.count)


class InvalidWeight(msgspec.Struct, frozen=True, gc=False):
    """Weight is negative or NaN - struct variant."""

    index: int
    weight: float

    def to_exception(self) -> InvalidWeightError:
        """Convert to exception for raise-based code."""
        return InvalidWeightError(self.index, self.weight)


class InvalidWeightError(Exception):
    """Weight is negative or NaN - exception variant."""

    def __init__(self, index: int, weight: float) -> None:
        self.index = index
        self.weight = weight
        super().__init__(f'Invalid weight {weight!r} at index {index}')

    def to_struct(self) -> InvalidWeight:
        """Convert to struct for value-based code."""
        return InvalidWeight(self.index, self.weight)
