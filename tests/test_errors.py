"""Tests for the dual struct/exception error types."""

from __future__ import annotations

import msgspec
import pytest
from randkit.errors import (
    EmptyRange,
    EmptyRangeError,
    InvalidRange,
    InvalidRangeError,
    InvalidWeight,
    InvalidWeightError,
    SourceExhausted,
    SourceExhaustedError,
)

STRUCTS = [
    (EmptyRange(3, 2), EmptyRangeError),
    (InvalidRange(4, 2, 10), InvalidRangeError),
    (InvalidWeight(1, -0.5), InvalidWeightError),
    (SourceExhausted('int', 4), SourceExhaustedError),
]


class TestConversions:
    """Struct and exception variants convert into each other."""

    @pytest.mark.parametrize(('struct', 'exc_type'), STRUCTS)
    def test_to_exception_and_back(self, struct: msgspec.Struct, exc_type: type[Exception]) -> None:
        exc = struct.to_exception()
        assert isinstance(exc, exc_type)
        assert exc.to_struct() == struct

    @pytest.mark.parametrize(('struct', 'exc_type'), STRUCTS)
    def test_struct_is_frozen(self, struct: msgspec.Struct, exc_type: type[Exception]) -> None:
        field = struct.__struct_fields__[0]
        with pytest.raises(AttributeError):
            setattr(struct, field, 0)

    @pytest.mark.parametrize(('struct', 'exc_type'), STRUCTS)
    def test_struct_encodes_to_json(self, struct: msgspec.Struct, exc_type: type[Exception]) -> None:
        decoded = msgspec.json.decode(msgspec.json.encode(struct), type=type(struct))
        assert decoded == struct


class TestMessages:
    """Exception messages carry the offending values."""

    def test_empty_range_message(self) -> None:
        assert str(EmptyRangeError(3, 2)) == 'Empty range [3, 2]'

    def test_invalid_range_message(self) -> None:
        err = InvalidRangeError(4, 2, 10)
        assert str(err) == 'Invalid range [4, 2) for sequence of length 10'
        assert (err.start, err.end, err.count) == (4, 2, 10)

    def test_invalid_weight_message(self) -> None:
        err = InvalidWeightError(1, -0.5)
        assert str(err) == 'Invalid weight -0.5 at index 1'

    def test_source_exhausted_message(self) -> None:
        err = SourceExhaustedError('real', 2)
        assert 'no real value left after 2 draws' in str(err)

    def test_exceptions_are_raisable(self) -> None:
        with pytest.raises(InvalidRangeError):
            raise InvalidRange(0, 5, 3).to_exception()
