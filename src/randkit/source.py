"""Uniform sources: the only collaborator the randomization algorithms consume.

A source answers two questions: a uniform integer in a closed range, and a
uniform real in a closed range. Every algorithm in randkit takes one through
its ``source`` keyword, so tests can swap in a `ScriptedSource` and pin the
exact trajectory of a shuffle or a reservoir pass.

Usage:
    >>> from randkit.source import ScriptedSource, SystemSource
    >>> rng = SystemSource(seed=7)
    >>> 0 <= rng.uniform_int(0, 9) <= 9
    True
    >>> scripted = ScriptedSource(ints=[2, 0])
    >>> scripted.uniform_int(0, 4), scripted.uniform_int(0, 4)
    (2, 0)
"""

from __future__ import annotations

import random
from collections import deque
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import msgspec

from randkit.errors import EmptyRangeError, SourceExhaustedError

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ['Draw', 'DrawKind', 'ScriptedSource', 'SystemSource', 'UniformSource']


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform random draws over closed ranges.

    Implementations must raise `EmptyRangeError` when ``lower > upper``.
    Any other failure (exhausted entropy, I/O) propagates to the caller
    of the algorithm unchanged.
    """

    def uniform_int(self, lower: int, upper: int) -> int:
        """Return an integer uniformly distributed over ``[lower, upper]``."""
        ...

    def uniform_real(self, lower: float, upper: float) -> float:
        """Return a float uniformly distributed over ``[lower, upper]``."""
        ...


class SystemSource:
    """Uniform source backed by a `random.Random` instance.

    Args:
        seed: Seed for a fresh generator. None seeds from system entropy.
        rng: Existing generator to wrap. Takes precedence over ``seed``.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def __repr__(self) -> str:
        return f'SystemSource(seed={self._seed!r})'

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Reseed the wrapped generator (None -> system entropy)."""
        self._seed = seed
        self._rng.seed(seed)

    def uniform_int(self, lower: int, upper: int) -> int:
        if lower > upper:
            raise EmptyRangeError(lower, upper)
        return self._rng.randint(lower, upper)

    def uniform_real(self, lower: float, upper: float) -> float:
        if lower > upper:
            raise EmptyRangeError(lower, upper)
        return self._rng.uniform(lower, upper)


class DrawKind(StrEnum):
    INT = 'int'
    REAL = 'real'


class Draw(msgspec.Struct, frozen=True, gc=False):
    """One recorded draw of a `ScriptedSource`."""

    kind: DrawKind
    lower: float
    upper: float
    value: float


class ScriptedSource:
    """Deterministic source that replays scripted values in order.

    Integer and real draws consume separate scripts. Every served draw is
    recorded in `draws`, which lets tests assert on the requested bounds
    as well as on the result.

    Args:
        ints: Values returned by successive `uniform_int` calls.
        reals: Values returned by successive `uniform_real` calls.

    Raises:
        SourceExhaustedError: When a draw finds its script empty.
        ValueError: When the next scripted value lies outside the requested range.

    Example:
        ```python
        source = ScriptedSource(ints=[3, 1], reals=[0.25])
        source.uniform_int(0, 5)      # 3
        source.uniform_real(0.0, 1.0) # 0.25
        source.remaining_ints         # 1
        ```
    """

    def __init__(self, ints: Iterable[int] = (), reals: Iterable[float] = ()) -> None:
        self._ints: deque[int] = deque(ints)
        self._reals: deque[float] = deque(reals)
        self.draws: list[Draw] = []

    def __repr__(self) -> str:
        return f'ScriptedSource(remaining_ints={self.remaining_ints}, remaining_reals={self.remaining_reals})'

    @property
    def remaining_ints(self) -> int:
        return len(self._ints)

    @property
    def remaining_reals(self) -> int:
        return len(self._reals)

    def uniform_int(self, lower: int, upper: int) -> int:
        return int(self._next(DrawKind.INT, self._ints, lower, upper))

    def uniform_real(self, lower: float, upper: float) -> float:
        return float(self._next(DrawKind.REAL, self._reals, lower, upper))

    def _next(self, kind: DrawKind, script: deque, lower: float, upper: float) -> float:
        if lower > upper:
            raise EmptyRangeError(lower, upper)
        if not script:
            consumed = sum(1 for draw in self.draws if draw.kind is kind)
            raise SourceExhaustedError(kind.value, consumed)
        value = script[0]
        if not lower <= value <= upper:
            msg = f'Scripted {kind.value} value {value!r} outside [{lower}, {upper}]'
            raise ValueError(msg)
        script.popleft()
        self.draws.append(Draw(kind, lower, upper, value))
        return value
