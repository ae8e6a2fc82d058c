"""Ranged Fisher-Yates shuffle: in-place and copying variants."""

from __future__ import annotations

import copy
import operator
from typing import TYPE_CHECKING

from randkit._config import default_source
from randkit._logging import get_logger
from randkit.errors import InvalidRangeError

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from randkit.source import UniformSource

__all__ = ['shuffle', 'shuffled']

log = get_logger(__name__)


def _check_range(count: int, start: int, end: int) -> tuple[int, int]:
    start = operator.index(start)
    end = operator.index(end)
    if not 0 <= start <= end <= count:
        raise InvalidRangeError(start, end, count)
    return start, end


def shuffle[T](
    seq: MutableSequence[T],
    start: int,
    end: int,
    *,
    source: UniformSource | None = None,
) -> None:
    """Shuffle ``seq[start:end]`` in place.

    Every index ``i`` of the range is visited once, in increasing order, and
    swapped with an index drawn uniformly from the whole range
    ``[start, end - 1]``. The draw bounds never shrink, so a scripted source
    replays one exact trajectory. Elements outside the range are untouched.

    Args:
        seq: Sequence to permute.
        start: First index of the range (inclusive).
        end: End of the range (exclusive).
        source: Uniform source for the swap partners. Defaults to the
            configured source.

    Raises:
        InvalidRangeError: If ``0 <= start <= end <= len(seq)`` does not hold.
            Raised before any draw, so ``seq`` is left intact.

    Example:
        ```python
        cards = list(range(10))
        shuffle(cards, 2, 8)   # cards[:2] and cards[8:] keep their places
        ```
    """
    start, end = _check_range(len(seq), start, end)
    if start == end:
        return
    rng = source if source is not None else default_source()

    swaps = 0
    for i in range(start, end):
        j = rng.uniform_int(start, end - 1)
        if j != i:
            seq[i], seq[j] = seq[j], seq[i]
            swaps += 1
    log.debug('shuffle.range', start=start, end=end, swaps=swaps)


def shuffled[S: MutableSequence](
    seq: S,
    start: int,
    end: int,
    *,
    source: UniformSource | None = None,
) -> S:
    """Return a shallow copy of ``seq`` with ``[start, end)`` shuffled.

    The copy keeps the container type (`copy.copy`); ``seq`` itself is not
    modified. See `shuffle` for the algorithm and the errors raised.
    """
    _check_range(len(seq), start, end)
    result = copy.copy(seq)
    shuffle(result, start, end, source=source)
    return result
