"""Single-pass reservoir sampling: Algorithm R and weighted Algorithm A-Chao.

Both samplers share one shape. The reservoir is filled with the first ``k``
elements, then every remaining element is streamed through an accept/reject
step, and the reservoir is returned as is (no re-sorting). The population is
read once, front to back, and only the reservoir is kept in memory.

Degenerate inputs are not errors:

- ``k <= 0`` returns an empty list,
- ``k >= len(seq)`` returns a copy of ``seq`` in its original order,
- (weighted) fewer weights than elements also returns a copy, rather than
  guessing the missing weights.

Reference:
    Vitter. "Random Sampling with a Reservoir" (1985)
    Chao. "A general purpose unequal probability sampling plan" (1982)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from randkit._config import default_source
from randkit._logging import get_logger
from randkit.errors import InvalidWeightError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from randkit.source import UniformSource

__all__ = ['random_slice']

log = get_logger(__name__)


def random_slice[T](
    seq: Sequence[T],
    k: int,
    weights: Sequence[float] | None = None,
    *,
    source: UniformSource | None = None,
) -> list[T]:
    """Return ``k`` elements of ``seq`` chosen at random without replacement.

    Without ``weights`` every ``k``-subset is equally likely (Algorithm R).
    With ``weights`` each element's chance of selection grows with its
    weight (Algorithm A-Chao).

    Args:
        seq: Population to sample from. Only indexed reads are used.
        k: Sample size.
        weights: Optional non-negative weight per element of ``seq``.
        source: Uniform source for the draws. Defaults to the configured source.

    Returns:
        A new list of ``min(max(k, 0), len(seq))`` elements.

    Raises:
        InvalidWeightError: If one of the first ``len(seq)`` weights is
            negative or NaN (checked before any draw).

    Example:
        ```python
        random_slice(['a', 'b', 'c', 'd'], 2)                       # e.g. ['d', 'b']
        random_slice(['a', 'b', 'c', 'd'], 1, [10.0, 1.0, 1.0, 1.0])  # usually ['a']
        random_slice([1, 2, 3], 5)                                  # [1, 2, 3]
        ```
    """
    count = len(seq)
    if k <= 0:
        log.debug('random_slice.empty', k=k, population=count)
        return []
    if k >= count:
        log.debug('random_slice.full_copy', reason='k >= population', k=k, population=count)
        return list(seq)

    if weights is None:
        return _algorithm_r(seq, k, source if source is not None else default_source())

    if len(weights) < count:
        log.debug(
            'random_slice.full_copy',
            reason='insufficient weights',
            k=k,
            population=count,
            weights=len(weights),
        )
        return list(seq)
    _check_weights(weights, count)
    return _algorithm_a_chao(seq, k, weights, source if source is not None else default_source())


def _algorithm_r[T](seq: Sequence[T], k: int, source: UniformSource) -> list[T]:
    """Uniform reservoir sampling.

    After element ``i`` is processed, each of the first ``i + 1`` elements is
    in the reservoir with probability ``k / (i + 1)``, uniformly in any slot.
    """
    reservoir = [seq[i] for i in range(k)]
    replaced = 0
    for i in range(k, len(seq)):
        j = source.uniform_int(0, i)
        if j < k:
            reservoir[j] = seq[i]
            replaced += 1
    log.debug('random_slice.sampled', algorithm='R', k=k, population=len(seq), replaced=replaced)
    return reservoir


def _algorithm_a_chao[T](
    seq: Sequence[T],
    k: int,
    weights: Sequence[float],
    source: UniformSource,
) -> list[T]:
    """Weighted reservoir sampling.

    ``weight_sum`` covers every element streamed so far, accepted or not, and
    is accumulated in stream order. The inclusion probability of element
    ``i`` is computed before its own weight is added.
    """
    reservoir = [seq[i] for i in range(k)]
    weight_sum = 0.0
    for i in range(k):
        weight_sum += weights[i]

    replaced = 0
    for i in range(k, len(seq)):
        weight = weights[i]
        p = _inclusion_probability(weight, weight_sum)
        if source.uniform_real(0.0, 1.0) <= p:
            slot = source.uniform_int(0, k - 1)
            reservoir[slot] = seq[i]
            replaced += 1
        weight_sum += weight
    log.debug(
        'random_slice.sampled',
        algorithm='A-Chao',
        k=k,
        population=len(seq),
        replaced=replaced,
        weight_sum=weight_sum,
    )
    return reservoir


def _inclusion_probability(weight: float, weight_sum: float) -> float:
    # IEEE division: w / 0.0 is inf for w > 0 (always accept), NaN for w == 0 (never accept)
    if weight_sum == 0.0:
        return math.inf if weight > 0.0 else math.nan
    return weight / weight_sum


def _check_weights(weights: Sequence[float], count: int) -> None:
    for index in range(count):
        weight = weights[index]
        if math.isnan(weight) or weight < 0.0:
            raise InvalidWeightError(index, weight)
