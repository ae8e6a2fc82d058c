"""Library configuration: RandomConfig, initialization, and the default source."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from randkit._logging import configure_logging, get_logger
from randkit.source import SystemSource, UniformSource

__all__ = [
    'RandomConfig',
    'default_source',
    'get_config',
    'init',
    'reset',
]

log = get_logger(__name__)


@dataclass(frozen=True)
class RandomConfig:
    """Configuration for randkit.

    Attributes:
        seed: Seed the default source was built from (None = system entropy).
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        source: Uniform source used when an algorithm is called without one.
    """

    seed: int | None = None
    log_level: str | None = None
    source: UniformSource = field(default_factory=SystemSource)


# Global configuration (set by init())
_config: RandomConfig | None = None

# Used when init() was never called
_fallback_source: UniformSource | None = None


def _detect_seed() -> int | None:
    """Read the default seed from RANDKIT_SEED, ignoring unparseable values."""
    raw = os.environ.get('RANDKIT_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw, 0)
    except ValueError:
        log.warning('ignoring unparseable RANDKIT_SEED', value=raw)
        return None


def _detect_log_level() -> str | None:
    return os.environ.get('RANDKIT_LOG_LEVEL', '').strip() or None


def init(
    seed: int | None = None,
    log_level: str | None = None,
    source: UniformSource | None = None,
) -> RandomConfig:
    """Initialize randkit with the specified configuration.

    Args:
        seed: Seed for the default `SystemSource`. Read from RANDKIT_SEED if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            RANDKIT_LOG_LEVEL if None; silent if neither is set.
        source: Explicit default source. Overrides ``seed`` for draws,
            though the seed is still recorded.

    Returns:
        The RandomConfig that was set.

    Example:
        ```python
        import randkit

        # Reproducible defaults for every call without an explicit source
        randkit.init(seed=1234, log_level="DEBUG")
        randkit.random_slice(range(100), 5)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_seed = seed if seed is not None else _detect_seed()
    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_source = source if source is not None else SystemSource(resolved_seed)

    _config = RandomConfig(seed=resolved_seed, log_level=resolved_level, source=resolved_source)

    if resolved_level is not None:
        configure_logging(resolved_level)

    log.debug('randkit.init', seed=resolved_seed, source=repr(resolved_source))
    return _config


def get_config() -> RandomConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'randkit not initialized. Call randkit.init() first.'
        raise RuntimeError(msg)
    return _config


def reset() -> None:
    """Forget the current configuration and the fallback source."""
    global _config, _fallback_source  # noqa: PLW0603
    _config = None
    _fallback_source = None


def default_source() -> UniformSource:
    """Return the configured source, or a lazily created unseeded one."""
    global _fallback_source  # noqa: PLW0603
    if _config is not None:
        return _config.source
    if _fallback_source is None:
        _fallback_source = SystemSource()
    return _fallback_source
