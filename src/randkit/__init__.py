"""randkit: statistically correct shuffling and sampling over sequences.

Ranged Fisher-Yates shuffle, uniform reservoir sampling (Algorithm R) and
weighted reservoir sampling (Algorithm A-Chao), all driven by an injectable
uniform source.

Flat imports (preferred):
    from randkit import shuffle, shuffled, random_slice
    from randkit import ScriptedSource, SystemSource, UniformSource

Submodule imports (for organization):
    from randkit.shuffling import shuffle, shuffled
    from randkit.sampling import random_slice
    from randkit.source import ScriptedSource
    from randkit.errors import InvalidRangeError
"""

# Configuration
from randkit._config import RandomConfig, default_source, get_config, init, reset

# Logging
from randkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Errors
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

# Algorithms
from randkit.sampling import random_slice
from randkit.shuffling import shuffle, shuffled

# Sources
from randkit.source import Draw, DrawKind, ScriptedSource, SystemSource, UniformSource

__version__ = '0.1.0'

__all__ = [
    'Draw',
    'DrawKind',
    # Errors - struct variants
    'EmptyRange',
    # Errors - exception variants
    'EmptyRangeError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidWeight',
    'InvalidWeightError',
    # Config
    'RandomConfig',
    # Sources
    'ScriptedSource',
    'SourceExhausted',
    'SourceExhaustedError',
    'SystemSource',
    'UniformSource',
    '__version__',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'default_source',
    'get_config',
    'get_logger',
    'init',
    # Algorithms
    'random_slice',
    'remove_log_hook',
    'reset',
    'shuffle',
    'shuffled',
]
