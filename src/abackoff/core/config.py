r"""Default configuration values for backoff policies.

The exponential defaults follow the widely used values of Google's
HTTP client backoff: start at 0.5s, grow by 50% per retry with +/-50%
jitter, cap single delays at one minute and give up after fifteen
minutes.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_INTERVAL",
    "DEFAULT_MAX_ELAPSED_TIME",
    "DEFAULT_MAX_INTERVAL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_RANDOMIZATION_FACTOR",
    "MAX_BACKOFF_INTERVAL",
]

import threading

# Delay in seconds before the first retry
DEFAULT_INITIAL_INTERVAL = 0.5

# Jitter width as a proportion of the current interval
# With 0.5: a 1s interval becomes a random delay in [0.5s, 1.5s]
DEFAULT_RANDOMIZATION_FACTOR = 0.5

# Growth factor applied to the interval after each retry
DEFAULT_MULTIPLIER = 1.5

# Ceiling in seconds on a single delay (<= 0 means no ceiling)
DEFAULT_MAX_INTERVAL = 60.0

# Total time budget in seconds, measured from the start of the iteration
# (0 means retry until another limit is reached)
DEFAULT_MAX_ELAPSED_TIME = 15 * 60.0

# Maximum number of retries (0 means unlimited)
DEFAULT_MAX_RETRIES = 0

# Hard ceiling in seconds on a single delay, applied when max_interval <= 0
# Longest timeout accepted by threading.Event.wait and time.sleep
MAX_BACKOFF_INTERVAL = threading.TIMEOUT_MAX
