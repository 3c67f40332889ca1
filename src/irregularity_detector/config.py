import os
from collections import namedtuple

from dotenv import dotenv_values, find_dotenv

# --- Analysis parameters ---
# Bytes dropped from each end of a file before building the histogram.
# Headers and trailers carry format structure, not payload.
HEAD_TRIM = 1
TAIL_TRIM = 2
MIN_FILE_BYTES = HEAD_TRIM + TAIL_TRIM

# Chi-square needs sufficient counts per bin
CHI_SQUARE_MIN_BYTES = 5 * 256

# Containers whose own compression drowns out the signal
EXEMPT_EXTENSIONS = (".jar",)

Thresholds = namedtuple(
    "Thresholds",
    [
        "score_with_entropy",   # rule A: score above this ...
        "entropy_with_score",   # ... and entropy above this
        "entropy_alone",        # rule B
        "score_alone",          # rule C
        "epsilon",              # signature match tolerance
    ],
)

DEFAULT_THRESHOLDS = Thresholds(
    score_with_entropy=10.0,
    entropy_with_score=7.0,
    entropy_alone=7.8,
    score_alone=20.0,
    epsilon=1e-6,
)

# --- Runtime settings ---
ENV_SIGNATURES = "IRREGULARITY_SIGNATURES"
ENV_WORKERS = "IRREGULARITY_WORKERS"
ENV_COUNT_EACH_RULE = "IRREGULARITY_COUNT_EACH_RULE"

Settings = namedtuple("Settings", ["signatures_path", "workers", "count_each_rule"])

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value):
    return value is not None and value.strip().lower() in _TRUTHY


def _as_workers(value):
    if value is None or not value.strip():
        return 1
    try:
        workers = int(value)
    except ValueError:
        raise ValueError(f"{ENV_WORKERS} must be an integer, got {value!r}") from None
    return max(1, workers)


def load_settings(env_file=None):
    """
    Reads settings from a .env file (if any) and the process environment.
    Variables already set in the environment take precedence over the file.
    """
    path = env_file if env_file is not None else find_dotenv(usecwd=True)
    values = dotenv_values(path) if path else {}
    values.update(os.environ)

    return Settings(
        signatures_path=values.get(ENV_SIGNATURES) or None,
        workers=_as_workers(values.get(ENV_WORKERS)),
        count_each_rule=_as_bool(values.get(ENV_COUNT_EACH_RULE)),
    )
