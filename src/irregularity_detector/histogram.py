import numpy as np

from irregularity_detector.config import HEAD_TRIM, TAIL_TRIM
from irregularity_detector.errors import RangeTooSmall


def build_histogram(data, head_trim=HEAD_TRIM, tail_trim=TAIL_TRIM):
    """
    Counts byte values over the interior of `data`, skipping `head_trim`
    leading and `tail_trim` trailing bytes. Returns a read-only array of
    256 counts indexed by byte value.
    """
    if len(data) < head_trim + tail_trim:
        raise RangeTooSmall(
            f"need at least {head_trim + tail_trim} bytes, got {len(data)}"
        )

    interior = np.frombuffer(data, dtype=np.uint8)[head_trim:len(data) - tail_trim]
    counts = np.bincount(interior, minlength=256)
    counts.flags.writeable = False
    return counts
