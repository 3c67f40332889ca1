"""
Byte-distribution statistics for a single file.

The irregularity score walks the histogram in ascending byte-value order
(not file order) and tracks the largest jump in probability between one
nonzero bin and the previous nonzero bin. Packers and crypters tend to leave
sharp spikes in an otherwise flat distribution, which this ratio picks up.
"""

import os
from collections import namedtuple

import numpy as np
from scipy import stats

from irregularity_detector.config import CHI_SQUARE_MIN_BYTES, HEAD_TRIM, TAIL_TRIM
from irregularity_detector.errors import RangeTooSmall
from irregularity_detector.histogram import build_histogram

Irregularity = namedtuple("Irregularity", ["entropy", "score", "byte"])

AnalysisResult = namedtuple(
    "AnalysisResult",
    [
        "file_name",
        "total_bytes",
        "analyzed_bytes",
        "entropy",
        "irregularity_score",
        "irregularity_byte",
        "chi_square",
        "p_value",
        "matched_signatures",
        "inconclusive",
    ],
)


# --- Calculation Functions ---

def shannon_entropy(counts, total):
    """Calculates Shannon entropy (bits per byte) for the given byte counts."""
    if total <= 0:
        return 0.0
    counts = np.asarray(counts)
    probabilities = counts[counts > 0] / total
    return max(0.0, float(-(probabilities * np.log2(probabilities)).sum()))


def irregularity_peak(counts, total):
    """
    Returns (score, byte): the largest ratio between the probability of a
    byte value and that of the previous nonzero byte value, and where it
    occurred. The first nonzero bin counts as a ratio of 1.0.
    """
    score = 0.0
    peak_byte = 0
    previous = 0.0

    # zero bins are skipped without resetting the baseline
    for value in np.flatnonzero(counts):
        probability = float(counts[value]) / total
        ratio = probability / previous if previous > 0.0 else 1.0
        if ratio > score:
            score = ratio
            peak_byte = int(value)
        previous = probability

    return score, peak_byte


def analyze_histogram(counts, total=None):
    """Computes entropy and the irregularity peak of a 256-bin histogram."""
    counts = np.asarray(counts)
    if total is None:
        total = int(counts.sum())
    if total <= 0:
        raise RangeTooSmall("analyzed range is empty")

    score, peak_byte = irregularity_peak(counts, total)
    return Irregularity(shannon_entropy(counts, total), score, peak_byte)


def chi_square_uniformity(counts, total):
    """Calculates the Chi-square statistic against a uniform distribution."""
    if total < CHI_SQUARE_MIN_BYTES:
        return None, None

    # Using observed total ensures sum(expected) == sum(observed)
    expected = np.full(256, total / 256.0)
    chisq_stat, p_value = stats.chisquare(f_obs=counts, f_exp=expected, ddof=0)
    return float(chisq_stat), float(p_value)


def inconclusive_result(file_name, total_bytes):
    return AnalysisResult(
        file_name=file_name,
        total_bytes=total_bytes,
        analyzed_bytes=max(0, total_bytes - HEAD_TRIM - TAIL_TRIM),
        entropy=0.0,
        irregularity_score=0.0,
        irregularity_byte=0,
        chi_square=None,
        p_value=None,
        matched_signatures=(),
        inconclusive=True,
    )


# --- Main Analysis Function ---

def analyze_bytes(data, file_name):
    """
    Runs the histogram and irregularity analysis over `data`. Files too short
    to leave an interior range come back inconclusive instead of raising.
    The result has no signature matches yet; see classifier.classify.
    """
    file_name = os.path.basename(file_name)
    try:
        counts = build_histogram(data)
        analyzed = int(counts.sum())
        irregularity = analyze_histogram(counts, analyzed)
    except RangeTooSmall:
        return inconclusive_result(file_name, len(data))

    chisq_stat, p_value = chi_square_uniformity(counts, analyzed)

    return AnalysisResult(
        file_name=file_name,
        total_bytes=len(data),
        analyzed_bytes=analyzed,
        entropy=irregularity.entropy,
        irregularity_score=irregularity.score,
        irregularity_byte=irregularity.byte,
        chi_square=chisq_stat,
        p_value=p_value,
        matched_signatures=(),
        inconclusive=False,
    )
