"""
Known irregularity fingerprints.

Each entry pairs a detection name with the irregularity score observed on a
known sample. Scores are empirical, so several entries may sit close to each
other and a single file can match more than one.
"""

import json
from collections import namedtuple

from irregularity_detector.config import DEFAULT_THRESHOLDS
from irregularity_detector.errors import SignatureTableError

SignatureEntry = namedtuple("SignatureEntry", ["name", "reference_score"])

DEFAULT_SIGNATURES = (
    SignatureEntry("VapeV4.11", 12.1883153487),
    SignatureEntry("SkilledV3", 1.3415799831),
    SignatureEntry("crimEXE", 54.0000000000),
)


class SignatureTable:
    """Ordered, read-only collection of SignatureEntry."""

    def __init__(self, entries=DEFAULT_SIGNATURES):
        self._entries = tuple(SignatureEntry(str(name), float(score)) for name, score in entries)

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"SignatureTable({list(self._entries)!r})"

    @property
    def entries(self):
        return self._entries

    def lookup(self, score, epsilon=DEFAULT_THRESHOLDS.epsilon):
        """Returns every entry within `epsilon` of `score`, in table order."""
        return [entry for entry in self._entries if abs(entry.reference_score - score) < epsilon]


def load_signature_table(path):
    """
    Loads a table from a JSON array of {"name": ..., "score": ...} objects.
    File order is kept.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise SignatureTableError(f"Cannot read signature file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise SignatureTableError(f"Invalid JSON in signature file '{path}': {e}") from e

    if not isinstance(raw, list):
        raise SignatureTableError(f"Signature file '{path}' must contain a JSON array")

    entries = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or "name" not in item or "score" not in item:
            raise SignatureTableError(
                f"Entry {index} in '{path}' needs both 'name' and 'score'"
            )
        score = item["score"]
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise SignatureTableError(f"Entry {index} in '{path}' has a non-numeric score")
        entries.append(SignatureEntry(str(item["name"]), float(score)))

    return SignatureTable(entries)
