import os
from collections import namedtuple

from irregularity_detector.config import DEFAULT_THRESHOLDS, EXEMPT_EXTENSIONS

RULE_IRREGULAR_ENTROPY = "irregularity+entropy"
RULE_NEAR_RANDOM = "near-random"
RULE_IRREGULARITY_SPIKE = "irregularity-spike"

Classification = namedtuple("Classification", ["result", "generic_rules", "signature_match"])


def is_exempt(file_name):
    """Archives like .jar are compressed internally and skip the generic rules."""
    return os.path.splitext(file_name)[1].lower() in EXEMPT_EXTENSIONS


def generic_rule_hits(result, thresholds=DEFAULT_THRESHOLDS):
    """Returns the generic rules that fire for `result`, each evaluated on its own."""
    if result.inconclusive or is_exempt(result.file_name):
        return ()

    score = result.irregularity_score
    entropy = result.entropy
    hits = []
    if score > thresholds.score_with_entropy and entropy > thresholds.entropy_with_score:
        hits.append(RULE_IRREGULAR_ENTROPY)
    if entropy > thresholds.entropy_alone:
        hits.append(RULE_NEAR_RANDOM)
    if score > thresholds.score_alone:
        hits.append(RULE_IRREGULARITY_SPIKE)
    return tuple(hits)


def classify(result, table, thresholds=DEFAULT_THRESHOLDS):
    """
    Applies the generic rules and the signature lookup to an analyzed file.

    Returns a Classification whose `result` carries every matched signature
    name. A file may land in both groups, either, or neither.
    """
    if result.inconclusive:
        return Classification(result, (), False)

    matches = table.lookup(result.irregularity_score, thresholds.epsilon)
    finalized = result._replace(matched_signatures=tuple(entry.name for entry in matches))
    return Classification(finalized, generic_rule_hits(finalized, thresholds), bool(matches))
