"""
Tests for classifier.classify: the three generic rules, the .jar exemption
and signature tagging.
"""

from __future__ import annotations

import pytest

from irregularity_detector.analyzer import AnalysisResult, analyze_bytes
from irregularity_detector.classifier import (
    RULE_IRREGULAR_ENTROPY,
    RULE_IRREGULARITY_SPIKE,
    RULE_NEAR_RANDOM,
    classify,
    generic_rule_hits,
    is_exempt,
)
from irregularity_detector.config import DEFAULT_THRESHOLDS
from irregularity_detector.signatures import SignatureTable

from samples import crim_interior, wrap

NO_SIGNATURES = SignatureTable(())


def _result(name="sample.bin", entropy=5.0, score=2.0, inconclusive=False):
    return AnalysisResult(
        file_name=name,
        total_bytes=1000,
        analyzed_bytes=997,
        entropy=entropy,
        irregularity_score=score,
        irregularity_byte=7,
        chi_square=None,
        p_value=None,
        matched_signatures=(),
        inconclusive=inconclusive,
    )


@pytest.mark.parametrize(
    "entropy, score, expected",
    [
        (5.0, 2.0, ()),
        (7.5, 12.0, (RULE_IRREGULAR_ENTROPY,)),
        (7.9, 2.0, (RULE_NEAR_RANDOM,)),
        (3.0, 25.0, (RULE_IRREGULARITY_SPIKE,)),
        (7.9, 25.0, (RULE_IRREGULAR_ENTROPY, RULE_NEAR_RANDOM, RULE_IRREGULARITY_SPIKE)),
        (7.5, 10.0, ()),
        (7.0, 12.0, ()),
        (7.8, 20.0, (RULE_IRREGULAR_ENTROPY,)),
    ],
)
def test_generic_rules(entropy, score, expected):
    assert generic_rule_hits(_result(entropy=entropy, score=score)) == expected


@pytest.mark.parametrize("name", ["client.jar", "CLIENT.JAR", "mod.Jar"])
def test_jar_files_skip_generic_rules(name):
    classification = classify(_result(name=name, entropy=7.95, score=60.0), NO_SIGNATURES)
    assert classification.generic_rules == ()


def test_is_exempt_only_checks_the_extension():
    assert is_exempt("a.jar")
    assert not is_exempt("jar.exe")
    assert not is_exempt("archive.jar.bak")


def test_jar_files_still_match_signatures():
    classification = classify(_result(name="client.JAR", entropy=7.95, score=54.0), SignatureTable())
    assert classification.generic_rules == ()
    assert classification.signature_match
    assert classification.result.matched_signatures == ("crimEXE",)


def test_every_matching_signature_is_tagged():
    table = SignatureTable([("First", 4.0), ("Other", 9.0), ("Second", 4.0000001)])
    classification = classify(_result(score=4.0), table)
    assert classification.result.matched_signatures == ("First", "Second")


def test_classify_does_not_touch_input():
    original = _result(score=54.0)
    classify(original, SignatureTable())
    assert original.matched_signatures == ()


def test_inconclusive_result_joins_no_group():
    classification = classify(_result(entropy=0.0, score=0.0, inconclusive=True), SignatureTable([("z", 0.0)]))
    assert classification.generic_rules == ()
    assert not classification.signature_match


def test_crafted_profile_matches_crim_exe():
    classification = classify(analyze_bytes(wrap(crim_interior()), "crim.exe"), SignatureTable())
    assert classification.signature_match
    assert classification.result.matched_signatures == ("crimEXE",)
    assert RULE_IRREGULARITY_SPIKE in classification.generic_rules


def test_random_payload_is_near_random(random_interior):
    classification = classify(analyze_bytes(wrap(random_interior), "payload.bin"), NO_SIGNATURES)
    assert classification.result.entropy > 7.9
    assert RULE_NEAR_RANDOM in classification.generic_rules


def test_random_payload_named_jar_is_not_generic(random_interior):
    classification = classify(analyze_bytes(wrap(random_interior), "payload.jar"), NO_SIGNATURES)
    assert classification.generic_rules == ()


def test_custom_thresholds():
    strict = DEFAULT_THRESHOLDS._replace(entropy_alone=4.0)
    assert generic_rule_hits(_result(entropy=5.0), strict) == (RULE_NEAR_RANDOM,)
