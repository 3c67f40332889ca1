"""
Flag packed, encrypted or obfuscated files in a directory from the
irregularity of their byte distribution.
"""

from irregularity_detector.analyzer import AnalysisResult, analyze_bytes, analyze_histogram
from irregularity_detector.classifier import Classification, classify
from irregularity_detector.config import DEFAULT_THRESHOLDS, Thresholds, load_settings
from irregularity_detector.errors import (
    DirectoryUnavailable,
    DivisionDegenerate,
    FileUnreadable,
    RangeTooSmall,
    ScanError,
    SignatureTableError,
)
from irregularity_detector.histogram import build_histogram
from irregularity_detector.scan import ScanResults, scan_directory
from irregularity_detector.signatures import (
    DEFAULT_SIGNATURES,
    SignatureEntry,
    SignatureTable,
    load_signature_table,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "Classification",
    "DEFAULT_SIGNATURES",
    "DEFAULT_THRESHOLDS",
    "DirectoryUnavailable",
    "DivisionDegenerate",
    "FileUnreadable",
    "RangeTooSmall",
    "ScanError",
    "ScanResults",
    "SignatureEntry",
    "SignatureTable",
    "SignatureTableError",
    "Thresholds",
    "analyze_bytes",
    "analyze_histogram",
    "build_histogram",
    "classify",
    "load_settings",
    "load_signature_table",
    "scan_directory",
]
