import concurrent.futures
import os
import stat
import sys

from irregularity_detector.analyzer import analyze_bytes
from irregularity_detector.classifier import classify
from irregularity_detector.config import DEFAULT_THRESHOLDS
from irregularity_detector.errors import DirectoryUnavailable, FileUnreadable


class ScanResults:
    """The three result groups of a scan, plus the files that could not be read."""

    def __init__(self, count_each_rule=False):
        self.count_each_rule = count_each_rule
        self.all_files = []
        self.generic = []
        self.signature = []
        self.failures = []

    def add(self, classification):
        self.all_files.append(classification)
        if classification.generic_rules:
            if self.count_each_rule:
                self.generic.extend(
                    classification._replace(generic_rules=(rule,)) for rule in classification.generic_rules
                )
            else:
                self.generic.append(classification)
        if classification.signature_match:
            self.signature.append(classification)

    def add_failure(self, error):
        self.failures.append(error)


# --- Directory / file access ---

def iter_directory(dir_path):
    """Yields (name, path) for each non-directory entry directly under dir_path."""
    if not os.path.isdir(dir_path):
        raise DirectoryUnavailable(f"Directory not found or not accessible: {dir_path}")
    try:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise DirectoryUnavailable(f"Error while scanning directory {dir_path}: {e}") from e

    for entry in entries:
        if entry.is_dir():
            continue
        yield entry.name, entry.path


def read_file(path):
    """Reads the whole file as bytes. FIFOs, sockets and devices are refused unopened."""
    try:
        if not stat.S_ISREG(os.stat(path).st_mode):
            raise FileUnreadable(path, "not a regular file")
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileUnreadable(path, e.strerror or e) from e


def analyze_file(name, path, table, thresholds=DEFAULT_THRESHOLDS):
    """Reads, analyzes and classifies one file."""
    data = read_file(path)
    return classify(analyze_bytes(data, name), table, thresholds)


# --- Main Scan Function ---

def scan_directory(dir_path, table, thresholds=DEFAULT_THRESHOLDS, workers=1, count_each_rule=False):
    """
    Analyzes every file directly under dir_path. Unreadable files are reported
    on stderr and skipped. With workers > 1 files are analyzed concurrently;
    results are still collected in listing order.
    """
    results = ScanResults(count_each_rule=count_each_rule)
    files = list(iter_directory(dir_path))

    def run(item):
        name, path = item
        try:
            return analyze_file(name, path, table, thresholds)
        except FileUnreadable as e:
            return e

    if workers > 1 and len(files) > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(run, files))
    else:
        outcomes = [run(item) for item in files]

    for outcome in outcomes:
        if isinstance(outcome, FileUnreadable):
            print(f"Warning: {outcome}", file=sys.stderr)
            results.add_failure(outcome)
        else:
            results.add(outcome)

    return results
