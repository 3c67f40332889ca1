"""
Pytest fixtures for the irregularity detector. Sample files are written to
tmp_path; random payloads come from a seeded numpy generator.
"""

from __future__ import annotations

import numpy as np
import pytest

from samples import crim_interior, wrap


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Keep the caller's IRREGULARITY_* variables and .env files out of the tests."""
    for name in ("IRREGULARITY_SIGNATURES", "IRREGULARITY_WORKERS", "IRREGULARITY_COUNT_EACH_RULE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def random_interior() -> bytes:
    return np.random.default_rng(1234).bytes(10_000)


@pytest.fixture
def sample_dir(tmp_path, random_interior):
    """
    A scan root holding a random payload (twice, once as .jar), a crafted
    crimEXE profile, a file too short to analyze and a nested directory.
    """
    root = tmp_path / "scan"
    root.mkdir()
    (root / "payload.bin").write_bytes(wrap(random_interior))
    (root / "payload.jar").write_bytes(wrap(random_interior))
    (root / "crim.exe").write_bytes(wrap(crim_interior()))
    (root / "tiny.txt").write_bytes(b"ab")
    nested = root / "nested"
    nested.mkdir()
    (nested / "hidden.bin").write_bytes(wrap(random_interior))
    return root
