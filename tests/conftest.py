"""Pytest configuration and shared fixtures."""

import os
import random
from pathlib import Path
from typing import Optional

import pytest

from ansi_textmode.core.cell import Cell
from ansi_textmode.core.document import Document

ART_SUFFIXES = ("*.ans", "*.bin", "*.xb")


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set ANSI_TEXTMODE_TEST_DIR to a directory of .ans/.bin/.xb files.
    """
    if env_path := os.environ.get("ANSI_TEXTMODE_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


def _art_files(art_dir: Path) -> list[Path]:
    files: list[Path] = []
    for pattern in ART_SUFFIXES:
        files.extend(art_dir.glob(pattern))
    # Limit to avoid very slow tests
    return sorted(files)[:50]


def make_document(columns: int, rows: int, seed: int = 0) -> Document:
    """A document filled with random glyphs, box drawing and colors."""
    rng = random.Random(seed)
    codes = [32, 65, 40, 41, 176, 177, 178, 187, 188, 196, 201, 205, 219, 220, 221, 222, 223]
    data = [
        Cell(code=rng.choice(codes), fg=rng.randrange(16), bg=rng.randrange(4))
        for _ in range(columns * rows)
    ]
    return Document(columns=columns, rows=rows, data=data, title="Sample", author="tester")


@pytest.fixture
def document_factory():
    """Build random documents: ``document_factory(columns, rows, seed)``."""
    return make_document


@pytest.fixture
def sample_doc() -> Document:
    return make_document(7, 4, seed=1)


@pytest.fixture
def blank_doc() -> Document:
    return Document(columns=80, rows=24)


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set ANSI_TEXTMODE_TEST_DIR")
    return art_dir


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Generate test cases from the external art directory."""
    if "art_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = _art_files(art_dir) if art_dir else []
        metafunc.parametrize("art_file", files, ids=lambda p: p.name)
