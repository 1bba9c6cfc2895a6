from __future__ import annotations

from pathlib import Path

import pytest

OFFICIAL_TEXT = (
    "The committee must act. However, this is more than a formality!\n"
    "\n"
    "If the treasury agrees, the bill passes; but it might not."
)

PSEUDONYM_TEXT = (
    "I think that this is very, very silly. And yet it is \"wise\".\n"
    "\n"
    "More must be said. That is all - for now."
)


@pytest.fixture
def official_text() -> str:
    return OFFICIAL_TEXT


@pytest.fixture
def pseudonym_text() -> str:
    return PSEUDONYM_TEXT


@pytest.fixture
def text_pair(tmp_path: Path) -> tuple[Path, Path]:
    """Write the official and pseudonymous sample texts to disk."""
    official = tmp_path / "official.txt"
    pseudonym = tmp_path / "pseudonym.txt"
    official.write_text(OFFICIAL_TEXT, encoding="utf-8")
    pseudonym.write_text(PSEUDONYM_TEXT, encoding="utf-8")
    return official, pseudonym
