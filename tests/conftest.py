"""
Wspólne fixtury testów generatora płótna.
"""

from pathlib import Path

import pytest

from data_model.documents import Document


TWO_LEVEL = "# A\nHello\n## B\nWorld\n## C\nBye"


@pytest.fixture
def two_level_doc() -> Document:
    return Document(name="Notes.md", text=TWO_LEVEL)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Mały vault: trzy pliki SPL (jeden w podkatalogu) + pliki spoza filtra."""
    root = tmp_path / "vault"
    (root / "sub").mkdir(parents=True)
    (root / "SPL 2.md").write_text("# Two\nx\n## T1\ny", encoding="utf-8")
    (root / "SPL 1.md").write_text(TWO_LEVEL, encoding="utf-8")
    (root / "sub" / "SPL 0.md").write_text("intro only, no headings\n", encoding="utf-8")
    (root / "other.md").write_text("# Other\n", encoding="utf-8")
    (root / "SPL notes.txt").write_text("# Not markdown\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SCG_LINE_HEIGHT", "SCG_IMAGE_HEIGHT", "SCG_GAP", "SCG_COLUMN_WIDTH",
        "SCG_NODE_WIDTH", "SCG_SUB_X_OFFSET", "SCG_IMAGE_EXTENSIONS", "SCG_FILTER",
    ):
        monkeypatch.delenv(name, raising=False)
