"""
Testy CLI scg — komendy generate i sections.
"""

import json

import pytest

from scg.cli import build_parser, main


class TestGenerateCommand:
    def test_writes_canvas(self, vault, tmp_path, capsys):
        out = tmp_path / "SPL.canvas"
        main(["generate", str(vault), "--filter", "SPL", "--out", str(out)])

        canvas = json.loads(out.read_text(encoding="utf-8"))
        assert len(canvas["nodes"]) == 5
        assert "Canvas:" in capsys.readouterr().out

    def test_default_output_path_and_env_filter(self, vault, monkeypatch):
        monkeypatch.setenv("SCG_FILTER", "SPL 2")
        main(["generate", str(vault)])

        canvas = json.loads((vault / "summary.canvas").read_text(encoding="utf-8"))
        assert [n["text"] for n in canvas["nodes"]] == ["# Two\nx", "![[SPL 2#T1]]"]

    def test_dry_run_does_not_write(self, vault, capsys):
        main(["generate", str(vault), "--filter", "SPL", "--dry-run"])

        assert not (vault / "summary.canvas").exists()
        assert "dry-run" in capsys.readouterr().out

    def test_layout_overrides(self, vault, tmp_path):
        out = tmp_path / "wide.canvas"
        main(["generate", str(vault), "--filter", "SPL 2", "--out", str(out), "--gap", "10"])

        canvas = json.loads(out.read_text(encoding="utf-8"))
        assert [n["y"] for n in canvas["nodes"]] == [10, 80]

    def test_empty_filter_result(self, vault, capsys):
        main(["generate", str(vault), "--filter", "zzz"])

        assert not (vault / "summary.canvas").exists()
        assert "Brak dokumentów" in capsys.readouterr().out

    def test_missing_vault_exits_with_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["generate", str(tmp_path / "missing")])
        assert exc.value.code == 1

    def test_invalid_layout_exits_with_error(self, vault, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["generate", str(vault), "--column-width", "10"])
        assert exc.value.code == 1
        assert "Błąd konfiguracji" in capsys.readouterr().out

    def test_sink_failure_exits_with_error(self, vault, tmp_path, capsys):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["generate", str(vault), "--out", str(blocker / "x.canvas")])
        assert exc.value.code == 1
        assert "Błąd zapisu" in capsys.readouterr().out


    def test_append_keeps_existing_board(self, vault, tmp_path):
        out = tmp_path / "board.canvas"
        manual = {"id": "manual", "type": "text", "text": "mine", "x": 0, "y": -300, "width": 100, "height": 50}
        out.write_text(json.dumps({"nodes": [manual], "edges": []}), encoding="utf-8")

        main(["generate", str(vault), "--filter", "SPL 2", "--out", str(out), "--append"])
        main(["generate", str(vault), "--filter", "SPL 2", "--out", str(out), "--append"])

        canvas = json.loads(out.read_text(encoding="utf-8"))
        assert [n["text"] for n in canvas["nodes"]] == ["mine", "# Two\nx", "![[SPL 2#T1]]"]

    def test_append_to_malformed_board_reports_error(self, vault, tmp_path, capsys):
        out = tmp_path / "board.canvas"
        out.write_text(json.dumps({"nodes": ["oops"]}), encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["generate", str(vault), "--out", str(out), "--append"])
        assert exc.value.code == 1
        assert "Błąd zapisu" in capsys.readouterr().out

    def test_show_prints_node_table(self, vault, tmp_path, capsys):
        out = tmp_path / "SPL.canvas"
        main(["generate", str(vault), "--filter", "SPL 2", "--out", str(out), "--show"])

        printed = capsys.readouterr().out
        assert "2 węzłów" in printed
        assert "TEKST" in printed
        assert out.exists()


class TestSectionsCommand:
    def test_shows_tree(self, vault, capsys):
        main(["sections", str(vault / "SPL 1.md")])

        out = capsys.readouterr().out
        assert "3 sekcji" in out

    def test_heading_less_file(self, vault, capsys):
        main(["sections", str(vault / "sub" / "SPL 0.md")])

        assert "Brak sekcji" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["sections", str(tmp_path / "nope.md")])


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
