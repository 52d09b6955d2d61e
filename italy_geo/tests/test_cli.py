"""
Tests for the CLI commands.
"""

from __future__ import annotations

import json
import sys

from italy_geo.__main__ import export, main
from italy_geo.registry import get_registry


def _run(monkeypatch, *argv):
    monkeypatch.setattr("italy_geo.__main__.setup_logging", lambda: None)
    monkeypatch.setattr(sys, "argv", ["italy-geo", *argv])
    main()


class TestCommands:
    def test_resolve(self, monkeypatch, capsys):
        _run(monkeypatch, "resolve", "Prov. di Roma")
        out = json.loads(capsys.readouterr().out)
        assert out["code"] == "RM"

    def test_match(self, monkeypatch, capsys):
        _run(monkeypatch, "match", "L'Aquila", "Aquila")
        out = json.loads(capsys.readouterr().out)
        assert out["match"] is True

    def test_region(self, monkeypatch, capsys):
        _run(monkeypatch, "region", "Umbria")
        out = capsys.readouterr().out
        assert "PG" in out and "TR" in out


class TestExport:
    def test_export_files(self, tmp_path):
        export(tmp_path)
        registry = get_registry()

        provinces = (tmp_path / "provinces.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(provinces) == 107
        assert json.loads(provinces[0])["code"] == "MI"

        tokens = (tmp_path / "lookup_index.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(tokens) == len(registry.lookup_index)
        rows = [json.loads(line) for line in tokens]
        assert {"token": "MILANO", "code": "MI"} in rows
