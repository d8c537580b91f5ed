"""
Tests: command line table builder
"""

import pytest

from static_phf import PerfectHashTable
from static_phf.examples.build_table import main, parse_signature, read_keys


@pytest.fixture
def keyfile(tmp_path, keywords):
    path = tmp_path / "keywords.txt"
    lines = ["# rust keywords"] + [f"{k.decode()} {v}" for k, v in keywords]
    path.write_text("\n".join(lines) + "\n")
    return path


def test_read_keys(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("if\n\n# comment\nelse 7\nfor\n")
    assert read_keys(path) == [(b"if", 0), (b"else", 7), (b"for", 2)]


def test_parse_signature():
    assert parse_signature("0,-1, 2") == (0, -1, 2)
    assert parse_signature("") == ()


def test_build_and_lookup(keyfile, capsys):
    assert main([str(keyfile), "--lookup", "while", "--lookup", "whoo"]) == 0
    out = capsys.readouterr().out
    assert "keys      : 51" in out
    assert "while -> 35" in out
    assert "whoo -> None" in out


def test_snapshot_out(keyfile, tmp_path, keywords):
    out = tmp_path / "kw.phf"
    assert main([str(keyfile), "--out", str(out)]) == 0
    loaded = PerfectHashTable.load(out, values=[v for _, v in keywords])
    assert loaded.get(b"return") == 23


def test_supplied_signature(tmp_path, capsys):
    path = tmp_path / "keys.txt"
    path.write_text("ab 1\nba 2\n")
    assert main([str(path), "--signature=0"]) == 0
    assert "signature : 0" in capsys.readouterr().out


def test_build_error(tmp_path, capsys):
    path = tmp_path / "keys.txt"
    path.write_text("aaaaXaaa\naaaaYaaa\n")
    assert main([str(path)]) == 1
    assert "no unique signature found" in capsys.readouterr().err
