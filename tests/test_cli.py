"""Test the command-line interface."""

import json

from sentencelight.cli import main

from conftest import LONG_SENTENCE


def test_validate_settings(temp_settings_file, capsys):
    assert main(["validate", str(temp_settings_file), "-v"]) == 0
    out = capsys.readouterr().out
    assert "Max words: 10" in out
    assert "view_change: 500" in out


def test_validate_missing_file(capsys):
    assert main(["validate", "/does/not/exist.yaml"]) == 1
    assert "not found" in capsys.readouterr().out


def test_validate_invalid_settings(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("max_words: 0\n", encoding="utf-8")
    assert main(["validate", str(path)]) == 1
    assert "validation failed" in capsys.readouterr().out


def test_scan_reports_long_sentences(tmp_path, capsys):
    doc = tmp_path / "note.txt"
    doc.write_text(f"Short one. {LONG_SENTENCE}\n\nTail", encoding="utf-8")

    assert main(["scan", str(doc), "--max-words", "10"]) == 0

    out = capsys.readouterr().out
    assert "1 long sentence(s)" in out
    assert f"[11:{11 + len(LONG_SENTENCE)}] 22 words" in out


def test_scan_json(tmp_path, capsys):
    doc = tmp_path / "note.txt"
    doc.write_text(LONG_SENTENCE, encoding="utf-8")

    assert main(["scan", str(doc), "-m", "10", "--json"]) == 0

    units = json.loads(capsys.readouterr().out)
    assert units == [{"text": LONG_SENTENCE, "start": 0, "end": len(LONG_SENTENCE), "word_count": 22}]


def test_scan_uses_settings_threshold(tmp_path, temp_settings_file, capsys):
    doc = tmp_path / "note.txt"
    doc.write_text("Exactly ten words are written in this sentence right here.", encoding="utf-8")
    assert main(["scan", str(doc), "--settings", str(temp_settings_file)]) == 0
    assert "No long sentences found" in capsys.readouterr().out


def test_scan_rejects_non_positive_threshold(tmp_path, capsys):
    doc = tmp_path / "note.txt"
    doc.write_text("Anything.", encoding="utf-8")
    assert main(["scan", str(doc), "-m", "0"]) == 1


def test_info(capsys):
    assert main(["info"]) == 0
    assert "SentenceLight CLI" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 1
