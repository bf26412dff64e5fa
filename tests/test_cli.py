import json
from pathlib import Path

import pytest

from apps.cli import query


def _corpus(tmp_path: Path) -> str:
    p = tmp_path / "corpus.txt"
    p.write_text("crane\nslate\ntrace\ncrate\nshale\n", encoding="utf-8")
    return str(p)


def test_query_words(tmp_path, capsys):
    rc = query.main(["--corpus", _corpus(tmp_path), "words", "C0R0A2N0E2/S2L1O0T0H1"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["SHALE"]


def test_query_most_common(tmp_path, capsys):
    rc = query.main(["--corpus", _corpus(tmp_path), "most-common", "5"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["TRACE", "CRATE"]


def test_query_reports_clue_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        query.main(["--corpus", _corpus(tmp_path), "words", "C0R0A2N0E2/S2T0"])
    assert exc.value.code == 2
    assert "Pattern length mismatch" in capsys.readouterr().err


def test_query_reports_missing_corpus(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        query.main(["--corpus", str(tmp_path / "missing.txt"), "most-common", "5"])
    assert exc.value.code == 2
    assert "corpus file not found" in capsys.readouterr().err
