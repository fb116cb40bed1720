import json
from pathlib import Path

import pytest

from frontend.__main__ import main


def _seed(tmp: Path) -> str:
    path = tmp / "apps.jsonl"
    rows = [
        {"app_id": "firefox.desktop", "name": "Firefox", "last_used": 3},
        {"app_id": "gimp.desktop", "name": "GIMP", "description": "Image editor"},
        {"app_id": "org.gnome.Nautilus.desktop", "name": "Files", "last_used": 9},
    ]
    path.write_text("".join(json.dumps(r) + "\n" for r in rows), encoding="utf-8")
    return str(path)


@pytest.mark.e2e
def test_cli_single_query_json(tmp_path: Path, capsys):
    rc = main(["--records", _seed(tmp_path), "--q", "fir", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["app_id"] for r in data] == ["firefox.desktop"]
    first = data[0]
    for key in ("position", "display_text", "score", "highlight_range", "matched_spans"):
        assert key in first
    assert first["matched_spans"] == [[0, 3]]


@pytest.mark.e2e
def test_cli_command_prefix_hides_all(tmp_path: Path, capsys):
    rc = main(["--records", _seed(tmp_path), "--q", ":quit"])
    assert rc == 0
    assert "(no matches)" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_top_k_limits_rows(tmp_path: Path, capsys):
    main(["--records", _seed(tmp_path), "--q", "i", "-k", "1", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1


@pytest.mark.e2e
def test_cli_repl_reads_until_empty_line(tmp_path: Path, capsys, monkeypatch):
    answers = iter(["gimp", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    rc = main(["--records", _seed(tmp_path), "--repl"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "GIMP" in out


@pytest.mark.e2e
def test_cli_requires_a_mode(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--records", _seed(tmp_path)])


@pytest.mark.e2e
def test_cli_missing_records_file(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--records", str(tmp_path / "missing.jsonl"), "--q", "x"])


@pytest.mark.e2e
def test_cli_empty_query_lists_everything_by_recency(tmp_path: Path, capsys):
    rc = main(["--records", _seed(tmp_path), "--q", "", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["app_id"] for r in data] == [
        "org.gnome.Nautilus.desktop", "firefox.desktop", "gimp.desktop",
    ]
    assert {r["score"] for r in data} == {100}
