import json
import logging
from pathlib import Path

import pytest

from launcher.config import Config, Field
from launcher.entries import get_field, make_candidate, make_candidates, read_records
from launcher.models import AppRecord


def _rec(**kw) -> AppRecord:
    base = dict(app_id="org.gnome.Nautilus.desktop", name="Files")
    base.update(kw)
    return AppRecord(**base)


def test_fields_derived_from_record():
    rec = _rec(description="Access files", executable="/usr/bin/nautilus",
               commandline="nautilus --new-window %U")
    assert get_field(rec, Field.ID) == "org.gnome.Nautilus"
    assert get_field(rec, Field.ID_SUFFIX) == "Nautilus"
    assert get_field(rec, Field.COMMENT) == "Access files"
    assert get_field(rec, Field.EXECUTABLE) == "nautilus"
    assert get_field(rec, Field.COMMANDLINE) == "nautilus --new-window %U"


def test_missing_fields_are_none():
    rec = AppRecord(app_id="plain", name="Plain")
    assert get_field(rec, Field.ID) is None
    assert get_field(rec, Field.ID_SUFFIX) is None
    assert get_field(rec, Field.COMMENT) is None
    assert get_field(rec, Field.EXECUTABLE) is None


def test_extra_field_appended_with_highlight_range():
    cand = make_candidate(_rec(), Config())
    assert cand.display_text == "Files Nautilus"
    assert cand.highlight_range == (6, 14)
    assert cand.display_text[6:14] == "Nautilus"
    assert cand.search_text == cand.display_text
    assert cand.score == 100


def test_extra_hidden_when_contained_in_name():
    cand = make_candidate(_rec(app_id="firefox.desktop", name="Firefox"), Config())
    assert cand.display_text == "Firefox"
    assert cand.highlight_range is None

    keep = Config(hide_extra_if_contained=False)
    cand = make_candidate(_rec(app_id="firefox.desktop", name="Firefox"), keep)
    assert cand.display_text == "Firefox firefox"


def test_name_override_with_carriage_return_splits_extra():
    cfg = Config(name_overrides={"org.gnome.Nautilus": "Files\rfile manager"})
    cand = make_candidate(_rec(), cfg)
    assert cand.display_text == "Files file manager"
    assert cand.highlight_range == (6, 18)


def test_name_override_without_extra():
    cfg = Config(name_overrides={"org.gnome.Nautilus": "Explorer"})
    cand = make_candidate(_rec(), cfg)
    assert cand.display_text == "Explorer"
    assert cand.highlight_range is None


def test_hidden_fields_extend_search_text_only():
    cfg = Config(hidden_fields=(Field.COMMENT, Field.EXECUTABLE))
    cand = make_candidate(_rec(description="Access files", executable="nautilus"), cfg)
    assert cand.display_text == "Files Nautilus"
    assert cand.search_text == "Files Nautilus Access files nautilus"


def test_recency_dropped_when_disabled():
    rec = _rec(last_used=1700000000)
    assert make_candidate(rec, Config()).last_used == 1700000000
    assert make_candidate(rec, Config(recent_first=False)).last_used == 0


def test_make_candidates_skips_excluded_and_hidden():
    recs = [
        _rec(),
        _rec(app_id="firefox.desktop", name="Firefox"),
        _rec(app_id="ssh.desktop", name="SSH", hidden=True),
    ]
    cands = list(make_candidates(recs, Config(exclude=("firefox",))))
    assert [c.app_id for c in cands] == ["org.gnome.Nautilus.desktop"]


def test_read_records_skips_malformed_lines(tmp_path: Path, caplog):
    path = tmp_path / "apps.jsonl"
    lines = [
        json.dumps({"app_id": "firefox.desktop", "name": "Firefox", "last_used": 5}),
        "",
        "{not json",
        json.dumps({"name": "no id"}),
        json.dumps({"app_id": "x.desktop", "name": "X", "colour": "red"}),
        json.dumps({"app_id": "gimp.desktop", "name": "GIMP"}),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="launcher.entries"):
        recs = read_records(str(path))
    assert [r.app_id for r in recs] == ["firefox.desktop", "gimp.desktop"]
    assert recs[0].last_used == 5
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3


def test_read_records_missing_file_raises(tmp_path: Path):
    with pytest.raises(OSError):
        read_records(str(tmp_path / "nope.jsonl"))


def test_executable_name_with_space_is_kept_whole():
    assert get_field(_rec(executable="/opt/apps/my\\ editor"), Field.EXECUTABLE) == "my editor"
    assert get_field(_rec(executable="/opt/apps/my editor"), Field.EXECUTABLE) == "my editor"
