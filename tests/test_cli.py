import datetime as _dt

import pandas as pd
import pytest

from slate_planner import cli, config


@pytest.fixture
def waitlist(tmp_path, template_text):
    p = tmp_path / "waitlist.csv"
    p.write_text(template_text + "\nC789,urgent,3,60,DR002,Cystoscopy,no,no\n", encoding="utf-8")
    return p


def test_plan_and_save(waitlist, tmp_path, capsys):
    out = tmp_path / "slates.csv"
    assert cli.main([str(waitlist), "--date", "2026-10-06", "--out", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "[Warning] Row 4: unrecognized benchmark 'urgent'." in printed
    assert "0 case(s) left on the waitlist." in printed
    assert f"Saved: {out}" in printed

    df = pd.read_csv(out)
    assert len(df) == 2
    assert list(df["Case ID"]) == ["Patient A123", "Patient B456"]
    assert list(df["Start"]) == ["08:00", "09:30"]


def test_surgeon_filter_and_priority_default(waitlist, tmp_path, monkeypatch):
    monkeypatch.setattr(config, "PRIORITY_MODE", "ttt")
    out = tmp_path / "slates.csv"
    assert cli.main([str(waitlist), "--date", "2026-10-06", "--surgeon", "DR001", "--out", str(out)]) == 0
    assert list(pd.read_csv(out)["Case ID"]) == ["Patient B456", "Patient A123"]


def test_secret_pseudonymises_ids(waitlist, tmp_path):
    out = tmp_path / "slates.csv"
    assert cli.main([str(waitlist), "--date", "2026-10-06", "--secret", "s3cret", "--out", str(out)]) == 0
    assert "00B2FEN1" in set(pd.read_csv(out)["Case ID"])


def test_bad_date(waitlist, capsys):
    assert cli.main([str(waitlist), "--date", "next tuesday"]) == 2
    assert "ERROR: Could not parse date" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.csv"), "--date", "2026-10-06"]) == 2
    assert capsys.readouterr().err.startswith("ERROR:")


def test_planning_dates():
    assert cli.planning_dates(["2026-10-13", "2026-10-06"], None, 5) == [_dt.date(2026, 10, 13), _dt.date(2026, 10, 6)]
    assert cli.planning_dates([], "2026-10-30", 3) == [
        _dt.date(2026, 10, 30), _dt.date(2026, 10, 31), _dt.date(2026, 11, 1),
    ]
    with pytest.raises(ValueError):
        cli.planning_dates([], "2026-10-06", 0)
