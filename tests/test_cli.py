"""
Tests for the kin command
"""
import json
from datetime import date

import pytest

import kinapi.cli
from kinapi.cli import main, parse_date_arg


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("2026-01-06", (2026, 1, 6)),
        ("2026/1/6", (2026, 1, 6)),
        ("06/01/2026", (2026, 1, 6)),
        ("29/02/2023", (2023, 2, 29)),
    ],
)
def test_parse_date_arg(arg, expected):
    assert parse_date_arg(arg) == expected


@pytest.mark.parametrize("arg", ["2026-02-30", "2026-13-01", "31/04/2026", "yesterday", "2026-00-10"])
def test_parse_date_arg_invalid(arg):
    with pytest.raises(ValueError):
        parse_date_arg(arg)


def test_main_text(capsys):
    assert main(["2026-01-06"]) == 0

    out = capsys.readouterr().out
    assert "KIN 28" in out
    assert "月亮的黃星星" in out
    assert "08.png" in out


def test_main_json(capsys):
    assert main(["2026-01-06", "--json"]) == 0

    body = json.loads(capsys.readouterr().out)
    assert body["success"] is True
    assert body["data"]["kin"] == 28


def test_main_hunab_ku(capsys):
    assert main(["2024-02-29"]) == 0
    assert "Hunab Ku" in capsys.readouterr().out


def test_main_unsupported_year(capsys):
    assert main(["1899-01-01"]) == 1
    assert "年份數據未定義" in capsys.readouterr().err


def test_main_invalid_date():
    with pytest.raises(SystemExit) as exc:
        main(["2026-04-31"])
    assert exc.value.code == 2


def test_main_today(capsys, monkeypatch):
    monkeypatch.setattr(kinapi.cli, "today_in", lambda tz: date(2026, 1, 6))

    assert main([]) == 0
    assert "2026-01-06" in capsys.readouterr().out


def test_main_today_uses_configured_timezone(capsys, monkeypatch):
    seen = []

    def fake_today(tz):
        seen.append(tz)
        return date(2026, 1, 6)

    monkeypatch.setattr(kinapi.cli.settings, "DEFAULT_TZ", "UTC")
    monkeypatch.setattr(kinapi.cli, "today_in", fake_today)

    assert main([]) == 0
    assert seen == ["UTC"]


def test_main_messages_file_setting(capsys, monkeypatch, tmp_path):
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"28": {"alignment": "命令列"}}, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setattr(kinapi.cli.settings, "MESSAGES_FILE", str(path))

    assert main(["2026-01-06", "--json"]) == 0

    body = json.loads(capsys.readouterr().out)
    assert body["data"]["messages"]["alignment"] == "命令列"
