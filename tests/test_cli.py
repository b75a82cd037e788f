"""Tests for the Typer CLI."""

import json
import logging
import sys
from datetime import date
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from smartcal.config import AppConfig
from smartcal.models import WeatherInfo
from smartcal_cli import setup_logging
from smartcal_cli.context import CLIContext
from smartcal_cli.parser import app, main

TODAY = date(2026, 2, 15)

runner = CliRunner()


@pytest.fixture(autouse=True)
def fixed_today(cli_env, monkeypatch):
    monkeypatch.setattr(CLIContext, "today", lambda self: TODAY)


@pytest.fixture
def text_provider(monkeypatch):
    provider = MagicMock()
    provider.summarize.return_value = "바쁜 달이에요"
    provider.chat.return_value = "추석에는 성묘를 다녀오세요"
    monkeypatch.setattr(CLIContext, "text_provider", property(lambda self: provider))
    return provider


def _events(cli_env):
    path = cli_env / "data" / "events.json"
    return json.loads(path.read_text(encoding="utf-8")) if path.exists() else []


def _add_dentist():
    return runner.invoke(app, ["add", "Dentist", "--start", "2026-02-16"])


def test_add_personal_event(cli_env):
    result = _add_dentist()
    assert result.exit_code == 0, result.output
    assert "Added Dentist" in result.output

    [doc] = _events(cli_env)
    assert doc["kind"] == "personal"
    assert doc["owner_id"] == "u1"
    assert doc["start_date"] == doc["end_date"] == "2026-02-16"


def test_add_contact(cli_env):
    result = runner.invoke(
        app, ["add", "Call mom", "--start", "2026-02-16", "--contact", "--phone", "010-1234-5678"]
    )
    assert result.exit_code == 0, result.output
    [doc] = _events(cli_env)
    assert doc["kind"] == "contact"
    assert doc["date"] == "2026-02-16"
    assert doc["phone_number"] == "010-1234-5678"


def test_add_rejects_malformed_date(cli_env):
    result = runner.invoke(app, ["add", "Bad", "--start", "2026-2-16"])
    assert result.exit_code != 0
    assert _events(cli_env) == []


def test_add_rejects_inverted_range(cli_env):
    result = runner.invoke(app, ["add", "Bad", "--start", "2026-02-16", "--end", "2026-02-01"])
    assert result.exit_code == 1
    assert _events(cli_env) == []


def test_edit_complete_delete(cli_env):
    """Events can be edited, completed and deleted by id."""
    _add_dentist()
    event_id = _events(cli_env)[0]["id"]

    result = runner.invoke(app, ["edit", event_id, "--end", "2026-02-18", "--exclude-sun"])
    assert result.exit_code == 0, result.output
    assert _events(cli_env)[0]["end_date"] == "2026-02-18"

    result = runner.invoke(app, ["complete", event_id])
    assert result.exit_code == 0, result.output
    assert _events(cli_env)[0]["completed"] is True

    result = runner.invoke(app, ["complete", event_id, "--undo"])
    assert _events(cli_env)[0]["completed"] is False

    result = runner.invoke(app, ["delete", event_id, "--force"])
    assert result.exit_code == 0, result.output
    assert _events(cli_env) == []


def test_edit_moves_contact(cli_env):
    """A contact is rescheduled with --date."""
    runner.invoke(app, ["add", "Call mom", "--start", "2026-02-16", "--contact"])
    event_id = _events(cli_env)[0]["id"]

    result = runner.invoke(app, ["edit", event_id, "--date", "2026-03-05"])
    assert result.exit_code == 0, result.output
    assert _events(cli_env)[0]["date"] == "2026-03-05"

    result = runner.invoke(app, ["day", "2026-03-05"])
    assert "Call mom" in result.output


def test_edit_rejects_foreign_field(cli_env):
    _add_dentist()
    event_id = _events(cli_env)[0]["id"]
    result = runner.invoke(app, ["edit", event_id, "--phone", "010"])
    assert result.exit_code == 1


def test_unknown_event_id(cli_env):
    assert runner.invoke(app, ["delete", "missing", "--force"]).exit_code == 1
    assert runner.invoke(app, ["complete", "missing"]).exit_code == 1


def test_search(cli_env):
    _add_dentist()
    runner.invoke(app, ["add", "Call mom", "--start", "2026-02-16", "--contact"])
    runner.invoke(app, ["add", "Chuseok trip", "--start", "2026-09-24", "--end", "2026-09-26"])

    result = runner.invoke(app, ["search", "DENT"])
    assert result.exit_code == 0, result.output
    assert "Dentist" in result.output
    assert "Call mom" not in result.output

    result = runner.invoke(app, ["search", "--kind", "contact"])
    assert "Call mom" in result.output
    assert "Dentist" not in result.output

    result = runner.invoke(app, ["search", "--from", "2026-09-01", "--to", "2026-09-30"])
    assert "Chuseok trip" in result.output
    assert "Dentist" not in result.output


def test_search_requires_criteria(cli_env):
    assert runner.invoke(app, ["search"]).exit_code == 1
    assert runner.invoke(app, ["search", "--kind", "holiday"]).exit_code == 1
    assert runner.invoke(app, ["search", "--from", "2026-09-30", "--to", "2026-09-01"]).exit_code == 1


def test_search_no_matches(cli_env):
    result = runner.invoke(app, ["search", "nothing"])
    assert result.exit_code == 0, result.output
    assert "No events matching" in result.output


def test_month_view(cli_env):
    _add_dentist()
    result = runner.invoke(app, ["month"])
    assert result.exit_code == 0, result.output
    assert "2026년 2월" in result.output


def test_month_rejects_invalid_month(cli_env):
    assert runner.invoke(app, ["month", "2026", "13"]).exit_code == 1


def test_day_view(cli_env):
    _add_dentist()
    result = runner.invoke(app, ["day", "2026-02-16"])
    assert result.exit_code == 0, result.output
    assert "Dentist" in result.output
    assert "설날 연휴" in result.output


def test_upcoming(cli_env):
    _add_dentist()
    result = runner.invoke(app, ["upcoming", "--days", "3"])
    assert result.exit_code == 0, result.output
    assert "Tomorrow 2026-02-16" in result.output


def test_holidays(cli_env):
    result = runner.invoke(app, ["holidays", "2026"])
    assert result.exit_code == 0, result.output
    assert "2026-09-25" in result.output


def test_weather(cli_env, monkeypatch):
    forecast = {"2026-02-15": WeatherInfo(max_temp=5.4, min_temp=-2.2, weather_code=0, icon="☀️")}
    monkeypatch.setattr(CLIContext, "forecast", lambda self: forecast)
    result = runner.invoke(app, ["weather"])
    assert result.exit_code == 0, result.output
    assert "2026-02-15" in result.output
    assert "-2°" in result.output


def test_weather_unavailable(cli_env, monkeypatch):
    monkeypatch.setattr(CLIContext, "forecast", lambda self: {})
    assert runner.invoke(app, ["weather"]).exit_code == 1


def test_settings_show_and_set(cli_env):
    result = runner.invoke(app, ["settings", "show"])
    assert result.exit_code == 0, result.output
    assert "advance_days" in result.output

    result = runner.invoke(app, ["settings", "set", "advance_days", "3"])
    assert result.exit_code == 0, result.output
    settings = json.loads((cli_env / "data" / "settings.json").read_text())
    assert settings["u1"]["advance_days"] == 3

    result = runner.invoke(app, ["settings", "set", "all", '{"enabled": false}'])
    assert result.exit_code == 0, result.output
    settings = json.loads((cli_env / "data" / "settings.json").read_text())
    assert settings["u1"] == {
        "advance_days": 1,
        "notify_holidays": True,
        "notify_personal": True,
        "enabled": False,
    }


@pytest.mark.parametrize(
    "args",
    [["advance_days", "-1"], ["volume", "3"], ["all", "{not json"]],
)
def test_settings_set_rejects_invalid(cli_env, args):
    """Invalid values are rejected after parsing, with exit code 1."""
    # "--" keeps click from reading "-1" as an option
    assert runner.invoke(app, ["settings", "set", "--", *args]).exit_code == 1


def test_notify_requires_permission_and_runs_once(cli_env):
    """Nothing is shown until permission is granted, then only once."""
    _add_dentist()

    result = runner.invoke(app, ["notify"])
    assert "No notification due" in result.output

    result = runner.invoke(app, ["permission", "--grant"])
    assert "granted" in result.output

    result = runner.invoke(app, ["notify"])
    assert result.exit_code == 0, result.output
    assert "1일 후 일정 안내" in result.output
    assert "Dentist" in result.output

    result = runner.invoke(app, ["notify"])
    assert "No notification due" in result.output


def test_notify_across_year_end(cli_env, monkeypatch):
    """On New Year's Eve the next year's holidays are consulted."""
    monkeypatch.setattr(CLIContext, "today", lambda self: date(2026, 12, 31))
    runner.invoke(app, ["permission", "--grant"])

    result = runner.invoke(app, ["notify"])
    assert result.exit_code == 0, result.output
    assert "1일 후 일정 안내" in result.output
    assert "신정" in result.output


def test_permission_deny(cli_env):
    result = runner.invoke(app, ["permission", "--deny"])
    assert "denied" in result.output
    result = runner.invoke(app, ["permission", "--grant", "--deny"])
    assert result.exit_code == 1


def test_summary(cli_env, text_provider):
    _add_dentist()
    result = runner.invoke(app, ["summary", "--ai"])
    assert result.exit_code == 0, result.output
    assert "2026-02-16: Dentist (진행중)" in result.output
    assert "바쁜 달이에요" in result.output

    events, label = text_provider.summarize.call_args[0]
    assert [e.title for e in events] == ["Dentist"]
    assert label == "2026년 2월"


def test_summary_without_ai_does_not_call_provider(cli_env, text_provider):
    result = runner.invoke(app, ["summary", "2026", "3"])
    assert result.exit_code == 0, result.output
    text_provider.summarize.assert_not_called()


def test_chat(cli_env, text_provider):
    result = runner.invoke(app, ["chat", "추석 계획 추천해줘"])
    assert result.exit_code == 0, result.output
    assert "성묘" in result.output
    text_provider.chat.assert_called_once_with("추석 계획 추천해줘", "2026년 2월")


def test_share_event_and_day(cli_env):
    _add_dentist()
    event_id = _events(cli_env)[0]["id"]

    result = runner.invoke(app, ["share", "--event", event_id])
    assert result.exit_code == 0, result.output
    assert "제목: Dentist" in result.output

    result = runner.invoke(app, ["share", "--day", "2026-02-16"])
    assert result.exit_code == 0, result.output
    assert "🚩 공휴일: 설날 연휴" in result.output


def test_share_requires_exactly_one_target(cli_env):
    assert runner.invoke(app, ["share"]).exit_code == 1
    assert runner.invoke(app, ["share", "--event", "x", "--day", "2026-02-16"]).exit_code == 1


def test_export(cli_env):
    _add_dentist()
    output = cli_env / "out.ics"
    result = runner.invoke(app, ["export", str(output), "--holidays", "2026"])
    assert result.exit_code == 0, result.output
    content = output.read_text(encoding="utf-8")
    assert "SUMMARY:Dentist" in content
    assert "HOLIDAY" in content


def test_theme(cli_env):
    assert "light" in runner.invoke(app, ["theme"]).output
    assert "dark" in runner.invoke(app, ["theme", "dark"]).output
    assert runner.invoke(app, ["theme", "sepia"]).exit_code == 1


def test_main_turns_calendar_errors_into_exit_code(cli_env, monkeypatch):
    """Unhandled CalendarError exits with status 1."""
    data_dir = cli_env / "data"
    data_dir.mkdir()
    (data_dir / "events.json").write_text("{broken", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["smartcal", "day", "2026-02-16"])

    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1


def test_logs_written_to_file(cli_env):
    _add_dentist()
    log_file = cli_env / "logs" / "smartcal.log"
    assert "Created personal event" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "verbose,quiet,level",
    [(False, False, logging.WARNING), (True, False, logging.INFO), (True, True, logging.ERROR)],
)
def test_setup_logging_levels(tmp_path, verbose, quiet, level):
    """The file gets everything; the console level follows the flags."""
    config = AppConfig(data_dir=tmp_path / "data", log_dir=tmp_path / "logs")
    setup_logging(verbose=verbose, quiet=quiet, config=config)

    file_handler, console_handler = logging.getLogger().handlers
    assert file_handler.level == logging.DEBUG
    assert console_handler.level == level
    assert logging.getLogger("urllib3").level == logging.WARNING
    file_handler.close()
