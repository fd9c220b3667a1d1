"""Tests for the Flask CLI commands."""

from __future__ import annotations

from habitboard.cli import DEMO_HABITS, DEMO_TIMETABLE


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=["habitboard-init-db"])

    assert result.exit_code == 0
    assert "Database ready." in result.output


def test_seed_command_creates_owned_rows(app, client):
    result = app.test_cli_runner().invoke(args=["habitboard-seed", "--user", "demo"])

    assert result.exit_code == 0
    habits = client.get("/api/habits", headers={"X-User-Id": "demo"}).get_json()
    entries = client.get("/api/timetable", headers={"X-User-Id": "demo"}).get_json()
    assert len(habits) == len(DEMO_HABITS)
    assert len(entries) == len(DEMO_TIMETABLE)
    assert client.get("/api/habits", headers={"X-User-Id": "someone"}).get_json() == []


def test_seed_requires_user(app):
    result = app.test_cli_runner().invoke(args=["habitboard-seed"])

    assert result.exit_code != 0
