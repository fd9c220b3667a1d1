"""Flask CLI commands for Habitboard."""

from __future__ import annotations

import click

DEMO_HABITS = (
    ("Morning run", "Three kilometres before breakfast"),
    ("Read", "Twenty pages of anything"),
    ("Journal", ""),
)

DEMO_TIMETABLE = (
    ("Monday", "Algorithms lecture", "09:00 AM - 10:30 AM"),
    ("Wednesday", "Lab session", "02:00 PM - 04:00 PM"),
    ("Friday", "Study group", None),
)


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("habitboard-init-db")
    def habitboard_init_db() -> None:
        """Create database tables."""

        from .extensions import get_engine
        from .infra.database import init_database

        init_database(get_engine())
        click.echo("Database ready.")

    @app.cli.command("habitboard-seed")
    @click.option("--user", "user_id", required=True, help="Owner id to seed data for")
    def habitboard_seed(user_id: str) -> None:
        """Insert demo habits and timetable entries for one user."""

        # Import here to avoid circular imports at module import time
        from .extensions import habit_repository, timetable_repository
        from .services import habits as habit_service
        from .services import timetable as timetable_service

        habits = habit_repository()
        for name, description in DEMO_HABITS:
            habit_service.create_habit(habits, user_id=user_id, name=name, description=description)

        entries = timetable_repository()
        for day, title, slot in DEMO_TIMETABLE:
            timetable_service.create_entry(
                entries, user_id=user_id, day_of_week=day, title=title, time=slot
            )

        click.echo(
            f"Seeded {len(DEMO_HABITS)} habits and {len(DEMO_TIMETABLE)} timetable entries for {user_id}."
        )
