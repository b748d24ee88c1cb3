"""
Command line tools.

Usage:
    tourlog parse-track path/to/tour.gpx
    tourlog streak 2026-09-28 2026-10-06 2026-10-14 --today 2026-10-18
    tourlog recalculate --user-id <user_id>
"""

import asyncio
from datetime import date, datetime
from pathlib import Path

import click

from app.config import settings
from app.features.stats.aggregator import AscentSnapshot, recompute_stats, week_start
from app.features.tracks import TrackParseError, parse_track
from app.shared.formatters import format_distance_km, format_duration_minutes, format_elevation


@click.group()
def cli():
    """Tour log tools."""
    pass


@cli.command("parse-track")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--points", is_flag=True, help="Also print every track point")
def parse_track_command(path: Path, points: bool):
    """Parse a GPX/TCX file and print its statistics."""
    try:
        track = parse_track(path.read_bytes(), path.name)
    except TrackParseError as e:
        raise click.ClickException(str(e))

    click.echo(f"File:           {path.name}")
    click.echo(f"Points:         {len(track.track_points)} ({track.discarded_points} discarded)")
    click.echo(f"Distance:       {format_distance_km(track.distance)}")
    click.echo(f"Elevation gain: {format_elevation(track.elevation_gain)}")
    click.echo(f"Elevation loss: {format_elevation(track.elevation_loss)}")
    click.echo(f"Highest point:  {format_elevation(track.max_elevation)}")
    click.echo(f"Lowest point:   {format_elevation(track.min_elevation)}")
    click.echo(f"Duration:       {format_duration_minutes(track.duration)}")

    if points:
        for p in track.track_points:
            ts = p.timestamp.isoformat() if p.timestamp else "-"
            ele = f"{p.elevation:.1f}" if p.elevation is not None else "-"
            click.echo(f"{p.latitude:.6f}\t{p.longitude:.6f}\t{ele}\t{ts}")


@cli.command()
@click.argument("dates", nargs=-1, required=True, type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference day (default: today in STATS_TIMEZONE)"
)
def streak(dates, today):
    """Show weekly streaks for a list of ascent dates."""
    ascents = sorted(
        (AscentSnapshot(date=d.date()) for d in dates),
        key=lambda a: a.date,
        reverse=True,
    )
    ref_day: date = today.date() if today else datetime.now(settings.stats_tz).date()
    stats = recompute_stats(ascents, today=ref_day, tz=settings.stats_tz)

    click.echo(f"Weeks with ascents: {', '.join(sorted({week_start(a.date).isoformat() for a in ascents}))}")
    click.echo(f"Current streak: {stats.current_streak} weeks")
    click.echo(f"Longest streak: {stats.longest_streak} weeks")


@cli.command()
@click.option("--user-id", required=True, help="User whose stats to rebuild")
def recalculate(user_id):
    """Recompute and store a user's stats."""
    asyncio.run(_recalculate(user_id))


async def _recalculate(user_id: str):
    from app.db.session import AsyncSessionLocal, init_db
    from app.features.stats.service import StatsService

    await init_db()
    async with AsyncSessionLocal() as db:
        stats = await StatsService(db).recompute_for_user(user_id)

    click.echo(f"Ascents:        {stats.total_ascents}")
    click.echo(f"Distance:       {format_distance_km(stats.total_distance)}")
    click.echo(f"Elevation gain: {format_elevation(stats.total_elevation_gain)}")
    click.echo(f"Duration:       {format_duration_minutes(stats.total_duration)}")
    click.echo(f"Streak:         {stats.current_streak} (longest {stats.longest_streak}) weeks")


if __name__ == "__main__":
    cli()
