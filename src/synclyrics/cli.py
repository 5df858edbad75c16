"""Command-line interface using Click."""

import sys
import time
from pathlib import Path
from typing import List, Optional

import click

from . import __version__
from .config import (
    ANIMATION_INTERVAL_MS,
    SWEEP_INTERVAL_MS,
    LyricsConfig,
    get_config_path,
    load_lyrics_config,
    save_lyrics_config,
)
from .core.lrc import parse_lyrics
from .core.models import LyricsLine
from .core.progress import target_progress
from .core.serialization import save_lines_to_json
from .core.sync import LyricsFrame, LyricsSession, current_line_index
from .exceptions import LyricsError, SyncLyricsError
from .utils.logging import setup_logging
from .utils.validation import (
    validate_duration,
    validate_filter_regex,
    validate_lrc_path,
    validate_position,
)


def format_timestamp(ms: int) -> str:
    """Format milliseconds as mm:ss.mmm."""
    minutes, rest = divmod(ms, 60000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes:02d}:{seconds:02d}.{millis:03d}"


def highlight_bar(progress: List[float], words: List, bar_len: int = 30) -> str:
    """Overall highlight of a line as a text bar (spaces are not counted)."""
    values = [p for p, w in zip(progress, words) if not w.is_space]
    fraction = sum(values) / len(values) if values else 0.0
    filled = int(bar_len * fraction)
    return "█" * filled + "░" * (bar_len - filled)


def read_lyrics_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LyricsError(f"Failed to read lyrics file {path}: {e}")


def _load_config(config_path: Optional[str]) -> LyricsConfig:
    return load_lyrics_config(Path(config_path) if config_path else None)


def _echo_line(index: int, line: LyricsLine) -> None:
    click.echo(
        f"{index:3d} [{format_timestamp(line.start_time_ms)} - "
        f"{format_timestamp(line.end_time_ms)}] {line.original_text}"
    )
    if line.translation_text:
        click.echo(f"    {'':27s} {line.translation_text}")


def _echo_frame(frame: LyricsFrame) -> None:
    line = frame.line
    bar = highlight_bar(frame.progress, line.word_timings)
    click.echo(f"{format_timestamp(frame.position_ms)}  [{bar}]  {line.original_text}")
    if frame.translation_text:
        click.echo(f"{'':47s}{frame.translation_text}")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.option('--log-file-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Level for the log file (default: same as console)')
@click.pass_context
def cli(ctx, verbose, log_file, log_file_level):
    """synclyrics - Time-synchronized lyrics with per-word highlighting."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose,
        file_level=log_file_level,
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.argument('lrc_file')
@click.option('--title', help='Song title shown before the first line')
@click.option('--config', 'config_path', type=click.Path(), help='Preferences JSON file')
@click.option('-o', '--output', type=click.Path(), help='Write the parsed lines as JSON')
@click.option('--words', is_flag=True, help='List word timings under each line')
@click.pass_context
def parse(ctx, lrc_file, title, config_path, output, words):
    """Parse an LRC file and print its timeline."""
    try:
        path = validate_lrc_path(lrc_file)
        config = _load_config(config_path)
        lines = parse_lyrics(read_lyrics_file(path), title=title, config=config)

        if output:
            save_lines_to_json(output, lines, title=title)
            click.echo(f"✅ Wrote {len(lines)} lines to {output}")
            return

        for i, line in enumerate(lines):
            _echo_line(i, line)
            if words:
                for w in line.word_timings:
                    if w.is_space:
                        continue
                    click.echo(
                        f"      {format_timestamp(w.start_time_ms)} - "
                        f"{format_timestamp(w.end_time_ms)}  {w.text}"
                    )
    except SyncLyricsError as e:
        ctx.obj['logger'].error(f"❌ {e}")
        sys.exit(1)


@cli.command()
@click.argument('lrc_file')
@click.option('--position', '-p', type=int, required=True, help='Playback position in ms')
@click.option('--title', help='Song title shown before the first line')
@click.option('--config', 'config_path', type=click.Path(), help='Preferences JSON file')
@click.pass_context
def show(ctx, lrc_file, position, title, config_path):
    """Show the active line and word progress at a playback position."""
    try:
        position = validate_position(position)
        path = validate_lrc_path(lrc_file)
        config = _load_config(config_path)
        lines = parse_lyrics(read_lyrics_file(path), title=title, config=config)

        if not lines:
            click.echo("No lyrics lines")
            return

        index = current_line_index(lines, position)
        line = lines[index]
        _echo_line(index, line)
        if line.translation_text and not config.show_translation:
            click.echo("    (translation hidden)")
        for w in line.word_timings:
            if w.is_space:
                continue
            click.echo(f"      {w.text:<12s} {target_progress(w, position) * 100:5.1f}%")
    except SyncLyricsError as e:
        ctx.obj['logger'].error(f"❌ {e}")
        sys.exit(1)


@cli.command()
@click.argument('lrc_file')
@click.option('--title', help='Song title shown before the first line')
@click.option('--start', type=int, default=0, help='Start position in ms')
@click.option('--duration', type=int, default=None,
              help='How long to play in ms (default: until the last line ends)')
@click.option('--config', 'config_path', type=click.Path(), help='Preferences JSON file')
@click.option('--fast', is_flag=True, help='Do not wait between animation ticks')
@click.pass_context
def play(ctx, lrc_file, title, start, duration, config_path, fast):
    """Play back the lyrics, printing the highlight of the active line."""
    try:
        start = validate_position(start)
        path = validate_lrc_path(lrc_file)
        session = LyricsSession(_load_config(config_path))
        if title:
            session.set_song(title)
        session.update_lyrics(read_lyrics_file(path))

        if not session.lines:
            click.echo("No lyrics lines")
            return

        if duration is None:
            duration = max(session.lines[-1].end_time_ms - start, ANIMATION_INTERVAL_MS)
        end = start + validate_duration(duration)

        position = start
        next_sweep = start + SWEEP_INTERVAL_MS
        last_index = None
        while position <= end:
            frame = session.tick(position)
            if frame is not None and (frame.line_index != last_index or position >= next_sweep):
                _echo_frame(frame)
                last_index = frame.line_index
            if position >= next_sweep:
                session.sweep()
                next_sweep += SWEEP_INTERVAL_MS
            if not fast:
                time.sleep(ANIMATION_INTERVAL_MS / 1000)
            position += ANIMATION_INTERVAL_MS
    except SyncLyricsError as e:
        ctx.obj['logger'].error(f"❌ {e}")
        sys.exit(1)


@cli.group()
def config():
    """Lyrics preferences commands."""
    pass


@config.command(name='show')
@click.option('--config', 'config_path', type=click.Path(), help='Preferences JSON file')
@click.pass_context
def config_show(ctx, config_path):
    """Show the lyrics options in effect."""
    try:
        cfg = _load_config(config_path)
    except SyncLyricsError as e:
        ctx.obj['logger'].error(f"❌ {e}")
        sys.exit(1)
    click.echo(f"Config File: {config_path or get_config_path()}")
    for key, value in cfg.to_dict().items():
        click.echo(f"{key}: {value}")


@config.command(name='init')
@click.option('--config', 'config_path', type=click.Path(), help='Preferences JSON file')
@click.option('--filter-regex', help='Pattern for non-lyric lines to drop')
@click.option('--no-filter', is_flag=True, help='Disable the lyrics filter')
@click.option('--hide-translation', is_flag=True, help='Do not show translations')
@click.pass_context
def config_init(ctx, config_path, filter_regex, no_filter, hide_translation):
    """Write lyrics options to the preferences file."""
    try:
        cfg = LyricsConfig(
            show_translation=not hide_translation,
            enable_lyrics_filter=not no_filter,
        )
        if filter_regex is not None:
            cfg.lyrics_filter_regex = validate_filter_regex(filter_regex)
        saved = save_lyrics_config(cfg, Path(config_path) if config_path else None)
    except SyncLyricsError as e:
        ctx.obj['logger'].error(f"❌ {e}")
        sys.exit(1)
    click.echo(f"✅ Saved config to {saved}")


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
