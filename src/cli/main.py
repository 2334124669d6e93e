"""CLI principal (Typer).

Commands:
- `generate`: render one or more passwords from a pattern
- `words`: build the word list and show a sample
- `doctor`: diagnostics and per-user setup (see `cli.doctor`)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli import doctor
from cli.ui_components import build_passwords_table, build_wordlist_panel, print_banner
from core.config import APP_VERSION, AppSettings
from core.domain.models import WordListConfig
from core.domain.presets import Preset
from core.errors import FeedPassError
from core.services.password_generator import DEFAULT_PATTERN, PasswordGenerator, validate_pattern
from core.services.wordlist_provider import WordListProvider

app = typer.Typer(
    no_args_is_help=True,
    help="Memorable passwords built from words harvested from a news feed.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def resolve_config(
    settings: AppSettings,
    *,
    preset: Preset | None,
    url: str | None,
    min_length: int | None,
    max_length: int | None,
    cache_file: Path | None,
    max_redirects: int | None,
) -> WordListConfig:
    """Settings + preset defaults, then explicit CLI flags on top."""

    base = settings.wordlist_config(preset)
    overrides: dict[str, Any] = {
        "source_url": url,
        "min_word_length": min_length,
        "max_word_length": max_length,
        "cache_file_path": cache_file,
        "max_redirects": max_redirects,
    }
    merged = base.model_dump()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return WordListConfig(**merged)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"feedpass {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """feedpass command line."""


def _build_generator(
    config: WordListConfig,
    *,
    cached: bool,
    verbose: bool,
) -> PasswordGenerator:
    provider = WordListProvider(verbose=verbose)
    if cached:
        return PasswordGenerator.cached(config.cache_file_path, provider=provider)
    return PasswordGenerator.from_config(config, provider=provider)


@app.command()
def generate(
    pattern: str = typer.Option(DEFAULT_PATTERN, "--pattern", "-p", help="Directives: i=integer, s=symbol, w=word."),
    count: int = typer.Option(1, "--count", "-n", min=1, max=1000, help="How many passwords to render."),
    preset: Optional[Preset] = typer.Option(None, "--preset", help="Feed preset (de/en)."),
    url: Optional[str] = typer.Option(None, "--url", help="Feed URL (overrides the preset)."),
    min_length: Optional[int] = typer.Option(None, "--min-length", min=1, help="Minimum word length."),
    max_length: Optional[int] = typer.Option(None, "--max-length", min=1, help="Maximum word length."),
    cache_file: Optional[Path] = typer.Option(None, "--cache-file", help="Word list cache (JSON)."),
    max_redirects: Optional[int] = typer.Option(None, "--max-redirects", min=0, max=20, help="Redirects to follow (0 disables)."),
    cached: bool = typer.Option(False, "--cached", help="Use only the cache file, never the network."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array instead of a table."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner first."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report feed/cache fallbacks."),
) -> None:
    """Generate passwords such as `Harbor412#Summit` from the feed word list."""

    settings = AppSettings()
    verbose = verbose or settings.verbose
    configure_logging(verbose)

    try:
        validate_pattern(pattern)
        config = resolve_config(
            settings,
            preset=preset,
            url=url,
            min_length=min_length,
            max_length=max_length,
            cache_file=cache_file,
            max_redirects=max_redirects,
        )
        generator = _build_generator(config, cached=cached, verbose=verbose)
        passwords = generator.generate_many(count, pattern)
    except FeedPassError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(passwords, ensure_ascii=False))
        return

    if banner:
        print_banner(_console)
    _console.print(build_passwords_table(passwords, pattern))


@app.command()
def words(
    preset: Optional[Preset] = typer.Option(None, "--preset", help="Feed preset (de/en)."),
    url: Optional[str] = typer.Option(None, "--url", help="Feed URL (overrides the preset)."),
    min_length: Optional[int] = typer.Option(None, "--min-length", min=1, help="Minimum word length."),
    max_length: Optional[int] = typer.Option(None, "--max-length", min=1, help="Maximum word length."),
    cache_file: Optional[Path] = typer.Option(None, "--cache-file", help="Word list cache (JSON)."),
    max_redirects: Optional[int] = typer.Option(None, "--max-redirects", min=0, max=20, help="Redirects to follow (0 disables)."),
    cached: bool = typer.Option(False, "--cached", help="Prefer the cache file when it has words."),
    limit: int = typer.Option(20, "--limit", min=0, help="How many words to show."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report feed/cache fallbacks."),
) -> None:
    """Build (or load) the word list and show its size and a sample."""

    settings = AppSettings()
    verbose = verbose or settings.verbose
    configure_logging(verbose)

    provider = WordListProvider(verbose=verbose)
    try:
        config = resolve_config(
            settings,
            preset=preset,
            url=url,
            min_length=min_length,
            max_length=max_length,
            cache_file=cache_file,
            max_redirects=max_redirects,
        )
        word_list = provider.build(config, prefer_cache=cached)
    except FeedPassError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _console.print(build_wordlist_panel(word_list, source=provider.last_report.source, limit=limit))
    if not word_list:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
