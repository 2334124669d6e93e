"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.feed_parser import parse_feed
from adapters.http_client import HttpFeedFetcher
from adapters.wordlist_cache import load_wordlist
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import WordListConfig
from core.domain.presets import Preset
from core.errors import ConfigError

app = typer.Typer(no_args_is_help=True, help="Feed, cache and configuration diagnostics.")

_console = Console()


def _check_feed(settings: AppSettings, config: WordListConfig) -> tuple[bool, str]:
    """Fetch and parse the feed once, without touching the cache file."""

    try:
        config.validate_for_fetch()
    except ConfigError as exc:
        return False, str(exc)

    fetched = HttpFeedFetcher(settings, config).fetch(config.source_url)
    if not fetched.ok:
        return False, fetched.detail
    parsed = parse_feed(fetched.body, config)
    if not parsed.ok:
        return False, parsed.detail
    return True, f"HTTP {fetched.status_code}, {len(parsed.words)} usable words"


def _check_cache(config: WordListConfig) -> tuple[bool, str]:
    loaded = load_wordlist(config.cache_file_path)
    if loaded.problem:
        return False, loaded.problem
    return True, f"{len(loaded.words)} words in {config.cache_file_path}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    config = settings.wordlist_config()

    table = Table(title="feedpass Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Preset", "OK", settings.preset.label())
    table.add_row("Feed URL", "OK", config.source_url or "-")
    table.add_row(
        "Word lengths",
        "OK" if config.min_word_length <= config.max_word_length else "FAIL",
        f"{config.min_word_length}..{config.max_word_length}",
    )
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_feed, detail_feed = _check_feed(settings, config)
    table.add_row("Feed", "OK" if ok_feed else "FAIL", detail_feed)

    ok_cache, detail_cache = _check_cache(config)
    table.add_row("Cache", "OK" if ok_cache else "MISSING", detail_cache)

    _console.print(table)

    if not ok_feed and ok_cache:
        _console.print("\n[yellow]Note:[/yellow] The feed is unavailable; passwords will use the cached word list.")
    elif not ok_feed and not ok_cache:
        _console.print(
            "\n[red]No word list available.[/red] Fix the feed URL or copy a wordlist.json to the cache path."
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    preset_value = typer.prompt(
        "Feed preset (de/en)",
        default=Preset.default().value,
        show_default=True,
    ).strip().lower()
    try:
        preset = Preset(preset_value)
    except ValueError as exc:
        raise typer.BadParameter(f"unknown preset: {preset_value}") from exc

    source_url = typer.prompt("Feed URL (empty = preset URL)", default="", show_default=False).strip()
    cache_path = typer.prompt("Cache file", default="wordlist.json", show_default=True).strip()
    verbose = typer.confirm("Report feed/cache fallbacks?", default=False)

    if source_url:
        try:
            WordListConfig(source_url=source_url).validate_for_fetch()
        except ConfigError as exc:
            raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            "FEEDPASS_PRESET": preset.value,
            "FEEDPASS_SOURCE_URL": source_url,
            "FEEDPASS_CACHE_FILE_PATH": cache_path or None,
            "FEEDPASS_VERBOSE": "true" if verbose else "false",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
