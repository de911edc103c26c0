"""Command-line interface for the word scramble game."""

import logging
import random
from pathlib import Path

import click
import requests
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from word_scramble import install_exception_hook
from word_scramble.cache_manager import CacheManager
from word_scramble.config import Settings, get_settings
from word_scramble.dictionary_client import create_spell_checker
from word_scramble.exceptions import WordListUnavailableError
from word_scramble.session import Accepted, GameSession, GameSnapshot, Rejected
from word_scramble.word_list import WordListManager

console = Console()

NEW_ROUND_COMMAND = ":new"
QUIT_COMMAND = ":quit"


def configure_verbose_logging() -> None:
    """Configure verbose debug logging."""
    logger.remove()
    logger.add(
        lambda msg: console.print(msg, end="", markup=False, highlight=False),
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    console.print("[dim]Debug logging enabled[/dim]")


def configure_quiet_logging() -> None:
    """Only let warnings and errors through, and silence HTTP library logs."""
    logger.remove()
    logger.add(lambda msg: None, level="WARNING")

    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests_cache").setLevel(logging.WARNING)


def load_settings_or_abort() -> Settings:
    """Load settings from the environment or abort with a helpful message."""
    try:
        return get_settings()
    except ValidationError as e:
        console.print("[bold red]Error:[/bold red] Invalid configuration")
        console.print("\nCheck the game settings in your environment or .env file.")
        console.print(f"Details: {e}")
        raise click.Abort from e


def load_root_words(words_file: Path | None, settings: Settings) -> list[str]:
    """Load root words from the given file, the configured file or the bundled list."""
    manager = WordListManager()
    source = words_file or settings.start_words_file
    try:
        words = manager.load_from_file(str(source)) if source else manager.load_bundled()
    except (WordListUnavailableError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Failed to load word list: {e}")
        raise click.Abort from e
    return manager.remove_duplicates(words)


def render_snapshot(snapshot: GameSnapshot) -> None:
    """Draw the root word, the accepted words and the score."""
    console.rule(f"[bold cyan]{snapshot.root_word}[/bold cyan]")
    if snapshot.used_words:
        table = Table(show_header=False, box=None)
        table.add_column(justify="right", style="magenta")
        table.add_column()
        for word in snapshot.used_words:
            table.add_row(str(len(word)), word)
        console.print(table)
    console.print(f"Points: [bold]{snapshot.score}[/bold]")


def render_rejection(result: Rejected) -> None:
    console.print(
        Panel(result.message, title=f"[bold red]{result.title}[/bold red]", expand=False)
    )


@click.group()
def cli() -> None:
    """Word Scramble: make new words from the letters of a root word."""
    install_exception_hook()


@cli.command()
@click.option(
    "--words",
    "-w",
    "words_file",
    required=False,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to a root word list (one word per line). Defaults to the bundled list.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for picking root words, for repeatable games",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def play(words_file: Path | None, seed: int | None, verbose: bool) -> None:
    """Play word scramble in the terminal.

    Type a word and press Enter to submit it. Type :new for another root
    word and :quit (or press Ctrl-D) to stop.
    """
    if verbose:
        configure_verbose_logging()
    else:
        configure_quiet_logging()

    settings = load_settings_or_abort()
    root_words = load_root_words(words_file, settings)

    try:
        spell_checker = create_spell_checker(settings)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] Dictionary unavailable: {e}")
        raise click.Abort from e

    session = GameSession(
        spell_checker,
        language=settings.language,
        min_word_length=settings.min_word_length,
        default_root_word=settings.default_root_word,
        rng=random.Random(seed),
    )

    console.print(
        f"[dim]Enter words made from the root word. "
        f"{NEW_ROUND_COMMAND} for another word, {QUIT_COMMAND} to stop.[/dim]"
    )
    render_snapshot(session.start_round(root_words).snapshot)

    while True:
        try:
            raw = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = raw.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == NEW_ROUND_COMMAND:
            render_snapshot(session.start_round(root_words).snapshot)
            continue

        try:
            result = session.submit(raw)
        except requests.RequestException as e:
            logger.warning(f"Dictionary lookup failed for '{raw.strip()}': {e}")
            console.print(f"[bold red]Error:[/bold red] Dictionary lookup failed: {e}")
            continue

        if result is None:
            continue
        if isinstance(result, Rejected):
            render_rejection(result)
        elif isinstance(result, Accepted):
            console.print(f"[green]✓ {result.word}[/green] (+{len(result.word)})")
        render_snapshot(result.snapshot)

    console.print(f"\nFinal score: [bold]{session.snapshot.score}[/bold]")


@cli.command("bust-cache")
@click.argument("word")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def bust_cache(word: str, verbose: bool) -> None:
    """Forget cached dictionary lookups for WORD."""
    if verbose:
        configure_verbose_logging()
    else:
        configure_quiet_logging()

    try:
        manager = CacheManager(load_settings_or_abort().cache_dir)
        deleted_count = manager.bust_word_cache(word)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise SystemExit(1) from e
    except click.Abort:
        raise
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] Failed to bust cache: {e}")
        logger.exception("Cache bust failed")
        raise SystemExit(1) from e

    if deleted_count > 0:
        console.print(f"[green]✓[/green] Deleted {deleted_count} cache entries for '{word}'")
    else:
        console.print(f"[yellow]No cache entries found for '{word}'[/yellow]")


@cli.command("clear-cache")
def clear_cache() -> None:
    """Forget every cached dictionary lookup."""
    configure_quiet_logging()
    manager = CacheManager(load_settings_or_abort().cache_dir)
    manager.clear_all_cache()
    console.print("[green]✓[/green] Dictionary cache cleared")


if __name__ == "__main__":
    cli()
