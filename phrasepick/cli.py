import asyncio
import logging
from typing import Optional
import typer
from rich.columns import Columns
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from phrasepick.selection.errors import SelectionError
from phrasepick.selection.models import BIP39_ENGLISH_URL, SessionConfig
from phrasepick.selection.session import SelectionSession
from phrasepick.words.bank import Vocabulary
from phrasepick.words.loader import fallback_vocabulary, load_vocabulary

app = typer.Typer(help="phrasepick: rebuild a recovery phrase by picking letters, never typing words.")
console = Console()

# Word panel is hidden while a single letter still matches this many words
MATCH_PANEL_LIMIT = 40

HELP_TEXT = (
    "letter: extend prefix | -: backspace | N: confirm match N | "
    "rm N: remove word N | clear | done"
)


@app.command()
def pick(
    wordlist: Optional[str] = typer.Option(None, envvar="PHRASEPICK_WORDLIST", help="Local word list (.txt or .json)"),
    url: str = typer.Option(BIP39_ENGLISH_URL, envvar="PHRASEPICK_URL", help="Word list to download"),
    capacity: int = typer.Option(24, envvar="PHRASEPICK_CAPACITY", min=1, help="Number of words in the phrase"),
    timeout: float = typer.Option(10.0, envvar="PHRASEPICK_TIMEOUT", help="Download timeout in seconds"),
    offline: bool = typer.Option(False, help="Skip the download and use the built-in demo list"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Interactively selects words until the phrase is complete.
    """
    _setup_logging(verbose)
    config = SessionConfig(capacity=capacity, wordlist_url=url, fetch_timeout=timeout)
    vocabulary = _load(config, wordlist, offline)
    session = SelectionSession(vocabulary, capacity=config.capacity)

    console.print(f"[dim]{HELP_TEXT}[/dim]")
    while True:
        _render(session)
        try:
            line = console.input("[green]>[/green] ")
        except EOFError:
            break
        if not _handle(session, line.strip()):
            break

    _print_phrase(session)


@app.command()
def matches(
    prefix: str = typer.Argument(..., help="Prefix to look up"),
    wordlist: Optional[str] = typer.Option(None, envvar="PHRASEPICK_WORDLIST", help="Local word list (.txt or .json)"),
    url: str = typer.Option(BIP39_ENGLISH_URL, envvar="PHRASEPICK_URL", help="Word list to download"),
    timeout: float = typer.Option(10.0, envvar="PHRASEPICK_TIMEOUT", help="Download timeout in seconds"),
    offline: bool = typer.Option(False, help="Skip the download and use the built-in demo list"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Shows the words and next letters reachable from a prefix.
    """
    _setup_logging(verbose)
    config = SessionConfig(wordlist_url=url, fetch_timeout=timeout)
    vocabulary = _load(config, wordlist, offline)
    prefix = prefix.lower()

    found = vocabulary.matches(prefix)
    console.print(f"[bold]{escape(prefix)}[/bold]: {len(found)} matches")
    for word in found:
        console.print(_highlight(word, prefix))
    console.print(f"next: {escape(' '.join(vocabulary.next_chars(prefix)))}")


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(config: SessionConfig, wordlist: Optional[str], offline: bool) -> Vocabulary:
    if offline and wordlist is None:
        return fallback_vocabulary()
    return asyncio.run(load_vocabulary(config, wordlist))


def _handle(session: SelectionSession, line: str) -> bool:
    """
    Applies one line of input. Returns False when the user is done.
    """
    command = line.lower()
    if command in ("done", "q", "quit"):
        return False

    try:
        if not command:
            pass
        elif command == "-":
            session.backspace()
        elif command == "clear":
            session.clear()
        elif command.startswith("rm"):
            position = _parse_position(command[2:])
            if position is not None:
                session.remove_at(position - 1)
        elif command.isdigit():
            shown = session.matches()
            position = int(command)
            if 1 <= position <= len(shown):
                session.confirm_word(shown[position - 1])
            else:
                console.print(f"[yellow]No match numbered {position}[/yellow]")
        elif len(command) == 1 and command.isalpha():
            session.append_char(command)
        else:
            console.print(f"[yellow]Unknown input. {HELP_TEXT}[/yellow]")
    except SelectionError as e:
        console.print(f"[yellow]{e}[/yellow]")
    return True


def _parse_position(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        console.print("[yellow]Usage: rm N[/yellow]")
        return None


def _show_match_panel(prefix: str, found: list[str]) -> bool:
    return len(prefix) >= 2 or (len(prefix) > 0 and len(found) <= MATCH_PANEL_LIMIT)


def _highlight(word: str, prefix: str) -> str:
    return f"[bold white]{escape(word[:len(prefix)])}[/bold white][green]{escape(word[len(prefix):])}[/green]"


def _render(session: SelectionSession):
    view = session.view()
    console.rule(f"WORDS: {len(view.confirmed)} / {view.capacity}")

    if view.confirmed:
        console.print(Columns([f"[green]{i + 1}.[/green] {escape(w)}" for i, w in enumerate(view.confirmed)]))
    else:
        console.print("[dim]AWAITING INPUT...[/dim]")

    if session.is_complete():
        console.print("[bold green]MAXIMUM WORDS REACHED[/bold green]")
        return

    if view.prefix:
        console.print(f"prefix: [bold]{escape(view.prefix)}[/bold]")
    else:
        console.print("[dim]Select the first letter...[/dim]")

    if view.next_chars:
        console.print(f"SELECT NEXT LETTER: {escape(' '.join(view.next_chars))}")

    if _show_match_panel(view.prefix, view.matches):
        console.print(f"SELECT WORD ({len(view.matches)} MATCHES):")
        console.print(Columns([
            f"[green]{i + 1}.[/green] {_highlight(w, view.prefix)}" for i, w in enumerate(view.matches)
        ]))


def _print_phrase(session: SelectionSession):
    if not session.confirmed:
        console.print("[dim]No words selected.[/dim]")
        return
    if not session.is_complete():
        console.print(f"[yellow]Phrase has {len(session.confirmed)} of {session.capacity} words[/yellow]")
    # soft_wrap keeps the phrase on one line for copying
    console.print(session.phrase(), soft_wrap=True, markup=False, highlight=False)


if __name__ == "__main__":
    app()
