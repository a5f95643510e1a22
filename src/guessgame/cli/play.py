"""Interactive terminal game."""

import asyncio
import random

import typer
from rich.console import Console
from rich.panel import Panel

from guessgame.config import settings
from guessgame.schemas.play import AnswerResult, NoticeKind, SessionPhase
from guessgame.services.content import ContentProvider, HttpContentProvider
from guessgame.services.session import GameSession

console = Console()

QUIT_COMMANDS = ("quit", "exit", "q")


class PlayClient:
    """Drives a :class:`GameSession` from terminal input."""

    def __init__(self, provider: ContentProvider, game: GameSession | None = None):
        self.provider = provider
        self.game = game or GameSession()

    def _print_notice(self) -> None:
        notice = self.game.notice
        if notice is None:
            return
        color = "green" if notice.kind == NoticeKind.CORRECT else "yellow"
        if notice.kind == NoticeKind.LOAD_FAILED:
            color = "red"
        console.print(f"[{color}]{notice.message}[/{color}]")

    async def load(self) -> bool:
        """Load content, offering a retry until it succeeds or the player gives up."""
        while True:
            with console.status("Loading categories..."):
                loaded = await self.game.load(self.provider)
            if loaded:
                return True
            self._print_notice()
            if not typer.confirm("Retry?", default=True):
                return False

    def choose_category(self) -> bool:
        """Prompt for a category. Returns False when the player quits."""
        if not self.game.categories:
            console.print("[dim]No categories available.[/dim]")
            return False

        console.print()
        for number, category in enumerate(self.game.categories, start=1):
            description = f" [dim]- {category.description}[/dim]" if category.description else ""
            console.print(f"  [cyan]{number}[/cyan]. {category.name}{description}")

        choice = console.input("[bold]Pick a category number (q to quit):[/bold] ").strip()
        if choice.lower() in QUIT_COMMANDS:
            return False
        if not choice.isdigit() or not 1 <= int(choice) <= len(self.game.categories):
            console.print("[red]Invalid choice.[/red]")
            return True

        self.game.select_category(self.game.categories[int(choice) - 1])
        return True

    def confirm_start(self) -> bool:
        """Ask to start the chosen category. Returns False when the player quits."""
        category = self.game.category
        if category is None:
            return True
        console.print(Panel.fit(category.description or category.name, title=category.name))

        choice = console.input("[bold]\\[s]tart, \\[b]ack or \\[q]uit:[/bold] ").strip().lower()
        if choice in QUIT_COMMANDS:
            return False
        if choice in ("b", "back"):
            self.game.return_to_category_selection()
        elif choice in ("s", "start", ""):
            self.game.start_game()
            self._print_notice()
        else:
            console.print("[red]Invalid choice.[/red]")
        return True

    def play_question(self) -> bool:
        """Show revealed hints and take one answer or command."""
        console.print()
        for number, hint in enumerate(self.game.revealed_hints, start=1):
            console.print(f"  [bold cyan]Hint {number}/{self.game.hint_count}:[/bold cyan] {hint}")

        prompt = "[bold green]Answer[/bold green] [dim](:h next hint, :b back, :q quit)[/dim]: "
        text = console.input(prompt)
        command = text.strip().lower()

        if command == ":q":
            return False
        if command == ":b":
            self.game.return_to_category_selection()
            return True
        if command == ":h":
            before = self.game.hint_index
            if self.game.reveal_next_hint() == before:
                console.print("[dim]No more hints.[/dim]")
            return True

        result = self.game.submit_answer(text)
        self._print_notice()
        if result == AnswerResult.CORRECT:
            self.game.return_to_category_selection()
        return True

    async def run_interactive(self) -> None:
        """Run the game loop until the player quits."""
        console.print(Panel.fit(
            "[bold]Guess the answer from its hints[/bold]\n"
            "Pick a category, reveal hints one at a time, then type your answer.",
            title="Guess Game",
        ))

        if not await self.load():
            return

        handlers = {
            SessionPhase.CATEGORY_SELECTION: self.choose_category,
            SessionPhase.CATEGORY_CHOSEN: self.confirm_start,
            SessionPhase.QUESTION_ACTIVE: self.play_question,
        }

        while True:
            try:
                if not handlers[self.game.phase]():
                    console.print("[dim]Goodbye![/dim]")
                    break
            except KeyboardInterrupt:
                console.print("\n[dim]Interrupted. Type 'q' to exit.[/dim]")
            except EOFError:
                console.print("\n[dim]Goodbye![/dim]")
                break


def play(
    url: str | None = typer.Option(None, "--url", help="Game content endpoint (defaults to CONTENT_URL)"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for question selection"),
):
    """Play the guessing game in the terminal."""
    provider = HttpContentProvider(url or settings.content_url)
    client = PlayClient(provider, GameSession(rng=random.Random(seed)))
    asyncio.run(client.run_interactive())
