"""Category management CLI commands."""

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from sqlmodel import func, select

from guessgame.database import get_session_context
from guessgame.models import Category, Question
from guessgame.models.category import CategoryCreate

console = Console()
app = typer.Typer(help="Category management commands")


@app.command("list")
def list_categories():
    """List all categories with question counts."""

    async def _list():
        async with get_session_context() as session:
            stmt = (
                select(Category, func.count(Question.id).label("question_count"))
                .outerjoin(Question, Question.category_id == Category.id)
                .group_by(Category.id)
                .order_by(Category.name)
            )
            result = await session.execute(stmt)
            rows = result.all()

            table = Table(title="Categories")
            table.add_column("ID", style="cyan")
            table.add_column("Name", style="green")
            table.add_column("Visible", style="magenta")
            table.add_column("Questions", style="blue", justify="right")

            for category, question_count in rows:
                visible = "[green]Yes[/green]" if category.is_visible else "No"
                table.add_row(category.id, category.name, visible, str(question_count))

            console.print(table)

    asyncio.run(_list())


@app.command("create")
def create_category(
    name: str = typer.Argument(..., help="Category name"),
    description: str = typer.Option("", "--description", "-d", help="Category description"),
    hidden: bool = typer.Option(False, "--hidden", help="Create the category hidden from players"),
):
    """Create a new category."""
    try:
        category_in = CategoryCreate(name=name, description=description, is_visible=not hidden)
    except ValidationError as e:
        error = e.errors()[0]
        console.print(f"[red]Error:[/red] Invalid {error['loc'][0]}: {error['msg']}")
        raise typer.Exit(1) from None

    async def _create():
        async with get_session_context() as session:
            stmt = select(Category).where(Category.name == category_in.name)
            result = await session.execute(stmt)
            if result.scalar_one_or_none():
                console.print(f"[red]Error:[/red] Category '{category_in.name}' already exists")
                raise typer.Exit(1)

            category = Category(
                name=category_in.name,
                description=category_in.description,
                is_visible=category_in.is_visible,
            )
            session.add(category)
            await session.commit()

            console.print(f"[green]Created category:[/green] {category.name}")
            console.print(f"  ID: {category.id}")

    asyncio.run(_create())


@app.command("show")
def show_category(
    category_id: str = typer.Argument(..., help="Category ID"),
):
    """Show a category and its questions."""

    async def _show():
        async with get_session_context() as session:
            category = await session.get(Category, category_id)
            if not category:
                console.print(f"[red]Error:[/red] Category '{category_id}' not found")
                raise typer.Exit(1)

            stmt = select(Question).where(Question.category_id == category.id).order_by(Question.created_at)
            questions = (await session.execute(stmt)).scalars().all()

            console.print(f"[bold]{category.name}[/bold]")
            console.print(f"  ID: [cyan]{category.id}[/cyan]")
            console.print(f"  Visible: {'yes' if category.is_visible else 'no'}")
            if category.description:
                console.print(f"  Description: {category.description}")
            console.print(f"  Questions: [blue]{len(questions)}[/blue]")
            for question in questions:
                hidden = "" if question.is_visible else " [dim](hidden)[/dim]"
                console.print(f"    [cyan]{question.id}[/cyan] {question.answer}{hidden}")

    asyncio.run(_show())


@app.command("visibility")
def set_visibility(
    category_id: str = typer.Argument(..., help="Category ID"),
    visible: bool = typer.Option(..., "--show/--hide", help="Show or hide the category"),
):
    """Show or hide a category from players."""

    async def _set():
        async with get_session_context() as session:
            category = await session.get(Category, category_id)
            if not category:
                console.print(f"[red]Error:[/red] Category '{category_id}' not found")
                raise typer.Exit(1)

            category.is_visible = visible
            await session.commit()
            state = "visible" if visible else "hidden"
            console.print(f"[green]Category {category.name} is now {state}[/green]")

    asyncio.run(_set())


@app.command("delete")
def delete_category(
    category_id: str = typer.Argument(..., help="Category ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a category with all of its questions and hints."""

    async def _delete():
        async with get_session_context() as session:
            category = await session.get(Category, category_id)
            if not category:
                console.print(f"[red]Error:[/red] Category '{category_id}' not found")
                raise typer.Exit(1)

            if not force and not typer.confirm(f"Delete '{category.name}' and all its questions?"):
                console.print("[dim]Cancelled[/dim]")
                raise typer.Exit(0)

            await session.delete(category)
            await session.commit()
            console.print(f"[green]Deleted category:[/green] {category.name}")

    asyncio.run(_delete())
