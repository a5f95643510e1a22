"""Question management CLI commands."""

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from sqlmodel import func, select

from guessgame.database import get_session_context
from guessgame.models import Category, Hint, Question
from guessgame.models.question import QuestionCreate

console = Console()
app = typer.Typer(help="Question management commands")


@app.command("list")
def list_questions(
    category_id: str | None = typer.Option(None, "--category", "-c", help="Only this category"),
):
    """List questions with hint counts."""

    async def _list():
        async with get_session_context() as session:
            stmt = (
                select(Question, Category.name, func.count(Hint.id).label("hint_count"))
                .join(Category, Category.id == Question.category_id)
                .outerjoin(Hint, Hint.question_id == Question.id)
                .group_by(Question.id, Category.name)
                .order_by(Category.name, Question.created_at)
            )
            if category_id:
                stmt = stmt.where(Question.category_id == category_id)
            result = await session.execute(stmt)
            rows = result.all()

            table = Table(title="Questions")
            table.add_column("ID", style="cyan")
            table.add_column("Answer", style="green")
            table.add_column("Category", style="yellow")
            table.add_column("Visible", style="magenta")
            table.add_column("Hints", style="blue", justify="right")

            for question, category_name, hint_count in rows:
                visible = "[green]Yes[/green]" if question.is_visible else "No"
                table.add_row(question.id, question.answer, category_name, visible, str(hint_count))

            console.print(table)

    asyncio.run(_list())


@app.command("create")
def create_question(
    answer: str = typer.Argument(..., help="Correct answer"),
    category_id: str = typer.Option(..., "--category", "-c", help="Owning category ID"),
    hints: list[str] = typer.Option(..., "--hint", "-h", help="Hint text, repeat in reveal order"),
    hidden: bool = typer.Option(False, "--hidden", help="Create the question hidden from players"),
):
    """Create a question with its hints."""
    try:
        question_in = QuestionCreate(answer=answer, category_id=category_id, hints=hints, is_visible=not hidden)
    except ValidationError as e:
        error = e.errors()[0]
        console.print(f"[red]Error:[/red] Invalid {error['loc'][0]}: {error['msg']}")
        raise typer.Exit(1) from None

    async def _create():
        async with get_session_context() as session:
            category = await session.get(Category, category_id)
            if not category:
                console.print(f"[red]Error:[/red] Category '{category_id}' not found")
                raise typer.Exit(1)

            question = Question(answer=question_in.answer, category_id=category.id, is_visible=question_in.is_visible)
            session.add(question)
            await session.flush()
            for index, content in enumerate(question_in.hints):
                session.add(Hint(question_id=question.id, content=content, order=index))
            await session.commit()

            console.print(f"[green]Created question:[/green] {question.answer} ({len(question_in.hints)} hints)")
            console.print(f"  ID: {question.id}")
            console.print(f"  Category: {category.name}")

    asyncio.run(_create())


@app.command("show")
def show_question(
    question_id: str = typer.Argument(..., help="Question ID"),
):
    """Show a question with its ordered hints."""

    async def _show():
        async with get_session_context() as session:
            question = await session.get(Question, question_id)
            if not question:
                console.print(f"[red]Error:[/red] Question '{question_id}' not found")
                raise typer.Exit(1)

            category = await session.get(Category, question.category_id)
            stmt = select(Hint).where(Hint.question_id == question.id).order_by(Hint.order)
            hints = (await session.execute(stmt)).scalars().all()

            console.print(f"[bold]{question.answer}[/bold]")
            console.print(f"  ID: [cyan]{question.id}[/cyan]")
            console.print(f"  Category: [yellow]{category.name if category else '-'}[/yellow]")
            console.print(f"  Visible: {'yes' if question.is_visible else 'no'}")
            for hint in hints:
                console.print(f"  {hint.order + 1}. {hint.content}")

    asyncio.run(_show())


@app.command("visibility")
def set_visibility(
    question_id: str = typer.Argument(..., help="Question ID"),
    visible: bool = typer.Option(..., "--show/--hide", help="Show or hide the question"),
):
    """Show or hide a question from players."""

    async def _set():
        async with get_session_context() as session:
            question = await session.get(Question, question_id)
            if not question:
                console.print(f"[red]Error:[/red] Question '{question_id}' not found")
                raise typer.Exit(1)

            question.is_visible = visible
            await session.commit()
            state = "visible" if visible else "hidden"
            console.print(f"[green]Question {question.id} is now {state}[/green]")

    asyncio.run(_set())


@app.command("delete")
def delete_question(
    question_id: str = typer.Argument(..., help="Question ID"),
):
    """Delete a question and its hints."""

    async def _delete():
        async with get_session_context() as session:
            question = await session.get(Question, question_id)
            if not question:
                console.print(f"[red]Error:[/red] Question '{question_id}' not found")
                raise typer.Exit(1)

            await session.delete(question)
            await session.commit()
            console.print(f"[green]Deleted question:[/green] {question_id}")

    asyncio.run(_delete())
