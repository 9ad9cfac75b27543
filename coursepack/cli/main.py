"""
Typer CLI for coursepack.

Commands:
    coursepack scan ROOT                 - Aggregate a content root and list modules
    coursepack show ROOT MODULE_ID       - Show a module's lessons and quiz
    coursepack quiz ROOT MODULE_ID       - Render a module's quiz as HTML
    coursepack parse-quiz FILE           - Parse a single quiz file

Usage:
    coursepack --help
    coursepack scan data/
    coursepack scan data/ --layout dirs
    coursepack quiz data/ math --output math_quiz.html
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from config import get_settings
from coursepack.curriculum import CurriculumStore, ModuleAggregator, parse_quiz
from coursepack.rendering import render_quiz_html
from coursepack.storage import open_storage

app = typer.Typer(
    help="coursepack: rebuild modules, lessons and quizzes from flat content files",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Curriculum loader for lesson/quiz content packs."""
    _configure_logging(verbose)


def _load(root: Path, layout: str) -> CurriculumStore:
    if layout not in ("auto", "flat", "dirs"):
        console.print(f"[red]Error: Unknown layout '{layout}' (use auto, flat or dirs)[/red]")
        raise typer.Exit(1)

    storage = open_storage(root)
    if storage is None:
        console.print(f"[red]Error: Cannot open content root: {root}[/red]")
        raise typer.Exit(1)

    aggregator = ModuleAggregator.from_settings(storage, get_settings())
    return aggregator.load(layout)


def _get_module(store: CurriculumStore, module_id: str):
    module = store.by_id(module_id)
    if module is None:
        console.print(f"[red]Error: Module not found: {module_id}[/red]")
        if store.count():
            console.print(f"  Available: {', '.join(store.ids())}")
        raise typer.Exit(1)
    return module


# ========================================
# Commands
# ========================================


@app.command("scan")
def scan(
    root: Path = typer.Argument(..., help="Content root directory"),
    layout: str = typer.Option("auto", "--layout", "-l", help="auto, flat or dirs"),
):
    """
    Aggregate a content root and list the resulting modules.

    Examples:
        coursepack scan data/
        coursepack scan sdcard/ --layout dirs
    """
    store = _load(root, layout)

    if not store.count():
        console.print("[yellow]No modules with lessons or quizzes found.[/yellow]")
        return

    table = Table(title=f"{store.count()} modules")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Lessons", justify="right", style="green")
    table.add_column("Questions", justify="right", style="green")

    for index, module in enumerate(store):
        table.add_row(
            str(index),
            module.id,
            module.display_name,
            str(module.lesson_count),
            str(module.question_count) if module.has_quiz else "-",
        )

    console.print(table)


@app.command("show")
def show(
    root: Path = typer.Argument(..., help="Content root directory"),
    module_id: str = typer.Argument(..., help="Module ID, e.g. math"),
    layout: str = typer.Option("auto", "--layout", "-l", help="auto, flat or dirs"),
):
    """Show a module's lessons (in lesson order) and quiz answers."""
    module = _get_module(_load(root, layout), module_id)

    console.print(f"\n[bold cyan]{module.display_name}[/bold cyan] ({module.id})")

    lessons = Table(title="Lessons")
    lessons.add_column("Key", justify="right", style="dim")
    lessons.add_column("Title", style="cyan")
    lessons.add_column("Source")
    for lesson in module.sorted_lessons():
        lessons.add_row(str(lesson.ordering_key), lesson.title, lesson.source_name)
    console.print(lessons)

    if not module.has_quiz:
        console.print("[dim]No quiz.[/dim]")
        return

    console.print(f"\n[bold]Quiz[/bold] ({module.question_count} questions)")
    for i, question in enumerate(module.quiz_questions, start=1):
        console.print(f"  {i}. {question.prompt}", markup=False)
        for option in question.options:
            marker = "*" if option.letter == question.correct_answer_letter else " "
            console.print(f"     {marker} {option.letter}) {option.text}", markup=False)


@app.command("quiz")
def quiz(
    root: Path = typer.Argument(..., help="Content root directory"),
    module_id: str = typer.Argument(..., help="Module ID, e.g. math"),
    output: Path = typer.Option(None, "--output", "-o", help="Write HTML to this file"),
    layout: str = typer.Option("auto", "--layout", "-l", help="auto, flat or dirs"),
):
    """Render a module's quiz as an HTML form."""
    module = _get_module(_load(root, layout), module_id)

    html = render_quiz_html(module)
    if not html:
        console.print(f"[yellow]Module {module_id} has no quiz.[/yellow]")
        raise typer.Exit(1)

    if output is None:
        typer.echo(html)
        return

    output.write_text(html, encoding="utf-8")
    console.print(f"[green]+[/green] Wrote {module.question_count} questions to {output}")


@app.command("parse-quiz")
def parse_quiz_file(
    file: Path = typer.Argument(..., help="Quiz text file"),
):
    """Parse a single quiz file and print the questions found."""
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    settings = get_settings()
    text = file.read_text(encoding="utf-8", errors="replace")
    questions = parse_quiz(
        text,
        max_questions=settings.max_quiz_questions,
        lookahead=settings.quiz_lookahead,
    )

    if not questions:
        console.print("[yellow]No questions found.[/yellow]")
        return

    table = Table(title=f"{len(questions)} questions from {file.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Options", justify="right")
    table.add_column("Answer", justify="center", style="green")

    for i, question in enumerate(questions, start=1):
        table.add_row(str(i), question.prompt, str(question.option_count), question.correct_answer_letter)

    console.print(table)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
