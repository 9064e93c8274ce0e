from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from minitools.config.loader import load_settings
from minitools.config.schema import LoggingConfig, Settings
from minitools.errors import FileOpenError, FileReadError, InputReadError, ParseError
from minitools.quiz import QuizRunner, load_problems
from minitools.redirect.server import serve as serve_redirects
from minitools.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Timed CSV quiz runner and path-to-URL redirect server.")
console = Console(highlight=False, emoji=False)
logger = get_logger(__name__)


def _fail(message: str) -> NoReturn:
    console.print(message, markup=False, emoji=False)
    raise typer.Exit(code=1)


def _load_settings(config: Optional[Path], log_level: Optional[str]) -> Settings:
    """Load `.env`, read settings, and configure logging with any CLI override."""
    load_dotenv(override=False)
    try:
        settings = load_settings(config)
        if log_level:
            settings.logging = LoggingConfig(
                level=log_level, json_output=settings.logging.json_output
            )
    except (FileNotFoundError, ValueError) as exc:
        _fail(str(exc))
    configure_logging(settings.logging)
    return settings


@app.command()
def quiz(
    limit: Optional[int] = typer.Option(
        None, min=0, help="The time limit for the quiz in seconds (default 30)."
    ),
    csv_path: Optional[Path] = typer.Option(
        None, "--csv", help="A CSV file in the format of 'question,answer' (default problems.csv)."
    ),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
):
    """
    Ask every question from the CSV file against one overall countdown.

    Reads the problems, runs `QuizRunner` on stdin, and prints the score summary. Any
    failure to open, read, or parse the file, or to read an answer, prints the error and
    exits with status 1.
    """
    settings = _load_settings(config, log_level)
    time_limit = limit if limit is not None else settings.quiz.limit
    problems_path = csv_path or settings.quiz.csv_path

    try:
        problems = load_problems(problems_path)
    except (FileOpenError, FileReadError, ParseError) as exc:
        _fail(str(exc))
    logger.debug("quiz_loaded", path=str(problems_path), problems=len(problems), time_limit=time_limit)

    runner = QuizRunner(problems, time_limit=time_limit, console=console)
    try:
        sheet = runner.run()
    except InputReadError as exc:
        console.print()
        _fail(str(exc))
    logger.debug("quiz_finished", correct=sheet.correct, wrong=sheet.wrong, total=sheet.total)
    runner.display_result(sheet)


@app.command()
def serve(
    path: Optional[Path] = typer.Option(
        None, help="File with path/url records; JSON and YAML supported."
    ),
    host: Optional[str] = typer.Option(None, help="Interface to bind (default 127.0.0.1)."),
    port: Optional[int] = typer.Option(None, min=1, max=65535, help="Port to listen on (default 8080)."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
):
    """
    Serve the redirector: file mappings, then the built-in defaults, then a hello page.

    A malformed data file is fatal; a missing file or unsupported extension only drops
    the file layer.
    """
    settings = _load_settings(config, log_level)
    updates = {
        key: value
        for key, value in {"data_path": path, "host": host, "port": port}.items()
        if value is not None
    }
    redirect_config = settings.redirect.model_copy(update=updates)
    try:
        serve_redirects(redirect_config, log_level=settings.logging.level)
    except ParseError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    app()
