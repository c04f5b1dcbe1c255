"""
bibleref - Command-Line Interface

Thin wrapper over the parsing core:

    bibleref parse "Gen 1:1 - Exodus 5"
    bibleref encode "John 3:16"
    bibleref decode 1001001 66005014
    bibleref books
"""
import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .books import BOOKS
from .codec import decode as decode_pair
from .codec import encode as encode_reference
from .config import OutputFormat, get_config
from .errors import ConfigurationError, error_for
from .observability.logging import LogContext, get_logger, setup_logging
from .parser import from_string
from .reference import EncodedReference, Reference
from .result import Err

app = typer.Typer(
    name="bibleref",
    help="Parse, format and encode Bible references",
    add_completion=False,
)

console = Console()
logger = get_logger("bibleref.cli")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Configure logging before any command runs."""
    try:
        config = get_config()
    except ConfigurationError as e:
        console.print(f"[red]Config error: {e.message}[/red]")
        raise typer.Exit(2) from e
    for problem in config.validate():
        console.print(f"[yellow]Config warning: {problem}[/yellow]")
    if verbose or config.debug:
        config.logging.level = "DEBUG"
    setup_logging(config.logging)


def _fail(err: Err, command: str, text: Optional[str] = None) -> None:
    error = error_for(err, input_text=text).with_context(command=command)
    logger.info(
        "Command failed",
        error_code=error.error_code,
        reason=error.message,
        context=error.context.to_dict(),
    )
    console.print(f"[red]Error: {err.error}[/red]")
    raise typer.Exit(1)


def _resolve_output(output: Optional[OutputFormat]) -> OutputFormat:
    if output is not None:
        return output
    try:
        return get_config().output_format
    except ConfigurationError:
        # Already reported as a config warning by main().
        return OutputFormat.TABLE


def _show_reference(ref: Reference, output: OutputFormat) -> None:
    encoded = encode_reference(ref)
    if output == OutputFormat.TEXT:
        console.print(ref.format(), highlight=False)
        return
    if output == OutputFormat.JSON:
        payload = {
            "reference": ref.format(),
            **ref.to_dict(),
            "encoded": encoded._asdict(),
        }
        console.print_json(json.dumps(payload))
        return

    table = Table(title=ref.format())
    table.add_column("", style="cyan")
    table.add_column("Book")
    table.add_column("Chapter", justify="right")
    table.add_column("Verse", justify="right")
    table.add_column("Encoded", justify="right", style="green")
    table.add_row("start", ref.start_book_name, str(ref.start_chapter),
                  str(ref.start_verse), str(encoded.start))
    table.add_row("end", ref.end_book_name, str(ref.end_chapter),
                  str(ref.end_verse), str(encoded.end))
    console.print(table)


@app.command()
def parse(
    text: str = typer.Argument(..., help="Reference text, e.g. 'Gen 1:1-5'"),
    output: Optional[OutputFormat] = typer.Option(None, "--output", "-o", help="Output format"),
):
    """Parse a reference and show its canonical form."""
    with LogContext(command="parse"):
        result = from_string(text)
        if result.is_err:
            _fail(result, "parse", text)
        _show_reference(result.value, _resolve_output(output))


@app.command()
def encode(
    text: str = typer.Argument(..., help="Reference text"),
):
    """Print the integer pair for a reference."""
    with LogContext(command="encode"):
        result = from_string(text)
        if result.is_err:
            _fail(result, "encode", text)
        encoded = encode_reference(result.value)
        console.print(f"{encoded.start} {encoded.end}", highlight=False)


@app.command()
def decode(
    start: int = typer.Argument(..., help="Encoded start"),
    end: int = typer.Argument(..., help="Encoded end"),
    output: Optional[OutputFormat] = typer.Option(None, "--output", "-o", help="Output format"),
):
    """Rebuild a reference from its integer pair."""
    with LogContext(command="decode"):
        result = decode_pair(EncodedReference(start, end))
        if result.is_err:
            _fail(result, "decode")
        _show_reference(result.value, _resolve_output(output))


@app.command()
def books():
    """List the books with their chapter and verse counts."""
    table = Table(title="Books")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Chapters", justify="right")
    table.add_column("Verses", justify="right")

    for info in BOOKS:
        table.add_row(str(int(info.book)), info.name, str(info.chapters), str(sum(info.verses)))

    console.print(table)


if __name__ == "__main__":
    app()
