from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docnav.application.search_engine import SearchQueryEngine
from docnav.application.type_expression import TypeExpressionResolver
from docnav.config import DocnavConfig
from docnav.domain.types import DocumentationModel
from docnav.infrastructure.model_loader import load_documentation_model
from docnav.logger import get_logger, setup_logger
from docnav.presentation.formatters import format_result_label, format_type_segments

logger = get_logger("main")
console = Console()

cli = typer.Typer(
    name="docnav",
    help="Search and browse a generated API documentation model",
    epilog="""
    Examples:
    $ docnav search User -m docs/model.json
    $ docnav resolve "Map<String, List<User>>" -m docs/model.json
    $ DOCNAV_MODEL_PATH=docs/model.json docnav browse
    """,
    add_completion=False,
)

_config = DocnavConfig()


@cli.callback()
def configure(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Load configuration from the environment and set up logging."""
    global _config
    _config = DocnavConfig.from_env()
    if debug:
        _config.log_level = "DEBUG"
    setup_logger(
        log_file=_config.log_file,
        log_level=_config.log_level,
        console_output=_config.console_output,
    )


def _load_model(model_path: Optional[str]) -> DocumentationModel:
    path = model_path or _config.model_path
    if not path:
        console.print("[red]No documentation model given. Pass --model or set DOCNAV_MODEL_PATH.[/]")
        raise typer.Exit(code=2)
    try:
        return load_documentation_model(path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)
    except ValueError as e:
        # json.JSONDecodeError and pydantic's ValidationError are both ValueErrors
        console.print(f"[red]Could not read {path}:[/] {e}")
        raise typer.Exit(code=1)


@cli.command()
def search(
    query: str = typer.Argument(..., help="Substring to look for"),
    model_path: Optional[str] = typer.Option(None, "--model", "-m", help="Serialized documentation model (JSON)"),
):
    """Print faceted search results for QUERY."""
    model = _load_model(model_path)
    results = SearchQueryEngine(model.search_index).filter(query)

    if results.is_empty():
        console.print("[dim]No results found[/]")
        return

    for category, entries in results.sections():
        table = Table(title=category.label, show_header=False, title_justify="left", box=None)
        table.add_column("result")
        table.add_column("qualified name", style="dim")
        for entry in entries:
            table.add_row(format_result_label(entry, query), entry.qualified_name)
        console.print(table)


@cli.command()
def resolve(
    expression: str = typer.Argument(..., help="Type expression, e.g. 'Map<String, List<User>>'"),
    model_path: Optional[str] = typer.Option(None, "--model", "-m", help="Serialized documentation model (JSON)"),
    html: bool = typer.Option(False, "--html", help="Print the HTML rendering"),
):
    """Resolve EXPRESSION into links and external references."""
    model = _load_model(model_path)
    resolver = TypeExpressionResolver(model.registry)

    if html:
        console.print(resolver.resolve_html(expression), markup=False, highlight=False, soft_wrap=True)
        return

    segments = resolver.resolve(expression)
    console.print(format_type_segments(segments, link_action=None))

    table = Table("segment", "kind", "target")
    for segment in segments:
        table.add_row(repr(segment.text), segment.kind.value, segment.target or "")
    console.print(table)


@cli.command()
def browse(
    model_path: Optional[str] = typer.Option(None, "--model", "-m", help="Serialized documentation model (JSON)"),
):
    """Open the interactive documentation browser."""
    from docnav.presentation.tui import DocBrowserApp

    model = _load_model(model_path)
    DocBrowserApp(model).run()


if __name__ == "__main__":
    cli()
