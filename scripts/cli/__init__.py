"""yamlsort CLI — re-emit YAML with sorted keys."""

from pathlib import Path
from typing import Annotated

import typer
import yaml

from cli._helpers import configure_logging, console, fail
from yamlsort import (
    Mode,
    SerializeOptions,
    UnsupportedValueError,
    __version__,
    get_mode_default,
    get_quote_default,
    iter_rendered,
    read_input,
    same_file,
    write_output,
)

app = typer.Typer(
    name="yamlsort",
    help=(
        "YAML sorter. Read YAML from stdin or a file, write it with map "
        "keys sorted (\"name\" first) to stdout or a file."
    ),
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"yamlsort {__version__}")
        raise typer.Exit()


def _resolve_mode(normal: bool, json_: bool) -> Mode:
    if normal and json_:
        raise typer.BadParameter("--normal and --json are mutually exclusive")
    if normal:
        return Mode.NORMAL
    if json_:
        return Mode.JSON
    return get_mode_default()


@app.command()
def sort(
    input_file: Annotated[
        Path | None,
        typer.Option("--input-file", "-i", help="Path to input file (default: stdin)"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output-file", "-o", help="Path to output file (default: stdout)"),
    ] = None,
    quote_string: Annotated[
        bool,
        typer.Option("--quote-string", help="Always quote string values in output"),
    ] = False,
    normal: Annotated[
        bool,
        typer.Option("--normal", help="Use the plain PyYAML dumper"),
    ] = False,
    json_: Annotated[
        bool,
        typer.Option("--json", help="Write JSON instead of YAML"),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Debug logging on stderr")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V",
            help="Show version",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Sort map keys of every document in a YAML stream."""
    configure_logging(verbose)
    try:
        mode = _resolve_mode(normal, json_)
    except ValueError as e:
        fail("Config error", e)
    options = SerializeOptions(
        always_quote_strings=quote_string or get_quote_default()
    )

    try:
        text = read_input(input_file)
        rendered = iter_rendered(text, mode, options)
        if same_file(input_file, output_file):
            # Render everything before the input file is truncated
            rendered = list(rendered)
        write_output(rendered, output_file)
    except yaml.YAMLError as e:
        fail("Parse error", e)
    except UnsupportedValueError as e:
        fail("Serialize error", e)
    except (OSError, UnicodeDecodeError) as e:
        fail("Error", e)


def main() -> None:
    """Console script entry point."""
    app()
