# src/file_merge/cli.py

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .concatenator import Concatenator
from .config import load_config
from .errors import MergeError
from .models import MergeConfig

# ------------------------------------------------------------------------
# Option objects live at module level so no calls sit in default
# positions (flake8-bugbear B008).
# ------------------------------------------------------------------------

TARGET_DIRECTORY_ARGUMENT = typer.Argument(
    None,
    help="Directory whose matching files are merged. Defaults to the current directory.",
    show_default=False,
)

OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Output file. Relative paths are resolved against the target directory.",
)

SUFFIX_OPTION = typer.Option(
    None,
    "--suffix",
    "-s",
    help="Only files whose names end with this suffix are merged (default: .rs).",
)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    help="YAML file with merge settings.",
)

UNSORTED_OPTION = typer.Option(
    False,
    "--unsorted",
    help="Keep raw directory-listing order instead of sorting by name.",
)

QUIET_OPTION = typer.Option(
    False,
    "--quiet",
    "-q",
    help="Only print errors.",
)

app = typer.Typer(
    name="file-merge",
    help="Concatenate every matching file of a directory into one output file.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _resolve_config(
    target_directory: Optional[Path],
    output: Optional[Path],
    suffix: Optional[str],
    config_file: Optional[Path],
    unsorted: bool,
) -> MergeConfig:
    overrides = {
        "target_directory": target_directory,
        "output_file": output,
        "suffix": suffix,
        # only an explicit flag overrides file/env settings
        "sort_names": False if unsorted else None,
    }
    return load_config(config_path=config_file, overrides=overrides)


def _fail(error: MergeError) -> typer.Exit:
    err_console.print(f"[bold red]Error: {escape(str(error))}[/bold red]")
    return typer.Exit(code=1)


# ------------------------------------------------------------------------
# Command: merge
# ------------------------------------------------------------------------
@app.command(name="merge")
def merge(
    target_directory: Optional[Path] = TARGET_DIRECTORY_ARGUMENT,
    output: Optional[Path] = OUTPUT_OPTION,
    suffix: Optional[str] = SUFFIX_OPTION,
    config_file: Optional[Path] = CONFIG_OPTION,
    unsorted: bool = UNSORTED_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Truncate the output file and append every matching file to it."""
    try:
        config = _resolve_config(target_directory, output, suffix, config_file, unsorted)
        concatenator = Concatenator(config, console=None if quiet else console)

        if not quiet:
            console.rule(f"[bold green]Merging *{escape(config.suffix)} files in {escape(str(config.target_directory))}")

        result = concatenator.merge()
    except MergeError as e:
        raise _fail(e) from e

    if not quiet:
        console.print(
            f"[green]✔ Merged [bold]{result.file_count}[/bold] files "
            f"({result.total_bytes} bytes) into[/green] {escape(str(result.output_path))}"
        )


# ------------------------------------------------------------------------
# Command: list-files
# ------------------------------------------------------------------------
@app.command(name="list-files")
def list_files(
    target_directory: Optional[Path] = TARGET_DIRECTORY_ARGUMENT,
    output: Optional[Path] = OUTPUT_OPTION,
    suffix: Optional[str] = SUFFIX_OPTION,
    config_file: Optional[Path] = CONFIG_OPTION,
    unsorted: bool = UNSORTED_OPTION,
):
    """Show the files a merge would include, in merge order, without writing anything."""
    try:
        config = _resolve_config(target_directory, output, suffix, config_file, unsorted)
        input_files = Concatenator(config).find_input_files()
    except MergeError as e:
        raise _fail(e) from e

    if not input_files:
        console.print(f"[yellow]No *{escape(config.suffix)} files found in:[/yellow] {escape(str(config.target_directory))}")
        raise typer.Exit()

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("File")
    table.add_column("Size (bytes)", justify="right")

    for index, path in enumerate(input_files, start=1):
        table.add_row(str(index), escape(path.name), str(path.stat().st_size))

    console.print(table)


# ------------------------------------------------------------------------
# Script entry-point
# ------------------------------------------------------------------------
if __name__ == "__main__":
    app()
