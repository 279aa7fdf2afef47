# src/file_merge/concatenator.py

import os
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from rich.console import Console
from rich.markup import escape

from .config import build_config
from .errors import InputFileReadError, OutputWriteError, TargetDirectoryError
from .models import DEFAULT_OUTPUT_FILE, DEFAULT_SUFFIX, MergeConfig, MergedFile, MergeResult

HEADER_TEMPLATE = "--- FILE: {name} ---\n"
SEPARATOR = b"\n"


def format_header(name: str) -> bytes:
    """Builds the delimiter line written before each input file's content."""
    # fsencode keeps undecodable file names byte-exact
    return os.fsencode(HEADER_TEMPLATE.format(name=name))


class Concatenator:
    """
    Appends every matching file of a directory to a single output file.

    Inputs are regular files directly inside the target directory whose
    names end with the configured suffix. Dotfiles, sub-directories and the
    output file itself are never included. The run stops at the first
    error; nothing is skipped or retried.
    """

    def __init__(self, config: MergeConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console

    @property
    def output_path(self) -> Path:
        return self.config.resolved_output_path()

    def _matches(self, name: str) -> bool:
        suffix = self.config.suffix
        if name.startswith("."):
            return False
        return name.endswith(suffix) and len(name) > len(suffix)

    def find_input_files(self) -> List[Path]:
        """
        Lists the target directory and returns the input files in the order
        they will be merged.

        Raises:
            TargetDirectoryError: If the directory does not exist, is not a
                directory, or cannot be listed.
        """
        directory = self.config.target_directory
        output_path = self.output_path.resolve()

        try:
            with os.scandir(directory) as entries:
                matches = [
                    Path(entry.path)
                    for entry in entries
                    if self._matches(entry.name) and entry.is_file()
                ]
        except FileNotFoundError as e:
            raise TargetDirectoryError(f"Target directory not found: {directory}") from e
        except NotADirectoryError as e:
            raise TargetDirectoryError(f"Target path is not a directory: {directory}") from e
        except OSError as e:
            raise TargetDirectoryError(f"Could not list target directory {directory}: {e}") from e

        # Never feed the output file back into itself on a re-run.
        matches = [p for p in matches if p.resolve() != output_path]

        if self.config.sort_names:
            matches.sort(key=lambda p: os.fsencode(p.name))
        return matches

    def _append_file(self, path: Path, out: BinaryIO) -> int:
        try:
            infile = open(path, "rb")
        except OSError as e:
            raise InputFileReadError(f"Could not open input file {path}: {e}") from e

        copied = 0
        with infile:
            while True:
                try:
                    chunk = infile.read(self.config.chunk_size)
                except OSError as e:
                    raise InputFileReadError(f"Could not read input file {path}: {e}") from e
                if not chunk:
                    break
                out.write(chunk)
                copied += len(chunk)
        return copied

    def merge(self) -> MergeResult:
        """
        Truncates the output file and appends a header, the full content and
        a newline for every input file.

        Returns:
            A MergeResult describing what was written.

        Raises:
            TargetDirectoryError: Before the output file is touched.
            InputFileReadError: Mid-run, leaving a partially written output.
            OutputWriteError: If the output cannot be created or written.
        """
        input_files = self.find_input_files()
        output_path = self.output_path

        if self.console:
            self.console.print(f"Found {len(input_files)} files to concatenate...")

        merged: List[MergedFile] = []
        try:
            with open(output_path, "wb") as out:
                for path in input_files:
                    out.write(format_header(path.name))
                    size = self._append_file(path, out)
                    out.write(SEPARATOR)
                    merged.append(MergedFile(name=path.name, size_bytes=size))
                    if self.console:
                        self.console.print(f"[dim]+ {escape(path.name)} ({size} bytes)[/dim]")
        except OSError as e:
            raise OutputWriteError(f"Could not write output file {output_path}: {e}") from e

        return MergeResult(output_path=output_path, files=merged)


def merge_files(
    target_directory: Union[str, Path] = ".",
    output_file: Union[str, Path] = DEFAULT_OUTPUT_FILE,
    suffix: str = DEFAULT_SUFFIX,
    console: Optional[Console] = None,
) -> MergeResult:
    """
    Merges every `suffix` file in `target_directory` into `output_file`.

    Sample Usage:
        merge_files("src", "rust_merged.txt", suffix=".rs")
    """
    config = build_config(
        target_directory=Path(target_directory),
        output_file=Path(output_file),
        suffix=suffix,
    )
    return Concatenator(config, console=console).merge()
