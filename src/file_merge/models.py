# src/file_merge/models.py

import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT_FILE = "merged_output.txt"
DEFAULT_SUFFIX = ".rs"
DEFAULT_CHUNK_SIZE = 64 * 1024


class MergeConfig(BaseModel):
    """
    Validated settings for a single merge run.

    A relative `output_file` is interpreted against `target_directory`, so
    with the defaults the output lands next to the files it collects.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_directory: Path = Field(Path("."), description="Directory scanned for input files.")
    output_file: Path = Field(Path(DEFAULT_OUTPUT_FILE), description="File that receives the merged content.")
    suffix: str = Field(DEFAULT_SUFFIX, description="File-name suffix selecting the input files.")
    sort_names: bool = Field(True, description="Process inputs in name order instead of raw listing order.")
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, gt=0, description="Bytes copied per read.")

    @field_validator("suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value:
            raise ValueError("suffix must not be empty")
        separators = {os.sep, os.altsep} - {None}
        if any(sep in value for sep in separators):
            raise ValueError(f"suffix must not contain a path separator: {value!r}")
        return value

    def resolved_output_path(self) -> Path:
        if self.output_file.is_absolute():
            return self.output_file
        return (self.target_directory / self.output_file).absolute()


class MergedFile(BaseModel):
    """One input file that was appended to the output."""

    name: str = Field(..., description="Base name of the input file.")
    size_bytes: int = Field(..., ge=0, description="Number of content bytes copied.")


class MergeResult(BaseModel):
    """Summary of a completed merge run."""

    output_path: Path
    files: List[MergedFile] = Field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_bytes(self) -> int:
        return sum(f.size_bytes for f in self.files)
