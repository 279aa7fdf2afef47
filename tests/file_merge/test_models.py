# tests/file_merge/test_models.py

from pathlib import Path

import pytest
from pydantic import ValidationError

# Subject under test
from file_merge.models import MergeConfig, MergedFile, MergeResult


def test_relative_output_is_resolved_against_target_directory(tmp_path: Path):
    config = MergeConfig(target_directory=tmp_path, output_file=Path("out.txt"))

    assert config.resolved_output_path() == tmp_path / "out.txt"


def test_absolute_output_is_kept(tmp_path: Path):
    output = tmp_path / "elsewhere" / "out.txt"
    config = MergeConfig(target_directory=Path("src"), output_file=output)

    assert config.resolved_output_path() == output


@pytest.mark.parametrize("suffix", ["", "a/b.rs"])
def test_invalid_suffix_is_rejected(suffix: str):
    with pytest.raises(ValidationError):
        MergeConfig(suffix=suffix)


def test_chunk_size_must_be_positive():
    with pytest.raises(ValidationError):
        MergeConfig(chunk_size=0)


def test_unknown_fields_are_forbidden():
    with pytest.raises(ValidationError):
        MergeConfig(recursive=True)


def test_merge_result_totals(tmp_path: Path):
    result = MergeResult(
        output_path=tmp_path / "out.txt",
        files=[MergedFile(name="a.rs", size_bytes=3), MergedFile(name="b.rs", size_bytes=4)],
    )

    assert result.file_count == 2
    assert result.total_bytes == 7
