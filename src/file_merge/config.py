# src/file_merge/config.py
"""
Layered settings for merge runs.

Values are merged with OmegaConf in increasing order of precedence:
model defaults, an optional YAML file, `FILE_MERGE_*` environment
variables (a `.env` file is read first if one exists), then explicit
overrides such as CLI options. The result is validated by `MergeConfig`.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv
from omegaconf import DictConfig, OmegaConf
from pydantic import ValidationError

from .errors import ConfigurationError
from .models import MergeConfig

ENV_PREFIX = "FILE_MERGE_"


def _plain(values: Mapping[str, Any]) -> Dict[str, Any]:
    # OmegaConf only stores primitive values; paths go in as strings.
    return {k: str(v) if isinstance(v, Path) else v for k, v in values.items() if v is not None}


def build_config(**values: Any) -> MergeConfig:
    """Validates raw values into a MergeConfig, wrapping pydantic errors."""
    try:
        return MergeConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid merge settings: {e}") from e


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Collects `FILE_MERGE_<FIELD>` variables for every MergeConfig field.
    Empty values are treated as unset.
    """
    environ = os.environ if environ is None else environ
    values: Dict[str, str] = {}
    for field_name in MergeConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value:
            values[field_name] = value
    return values


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Loads a YAML settings file, which must contain a single mapping."""
    path = Path(config_path)
    try:
        loaded = OmegaConf.load(path)
    except Exception as e:  # noqa: BLE001 – OmegaConf surfaces both IO and YAML errors
        raise ConfigurationError(f"Could not parse config file {path}: {e}") from e

    if not isinstance(loaded, DictConfig):
        raise ConfigurationError(f"Config file {path} must contain a mapping of settings.")
    return OmegaConf.to_container(loaded, resolve=True)  # type: ignore[return-value]


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    use_env: bool = True,
) -> MergeConfig:
    """
    Builds the effective MergeConfig for a run.

    Args:
        config_path: Optional YAML file with MergeConfig fields.
        overrides: Highest-precedence values; None entries are ignored.
        environ: Environment mapping to read instead of `os.environ`. When
            given, no `.env` file is loaded.
        use_env: Set to False to ignore the environment entirely.

    Raises:
        ConfigurationError: If the file cannot be read or the merged values
            fail validation.
    """
    layers = []

    if config_path is not None:
        layers.append(OmegaConf.create(_plain(load_config_file(config_path))))

    if use_env:
        if environ is None:
            dotenv_path = find_dotenv(usecwd=True)
            if dotenv_path:
                load_dotenv(dotenv_path=dotenv_path)
        layers.append(OmegaConf.create(config_from_env(environ)))

    if overrides:
        layers.append(OmegaConf.create(_plain(overrides)))

    merged = OmegaConf.merge(*layers) if layers else OmegaConf.create({})
    values = OmegaConf.to_container(merged, resolve=True)
    return build_config(**{str(k): v for k, v in values.items()})  # type: ignore[union-attr]
