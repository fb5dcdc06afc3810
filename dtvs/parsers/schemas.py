"""
Pydantic schemas for spec parse results AND run configuration files.

This is the single source of truth for:
- Parse result containers (spec files turned into validated TestCase models)
- Run configuration file schema (validated before collecting specs)

Config validation happens early to fail fast with clear errors.

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field, field_validator, ConfigDict

from dtvs.constants import DEFAULT_PLATFORM


# =============================================================================
# Common Types
# =============================================================================


class ParseStatus(Enum):
    """Status of a parse operation."""

    SUCCESS = "success"
    PARTIAL = "partial"  # Some cases parsed, some failed validation
    FAILED = "failed"
    NO_DATA = "no_data"  # Spec file holds no case for this platform


T = TypeVar('T', bound=BaseModel)


@dataclass
class ParseResult(Generic[T]):
    """
    Generic result container for all parsers.

    Contains validated Pydantic models plus any warnings/errors.
    """

    status: ParseStatus
    results: List[T] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == ParseStatus.SUCCESS

    @property
    def has_results(self) -> bool:
        return len(self.results) > 0


# =============================================================================
# Configuration File Schemas (Input Validation - Fail Fast)
# =============================================================================


class RunConfigFile(BaseModel):
    """
    Schema for the spec run configuration file (YAML or JSON).

    Usage:
        config = validate_config_file("input/config/datetime_run.yaml")
        for spec_file in discover_spec_files(config.specs_dir, config.languages, config.sub_types):
            ...
    """

    model_config = ConfigDict(extra="forbid")  # Catch typos in top-level keys

    specs_dir: Optional[str] = Field(default=None, description="Root of the Specs tree (contains DateTime/)")
    languages: List[str] = Field(default_factory=list, description="Languages to run; empty means all")
    sub_types: List[str] = Field(default_factory=list, description="Sub-types to run; empty means all")
    platform: str = Field(default=DEFAULT_PLATFORM, description="Platform tag matched against NotSupported lists")
    enable_debug_breakpoints: bool = Field(
        default=False, description="Call breakpoint() for cases marked Debug: true"
    )

    @field_validator('specs_dir')
    @classmethod
    def validate_specs_dir_not_placeholder(cls, v: Optional[str]) -> Optional[str]:
        """Check that specs_dir is not still a placeholder."""
        if v is not None and '<changeme>' in v.lower():
            raise ValueError("specs_dir contains placeholder '<changeme>'. Please set the path to the Specs tree.")
        return v

    @field_validator('platform')
    @classmethod
    def normalize_platform(cls, v: str) -> str:
        return v.strip().lower()

    def validate_paths_exist(self) -> List[str]:
        """
        Check that configured paths exist on disk.

        Returns:
            List of error messages (empty if all paths are valid)
        """
        errors = []
        if self.specs_dir:
            specs_path = Path(self.specs_dir)
            if not specs_path.is_dir():
                errors.append(f"specs_dir does not exist: {specs_path}")
            elif not (specs_path / "DateTime").is_dir():
                errors.append(f"specs_dir has no DateTime/ directory: {specs_path}")
        return errors


def validate_config_file(config_path: Union[str, Path]) -> RunConfigFile:
    """
    Load and validate a run configuration file.

    Args:
        config_path: Path to configuration file (YAML or JSON)

    Returns:
        Validated RunConfigFile

    Raises:
        ValueError: If config is invalid with detailed error message
        FileNotFoundError: If config file doesn't exist
    """
    import json
    import yaml
    from pydantic import ValidationError

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        if config_path.suffix in ('.yaml', '.yml'):
            raw_config = yaml.safe_load(f)
        else:
            raw_config = json.load(f)

    if raw_config is None:
        raise ValueError(f"Configuration file is empty: {config_path}")

    try:
        return RunConfigFile.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Invalid run configuration in {config_path}:\n{e}") from e


def resolve_run_config(
    config_file: Optional[Union[str, Path]] = None,
    specs_dir: Optional[str] = None,
    languages: Optional[List[str]] = None,
    sub_types: Optional[List[str]] = None,
    debug_breakpoints: bool = False,
) -> RunConfigFile:
    """
    Build the effective run configuration.

    Starts from the config file when one is given; command-line values
    override it (lists override only when non-empty, the debug flag only
    switches breakpoints on).
    """
    config = validate_config_file(config_file) if config_file else RunConfigFile()

    overrides = {}
    if specs_dir:
        overrides["specs_dir"] = specs_dir
    if languages:
        overrides["languages"] = list(languages)
    if sub_types:
        overrides["sub_types"] = list(sub_types)
    if debug_breakpoints:
        overrides["enable_debug_breakpoints"] = True

    if overrides:
        config = RunConfigFile.model_validate({**config.model_dump(), **overrides})
    return config
