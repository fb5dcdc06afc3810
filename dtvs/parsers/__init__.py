"""
Parsers module - Data Abstraction & Validation.

Parsers are responsible for:
- Discovering spec files and turning them into validated TestCase models
- Validating run configuration files (fail fast)

Parsers should NOT:
- Call the recognizer
- Make pass/fail decisions (validation only)
"""

from dtvs.parsers.schemas import (
    # Result schemas
    ParseResult,
    ParseStatus,
    # Config file schemas
    RunConfigFile,
    # Validation helper
    validate_config_file,
    resolve_run_config,
)

# Parser implementations
from dtvs.parsers.spec_loader import SpecFile, SpecFileParser, discover_spec_files

__all__ = [
    # Result schemas
    "ParseResult",
    "ParseStatus",
    # Config file schemas
    "RunConfigFile",
    # Validation helper
    "validate_config_file",
    "resolve_run_config",
    # Parser implementations
    "SpecFile",
    "SpecFileParser",
    "discover_spec_files",
]
