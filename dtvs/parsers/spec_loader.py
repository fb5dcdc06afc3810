"""
Spec file discovery and parsing.

Specs are laid out as <specs_dir>/DateTime/<Language>/<SubType>.json, each
file holding a JSON list of test cases. The language and sub-type in the
path select the datetime runner for every case in the file.

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from pydantic import ValidationError

from dtvs.constants import DEFAULT_PLATFORM
from dtvs.parsers.schemas import ParseResult, ParseStatus
from dtvs.schema.spec import RunnerConfig, TestCase

log = logging.getLogger(__name__)

RECOGNIZER_DIR = "DateTime"


@dataclass(frozen=True)
class SpecFile:
    """A single spec file and the runner configuration derived from its path."""

    language: str
    sub_type: str
    path: Path

    @property
    def config(self) -> RunnerConfig:
        return RunnerConfig(language=self.language, sub_type=self.sub_type)

    @property
    def label(self) -> str:
        return f"{self.language}-{self.sub_type}"


def discover_spec_files(
    specs_dir: Union[str, Path], languages: Optional[List[str]] = None, sub_types: Optional[List[str]] = None
) -> Iterator[SpecFile]:
    """
    Walk <specs_dir>/DateTime and yield matching spec files in sorted order.

    Args:
        specs_dir: Root of the Specs tree
        languages: Only yield these languages (None or empty means all)
        sub_types: Only yield these sub-types (None or empty means all)
    """
    root = Path(specs_dir) / RECOGNIZER_DIR
    if not root.is_dir():
        log.warning(f"No {RECOGNIZER_DIR} specs found under {specs_dir}")
        return

    for language_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        if languages and language_dir.name not in languages:
            continue
        for spec_path in sorted(language_dir.glob("*.json")):
            if sub_types and spec_path.stem not in sub_types:
                continue
            yield SpecFile(language=language_dir.name, sub_type=spec_path.stem, path=spec_path)


class SpecFileParser:
    """
    Parser for one spec file.

    Handles:
    - Reading the JSON list (utf-8, optional BOM)
    - Validating every entry as a TestCase
    - Dropping cases marked NotSupported / NotSupportedByDesign for the platform
    """

    def __init__(self, spec_file: SpecFile, platform: str = DEFAULT_PLATFORM):
        self.spec_file = spec_file
        self.platform = platform

    def load_raw(self):
        with open(self.spec_file.path, encoding="utf-8-sig") as f:
            return json.load(f)

    def parse(self) -> ParseResult[TestCase]:
        metadata = {"language": self.spec_file.language, "sub_type": self.spec_file.sub_type, "skipped": 0}

        try:
            raw_cases = self.load_raw()
        except (OSError, ValueError) as e:
            log.error(f"Cannot read spec file {self.spec_file.path}: {e}")
            return ParseResult(status=ParseStatus.FAILED, errors=[f"{self.spec_file.path}: {e}"], metadata=metadata)

        if not isinstance(raw_cases, list):
            msg = f"{self.spec_file.path}: expected a JSON list, got {type(raw_cases).__name__}"
            return ParseResult(status=ParseStatus.FAILED, errors=[msg], metadata=metadata)

        cases = []
        errors = []
        for i, raw in enumerate(raw_cases):
            try:
                case = TestCase.model_validate(raw)
            except ValidationError as e:
                errors.append(f"{self.spec_file.path}[{i}]: {e}")
                continue

            if not case.is_supported_on(self.platform):
                metadata["skipped"] += 1
                continue
            cases.append(case)

        log.info(
            f"Parsed {self.spec_file.label}: {len(cases)} cases, "
            f"{metadata['skipped']} not supported on {self.platform}, {len(errors)} invalid"
        )

        if errors and cases:
            status = ParseStatus.PARTIAL
        elif errors:
            status = ParseStatus.FAILED
        elif not cases:
            status = ParseStatus.NO_DATA
        else:
            status = ParseStatus.SUCCESS

        return ParseResult(status=status, results=cases, errors=errors, metadata=metadata)
