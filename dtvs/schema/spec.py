# std libs
from typing import Any, Dict, List, Optional

# pypdantic libs
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dtvs.lib.utils_lib import parse_iso_local


def _split_platforms(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [p.strip().lower() for p in value.split(",") if p.strip()]


class TestContext(BaseModel):
    __test__ = False  # not a pytest test class

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    reference_date_time: Optional[str] = Field(default=None, alias="ReferenceDateTime")

    @field_validator("reference_date_time")
    @classmethod
    def validate_reference_date_time(cls, v: Optional[str]) -> Optional[str]:
        """Reject reference date-times that cannot be turned into a datetime."""
        if v is not None:
            parse_iso_local(v)
        return v


class TestCase(BaseModel):
    """One entry of a spec file."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    input: str = Field(alias="Input")
    results: List[Dict[str, Any]] = Field(default_factory=list, alias="Results")
    context: Optional[TestContext] = Field(default=None, alias="Context")
    debug: bool = Field(default=False, alias="Debug")
    not_supported: Optional[str] = Field(default=None, alias="NotSupported")
    not_supported_by_design: Optional[str] = Field(default=None, alias="NotSupportedByDesign")
    comment: Optional[str] = Field(default=None, alias="Comment")

    def is_supported_on(self, platform: str) -> bool:
        platform = platform.lower()
        unsupported = _split_platforms(self.not_supported) + _split_platforms(self.not_supported_by_design)
        return platform not in unsupported


class RunnerConfig(BaseModel):
    """Which capability a spec file exercises: language plus sub-type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: str
    sub_type: str = Field(alias="subType")

    @property
    def label(self) -> str:
        return f"{self.language}-{self.sub_type}"
