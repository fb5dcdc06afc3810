"""DTVS Pydantic schemas for spec data validation."""

from .spec import (
    TestContext,
    TestCase,
    RunnerConfig,
)

__all__ = [
    'TestContext',
    'TestCase',
    'RunnerConfig',
]
