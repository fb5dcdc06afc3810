"""
Runners module - drive the recognizer for one spec configuration.

Runners are responsible for:
- Selecting the extractor / parser / model for a language and sub-type
- Feeding each spec case through it with the case's reference date
- Comparing actual output with the expected Results

Runners should NOT:
- Read spec files (see dtvs.parsers)
- Decide pytest outcomes (mismatches are collected by the verifier)
"""

from dtvs.runners.datetime_runner import IGNORED_TEST, MODEL_FUNCTIONS, get_datetime_runner

__all__ = [
    "IGNORED_TEST",
    "MODEL_FUNCTIONS",
    "get_datetime_runner",
]
