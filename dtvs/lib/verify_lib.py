'''
Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved. This notice is intended as a precaution against inadvertent publication and does not imply publication or any waiver of confidentiality.
The year included in the foregoing notice is the year of creation of the work.
All code contained here is Property of Advanced Micro Devices, Inc.
'''

from dtvs.lib import globals
from dtvs.lib.utils_lib import fail_test

log = globals.log


class Verifier:
    """
    Comparison primitives handed to datetime runners.

    Mismatches go through fail_test(), so one spec case reports every wrong
    field instead of stopping at the first one. Call update_test_result() at
    the end of the pytest test case to turn them into a failure.
    """

    def __init__(self, case_label=''):
        self.case_label = case_label
        self.checks = 0
        self.failures = 0

    def _failure_message(self, message, actual, expected):
        text = f'expected {expected!r}, got {actual!r}'
        if message:
            text = f'{message} {text}'
        if self.case_label:
            text = f'{self.case_label}: {text}'
        return text

    def _check(self, ok, actual, expected, message):
        self.checks += 1
        if ok:
            return True
        self.failures += 1
        fail_test(self._failure_message(message, actual, expected))
        return False

    def is_(self, actual, expected, message=''):
        """Strict equality check for scalar fields like text, type name and timex."""
        return self._check(type(actual) is type(expected) and actual == expected, actual, expected, message)

    def deep_equal(self, actual, expected, message=''):
        """Structural equality for resolution dicts and value lists."""
        return self._check(actual == expected, actual, expected, message)

    @property
    def passed(self):
        return self.failures == 0
