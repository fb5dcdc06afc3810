'''
Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved. This notice is intended as a precaution against inadvertent publication and does not imply publication or any waiver of confidentiality.
The year included in the foregoing notice is the year of creation of the work.
All code contained here is Property of Advanced Micro Devices, Inc.
'''

import re
import json
from datetime import datetime

import pytest

from dtvs.lib import globals

log = globals.log


def fail_test(msg):
    """
    Record and report a comparison failure without immediately raising an exception.
    This lets a spec case keep comparing the remaining results instead of
    returning on the first mismatch.

    Parameters:
      msg (str): Human-readable failure description to log and store.

    Behavior:
      - Prints a standardized "FAIL - ..." message to stdout for quick visibility.
      - Logs the same message at error level via the global `log` logger.
      - Appends the raw message to `globals.error_list` for later aggregation/reporting.
      - Does NOT raise. update_test_result() turns the collected list into a pytest failure.
    """
    print('FAIL - {}'.format(msg))
    log.error('FAIL - {}'.format(msg))
    globals.error_list.append(msg)


def reset_test_result():
    # Every spec case starts with an empty error list
    del globals.error_list[:]


def update_test_result():
    # fail_test() appends to globals.error_list; a non-empty list at the end of
    # the test case marks it as a failure
    if len(globals.error_list) > 0:
        pytest.fail('Following FAILURES seen - {}'.format(globals.error_list))


def print_test_case(log, language, sub_type, test_case):
    print('#========================================================#')
    print('\t\t ** Spec Case **')
    print('#========================================================#')
    print(f'==== {language} / {sub_type} ====')
    print(test_case.input)
    log.info(f'Debug case {language}/{sub_type}: {json.dumps(test_case.results, ensure_ascii=False, default=str)}')


def parse_iso_local(date_string):
    """
    Parse an ISO-like date-time string into a naive local datetime.

    The string is split on every non-digit character and the pieces are read
    as year, month, day, hour, minute, second. Time pieces that are not
    present default to zero.

    Parameters:
      date_string (str): e.g. "2016-11-07T00:00:00" or "2016-11-07".

    Returns:
      datetime: naive datetime built from the numeric pieces.

    Raises:
      ValueError: if fewer than three numeric pieces are present or the
      values do not form a valid date.
    """
    parts = [int(p) for p in re.split(r'\D', date_string.strip()) if p != '']
    if len(parts) < 3:
        raise ValueError(f"Cannot parse reference date-time '{date_string}'")
    parts = (parts + [0, 0, 0])[:6]
    return datetime(*parts)
