"""
Datetime spec runners.

get_datetime_runner() turns a RunnerConfig (language + sub-type) into a
callable runner(t, test_case) that drives the matching extractor, parser or
model and compares its output with the case's expected Results through the
comparison primitives on t (see dtvs.lib.verify_lib.Verifier).

A configuration with no matching component yields IGNORED_TEST (None); the
caller skips those cases instead of failing them.

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

import logging
from itertools import zip_longest
from typing import Any, Callable, Optional

from dtvs import constants
from dtvs.cultures import get_culture_code
from dtvs.lib import datetime_extractors, datetime_parsers
from dtvs.lib.component_lib import DATETIME_OPTIONS_MODULE, load_attr
from dtvs.lib.utils_lib import parse_iso_local, print_test_case
from dtvs.schema.spec import RunnerConfig, TestCase

log = logging.getLogger(__name__)

IGNORED_TEST = None

Runner = Callable[[Any, TestCase], None]


def recognize_datetime_model(query, culture, options, reference):
    """DateTimeModel entry point: extract + parse + merge in a single call."""
    from recognizers_suite import recognize_datetime

    return recognize_datetime(query, culture, options, reference, False)


MODEL_FUNCTIONS = {
    'DateTimeModel': recognize_datetime_model,
}


def get_datetime_runner(config: RunnerConfig, debug_breakpoints: bool = False) -> Optional[Runner]:
    """
    Select the runner for a spec configuration.

    Routing is by sub-type token, checked in order: Extractor, Parser
    (Merged parsers get their own runner), Model.

    Args:
        config: Language and sub-type of the spec file
        debug_breakpoints: Call breakpoint() for cases marked Debug

    Returns:
        runner(t, test_case), or IGNORED_TEST when the component is missing
    """
    sub_type = config.sub_type
    on_debug = _debug_hook(config, debug_breakpoints)

    # Extractor only test
    if constants.Extractor in sub_type:
        extractor = get_extractor(config)
        if not extractor:
            log.info(f"No extractor for {config.label}, ignoring")
            return IGNORED_TEST

        return get_extractor_test_runner(extractor, on_debug)

    # Parser test
    if constants.Parser in sub_type:
        extractor = get_extractor(config)
        if not extractor:
            log.info(f"No extractor for {config.label}, ignoring")
            return IGNORED_TEST

        parser = get_parser(config)
        if not parser:
            log.info(f"No parser for {config.label}, ignoring")
            return IGNORED_TEST

        if constants.Merged in sub_type:
            return get_merged_parser_test_runner(extractor, parser, on_debug)

        return get_parser_test_runner(extractor, parser, on_debug)

    # Model test
    if constants.Model in sub_type:
        model_function = get_model_function(config)
        if not model_function:
            log.info(f"No model for {config.label}, ignoring")
            return IGNORED_TEST

        return get_model_test_runner(model_function, on_debug)

    return IGNORED_TEST


def get_extractor_test_runner(extractor, on_debug=None) -> Runner:
    def run(t, test_case: TestCase):
        expected_results = test_case.results
        reference_date_time = get_reference_date(test_case)
        _maybe_debug(on_debug, test_case)

        result = extractor.extract(test_case.input, reference_date_time)

        t.is_(len(result), len(expected_results), 'Result count')
        for actual, expected in zip_longest(result, expected_results):
            t.is_(_field(actual, 'text'), _field(expected, 'Text'), 'Result.Text')
            t.is_(_field(actual, 'type'), _field(expected, 'Type', 'TypeName'), 'Result.Type')

    return run


def get_parser_test_runner(extractor, parser, on_debug=None) -> Runner:
    def run(t, test_case: TestCase):
        expected_results = test_case.results
        reference_date_time = get_reference_date(test_case)
        _maybe_debug(on_debug, test_case)

        extract_results = extractor.extract(test_case.input, reference_date_time)
        result = [parser.parse(er, reference_date_time) for er in extract_results]

        t.is_(len(result), len(expected_results), 'Result count')
        for actual, expected in zip_longest(result, expected_results):
            t.is_(_field(actual, 'text'), _field(expected, 'Text'), 'Result.Text')
            t.is_(_field(actual, 'type'), _field(expected, 'Type', 'TypeName'), 'Result.Type')

            actual_value = _field(actual, 'value')
            expected_value = _field(expected, 'Value')
            if actual_value and expected_value:
                # timex
                t.is_(_field(actual_value, 'timex'), _field(expected_value, 'Timex'), 'Result.Value.Timex')

                # resolutions
                t.deep_equal(
                    _field(actual_value, 'future_resolution'),
                    _field(expected_value, 'FutureResolution'),
                    'Result.Value.FutureResolution',
                )
                t.deep_equal(
                    _field(actual_value, 'past_resolution'),
                    _field(expected_value, 'PastResolution'),
                    'Result.Value.PastResolution',
                )

    return run


def get_merged_parser_test_runner(extractor, parser, on_debug=None) -> Runner:
    def run(t, test_case: TestCase):
        expected_results = test_case.results
        reference_date_time = get_reference_date(test_case)
        _maybe_debug(on_debug, test_case)

        extract_results = extractor.extract(test_case.input, reference_date_time)
        result = [parser.parse(er, reference_date_time) for er in extract_results]

        t.is_(len(result), len(expected_results), 'Result count')
        for actual, expected in zip_longest(result, expected_results):
            t.is_(_field(actual, 'text'), _field(expected, 'Text'), 'Result.Text')
            t.is_(_field(actual, 'type'), _field(expected, 'Type', 'TypeName'), 'Result.Type')

            actual_value = _field(actual, 'value')
            expected_value = _field(expected, 'Value')
            if actual_value and expected_value:
                t.is_(actual_value is not None, True, 'Result.Value is defined')
                for actual_item, expected_item in zip_longest(
                    _field(actual_value, 'values') or [], _field(expected_value, 'values') or []
                ):
                    t.deep_equal(actual_item, expected_item, 'Values')

    return run


def get_model_test_runner(get_results, on_debug=None) -> Runner:
    def run(t, test_case: TestCase):
        expected_results = test_case.results
        reference_date_time = get_reference_date(test_case)
        _maybe_debug(on_debug, test_case)

        result = get_results(test_case.input, reference_date_time)

        t.is_(len(result), len(expected_results), 'Result count')
        for actual, expected in zip_longest(result, expected_results):
            t.is_(_field(actual, 'text'), _field(expected, 'Text'), 'Result.Text')
            t.is_(_field(actual, 'type_name'), _field(expected, 'TypeName'), 'Result.TypeName')

            resolution = _field(actual, 'resolution')
            if resolution:
                values = _field(resolution, 'values') or []
                expected_values = _field(_field(expected, 'Resolution'), 'values') or []
                t.is_(len(values), len(expected_values), 'Resolution.Values count')
                t.deep_equal(values, expected_values, 'Resolution.Values')

    return run


def get_extractor_name(sub_type: str) -> str:
    return sub_type.replace(constants.Extractor, '', 1).replace(constants.Parser, '', 1).replace(constants.Base, '', 1)


def get_parser_name(sub_type: str) -> str:
    return sub_type.replace(constants.Parser, '', 1).replace(constants.Base, '', 1)


def get_extractor(config: RunnerConfig):
    key = '-'.join([config.language, get_extractor_name(config.sub_type)])
    return datetime_extractors.get_extractor(key)


def get_parser(config: RunnerConfig):
    key = '-'.join([config.language, get_parser_name(config.sub_type)])
    return datetime_parsers.get_parser(key)


def get_model_options(sub_type: str):
    """DateTimeOptions flags encoded in a model sub-type."""
    datetime_options = load_attr(DATETIME_OPTIONS_MODULE, 'DateTimeOptions')

    options = datetime_options.NONE
    if constants.SplitDateAndTime in sub_type:
        options |= datetime_options.SPLIT_DATE_AND_TIME
    if constants.Calendar in sub_type:
        options |= datetime_options.CALENDAR
    return options


def get_model_function(config: RunnerConfig) -> Optional[Callable]:
    model_function = MODEL_FUNCTIONS.get('DateTimeModel')
    culture = get_culture_code(config.language)
    if model_function is None or culture is None:
        return None

    options = get_model_options(config.sub_type)

    def run_model(query, reference):
        return model_function(query, culture, options, reference)

    return run_model


def get_reference_date(test_case: TestCase):
    context = test_case.context
    if context and context.reference_date_time:
        return parse_iso_local(context.reference_date_time)

    return None


def _field(obj, *names):
    """First present field among names, read as a dict key or attribute."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _debug_hook(config: RunnerConfig, debug_breakpoints: bool):
    def on_debug(test_case: TestCase):
        print_test_case(log, config.language, config.sub_type, test_case)
        if debug_breakpoints:
            breakpoint()

    return on_debug


def _maybe_debug(on_debug, test_case: TestCase):
    if test_case.debug and on_debug:
        on_debug(test_case)
