"""
Datetime parser table keyed by "{language}-{name}".

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

from dataclasses import replace

from dtvs.lib.component_lib import DATETIME_PACKAGE, ComponentSpec, ComponentTable, module_name
from dtvs.lib.datetime_extractors import CONFIGURED_LANGUAGES, CHINESE_EXTRACTOR_NAMES, EXTRACTOR_NAMES

# Language-specific subclasses the library uses in place of Base{Name}Parser,
# built with the same configuration arguments
PARSER_CLASS_OVERRIDES = {
    "English-Time": (f"{DATETIME_PACKAGE}.english.parsers", "EnglishTimeParser"),
    "French-Time": (f"{DATETIME_PACKAGE}.french.parsers", "FrenchTimeParser"),
    "Spanish-DateTimePeriod": (f"{DATETIME_PACKAGE}.spanish.parsers", "SpanishDateTimePeriodParser"),
}


def _configured_parser(language, name):
    stem = module_name(name)
    return ComponentSpec(
        module=f"{DATETIME_PACKAGE}.base_{stem}",
        class_name=f"Base{name}Parser",
        config_module=f"{DATETIME_PACKAGE}.{language.lower()}.{stem}_parser_config",
        config_class=f"{language}{name}ParserConfiguration",
        common_config_module=f"{DATETIME_PACKAGE}.{language.lower()}.common_configs",
        common_config_class=f"{language}CommonDateTimeParserConfiguration",
        options="NONE" if name == "Merged" else None,
    )


def _chinese_parser(name):
    return ComponentSpec(
        module=f"{DATETIME_PACKAGE}.chinese.{module_name(name)}_parser",
        class_name=f"Chinese{name}Parser",
    )


def build_parser_specs():
    specs = {}
    for language in CONFIGURED_LANGUAGES:
        for name in EXTRACTOR_NAMES:
            specs[f"{language}-{name}"] = _configured_parser(language, name)

    for key, (module, class_name) in PARSER_CLASS_OVERRIDES.items():
        specs[key] = replace(specs[key], module=module, class_name=class_name)

    for name in CHINESE_EXTRACTOR_NAMES + ["Merged"]:
        specs[f"Chinese-{name}"] = _chinese_parser(name)
    return specs


PARSERS = ComponentTable("parser", build_parser_specs())


def get_parser(key):
    """Parser exposing parse(extract_result, reference) for key, or None."""
    return PARSERS.get(key)
