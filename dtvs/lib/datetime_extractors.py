"""
Datetime extractor table keyed by "{language}-{name}".

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

from dtvs.lib.component_lib import DATETIME_PACKAGE, ComponentSpec, ComponentTable, module_name

# Languages whose extractors follow Base{Name}Extractor({Language}{Name}ExtractorConfiguration())
CONFIGURED_LANGUAGES = ["English", "Spanish", "French"]

EXTRACTOR_NAMES = [
    "Date",
    "Time",
    "DatePeriod",
    "TimePeriod",
    "DateTime",
    "DateTimePeriod",
    "Duration",
    "Set",
    "Holiday",
    "Merged",
]

# Chinese ships self-configured extractor classes for all names except Holiday
CHINESE_EXTRACTOR_NAMES = [
    "Date",
    "Time",
    "DatePeriod",
    "TimePeriod",
    "DateTime",
    "DateTimePeriod",
    "Duration",
    "Set",
    "Holiday",
]


def _configured_extractor(language, name, options=None):
    stem = module_name(name)
    return ComponentSpec(
        module=f"{DATETIME_PACKAGE}.base_{stem}",
        class_name=f"Base{name}Extractor",
        config_module=f"{DATETIME_PACKAGE}.{language.lower()}.{stem}_extractor_config",
        config_class=f"{language}{name}ExtractorConfiguration",
        options=options,
    )


def _chinese_extractor(name, options=None):
    return ComponentSpec(
        module=f"{DATETIME_PACKAGE}.chinese.{module_name(name)}_extractor",
        class_name=f"Chinese{name}Extractor",
        options=options,
    )


def build_extractor_specs():
    specs = {}
    for language in CONFIGURED_LANGUAGES:
        for name in EXTRACTOR_NAMES:
            options = "NONE" if name == "Merged" else None
            specs[f"{language}-{name}"] = _configured_extractor(language, name, options)
        specs[f"{language}-MergedSkipFromTo"] = _configured_extractor(language, "Merged", "SKIP_FROM_TO_MERGE")

    for name in CHINESE_EXTRACTOR_NAMES:
        if name != "Holiday":
            specs[f"Chinese-{name}"] = _chinese_extractor(name)
    specs["Chinese-Holiday"] = ComponentSpec(
        module=f"{DATETIME_PACKAGE}.base_holiday",
        class_name="BaseHolidayExtractor",
        config_module=f"{DATETIME_PACKAGE}.chinese.holiday_extractor_config",
        config_class="ChineseHolidayExtractorConfiguration",
    )
    specs["Chinese-Merged"] = _chinese_extractor("Merged", "NONE")
    specs["Chinese-MergedSkipFromTo"] = _chinese_extractor("Merged", "SKIP_FROM_TO_MERGE")
    return specs


EXTRACTORS = ComponentTable("extractor", build_extractor_specs())


def get_extractor(key):
    """Extractor exposing extract(text, reference) for key, or None."""
    return EXTRACTORS.get(key)
