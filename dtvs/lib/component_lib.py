"""
Lazy lookup tables of recognizer components.

A table maps "{language}-{name}" keys (e.g. "English-DatePeriod") to a
ComponentSpec that names the library class and its configuration classes.
Nothing is imported from the recognizer library until a key is requested,
so a missing language pack only affects the specs that need it.

Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved.
"""

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

DATETIME_PACKAGE = "recognizers_date_time.date_time"
DATETIME_OPTIONS_MODULE = "recognizers_date_time.date_time.utilities"


def load_attr(module_name: str, attr_name: str) -> Any:
    """Import module_name and return attr_name from it."""
    module = importlib.import_module(module_name)
    return getattr(module, attr_name)


@dataclass(frozen=True)
class ComponentSpec:
    """
    Description of how to build one extractor or parser.

    Constructor call shapes covered:
        cls()
        cls(options)
        cls(config_cls())
        cls(config_cls(common_config_cls()))
        cls(config_cls(...), options)
    """

    module: str
    class_name: str
    config_module: Optional[str] = None
    config_class: Optional[str] = None
    common_config_module: Optional[str] = None
    common_config_class: Optional[str] = None
    # DateTimeOptions member name, e.g. "NONE" or "SKIP_FROM_TO_MERGE"
    options: Optional[str] = None

    def build(self) -> Any:
        component_cls = load_attr(self.module, self.class_name)
        args = []

        if self.config_class:
            config_cls = load_attr(self.config_module, self.config_class)
            if self.common_config_class:
                common_config = load_attr(self.common_config_module, self.common_config_class)()
                args.append(config_cls(common_config))
            else:
                args.append(config_cls())

        if self.options:
            datetime_options = load_attr(DATETIME_OPTIONS_MODULE, "DateTimeOptions")
            args.append(datetime_options[self.options])

        return component_cls(*args)


class ComponentTable:
    """Keyed table of ComponentSpec entries with per-key instance caching."""

    def __init__(self, kind: str, specs: Dict[str, ComponentSpec]):
        self.kind = kind
        self.specs = dict(specs)
        self._instances: Dict[str, Any] = {}

    def __contains__(self, key):
        return key in self.specs

    def __len__(self):
        return len(self.specs)

    def keys(self):
        return self.specs.keys()

    def get(self, key: str) -> Optional[Any]:
        """
        Return the built component for key, or None when there is none.

        A registered entry whose module or class cannot be resolved is logged
        and treated like a missing one.
        """
        if key in self._instances:
            return self._instances[key]

        spec = self.specs.get(key)
        if spec is None:
            log.debug(f"No {self.kind} registered for '{key}'")
            return None

        try:
            instance = spec.build()
        except (ImportError, AttributeError) as e:
            log.warning(f"Cannot build {self.kind} '{key}' from {spec.module}.{spec.class_name}: {e}")
            instance = None

        self._instances[key] = instance
        return instance

    def clear_cache(self):
        self._instances.clear()


def module_name(name: str) -> str:
    """Library module stem for a component name, e.g. "DatePeriod" -> "dateperiod"."""
    return name.lower()
