#!/usr/bin/env python3
"""
dtvs command line: `dtvs list` and `dtvs run` over a Recognizers-Text Specs tree.

Subcommands are SubcommandPlugin classes found in dtvs/cli_plugins.
"""

import argparse
import sys
import os
import importlib
import pkgutil
import importlib.metadata as metadata
from dtvs.cli_plugins.base import SubcommandPlugin

PLUGIN_DIR = os.path.join(os.path.dirname(__file__), "cli_plugins")
# Distribution whose recognizers the spec suite exercises
RECOGNIZER_DISTRIBUTION = "recognizers-text-date-time"

DESCRIPTION = """Date-Time Validation Suite (DTVS)

Runs the Recognizers-Text DateTime spec files (Specs/DateTime/<Language>/<SubType>.json)
against the Python date-time recognizer. Each spec case becomes one pytest test."""


def _dtvs_version():
    try:
        return metadata.version("dtvs")
    except metadata.PackageNotFoundError:
        # Source checkout
        version_file = os.path.join(os.path.dirname(__file__), "..", "version.txt")
        if os.path.exists(version_file):
            with open(version_file) as f:
                return f.read().strip()
    return "unknown"


def _recognizer_version():
    try:
        return metadata.version(RECOGNIZER_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "not installed"


def get_version():
    """Version line for --version: dtvs itself plus the recognizer under test."""
    return f"dtvs: {_dtvs_version()} ({RECOGNIZER_DISTRIBUTION}: {_recognizer_version()})"


def discover_plugins():
    """Instantiate every SubcommandPlugin subclass defined in a dtvs.cli_plugins module.

    A module that fails to import is reported and skipped so the other
    subcommands stay usable. Plugins come back sorted by (order, name).
    """
    plugins = []
    for _, name, ispkg in pkgutil.iter_modules([PLUGIN_DIR]):
        if ispkg:
            continue
        try:
            mod = importlib.import_module(f"dtvs.cli_plugins.{name}")
        except Exception as e:
            print(f"Warning: Skipping subcommand module {name}: {e}")
            continue

        for obj in vars(mod).values():
            # Only classes defined here; RunPlugin's import of ListPlugin must not register it twice
            if (
                isinstance(obj, type)
                and issubclass(obj, SubcommandPlugin)
                and obj is not SubcommandPlugin
                and obj.__module__ == mod.__name__
            ):
                plugins.append(obj())

    return sorted(plugins, key=lambda p: (p.get_order(), p.get_name()))


def build_arg_parser(plugins):
    """Top-level parser with one subparser per plugin; plugin examples form the epilog."""
    epilog = "\n".join(plugin.get_epilog() for plugin in plugins if plugin.get_epilog().strip())

    parser = argparse.ArgumentParser(
        prog="dtvs",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument("--version", action="version", version=get_version())
    subparsers = parser.add_subparsers(dest="command", help="list spec files or run the suite")
    for plugin in plugins:
        plugin.get_parser(subparsers)
    return parser


def main(plugins=None):
    if plugins is None:
        plugins = discover_plugins()
    parser = build_arg_parser(plugins)
    # Unknown arguments are forwarded to pytest by `dtvs run`
    args, extra_pytest_args = parser.parse_known_args()
    args.extra_pytest_args = extra_pytest_args

    if not hasattr(args, "_plugin"):
        parser.print_help()
        sys.exit(1)
    args._plugin.run(args)


if __name__ == "__main__":
    main()
