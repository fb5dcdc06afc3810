'''
Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved. This notice is intended as a precaution against inadvertent publication and does not imply publication or any waiver of confidentiality.
The year included in the foregoing notice is the year of creation of the work.
All code contained here is Property of Advanced Micro Devices, Inc.
'''
import importlib.metadata
import os
import sys

import pytest

# Add all additional cmd line arguments for the spec suite
def pytest_addoption(parser):
    parser.addoption( "--specs_dir", action="store", default=None, help="Root of the Specs tree containing DateTime/<Language>/<SubType>.json files" )
    parser.addoption( "--config_file", action="store", default=None, help="Optional run configuration file in YAML or JSON format" )
    parser.addoption( "--language", action="append", default=[], help="Only run specs for this language (repeatable)" )
    parser.addoption( "--sub_type", action="append", default=[], help="Only run specs for this sub-type, e.g. DateExtractor (repeatable)" )
    parser.addoption( "--debug_breakpoints", action="store_true", default=False, help="Call breakpoint() for spec cases marked Debug" )

@pytest.hookimpl(optionalhook=True)
def pytest_metadata(metadata):
    """Add DTVS version metadata for both console output and HTML report."""

    # Get DTVS version - try package metadata first, fallback to version.txt
    try:
        dtvs_version = importlib.metadata.version('dtvs')
    except importlib.metadata.PackageNotFoundError:
        # Fallback for development mode (running from cloned repo)
        try:
            version_file = os.path.join(os.path.dirname(__file__), "..", "version.txt")
            with open(version_file) as f:
                dtvs_version = f.read().strip()
        except OSError as e:
            dtvs_version = f"Unknown (Error: {e})"

    specs_dir = "Not specified"
    config_file = "Not specified"
    for i, arg in enumerate(sys.argv):
        if arg.startswith("--specs_dir="):
            specs_dir = arg.split("=", 1)[1]
        elif arg == "--specs_dir" and i + 1 < len(sys.argv):
            specs_dir = sys.argv[i + 1]
        elif arg.startswith("--config_file="):
            config_file = arg.split("=", 1)[1]
        elif arg == "--config_file" and i + 1 < len(sys.argv):
            config_file = sys.argv[i + 1]

    metadata['DTVS version'] = dtvs_version
    metadata['Specs Dir'] = specs_dir
    metadata['Config File'] = config_file
