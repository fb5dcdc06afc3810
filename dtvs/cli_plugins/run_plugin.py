import pytest
import sys
import os

from .list_plugin import ListPlugin

SPEC_SUITE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "tests", "datetime", "test_datetime_specs.py")
# Directory holding the dtvs package, so pytest loads dtvs/conftest.py for the suite options
PACKAGE_PARENT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class RunPlugin(ListPlugin):
    def get_name(self):
        return "run"

    def get_order(self):
        return 20

    def get_parser(self, subparsers):
        parser = subparsers.add_parser("run", help="Run the DateTime spec suite (wrapper over pytest)")
        self.add_specs_arguments(parser)
        parser.add_argument("--language", action="append", default=[], help="Only run this language (repeatable)")
        parser.add_argument(
            "--sub_type", action="append", default=[], help="Only run this sub-type, e.g. DateParser (repeatable)"
        )
        parser.add_argument(
            "--debug_breakpoints", action="store_true", help="Call breakpoint() for spec cases marked Debug"
        )
        parser.add_argument("--html", help="Pytest: Create HTML report file at given path")
        parser.add_argument(
            "--self-contained-html",
            action="store_true",
            help="Pytest: Create a self-contained HTML file containing all the HTML report",
        )
        parser.add_argument(
            "--log-file",
            default="/tmp/dtvs/test.log",
            help="Pytest: Path to file for logging output (default: /tmp/dtvs/test.log)",
        )
        parser.add_argument(
            "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Pytest: Level of messages to catch/display",
        )
        parser.add_argument(
            "--capture",
            choices=["no", "tee-sys", "tee-merged", "fd", "sys"],
            help="Per-test capturing method for stdout/stderr",
        )
        parser.set_defaults(_plugin=self)
        return parser

    def get_epilog(self):
        return """
Run Commands:
  dtvs run --specs_dir ~/Specs                              Run every DateTime spec
  dtvs run --specs_dir ~/Specs --language English           Run English specs only
  dtvs run --specs_dir ~/Specs --sub_type MergedParser      Run one sub-type across languages
  dtvs run --config_file run.yaml --html report.html        Run from a config file with HTML report"""

    def run(self, args):
        self.run_specs(
            args.specs_dir,
            args.config_file,
            args.language,
            args.sub_type,
            args.debug_breakpoints,
            args.html,
            args.self_contained_html,
            args.log_file,
            args.log_level,
            args.capture,
            getattr(args, "extra_pytest_args", []),
        )

    def run_specs(
        self,
        specs_dir,
        config_file,
        languages,
        sub_types,
        debug_breakpoints,
        html,
        self_contained_html,
        log_file,
        log_level,
        capture,
        extra_pytest_args,
    ):
        if config_file and not os.path.exists(config_file):
            print(f"Error: Configuration file not found: {config_file}")
            sys.exit(1)

        specs_dir = self.default_specs_dir(specs_dir, config_file)

        # Build pytest arguments
        pytest_args = [SPEC_SUITE, f"--confcutdir={PACKAGE_PARENT}"]

        # Add DTVS-specific arguments
        if specs_dir:
            pytest_args.append(f"--specs_dir={specs_dir}")
        if config_file:
            pytest_args.append(f"--config_file={config_file}")
        for language in languages or []:
            pytest_args.append(f"--language={language}")
        for sub_type in sub_types or []:
            pytest_args.append(f"--sub_type={sub_type}")
        if debug_breakpoints:
            pytest_args.append("--debug_breakpoints")

        # Ensure log directory exists
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

        # Add pytest arguments
        if html:
            pytest_args.append(f"--html={html}")
            if self_contained_html:
                pytest_args.append("--self-contained-html")

        if log_file:
            pytest_args.append(f"--log-file={log_file}")

        if log_level:
            pytest_args.append(f"--log-level={log_level}")

        if capture:
            pytest_args.append(f"--capture={capture}")

        # Add any extra pytest args
        pytest_args.extend(extra_pytest_args)

        exit_code = pytest.main(pytest_args)
        sys.exit(exit_code)
