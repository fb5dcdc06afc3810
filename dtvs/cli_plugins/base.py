import os

BUNDLED_SPECS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "input", "specs")


class SubcommandPlugin:
    """Base class for DTVS CLI subcommand plugins."""

    def get_name(self):
        raise NotImplementedError

    def get_parser(self, subparsers):
        """Register subcommand with argparse subparsers."""
        raise NotImplementedError

    def get_epilog(self):
        """Return examples or help text for this subcommand. Default is empty."""
        return ""

    def get_order(self):
        """Return the display order for this plugin. Lower numbers appear first. Default is 0."""
        return 0

    def run(self, args):
        """Run the subcommand logic."""
        raise NotImplementedError

    @staticmethod
    def add_specs_arguments(parser):
        """Options shared by subcommands that read spec files."""
        parser.add_argument(
            "--specs_dir",
            help="Root of the Specs tree containing DateTime/<Language>/<SubType>.json (default: bundled samples)",
        )
        parser.add_argument("--config_file", help="Path to run configuration YAML/JSON file")

    @staticmethod
    def default_specs_dir(specs_dir, config_file=None):
        """Fall back to the bundled sample specs when neither a dir nor a config file is given."""
        if specs_dir or config_file:
            return specs_dir
        return BUNDLED_SPECS_DIR
