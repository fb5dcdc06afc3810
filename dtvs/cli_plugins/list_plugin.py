import sys

from .base import SubcommandPlugin
from dtvs.parsers.schemas import resolve_run_config
from dtvs.parsers.spec_loader import SpecFileParser, discover_spec_files


class ListPlugin(SubcommandPlugin):
    @staticmethod
    def discover_specs(specs_dir, config_file=None):
        """
        Discover spec files organized by language.
        Returns a nested dict: {language: {sub_type: SpecFile}}
        """
        run_config = resolve_run_config(config_file=config_file, specs_dir=specs_dir)
        spec_map = {}
        if not run_config.specs_dir:
            return spec_map

        for spec_file in discover_spec_files(run_config.specs_dir, run_config.languages, run_config.sub_types):
            spec_map.setdefault(spec_file.language, {})[spec_file.sub_type] = spec_file
        return spec_map

    def load_specs(self, specs_dir, config_file=None):
        try:
            return self.discover_specs(self.default_specs_dir(specs_dir, config_file), config_file)
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    def load_run_config(self, specs_dir, config_file=None):
        try:
            return resolve_run_config(config_file=config_file, specs_dir=self.default_specs_dir(specs_dir, config_file))
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    def list_specs(self, specs_dir, config_file=None, language=None, platform=None):
        spec_map = self.load_specs(specs_dir, config_file)

        if language:
            # List sub-types of one language with their case counts
            if language not in spec_map:
                print(f"Error: Unknown language '{language}'")
                print("Use 'dtvs list' to see available languages.")
                sys.exit(1)

            # NotSupported lists are matched against the configured platform
            if platform is None:
                platform = self.load_run_config(specs_dir, config_file).platform

            print(f"\nAvailable specs for {language}:")
            for sub_type in sorted(spec_map[language]):
                parsed = SpecFileParser(spec_map[language][sub_type], platform=platform).parse()
                line = f"  - {sub_type} ({len(parsed.results)} cases"
                if parsed.metadata.get("skipped"):
                    line += f", {parsed.metadata['skipped']} not supported"
                if parsed.errors:
                    line += f", {len(parsed.errors)} invalid"
                print(line + ")")
        else:
            print("Available specs:")
            for lang in sorted(spec_map):
                print(f"{lang}:")
                for sub_type in sorted(spec_map[lang]):
                    print(f"  - {sub_type}")
                print()  # Blank line between languages

    def get_name(self):
        return "list"

    def get_order(self):
        return 10

    def get_parser(self, subparsers):
        parser = subparsers.add_parser("list", help="List available spec files")
        parser.add_argument("language", nargs="?", help="Optional: list sub-types and case counts for one language")
        self.add_specs_arguments(parser)
        parser.set_defaults(_plugin=self)
        return parser

    def get_epilog(self):
        return """
List Commands:
  dtvs list                                  List bundled sample spec files
  dtvs list --specs_dir ~/Specs              List all spec files under a Specs tree
  dtvs list English --specs_dir ~/Specs      List English sub-types with case counts"""

    def run(self, args):
        self.list_specs(args.specs_dir, args.config_file, args.language)
