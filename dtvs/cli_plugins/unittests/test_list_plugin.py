import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from dtvs.cli_plugins.base import BUNDLED_SPECS_DIR
from dtvs.cli_plugins.list_plugin import ListPlugin


class TestListPlugin(unittest.TestCase):
    """Test ListPlugin spec discovery"""

    def setUp(self):
        self.plugin = ListPlugin()

    def test_discover_bundled_specs(self):
        spec_map = self.plugin.discover_specs(BUNDLED_SPECS_DIR)
        self.assertIn("English", spec_map)
        self.assertIn("DateExtractor", spec_map["English"])
        self.assertEqual(spec_map["English"]["DateParser"].sub_type, "DateParser")

    def test_default_specs_dir(self):
        self.assertEqual(self.plugin.default_specs_dir(None), BUNDLED_SPECS_DIR)
        self.assertEqual(self.plugin.default_specs_dir("/data/Specs"), "/data/Specs")
        self.assertIsNone(self.plugin.default_specs_dir(None, "run.yaml"))

    def test_list_all_languages(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.plugin.list_specs(None)
        output = buf.getvalue()
        self.assertIn("Available specs:", output)
        self.assertIn("English:", output)
        self.assertIn("  - DateTimeModel", output)

    def test_list_one_language_with_counts(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.plugin.list_specs(None, language="English")
        output = buf.getvalue()
        self.assertIn("Available specs for English:", output)
        self.assertIn("  - DateExtractor (2 cases, 1 not supported)", output)

    def test_unknown_language_exits(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.plugin.list_specs(None, language="Klingon")
        self.assertEqual(ctx.exception.code, 1)

    def test_config_file_filters_languages(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            for language in ("English", "Spanish"):
                os.makedirs(os.path.join(tmpdir, "DateTime", language))
                with open(os.path.join(tmpdir, "DateTime", language, "DateExtractor.json"), "w") as f:
                    json.dump([], f)
            config_file = os.path.join(tmpdir, "run.json")
            with open(config_file, "w") as f:
                json.dump({"specs_dir": tmpdir, "languages": ["Spanish"]}, f)

            spec_map = self.plugin.load_specs(None, config_file)

        self.assertEqual(list(spec_map), ["Spanish"])

    def test_counts_use_configured_platform(self):
        cases = [
            {"Input": "I'll go back on 15", "Results": []},
            {"Input": "I'll go back on Oct/2", "NotSupported": "python", "Results": []},
        ]
        with tempfile.TemporaryDirectory() as tmpdir:
            os.makedirs(os.path.join(tmpdir, "DateTime", "English"))
            with open(os.path.join(tmpdir, "DateTime", "English", "DateExtractor.json"), "w") as f:
                json.dump(cases, f)
            config_file = os.path.join(tmpdir, "run.json")
            with open(config_file, "w") as f:
                json.dump({"specs_dir": tmpdir, "platform": "javascript"}, f)

            buf = io.StringIO()
            with redirect_stdout(buf):
                self.plugin.list_specs(None, config_file, language="English")

        self.assertIn("  - DateExtractor (2 cases)", buf.getvalue())

    def test_get_name(self):
        self.assertEqual(self.plugin.get_name(), "list")


if __name__ == "__main__":
    unittest.main()
