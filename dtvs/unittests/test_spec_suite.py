import importlib.util
import subprocess
import sys
import unittest

from dtvs.cli_plugins.base import BUNDLED_SPECS_DIR
from dtvs.cli_plugins.run_plugin import PACKAGE_PARENT, SPEC_SUITE

RECOGNIZERS_INSTALLED = importlib.util.find_spec("recognizers_date_time") is not None


@unittest.skipUnless(RECOGNIZERS_INSTALLED, "recognizers-text-date-time not installed")
class TestBundledSpecSuite(unittest.TestCase):
    """Run the pytest spec suite over the bundled sample specs"""

    def run_suite(self, *args):
        # Separate interpreter so the suite's conftest options register on a fresh pytest config
        cmd = [
            sys.executable,
            "-m",
            "pytest",
            SPEC_SUITE,
            f"--confcutdir={PACKAGE_PARENT}",
            "-p",
            "no:cacheprovider",
            "-q",
            *args,
        ]
        return subprocess.run(cmd, cwd=PACKAGE_PARENT, capture_output=True, text=True)

    def test_bundled_specs_pass(self):
        result = self.run_suite(f"--specs_dir={BUNDLED_SPECS_DIR}")
        self.assertEqual(result.returncode, 0, result.stdout + result.stderr)
        self.assertIn("passed", result.stdout)
        self.assertNotIn("failed", result.stdout)

    def test_language_filter_without_matches_runs_nothing(self):
        result = self.run_suite(f"--specs_dir={BUNDLED_SPECS_DIR}", "--language=Klingon")
        # An empty selection leaves a single skipped placeholder test
        self.assertEqual(result.returncode, 0, result.stdout + result.stderr)
        self.assertNotIn("passed", result.stdout)
        self.assertIn("skipped", result.stdout)


if __name__ == "__main__":
    unittest.main()
