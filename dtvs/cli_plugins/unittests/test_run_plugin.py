import unittest
from unittest.mock import MagicMock, patch

from dtvs.cli_plugins.base import BUNDLED_SPECS_DIR
from dtvs.cli_plugins.run_plugin import PACKAGE_PARENT, SPEC_SUITE, RunPlugin


class TestRunPlugin(unittest.TestCase):
    def setUp(self):
        self.plugin = RunPlugin()

    def make_args(self, **overrides):
        args = MagicMock()
        args.specs_dir = "/data/Specs"
        args.config_file = None
        args.language = []
        args.sub_type = []
        args.debug_breakpoints = False
        args.html = None
        args.self_contained_html = False
        args.log_file = "/tmp/dtvs/test.log"
        args.log_level = None
        args.capture = None
        args.extra_pytest_args = []
        for key, value in overrides.items():
            setattr(args, key, value)
        return args

    @patch("dtvs.cli_plugins.run_plugin.os.makedirs")
    @patch("dtvs.cli_plugins.run_plugin.pytest.main")
    @patch("dtvs.cli_plugins.run_plugin.sys.exit")
    def test_run_with_filters(self, mock_exit, mock_pytest_main, mock_makedirs):
        """Test language/sub-type filters are passed to the spec suite"""
        mock_pytest_main.return_value = 0

        self.plugin.run(
            self.make_args(language=["English", "Spanish"], sub_type=["DateParser"], capture="tee-sys")
        )

        expected_args = [
            SPEC_SUITE,
            f"--confcutdir={PACKAGE_PARENT}",
            "--specs_dir=/data/Specs",
            "--language=English",
            "--language=Spanish",
            "--sub_type=DateParser",
            "--log-file=/tmp/dtvs/test.log",
            "--capture=tee-sys",
        ]
        mock_pytest_main.assert_called_once_with(expected_args)
        mock_makedirs.assert_called_once_with("/tmp/dtvs", exist_ok=True)
        mock_exit.assert_called_once_with(0)

    @patch("dtvs.cli_plugins.run_plugin.os.makedirs")
    @patch("dtvs.cli_plugins.run_plugin.pytest.main")
    @patch("dtvs.cli_plugins.run_plugin.sys.exit")
    def test_run_defaults_to_bundled_specs_with_report(self, mock_exit, mock_pytest_main, mock_makedirs):
        mock_pytest_main.return_value = 1

        self.plugin.run(
            self.make_args(
                specs_dir=None,
                html="report.html",
                self_contained_html=True,
                debug_breakpoints=True,
                extra_pytest_args=["-k", "DateParser"],
            )
        )

        expected_args = [
            SPEC_SUITE,
            f"--confcutdir={PACKAGE_PARENT}",
            f"--specs_dir={BUNDLED_SPECS_DIR}",
            "--debug_breakpoints",
            "--html=report.html",
            "--self-contained-html",
            "--log-file=/tmp/dtvs/test.log",
            "-k",
            "DateParser",
        ]
        mock_pytest_main.assert_called_once_with(expected_args)
        mock_exit.assert_called_once_with(1)

    @patch("dtvs.cli_plugins.run_plugin.pytest.main")
    def test_missing_config_file_exits(self, mock_pytest_main):
        with patch("sys.stdout"):
            with self.assertRaises(SystemExit) as ctx:
                self.plugin.run(self.make_args(specs_dir=None, config_file="/nope/run.yaml"))
        self.assertEqual(ctx.exception.code, 1)
        mock_pytest_main.assert_not_called()

    def test_get_name(self):
        self.assertEqual(self.plugin.get_name(), "run")


if __name__ == "__main__":
    unittest.main()
