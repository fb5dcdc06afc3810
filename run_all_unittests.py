# run_all_unittests.py
import sys

import unittest


def main():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    # Add all unit tests recursively from the dtvs package; the spec suite
    # under dtvs/tests needs pytest options and runs through `dtvs run`
    suite.addTests(loader.discover(start_dir="dtvs", pattern="test_*.py", top_level_dir="."))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    # Return 0 if successful, 1 if failed
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(main())
