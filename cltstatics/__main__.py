import os
import sys
import unittest


def run_tests():
    # The test modules live in the 't' directory next to this file.
    start_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 't')
    if not os.path.isdir(start_dir):
        print("Error: Could not find the test directory.")
        sys.exit(1)

    loader = unittest.TestLoader()
    suite = loader.discover(start_dir, pattern='test_*.py')

    # verbosity=0 only prints the summary.
    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m cltstatics test")
