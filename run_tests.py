#!/usr/bin/env python3
"""
Main test runner for the bytelex scanner.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_sample():
    """Scan the built-in sample and show the token stream."""

    print("bytelex Scanner Test Suite")
    print("=" * 60)

    try:
        from bytelex.lexer import Lexer
        from bytelex.cli import SAMPLE_SOURCE, format_result
    except ImportError as e:
        print(f"Failed to import scanner modules: {e}")
        return False

    result = Lexer(SAMPLE_SOURCE, "<sample>").scan()
    print(format_result(result))
    print("-" * 60)
    return True


def run_all_tests():
    """Run the sample and every test module under tests/."""
    if not run_sample():
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), top_level_dir=project_root)
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
