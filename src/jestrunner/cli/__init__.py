"""jestrunner command line interface."""
