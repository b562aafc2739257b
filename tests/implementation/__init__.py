"""Reference implementations used by the test suite."""
