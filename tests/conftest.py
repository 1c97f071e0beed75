"""
Pytest configuration shared by the test suite.
"""


def pytest_configure(config):
    config.addinivalue_line("markers", "regression: checks against sample corpus data")
