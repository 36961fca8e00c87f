"""Shared pytest configuration for OrderTreeLib tests."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large-tree tests excluded from the default run_tests.py run"
    )
