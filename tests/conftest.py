"""Shared pytest configuration for the NavTreeLib test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: traversals of very large trees")
