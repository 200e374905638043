"""Pytest configuration: register custom markers."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests that rebuild the table from real UCD files in data/ucd"
    )
