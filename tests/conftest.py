"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path, so tests import ``region_ruler`` and the
shared helpers under ``tests.unit`` without installing the package.
"""
