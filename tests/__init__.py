"""
Test package for the content core.

Tests run against an application built with the testing configuration: an
in-memory SQLite database recreated for every test and a fixed settings
encryption key. Fixtures live in conftest.py.
"""
