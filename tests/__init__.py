"""
Test package for the interface_contracts suite.

Test discovery is handled by pytest; shared fixtures live in conftest.py.
"""
