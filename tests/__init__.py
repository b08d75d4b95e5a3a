"""
Test package for the fitness score API.

Test Organization:
    unit/: Unit tests for models, services and Lambda handlers
    conftest.py: Pytest configuration and shared fixtures
"""
