"""Integration tests for startheme.

This package contains tests that drive the CLI end to end against a
temporary home directory.

Test Structure:
- test_cli_workflows.py: list, change, get and help commands
"""
