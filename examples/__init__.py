"""Example scripts for Folder Mirror.

Available examples:

basic_usage.py
    Configure a mirror, run passes by hand, inspect status, then let
    PeriodicSync drive it. Start here to understand the core workflow.

Run:
    python examples/basic_usage.py
"""
