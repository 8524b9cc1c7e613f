"""Resource access layer.

This module reads datasets, runtime resources, and runtime status.
It hides the concrete resource store behind a key-based accessor.
"""
