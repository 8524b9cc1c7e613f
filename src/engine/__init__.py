"""Reference dataset engine.

This module resolves the delegate runtime behind a reference dataset.
It builds the reference runtime descriptor and surfaces delegate status.
"""
