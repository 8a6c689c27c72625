"""Command-line entry point and small developer helpers.

:mod:`cli` runs an analysis from the terminal, :mod:`formatting` renders
roots and ticks as text, and :mod:`debug` provides opt-in timing.
"""
