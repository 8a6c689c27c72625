"""Data input/output helpers.

- :mod:`log_loader` reads sample series from CSV files.
- :mod:`csv_writer` writes zeros/poles, Bode curves, candles and series.
"""
