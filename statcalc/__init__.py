"""
Statistics Calculator v1.0.0

Desktop tool for quick descriptive statistics on a typed list of numbers.
Computes count, sum, mean, median, mode, population standard deviation
and variance, range, quartiles and IQR, keeps a rolling history of the
last ten calculations, plots the raw values as a bar chart, and
evaluates a point probability density for a chosen distribution.
"""

APP_NAME = "Statistics Calculator"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-19"
__version__ = APP_VERSION
