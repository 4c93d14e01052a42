"""
Fortune K-Line - Zodiac Fortune Series Generator

Synthesizes a ten-year monthly "fortune" candlestick series from a birth
date and its Chinese zodiac sign, renders it as an ECharts candlestick
chart and composes a short first-year narrative. The values are synthetic
pseudo-random data with cosmetic structure.
"""

__version__ = "0.1.0"
__author__ = "Fortune K-Line Team"
