"""Converters between anygraph graphs and other graph libraries.

Adapters import their third-party library on first use, so importing
this package never requires the optional dependencies.
"""
