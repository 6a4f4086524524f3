"""
Capacity Extender.

Projects each employee's latest monthly capacity entry from a
semicolon-delimited roster onto a new target month.
"""

__version__ = "1.0.0"
