"""
roundtrip - DNS round-trip checker

Reads hosts and IP addresses from a CSV file, resolves each one forward
and reverse, and reports whether the two directions agree.
"""

__version__ = "1.0.0"
__author__ = "roundtrip"
