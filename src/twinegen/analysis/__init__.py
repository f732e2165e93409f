"""Static analysis of code that calls generated translation modules.

Python 3.13+.
"""

from .references import KeyReference, check_references, find_references

__all__ = ["KeyReference", "check_references", "find_references"]
