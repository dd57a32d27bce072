"""
Input data module.

Immutable containers for parsed level lists and the text parsers that
build them.
"""
