# sub_core/__init__.py
"""Core subtitle handling: ASS parsing, editing and writing."""

__version__ = '0.1.0'
