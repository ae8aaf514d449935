"""Searchable clipboard history viewer (Qt6)"""

__version__ = "0.1.0"
