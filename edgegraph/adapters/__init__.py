"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the toolkit to external record sources such as
delimited text files.
"""
