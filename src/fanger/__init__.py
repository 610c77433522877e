"""
Fanger - File Ranger

A keyboard-driven terminal file manager with Miller columns, tabs and
background file operations. Inspired by ranger.

Created: 2025-11-07
"""

__version__ = "0.1.0"
__author__ = "Ryan Young"
