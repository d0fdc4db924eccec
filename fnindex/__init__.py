"""
Cross-file function index for require()-style JavaScript trees.
"""

__version__ = "0.1.0"
