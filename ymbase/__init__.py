"""Small building blocks: JSON value trees and output, union-find, option strings, shared strings, a position-tracking scanner, DOT output and message handling."""

__version__ = "0.1.0"