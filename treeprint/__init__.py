"""Compose trees and render them as ASCII text, by hand or from dataclasses."""

__version__ = "0.1.0"
__all__ = ["tree", "helpers", "structs"]