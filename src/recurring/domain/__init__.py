"""Domain layer — intervals, recurrences, and their date/time primitives.

This layer depends only on the standard library.
It must never import from config.
"""
