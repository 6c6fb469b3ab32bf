"""
Utility helpers shared across the building blocks.
"""
