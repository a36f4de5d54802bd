#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/utils/__init__.py
"""Utility modules for the mdsnow package."""

from mdsnow.utils.regions import map_outside_regions, split_regions

__all__ = [
    "map_outside_regions",
    "split_regions",
]
