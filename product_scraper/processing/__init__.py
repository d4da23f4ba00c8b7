"""
Processing package for the product scraper.

This package contains post-processing applied to scraped records.
"""

from .normalizer import normalize_record, normalize_records

__all__ = [
    "normalize_record",
    "normalize_records",
]
