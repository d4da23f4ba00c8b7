"""
Crawler functionality for paginating listing sites and fetching product pages.
"""

from .listing_crawler import CrawlError, ListingCrawler
from .renderer import BrowserSession, PageSession, launch_browser
from .site import EBAY, SiteProfile

__all__ = [
    "ListingCrawler",
    "CrawlError",
    "BrowserSession",
    "PageSession",
    "launch_browser",
    "SiteProfile",
    "EBAY",
]
