"""
API module for the product scraper.

This module contains the FastAPI application and the helper used to run it
with uvicorn.
"""

from .app import app, start_server

__all__ = ["app", "start_server"]
