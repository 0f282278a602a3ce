"""Scrape LinkedIn internship postings and announce them on a Discord webhook."""

__version__ = "0.2.0"