"""Scraping of the public LinkedIn job search listing."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup, Tag

from .models import Job

__all__ = [
    "BASE_URL",
    "MAX_JOBS",
    "LinkedInError",
    "linkedin_headers",
    "build_search_url",
    "parse_linkedin_jobs",
    "monitor_linkedin",
]

log = logging.getLogger(__name__)

BASE_URL = "https://www.linkedin.com/jobs-guest/jobs/api/seeMoreJobPostings/search"
MAX_JOBS = 1000


class LinkedInError(RuntimeError):
    """Raised when a LinkedIn search page cannot be fetched."""


def linkedin_headers() -> dict[str, str]:
    """Return the browser-like headers sent with every search request."""
    return {
        "authority": "www.linkedin.com",
        "accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/avif,image/webp,image/apng,*/*;q=0.8"
        ),
        "accept-language": "en-US,en;q=0.9",
        "cache-control": "max-age=0",
        "upgrade-insecure-requests": "1",
        "user-agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
    }


def build_search_url(keywords: str, start: int) -> str:
    """Return the search URL for postings from the past hour, starting at ``start``."""
    params = {
        "location": "United States",
        "keywords": keywords,
        "f_TPR": "r3600",
        "start": str(start),
    }
    return f"{BASE_URL}?{urlencode(sorted(params.items()))}"


def _text(card: Tag, selector: str) -> str:
    return "".join(element.get_text() for element in card.select(selector)).strip()


def _attr(card: Tag, selector: str, name: str) -> str:
    element = card.select_one(selector)
    if element is None:
        return ""
    value = element.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else " ".join(value)


def parse_linkedin_jobs(html: str) -> list[Job]:
    """Extract the job cards from one page of search results."""
    soup = BeautifulSoup(html, "html.parser")
    return [
        Job(
            title=_text(card, "h3.base-search-card__title"),
            company=_text(card, "h4.base-search-card__subtitle"),
            location=_text(card, "span.job-search-card__location"),
            link=_attr(card, "a.base-card__full-link", "href"),
            time=_attr(card, "time.job-search-card__listdate--new", "datetime"),
        )
        for card in soup.select("div.base-search-card")
    ]


def monitor_linkedin(
    delay: int,
    keywords: str,
    session: requests.Session | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[Job]:
    """Collect recent postings for ``keywords``, page by page.

    Paging stops when a page adds no jobs or ``MAX_JOBS`` are collected.
    ``delay`` is the pause between pages in milliseconds.
    """
    owned = session is None
    client = requests.Session() if session is None else session
    jobs: list[Job] = []
    try:
        while True:
            url = build_search_url(keywords, len(jobs) + 1)
            try:
                response = client.get(url, headers=linkedin_headers())
            except requests.RequestException as exc:
                raise LinkedInError(f"sending request: {exc}") from exc
            with response:
                body = response.text

            page = parse_linkedin_jobs(body)
            jobs.extend(page)

            if not page or len(jobs) >= MAX_JOBS:
                log.info("Scraped %d total jobs.", len(jobs))
                break

            log.info("Scraped %d jobs so far.", len(jobs))
            sleep(delay / 1000)
    finally:
        if owned:
            client.close()
    return jobs