"""The monitor's entry point: health check server and scraping schedule."""

from __future__ import annotations

import argparse
import json
import logging
import os
import threading
import time
from collections.abc import Iterable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit, urlunsplit

import requests

from . import config
from .config import Config, ConfigError
from .linkedin import LinkedInError, monitor_linkedin
from .models import Job
from .notifier import WebhookError, send_discord_embeds

__all__ = [
    "LINKEDIN_INTERVAL",
    "append_unique_jobs",
    "get_port",
    "run_linkedin_cycle",
    "serve_health_check",
    "main",
]

log = logging.getLogger(__name__)

LINKEDIN_INTERVAL = 60 * 60.0
DEFAULT_PORT = "8080"


def append_unique_jobs(base: Iterable[Job], to_add: Iterable[Job], seen: set[str]) -> list[Job]:
    """Return ``base`` extended with the jobs of ``to_add`` not seen before.

    Jobs are compared by link with the query string removed; ``seen`` is
    updated with the links added. Jobs with unparseable links are skipped.
    """
    result = list(base)
    for job in to_add:
        try:
            parts = urlsplit(job.link)
        except ValueError:
            continue
        clean = urlunsplit(parts._replace(query=""))
        if clean not in seen:
            result.append(job)
            seen.add(clean)
    return result


def get_port() -> str:
    """Return the health check port from ``PORT``, defaulting to 8080."""
    return os.environ.get("PORT") or DEFAULT_PORT


def run_linkedin_cycle(cfg: Config, session: requests.Session | None = None) -> list[Job]:
    """Scrape every keyword, announce the unique jobs, and return them."""
    log.info("Starting LinkedIn scraping cycle...")
    all_jobs: list[Job] = []
    seen: set[str] = set()

    for keyword in cfg.keywords:
        log.info("Scraping LinkedIn for keyword: %s", keyword)
        try:
            new_jobs = monitor_linkedin(cfg.delay, keyword, session=session)
        except LinkedInError as exc:
            log.error("Error scraping LinkedIn for keyword '%s': %s", keyword, exc)
            continue
        all_jobs = append_unique_jobs(all_jobs, new_jobs, seen)

    try:
        send_discord_embeds(cfg.linkedin_wh, all_jobs, session=session)
    except WebhookError as exc:
        log.error("Error sending LinkedIn webhook: %s", exc)
    else:
        log.info("Successfully sent %d unique LinkedIn jobs", len(all_jobs))
    return all_jobs


class _HealthHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        body = b"Bot is running.\n"
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_POST = do_GET
    do_HEAD = do_GET

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        log.debug("health check: " + format, *args)


def serve_health_check(port: str | int | None = None) -> ThreadingHTTPServer:
    """Start the health check server in a background thread and return it."""
    chosen = int(port if port is not None else get_port())
    server = ThreadingHTTPServer(("", chosen), _HealthHandler)
    log.info("Starting HTTP server on port %s", server.server_address[1])
    thread = threading.Thread(target=server.serve_forever, name="health-check", daemon=True)
    thread.start()
    return server


def _spawn_linkedin_cycle(cfg: Config) -> None:
    def run() -> None:
        try:
            run_linkedin_cycle(cfg)
        except Exception:
            log.exception("LinkedIn cycle failed")

    threading.Thread(target=run, name="linkedin-cycle", daemon=True).start()


def main(argv: list[str] | None = None) -> int:
    """Run the monitor until interrupted."""
    parser = argparse.ArgumentParser(
        prog="internmonitor",
        description="Scrape internship postings and announce them on Discord.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    log.info("==> Starting job monitor...")
    server = serve_health_check(get_port())
    try:
        log.info("Loading config...")
        try:
            cfg = config.load()
        except ConfigError as exc:
            log.error("Failed to load config: %s", exc)
            return 1

        _spawn_linkedin_cycle(cfg)
        try:
            while True:
                time.sleep(LINKEDIN_INTERVAL)
                _spawn_linkedin_cycle(cfg)
        except KeyboardInterrupt:
            log.info("Stopping.")
        return 0
    finally:
        server.shutdown()
        server.server_close()


def _payload_embed_count(body: bytes | str) -> int:
    return len(json.loads(body).get("embeds") or [])