"""Discord webhook notifications for scraped jobs."""

from __future__ import annotations

import json
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import requests

from .models import Job, is_blacklisted, is_prestigious

__all__ = [
    "EmbedField",
    "EmbedFooter",
    "Embed",
    "WebhookPayload",
    "WebhookError",
    "job_embed",
    "send_webhook",
    "send_discord_embeds",
    "MAX_EMBEDS_PER_MESSAGE",
    "EMBED_COLOR",
    "RATE_LIMIT_DELAY",
]

MAX_EMBEDS_PER_MESSAGE = 10
EMBED_COLOR = 0x000000
RATE_LIMIT_DELAY = 4.0
FOOTER_TEXT = "CYUN v0.2"
WEBHOOK_USERNAME = "Job Monitor"
PING_CONTENT = "<@&1385352630447902771>"


class WebhookError(RuntimeError):
    """Raised when a webhook message cannot be delivered."""


@dataclass
class EmbedField:
    name: str
    value: str
    inline: bool = False


@dataclass
class EmbedFooter:
    text: str = ""
    icon_url: str = ""


@dataclass
class Embed:
    title: str
    description: str = ""
    url: str = ""
    color: int = 0
    fields: list[EmbedField] = field(default_factory=list)
    timestamp: str = ""
    footer: EmbedFooter | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty optional members."""
        data: dict[str, Any] = {"title": self.title}
        if self.description:
            data["description"] = self.description
        if self.url:
            data["url"] = self.url
        if self.color:
            data["color"] = self.color
        if self.fields:
            data["fields"] = [
                {"name": f.name, "value": f.value, "inline": f.inline} for f in self.fields
            ]
        if self.timestamp:
            data["timestamp"] = self.timestamp
        if self.footer is not None:
            footer: dict[str, str] = {}
            if self.footer.text:
                footer["text"] = self.footer.text
            if self.footer.icon_url:
                footer["icon_url"] = self.footer.icon_url
            data["footer"] = footer
        return data


@dataclass
class WebhookPayload:
    embeds: list[Embed] = field(default_factory=list)
    content: str = ""
    username: str = ""
    avatar_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; an empty embed list is sent as null."""
        data: dict[str, Any] = {}
        if self.content:
            data["content"] = self.content
        if self.username:
            data["username"] = self.username
        if self.avatar_url:
            data["avatar_url"] = self.avatar_url
        data["embeds"] = [embed.to_dict() for embed in self.embeds] or None
        return data


def _rfc3339(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def job_embed(job: Job, timestamp: datetime | None = None) -> Embed:
    """Build the embed announcing one job."""
    moment = timestamp if timestamp is not None else datetime.now(timezone.utc)
    return Embed(
        title=job.title,
        url=job.link,
        color=EMBED_COLOR,
        fields=[
            EmbedField("Company", job.company, True),
            EmbedField("Location", job.location, True),
            EmbedField("Posted", job.time, True),
        ],
        timestamp=_rfc3339(moment),
        footer=EmbedFooter(text=FOOTER_TEXT),
    )


def send_webhook(
    url: str,
    embeds: list[Embed],
    ping: bool = False,
    session: requests.Session | None = None,
) -> None:
    """Post one message carrying ``embeds`` to a Discord webhook."""
    payload = WebhookPayload(
        embeds=embeds,
        username=WEBHOOK_USERNAME,
        content=PING_CONTENT if ping else "",
    )
    body = json.dumps(payload.to_dict())
    client = session if session is not None else requests
    try:
        response = client.post(url, data=body, headers={"Content-Type": "application/json"})
    except requests.RequestException as exc:
        raise WebhookError(f"failed to send webhook: {exc}") from exc
    with response:
        if response.status_code >= 300:
            raise WebhookError(f"webhook failed: status {response.status_code}")


def send_discord_embeds(
    webhook_url: str,
    jobs: Iterable[Job],
    session: requests.Session | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Announce jobs in batches of up to ten embeds per message.

    Blacklisted companies are skipped. A batch containing a top-tech company
    pings the role. Batches are spaced out to respect Discord rate limits.
    """
    job_list = list(jobs)
    batch: list[Embed] = []
    should_ping = False

    for index, job in enumerate(job_list):
        if not is_blacklisted(job.company):
            batch.append(job_embed(job))
        if is_prestigious(job.company):
            should_ping = True

        is_last = index == len(job_list) - 1
        if len(batch) == MAX_EMBEDS_PER_MESSAGE or is_last:
            send_webhook(webhook_url, batch, should_ping, session)
            batch = []
            should_ping = False
            if not is_last:
                sleep(RATE_LIMIT_DELAY)