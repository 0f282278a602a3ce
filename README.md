# internmonitor

A small service that scrapes LinkedIn's public job search for fresh postings
that match your keywords and posts them as embeds to a Discord webhook.

## What it does

- Searches the past hour of LinkedIn postings in the United States for each
  configured keyword. It pages through the results, pausing `DELAY`
  milliseconds between pages, until a page brings no job cards or 1000 jobs
  have been collected.
- Drops duplicate postings across keywords. Two links count as the same job
  when they match once the query string is removed.
- Sends the jobs to a Discord webhook as the user "Job Monitor", at most ten
  embeds per message, with a four-second pause between messages. Each embed
  shows the title (linked to the posting), company, location and posting date.
- Skips postings from the aggregators "Jobs via Dice", Lensa and Jobot.
- Mentions a role in a message whose batch holds a posting from a well-known
  tech company (see `TOP_TECH_COMPANIES` in `internmonitor.models`).
- Runs a scraping cycle at startup and then once every hour, each in a
  background thread.
- Runs an HTTP health-check server that answers `Bot is running.` to any
  GET, HEAD or POST request.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from the environment. A `.env` file in the working
directory is loaded too; variables already set in the environment win.

| Variable      | Meaning                                                     |
|---------------|-------------------------------------------------------------|
| `DELAY`       | Milliseconds to wait between result pages (required)        |
| `KEYWORDS`    | Comma-separated search keywords, e.g. `software intern,swe` |
| `LINKEDINWH`  | Discord webhook URL that receives LinkedIn postings         |
| `GLASSDOORWH` | Read into `Config.glassdoor_wh`; nothing uses it            |
| `POSTGRESQL_TOKEN` | Read into `Config.postgresql_token`; nothing uses it   |
| `PORT`        | Port for the health-check server (default `8080`)           |

`internmonitor.config.load()` raises `ConfigError` if `DELAY` is missing or is
not a whole number from 0 to 4294967295. The `internmonitor` command logs the
error and exits with status 1 in that case.

Example `.env`:

```
DELAY=1500
KEYWORDS=software engineering intern,data science intern
LINKEDINWH=https://discord.example.com/api/webhooks/placeholder
```

## Running

```
internmonitor
```

The command takes no options besides `--help`. It runs until interrupted
with Ctrl-C.

## Using it as a library

```python
from internmonitor.config import load
from internmonitor.linkedin import monitor_linkedin
from internmonitor.notifier import send_discord_embeds

cfg = load(".env")
jobs = monitor_linkedin(cfg.delay, "software intern")
send_discord_embeds(cfg.linkedin_wh, jobs)
```

Other pieces:

- `internmonitor.models`: the `Job` dataclass (`title`, `location`,
  `company`, `link`, `time`) and `is_prestigious(company)` /
  `is_blacklisted(company)`, which ignore case.
- `internmonitor.linkedin`: `parse_linkedin_jobs(html)` turns a page of search
  results into `Job` objects; `build_search_url(keywords, start)` and
  `linkedin_headers()` give the request used for each page. Network failures
  raise `LinkedInError`.
- `internmonitor.notifier`: `job_embed(job, timestamp)` builds one `Embed`;
  `send_webhook(url, embeds, ping, session)` posts one message. A failed post
  or a status of 300 or above raises `WebhookError`.
- `internmonitor.app`: `append_unique_jobs(base, to_add, seen)` returns a new
  list with the jobs whose links are not yet in `seen`, and updates `seen`;
  `run_linkedin_cycle(cfg, session)` scrapes every keyword, sends the unique
  jobs and returns them; `serve_health_check(port)` starts the health-check
  server in a background thread and returns it.

`monitor_linkedin`, `send_webhook`, `send_discord_embeds` and
`run_linkedin_cycle` accept an optional `requests.Session`.

## What it does not do

- Only LinkedIn is scraped. There is no Glassdoor scraper, so `GLASSDOORWH`
  receives nothing.
- Nothing is stored between cycles. Duplicates are only dropped within one
  cycle, and the search covers the past hour, so a posting can be announced
  again in a later cycle.
- There is no Discord bot; messages go out through the webhook alone.