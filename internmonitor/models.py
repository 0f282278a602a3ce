"""Job records and the company lists used to filter and highlight them."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Job",
    "BLACKLIST",
    "TOP_TECH_COMPANIES",
    "is_prestigious",
    "is_blacklisted",
]


@dataclass(frozen=True)
class Job:
    """A single job posting scraped from a job board."""

    title: str = ""
    location: str = ""
    company: str = ""
    link: str = ""
    time: str = ""


BLACKLIST: frozenset[str] = frozenset({"jobs via dice", "lensa", "jobot"})

TOP_TECH_COMPANIES: frozenset[str] = frozenset(
    {
        "google", "meta", "apple", "microsoft", "amazon",
        "nvidia", "openai", "tesla", "palantir", "stripe",
        "databricks", "snowflake", "linkedin", "samsung", "tiktok",
        "bytedance", "netflix", "adobe", "intel", "amd",
        "oracle", "salesforce", "airbnb", "uber", "lyft",
        "dropbox", "snap", "pinterest", "doordash", "robinhood",
        "coinbase", "square", "block", "zendesk", "asana",
        "twilio", "github", "digitalocean", "shopify", "spotify",
        "qualcomm", "huawei", "tencent", "baidu", "alibaba",
        "ibm", "dell", "hp", "cisco", "red hat",
        "cloudflare", "figma", "notion", "monday.com", "atlassian",
        "zapier", "intercom", "splunk", "elastic", "fastly",
        "unity", "epic games", "riot games", "blizzard", "valve",
        "rovi", "arm", "marvell", "synopsys",
        "keysight", "ni", "luminar", "waymo", "cruise",
        "zoox", "niantic", "replit", "hugging face", "scale ai",
        "anthropic", "runway", "mistral ai", "perplexity", "character.ai",
        "stability ai", "skydio", "anduril", "spacex", "blue origin",
        "rocket lab", "relativity space", "calm", "headspace", "duolingo",
        "coursera", "khan academy", "chegg", "udemy", "edx",
        "naver", "line", "kakao", "grab", "gojek",
        "booking.com", "expedia", "yelp", "tripadvisor", "zillow",
        "glassdoor", "indeed", "monster", "okta", "auth0",
        "dashlane", "1password", "lastpass", "bitwarden", "samsara",
        "cloudera", "confluent", "mongodb", "couchbase", "datastax",
        "c3.ai", "verkada", "rippling", "gusto", "brex",
        "plaid", "robin", "nuro", "aurora", "embark",
        "argo ai", "argo", "dataminr", "pagerduty",
        "sendbird", "segment", "postman", "new relic", "sentry",
        "bugsnag", "launchdarkly", "circleci", "travis ci", "vercel",
        "netlify", "heroku", "render", "fly.io", "supabase",
        "firebase", "backblaze", "wasabi", "digital ocean", "linode",
        "vultr", "alation", "collibra", "domo", "tableau",
        "looker", "mode", "hex", "preset", "thoughtspot",
        "airbyte", "fivetran", "census", "rudderstack", "apache",
        "jetbrains", "intellij", "pycharm", "goland", "eclipse",
        "vs code", "visual studio", "docker", "kubernetes", "terraform",
        "ansible", "chef", "puppet", "hashicorp", "redpanda",
    }
)


def is_prestigious(company: str) -> bool:
    """Return True if the company is on the top-tech list (case-insensitive)."""
    return company.lower() in TOP_TECH_COMPANIES


def is_blacklisted(company: str) -> bool:
    """Return True if postings from this company should be dropped."""
    return company.lower() in BLACKLIST