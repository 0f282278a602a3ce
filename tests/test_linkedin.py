from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from internmonitor.linkedin import (
    BASE_URL,
    MAX_JOBS,
    LinkedInError,
    build_search_url,
    linkedin_headers,
    monitor_linkedin,
    parse_linkedin_jobs,
)
from internmonitor.models import Job


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def card(title, company="Acme", location="Austin, TX", link=None, posted=None):
    link_html = f'<a class="base-card__full-link" href="{link}">view</a>' if link else ""
    time_html = (
        f'<time class="job-search-card__listdate--new" datetime="{posted}">1h</time>'
        if posted
        else ""
    )
    return (
        '<div class="base-card base-search-card">'
        f"{link_html}"
        f'<h3 class="base-search-card__title">\n  {title}\n</h3>'
        f'<h4 class="base-search-card__subtitle"> {company} </h4>'
        f'<span class="job-search-card__location">  {location}</span>'
        f"{time_html}"
        "</div>"
    )


def page(*cards):
    return "<ul>" + "".join(f"<li>{c}</li>" for c in cards) + "</ul>"


def start_of(call):
    return parse_qs(urlsplit(call.request.url).query)["start"]


def test_headers_include_user_agent_and_language():
    headers = linkedin_headers()
    assert headers["authority"] == "www.linkedin.com"
    assert headers["accept-language"] == "en-US,en;q=0.9"
    assert headers["user-agent"].startswith("Mozilla/5.0")


def test_build_search_url_query():
    url = build_search_url("software intern", 11)
    assert url.startswith(BASE_URL + "?")
    query = parse_qs(urlsplit(url).query)
    assert query == {
        "location": ["United States"],
        "keywords": ["software intern"],
        "f_TPR": ["r3600"],
        "start": ["11"],
    }
    assert "location=United+States" in url


def test_build_search_url_keys_sorted():
    query = urlsplit(build_search_url("x", 1)).query
    keys = [part.split("=")[0] for part in query.split("&")]
    assert keys == sorted(keys)


def test_parse_full_card():
    html = page(card("Intern", "Google", "NYC", "https://example.com/j/1?x=1", "2024-06-01"))
    assert parse_linkedin_jobs(html) == [
        Job(
            title="Intern",
            location="NYC",
            company="Google",
            link="https://example.com/j/1?x=1",
            time="2024-06-01",
        )
    ]


def test_parse_missing_link_and_time_are_empty():
    jobs = parse_linkedin_jobs(page(card("Intern")))
    assert len(jobs) == 1
    assert jobs[0].link == ""
    assert jobs[0].time == ""
    assert jobs[0].title == "Intern"


def test_parse_ignores_other_elements():
    html = '<div class="other"><h3 class="base-search-card__title">No</h3></div>' + page(
        card("A"), card("B")
    )
    assert [job.title for job in parse_linkedin_jobs(html)] == ["A", "B"]


def test_parse_empty_page():
    assert parse_linkedin_jobs("") == []


def test_monitor_pages_until_empty(mocked):
    mocked.add(responses.GET, BASE_URL, body=page(card("A"), card("B")))
    mocked.add(responses.GET, BASE_URL, body=page())
    sleeps = []
    jobs = monitor_linkedin(250, "intern", sleep=sleeps.append)
    assert [job.title for job in jobs] == ["A", "B"]
    assert len(mocked.calls) == 2
    assert start_of(mocked.calls[0]) == ["1"]
    assert start_of(mocked.calls[1]) == ["3"]
    assert sleeps == [0.25]


def test_monitor_stops_at_limit(mocked):
    half = MAX_JOBS // 2
    mocked.add(responses.GET, BASE_URL, body=page(*(card(f"J{n}") for n in range(half))))
    jobs = monitor_linkedin(0, "intern", sleep=lambda seconds: None)
    assert len(jobs) == MAX_JOBS
    assert len(mocked.calls) == 2


def test_monitor_sends_headers_and_keywords(mocked):
    mocked.add(responses.GET, BASE_URL, body=page())
    with requests.Session() as session:
        assert monitor_linkedin(0, "data science", session=session) == []
    request = mocked.calls[0].request
    assert request.headers["accept-language"] == "en-US,en;q=0.9"
    assert parse_qs(urlsplit(request.url).query)["keywords"] == ["data science"]


def test_monitor_network_error(mocked):
    mocked.add(responses.GET, BASE_URL, body=requests.ConnectionError("down"))
    with pytest.raises(LinkedInError, match="sending request"):
        monitor_linkedin(0, "intern")