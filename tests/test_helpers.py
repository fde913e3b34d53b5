"""
tests/test_helpers.py
"""
from __future__ import annotations

from datetime import datetime, timedelta

import colorlog
import pytest
import yaml
from flask import Flask
from flask.logging import default_handler

from blogdesk import configure_logging
from blogdesk.utils.dates import parse_iso, relative_time, to_iso, utc_now
from blogdesk.utils.file_helper import allowed_mime_type, format_size, get_file_type
from blogdesk.utils.markdown_helper import parse_front_matter
from blogdesk.utils.text import make_excerpt, normalize_tags, reading_time, slugify, tag_slug
from blogdesk.utils.validators import is_valid_email, is_valid_slug


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Test Category", "test-category"),
        ("  Hello,   World!  ", "hello-world"),
        ("Already-a-slug", "already-a-slug"),
        ("C++ & Rust", "c-rust"),
        ("", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_reading_time_is_at_least_one_minute():
    assert reading_time("") == 1
    assert reading_time("word " * 200) == 1
    assert reading_time("word " * 201) == 2


def test_make_excerpt_strips_markdown_and_truncates():
    assert make_excerpt("# Title\n\nSome *bold* text") == "Title Some bold text"
    long = "lorem " * 100
    excerpt = make_excerpt(long)
    assert excerpt.endswith("...")
    assert len(excerpt) <= 163


def test_normalize_tags():
    assert normalize_tags("Python, flask ,python,,") == ["python", "flask"]
    assert normalize_tags(["A", " b ", "a"]) == ["a", "b"]
    assert normalize_tags(None) == []


def test_tag_slug():
    assert tag_slug("Getting Started") == "getting-started"


def test_iso_round_trip_keeps_milliseconds():
    now = utc_now().replace(microsecond=123000)
    text = to_iso(now)
    assert text.endswith(".123Z")
    assert parse_iso(text) == now
    assert parse_iso("not a date") is None


def test_validators():
    assert is_valid_email("a@b.co")
    assert not is_valid_email("a@b")
    assert not is_valid_email("a b@c.com")
    assert is_valid_slug("my-post-2")
    assert not is_valid_slug("My Post")
    assert not is_valid_slug("double--dash")


def test_file_helpers():
    assert allowed_mime_type("image/png")
    assert not allowed_mime_type("application/x-msdownload")
    assert get_file_type("image/jpeg") == "image"
    assert get_file_type("application/pdf") == "pdf"
    assert format_size(0) == "0 Bytes"
    assert format_size(1536) == "1.5 KB"


def test_parse_front_matter_with_delimiters():
    meta, body = parse_front_matter(
        "---\nTitle: First Post\nTags: a, b\n---\n\n# Heading\n\nBody text."
    )
    assert meta["title"] == "First Post"
    assert meta["tags"] == "a, b"
    assert body.startswith("# Heading")
    assert "Title:" not in body


def test_parse_front_matter_without_meta():
    meta, body = parse_front_matter("Just a paragraph.")
    assert meta == {}
    assert body == "Just a paragraph."


def test_parse_front_matter_inline_and_quoted_values():
    meta, body = parse_front_matter(
        '---\ntitle: "Next.js in Practice"\ntags: ["react", "nextjs"]\nfeatured: true\n---\nBody'
    )
    assert meta["title"] == "Next.js in Practice"
    assert meta["tags"] == ["react", "nextjs"]
    assert meta["featured"] is True
    assert body == "Body"


def test_parse_front_matter_block_list_keeps_later_keys():
    meta, _ = parse_front_matter(
        "---\ntitle: Lists\ntags:\n  - react\n  - nextjs\ncategory: Technology\n---\n\nText"
    )
    assert meta["tags"] == ["react", "nextjs"]
    assert meta["category"] == "Technology"


def test_parse_front_matter_without_closing_delimiter():
    meta, body = parse_front_matter("---\ntitle: Open\n\nNo end")
    assert meta == {}
    assert body.startswith("---")


def test_parse_front_matter_rejects_broken_yaml():
    with pytest.raises(yaml.YAMLError):
        parse_front_matter("---\ntags: [a, b\n---\nBody")


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=30), "Just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=45), "45 minutes ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=10), "2024-03-05"),
    ],
)
def test_relative_time(delta, expected):
    now = datetime(2024, 3, 15, 12, 0, 0)
    assert relative_time(to_iso(now - delta), now) == expected


def test_relative_time_unparseable():
    assert relative_time(None) == ""
    assert relative_time("not a date") == ""


def test_console_handler_is_attached_once():
    app = Flask("blogdesk_logging_check")
    app.config["LOG_LEVEL"] = "DEBUG"
    try:
        configure_logging(app)
        configure_logging(app)
        colored = [h for h in app.logger.handlers if isinstance(h.formatter, colorlog.ColoredFormatter)]
        assert len(colored) == 1
        assert default_handler not in app.logger.handlers
    finally:
        for handler in list(app.logger.handlers):
            app.logger.removeHandler(handler)
