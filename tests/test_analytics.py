"""
tests/test_analytics.py
"""
from __future__ import annotations

import pytest

from blogdesk.exceptions import ValidationError
from blogdesk.services.analytics_service import AnalyticsService
from blogdesk.services.post_service import PostService


def test_overview_counts_seeded_data(client):
    rv = client.get("/api/analytics")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["success"] is True
    assert data["range"] == "30d"
    assert data["overview"] == {
        "totalViews": 42,
        "totalPosts": 1,
        "publishedPosts": 1,
        "totalCategories": 4,
        "totalMedia": 4,
        "approvedComments": 3,
        "pendingComments": 1,
        "viewsGrowth": 100,
        "postsGrowth": 100,
    }
    assert data["performance"] == {"avgReadTime": 2, "avgViewsPerPost": 42}


def test_chart_data_covers_the_range(client):
    chart = client.get("/api/analytics?range=7d").get_json()["chartData"]
    assert len(chart) == 7
    assert chart == sorted(chart, key=lambda d: d["date"])
    assert sum(d["posts"] for d in chart) == 1
    assert sum(d["views"] for d in chart) == 42
    assert sum(d["comments"] for d in chart) == 5

    assert len(client.get("/api/analytics?range=90d").get_json()["chartData"]) == 90


def test_unknown_range_is_rejected(client):
    rv = client.get("/api/analytics?range=1y")
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Invalid range. Supported: 7d, 30d, 90d"


def test_top_posts_and_categories_follow_views(client, ctx, make_post):
    post = make_post(title="Popular", status="published", categoryId="3")
    for _ in range(50):
        PostService.increment_views(post["id"])
    make_post(title="Draft only", categoryId="3")

    data = client.get("/api/analytics").get_json()
    assert [p["title"] for p in data["topPosts"][:2]] == ["Popular", "Welcome to Your Blog Admin"]
    assert data["topPosts"][0]["views"] == 50
    assert data["topPosts"][0]["category"] == "Technology"

    top = data["topCategories"]
    assert len(top) == 4
    assert (top[0]["name"], top[0]["posts"], top[0]["views"]) == ("Technology", 1, 50)
    assert (top[1]["name"], top[1]["posts"], top[1]["views"]) == ("General", 1, 42)
    assert top[0]["color"] == "#6366F1"


def test_recent_activity_is_newest_first(client, make_post):
    make_post(title="Fresh draft")
    activity = client.get("/api/analytics").get_json()["recentActivity"]
    assert len(activity) == 8
    assert activity[0]["type"] == "post_created"
    assert activity[0]["title"] == "Fresh draft"
    assert activity[0]["time"] == "Just now"
    assert {a["type"] for a in activity} <= {
        "post_created", "post_published", "category_created", "media_uploaded",
    }
    stamps = [a["timestamp"] for a in activity]
    assert stamps == sorted(stamps, reverse=True)
    assert len({a["id"] for a in activity}) == 8


def test_range_days(ctx):
    assert AnalyticsService.range_days(None) == 30
    assert AnalyticsService.range_days("7d") == 7
    with pytest.raises(ValidationError):
        AnalyticsService.range_days("365d")
