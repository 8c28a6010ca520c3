"""Unit tests for path joining, cleaning and redirect lookup."""
from __future__ import annotations

import pytest

from booksgo.paths import canonical_path, clean_path, join_paths
from booksgo.router import find_redirect

ROUTES = ["/api/", "/api/health", "/api/time"]


@pytest.mark.parametrize("raw, expected", [
    ("", "."),
    ("/", "/"),
    ("//a///b", "/a/b"),
    ("/a/./b/", "/a/b"),
    ("/a/../../b", "/b"),
    ("a/../..", ".."),
])
def test_clean_path(raw, expected):
    assert clean_path(raw) == expected


@pytest.mark.parametrize("base, relative, expected", [
    ("/", "/", "/"),
    ("/", "/health", "/health"),
    ("/api", "/", "/api/"),
    ("/api/", "/health", "/api/health"),
    ("/", "api", "/api"),
    ("/", "", "/"),
])
def test_join_paths(base, relative, expected):
    assert join_paths(base, relative) == expected


def test_canonical_path_keeps_trailing_slash():
    assert canonical_path("//api//") == "/api/"
    assert canonical_path("api/x/..") == "/api"


def test_find_redirect_toggles_trailing_slash():
    assert find_redirect(ROUTES, "/api") == "/api/"
    assert find_redirect(ROUTES, "/api/health/") == "/api/health"


def test_find_redirect_cleans_and_ignores_case():
    assert find_redirect(ROUTES, "//api//HEALTH") == "/api/health"
    assert find_redirect(ROUTES, "/api/x/../Time/") == "/api/time"


def test_find_redirect_misses():
    assert find_redirect(ROUTES, "/") is None
    assert find_redirect(ROUTES, "/api/books") is None
    assert find_redirect([], "/health") is None
