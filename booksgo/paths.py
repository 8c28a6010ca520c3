"""URL path helpers shared by route registration and redirects."""
from __future__ import annotations


def clean_path(path: str) -> str:
    """Lexically clean a slash-separated path.

    Collapses repeated slashes, drops ``.`` segments and resolves ``..``
    against the preceding segment. A rooted path never climbs above ``/``.
    The trailing slash is dropped; an empty result is ``.``.
    """
    rooted = path.startswith("/")
    parts: list[str] = []

    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)

    cleaned = "/".join(parts)
    if rooted:
        cleaned = "/" + cleaned
    return cleaned or "."


def join_paths(base: str, relative: str) -> str:
    """Join a group prefix and a route path.

    The result is cleaned, but keeps a trailing slash when ``relative``
    ends with one, so ``join_paths("/api", "/")`` is ``/api/``.
    """
    if not relative:
        return base

    final = clean_path("/".join(p for p in (base, relative) if p))
    if relative.endswith("/") and not final.endswith("/"):
        return final + "/"
    return final


def canonical_path(path: str) -> str:
    """Rooted, cleaned form of a request path; trailing slash preserved."""
    cleaned = clean_path("/" + path)
    if path.endswith("/") and cleaned != "/":
        return cleaned + "/"
    return cleaned


def toggle_trailing_slash(path: str) -> str:
    if path.endswith("/"):
        return path[:-1]
    return path + "/"
