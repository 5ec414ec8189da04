"""Slug derivation rules."""

import hashlib
import re

POST_SLUG_MAX_LENGTH = 50

_WHITESPACE = re.compile(r"\s+")
_POST_SLUG_STRIP = re.compile(r"[^\w\s-]", re.ASCII)


def derive_slug(display_name: str) -> str:
    """Derive a taxonomy slug from a display name.

    Lowercases and replaces whitespace runs with hyphens. Everything else is
    kept, so CJK names produce CJK slugs.

    Args:
        display_name: Human label of a tag or category

    Returns:
        Slug string
    """
    return _WHITESPACE.sub("-", display_name.lower())


def derive_post_slug(title: str) -> str:
    """Derive a URL-safe post slug from a title.

    - Converts to lowercase
    - Strips characters outside ASCII word characters, whitespace and hyphens
    - Replaces whitespace runs with hyphens
    - Truncates to 50 characters

    A title with no usable characters (e.g. entirely CJK) falls back to
    ``post-<md5 prefix>`` so the result is still deterministic.

    Args:
        title: Post title

    Returns:
        Slug string, idempotent under re-derivation
    """
    slug = _POST_SLUG_STRIP.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)[:POST_SLUG_MAX_LENGTH]
    if slug.strip("-_"):
        return slug

    digest = hashlib.md5(title.encode("utf-8")).hexdigest()
    return f"post-{digest[:8]}"
