"""Filesystem-safe slugs from free-text titles."""

RESERVED_CHARS = " /\\:?*\"'<>|"


def slugify(title: str) -> str:
    """
    Turn a title into a slug.

    Reserved characters become hyphens, hyphen runs collapse to one,
    and trailing hyphens are stripped. A leading hyphen is kept.
    """
    slug = title
    for char in RESERVED_CHARS:
        slug = slug.replace(char, "-")

    while "--" in slug:
        slug = slug.replace("--", "-")

    return slug.rstrip("-")
