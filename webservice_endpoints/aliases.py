"""Alias parsing.

An alias is either a bare name (``Articles``) or a namespace-qualified one
(``Blog.Articles``). The namespace may itself be a slash-delimited path
(``Vendor/Blog.Articles``).
"""
from __future__ import annotations

NAMESPACE_SEPARATOR = "."
PATH_SEPARATOR = "/"


def split_alias(alias: str) -> tuple[str, str]:
    """Split an alias into ``(namespace, name)``.

    The last separator wins, so the returned name never contains one and
    splitting it again yields ``("", name)``.
    """
    namespace, sep, name = alias.rpartition(NAMESPACE_SEPARATOR)
    if not sep:
        return "", alias
    return namespace, name


def namespace_segments(namespace: str) -> list[str]:
    """Return the path segments of a namespace (``Vendor/Blog`` -> ``[Vendor, Blog]``)."""
    if not namespace:
        return []
    return namespace.split(PATH_SEPARATOR)
