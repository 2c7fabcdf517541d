"""Case conversion helpers used for alias and connection name conventions."""
from __future__ import annotations

import re

_UPPER_AFTER_WORD = re.compile(r"(?<=\w)([A-Z])")


def camelize(value: str, delimiter: str = "_") -> str:
    """Turn a delimited word into CamelCase: ``my_articles`` -> ``MyArticles``.

    Only the first letter of each word is touched, so existing capitals
    and non-delimiter punctuation survive unchanged.
    """
    words = value.split(delimiter)
    return "".join(word[:1].upper() + word[1:] for word in words)


def underscore(value: str) -> str:
    """Turn CamelCase into snake_case: ``BlogPosts`` -> ``blog_posts``."""
    return delimit(value.replace("-", "_"), "_")


def delimit(value: str, delimiter: str = "_") -> str:
    return _UPPER_AFTER_WORD.sub(delimiter + r"\1", value).lower()
