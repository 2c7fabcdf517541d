import pytest

from webservice_endpoints.inflector import camelize, underscore


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("my_articles", "MyArticles"),
        ("articles", "Articles"),
        ("Articles", "Articles"),
        ("Blog.articles", "Blog.articles"),
        ("Vendor/Plugin.Articles", "Vendor/Plugin.Articles"),
        ("", ""),
    ],
)
def test_camelize(value, expected):
    assert camelize(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Articles", "articles"),
        ("BlogPosts", "blog_posts"),
        ("MyArticles", "my_articles"),
        ("my-plugin", "my_plugin"),
        ("Plugin", "plugin"),
        ("already_snake", "already_snake"),
    ],
)
def test_underscore(value, expected):
    assert underscore(value) == expected
