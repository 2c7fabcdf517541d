import pytest
from pydantic import ValidationError

from tests import sample_endpoints
from webservice_endpoints import Endpoint, EndpointOptions


def test_default_connection_name():
    assert Endpoint.default_connection_name() == "webservice"
    assert sample_endpoints.ArticlesEndpoint.default_connection_name() == "webservice"
    assert sample_endpoints.ArchivedPostsEndpoint.default_connection_name() == "archive"


def test_endpoint_name_defaults_to_underscored_alias():
    endpoint = Endpoint({"alias": "BlogPosts"})

    assert endpoint.endpoint == "blog_posts"
    assert endpoint.registry_alias == "BlogPosts"
    assert endpoint.connection is None


def test_extra_options_are_kept():
    endpoint = Endpoint({"alias": "Articles", "page_size": 50})
    assert endpoint.options.model_extra == {"page_size": 50}


def test_accepts_validated_options():
    options = EndpointOptions(alias="Articles", endpoint="posts")
    endpoint = Endpoint(options)

    assert endpoint.options is options
    assert endpoint.endpoint == "posts"


def test_alias_is_required():
    with pytest.raises(ValidationError):
        Endpoint({})


def test_repr():
    endpoint = Endpoint({"alias": "Articles", "registry_alias": "Blog.Articles"})
    assert repr(endpoint) == "Endpoint(registry_alias='Blog.Articles', endpoint='articles')"
