import textwrap

import pytest

from tests import sample_endpoints
from webservice_endpoints import ConfigurationError, build_locator, load_config


def test_load_config_defaults_when_missing(tmp_path):
    config = load_config(tmp_path)

    assert config.path is None
    assert config.locator.default_connection == "webservice"
    assert config.locator.close_evicted is False
    assert config.connections == {}
    assert config.endpoints == {}


def test_load_config_reads_fields(tmp_path):
    config_file = tmp_path / "webservice-endpoints.toml"
    config_file.write_text(
        textwrap.dedent(
            """
            [locator]
            default_connection = "api"
            close_evicted = true

            [connections.api]
            driver = "tests.sample_endpoints:RecordingDriver"
            host = "api.example.com"

            [connections.archive]

            [endpoints]
            Articles = "tests.sample_endpoints:ArticlesEndpoint"
            """
        ).strip()
    )

    config = load_config(tmp_path)

    assert config.path == config_file
    assert config.locator.default_connection == "api"
    assert config.locator.close_evicted is True
    assert config.connections["api"]["host"] == "api.example.com"
    assert config.connections["archive"] == {}
    assert config.endpoints == {"Articles": "tests.sample_endpoints:ArticlesEndpoint"}


def test_load_config_rejects_bad_endpoint_entry(tmp_path):
    (tmp_path / "webservice-endpoints.toml").write_text("[endpoints]\nArticles = 3\n")

    with pytest.raises(ConfigurationError, match="module:Class"):
        load_config(tmp_path)


def test_load_config_rejects_bad_connection_entry(tmp_path):
    (tmp_path / "webservice-endpoints.toml").write_text('[connections]\napi = "x"\n')

    with pytest.raises(ConfigurationError, match=r"\[connections.api\]"):
        load_config(tmp_path)


def test_build_locator_from_config(tmp_path):
    (tmp_path / "webservice-endpoints.toml").write_text(
        textwrap.dedent(
            """
            [locator]
            default_connection = "api"

            [connections.api]
            driver = "tests.sample_endpoints:RecordingDriver"
            host = "api.example.com"

            [connections.webservice]

            [endpoints]
            Articles = "tests.sample_endpoints:ArticlesEndpoint"
            """
        ).strip()
    )
    locator = build_locator(load_config(tmp_path))

    generic = locator.get("Comments")
    articles = locator.get("Articles")

    assert generic.connection.name == "api"
    assert generic.connection.driver.kwargs == {"host": "api.example.com"}
    assert isinstance(articles, sample_endpoints.ArticlesEndpoint)
    assert articles.connection.name == "webservice"
