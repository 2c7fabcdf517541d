"""Shared fixtures for the webservice-endpoints test suite."""
import pytest

from webservice_endpoints import ConnectionManager, EndpointClassResolver, EndpointLocator


@pytest.fixture
def connections():
    """Connection catalog covering the names the default conventions produce."""
    return ConnectionManager(
        {
            "webservice": {},
            "blog": {"timeout": 5},
            "plugin": {},
            "archive": {},
        }
    )


@pytest.fixture
def classes():
    return EndpointClassResolver()


@pytest.fixture
def locator(connections, classes):
    return EndpointLocator(connections, classes)
