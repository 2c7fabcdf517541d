"""Endpoint classes used by the tests."""
from __future__ import annotations

from webservice_endpoints import Endpoint


class ArticlesEndpoint(Endpoint):
    pass


class ArchivedPostsEndpoint(Endpoint):
    connection_name = "archive"


class ClosingEndpoint(Endpoint):
    def __init__(self, options):
        super().__init__(options)
        self.closed = 0

    def close(self) -> None:
        self.closed += 1


class BrokenCloseEndpoint(Endpoint):
    def close(self) -> None:
        raise RuntimeError("close failed")


class RecordingDriver:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.closed = False

    def close(self) -> None:
        self.closed = True


NOT_A_CLASS = object()
