"""Shared fixtures: a recording transport stub."""

from collections.abc import Callable
from typing import Any

import pytest

from apinodes.kernel.resolver.request_spec import RequestSpec


class StubTransport:
    """Records every request and answers from a script.

    ``responder`` receives the request and returns the body, or raises.
    """

    def __init__(self, responder: Callable[[RequestSpec], Any] | None = None) -> None:
        self.requests: list[RequestSpec] = []
        self._responder = responder or (lambda request: {"ok": True})

    def __call__(self, request: RequestSpec) -> Any:
        self.requests.append(request)
        return self._responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def make_transport() -> Callable[..., StubTransport]:
    return StubTransport
