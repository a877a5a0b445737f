"""RequestsTransport tests with a mocked requests Session."""

from unittest.mock import MagicMock

import pytest
import requests

from apinodes.kernel.errors import TransportError
from apinodes.kernel.executor.transport import RequestsTransport
from apinodes.kernel.resolver.request_spec import RequestSpec


def make_session(status_code: int = 200, body: object = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.content = b"x" if body is not None or text else b""
    if body is not None:
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("not json")
    response.text = text

    session = MagicMock()
    session.headers = {}
    session.request.return_value = response
    return session


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestRequestsTransport:
    def test_get_sends_query_and_headers(self) -> None:
        session = make_session(body=[{"id": 1}])
        transport = RequestsTransport(session=session, timeout=5)
        request = RequestSpec(
            method="GET",
            url="https://api.test/posts",
            query={"k": 3},
            headers={"Accept": "application/json"},
        )

        assert transport(request) == [{"id": 1}]
        session.request.assert_called_once_with(
            "GET",
            "https://api.test/posts",
            params={"k": 3},
            json=None,
            headers={"Accept": "application/json"},
            timeout=5,
        )

    def test_post_sends_json_body(self) -> None:
        session = make_session(body={"id": 101})
        transport = RequestsTransport(session=session)

        transport(RequestSpec(method="POST", url="https://api.test/posts", body={"title": "foo"}))

        assert session.request.call_args.kwargs["json"] == {"title": "foo"}
        assert session.request.call_args.kwargs["params"] is None

    def test_non_2xx_raises_with_status_and_body(self) -> None:
        transport = RequestsTransport(session=make_session(status_code=404, body={"detail": "missing"}))

        with pytest.raises(TransportError) as exc_info:
            transport(RequestSpec(method="GET", url="https://api.test/posts/999"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.response == {"detail": "missing"}
        assert "404" in exc_info.value.message

    def test_timeout_raises_transport_error(self) -> None:
        session = make_session()
        session.request.side_effect = requests.exceptions.Timeout("slow")
        transport = RequestsTransport(session=session)

        with pytest.raises(TransportError) as exc_info:
            transport(RequestSpec(method="GET", url="https://api.test"))

        assert "timed out" in exc_info.value.message
        assert exc_info.value.status_code is None

    def test_connection_error_raises_transport_error(self) -> None:
        session = make_session()
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TransportError):
            RequestsTransport(session=session)(RequestSpec(method="GET", url="https://api.test"))

    def test_text_body_returned_when_not_json(self) -> None:
        transport = RequestsTransport(session=make_session(text="plain"))

        assert transport(RequestSpec(method="GET", url="https://api.test")) == "plain"

    def test_empty_body_is_none(self) -> None:
        transport = RequestsTransport(session=make_session())

        assert transport(RequestSpec(method="GET", url="https://api.test")) is None

    def test_user_agent_set_on_session(self) -> None:
        session = make_session(body={})

        RequestsTransport(session=session)

        assert session.headers["User-Agent"].startswith("apinodes/")
