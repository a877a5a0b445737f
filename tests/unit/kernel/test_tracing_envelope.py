"""Trace log and response envelope tests."""

import json
import threading

import pytest

from apinodes.kernel.errors import TransportError
from apinodes.kernel.executor.envelope import ErrorPayload, ResponseEnvelope
from apinodes.kernel.executor.tracing import TraceLog


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestTraceLog:
    def test_indices_assigned_in_order(self) -> None:
        trace = TraceLog()

        assert trace.add_input_data("ai_tool", {"q": 1}) == 0
        assert trace.add_input_data("ai_tool", {"q": 2}) == 1
        assert trace.add_input_data("other", {"q": 3}) == 0

    def test_output_is_write_once(self) -> None:
        trace = TraceLog()
        index = trace.add_input_data("ai_tool", {})
        trace.add_output_data("ai_tool", index, {"success": True})

        with pytest.raises(ValueError):
            trace.add_output_data("ai_tool", index, {"success": False})

    def test_output_for_unknown_index_rejected(self) -> None:
        trace = TraceLog()

        with pytest.raises(KeyError):
            trace.add_output_data("ai_tool", 0, {})

    def test_entries_are_frozen(self) -> None:
        trace = TraceLog()
        trace.add_input_data("ai_tool", {"q": 1})

        with pytest.raises(ValueError):
            trace.entries()[0].index = 5

    def test_concurrent_appends_get_unique_indices(self) -> None:
        trace = TraceLog()
        indices: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(50):
                index = trace.add_input_data("ai_tool", {})
                trace.add_output_data("ai_tool", index, {})
                with lock:
                    indices.append(index)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(indices) == list(range(400))
        assert len(trace) == 800


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestResponseEnvelope:
    def test_success_payload_has_only_response(self) -> None:
        payload = ResponseEnvelope.ok({"q": 1}, None).to_payload()

        assert payload == {"success": True, "request": {"q": 1}, "response": None}

    def test_error_payload_has_only_error(self) -> None:
        error = TransportError("bad gateway", status_code=502)

        payload = ResponseEnvelope.from_error({"q": 1}, error).to_payload()

        assert "response" not in payload
        assert payload["error"] == {"message": "bad gateway", "code": "TRANSPORT"}
        assert payload["statusCode"] == 502

    def test_empty_upstream_body_is_a_success(self) -> None:
        """A 204 reply reads as an empty body: success, null response, no error key."""
        payload = json.loads(ResponseEnvelope.ok({"postId": 1}, None).render())

        assert payload == {"success": True, "request": {"postId": 1}, "response": None}
        assert "error" not in payload

    def test_success_with_error_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResponseEnvelope(success=True, response={}, error=ErrorPayload(message="x", code="INTERNAL"))

    def test_failure_without_error_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResponseEnvelope(success=False)

    def test_failure_with_response_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResponseEnvelope(success=False, response={}, error=ErrorPayload(message="x", code="INTERNAL"))

    def test_render_is_json(self) -> None:
        text = ResponseEnvelope.ok({"q": "é"}, [1, 2]).render()

        assert json.loads(text) == {"success": True, "request": {"q": "é"}, "response": [1, 2]}
