import asyncio

import httpx
import pytest

from asset_engine.errors import BackendJobError, JobTimeoutError, SubmissionError, classify_error
from asset_engine.jobs import QueuePolicy, TransitionError, ensure_transition_allowed, run_queue, run_subscribe

POLICY = QueuePolicy(interval=1.0, max_polls=30)


def test_never_completing_job_times_out_after_exact_max_polls(make_backend, sleep):
    backend = make_backend(statuses=["IN_PROGRESS"])
    with pytest.raises(JobTimeoutError) as exc:
        asyncio.run(run_queue(backend, "fal-ai/trellis", {}, POLICY, sleep=sleep))
    assert backend.count("status") == 30
    assert backend.count("result") == 0
    assert "did not complete in time" in str(exc.value)
    assert sleep.delays == [1.0] * 30


def test_small_poll_budget_is_respected(make_backend, sleep):
    backend = make_backend(statuses=["IN_QUEUE"])
    with pytest.raises(JobTimeoutError):
        asyncio.run(run_queue(backend, "m", {}, QueuePolicy(interval=2.0, max_polls=3), sleep=sleep))
    assert backend.count("status") == 3


def test_failed_status_stops_polling_immediately(make_backend, sleep):
    backend = make_backend(statuses=["IN_QUEUE", "IN_PROGRESS", "FAILED"])
    with pytest.raises(BackendJobError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert backend.count("status") == 3
    assert backend.count("result") == 0
    assert exc.value.status == "FAILED"
    assert "FAILED" in str(exc.value)


def test_cancelled_status_is_backend_error(make_backend, sleep):
    backend = make_backend(statuses=["CANCELLED"])
    with pytest.raises(BackendJobError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert exc.value.status == "CANCELLED"


def test_completed_job_fetches_result_once(make_backend, sleep):
    backend = make_backend(
        statuses=["IN_QUEUE", "IN_PROGRESS", "COMPLETED"],
        result_response={"data": {"images": [{"url": "https://cdn/x.png"}]}},
    )
    response, execution = asyncio.run(run_queue(backend, "m", {"a": 1}, POLICY, sleep=sleep))
    assert response["data"]["images"][0]["url"] == "https://cdn/x.png"
    assert response["request_id"] == "req-1"
    assert execution.status == "DONE"
    assert execution.poll_count == 2
    assert [c[0] for c in backend.calls] == ["submit", "status", "status", "status", "result"]


def test_missing_request_id_fails_before_polling(make_backend, sleep):
    backend = make_backend(submit_response={})
    with pytest.raises(SubmissionError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert "did not return a request_id" in str(exc.value)
    assert backend.count("status") == 0


def test_submit_transport_error_becomes_submission_error(make_backend, sleep):
    backend = make_backend(error=httpx.ConnectError("boom"))
    with pytest.raises(SubmissionError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_poll_timeout_is_timeout_error_with_cause(make_backend, sleep):
    backend = make_backend(status_error=httpx.ReadTimeout("read timed out"))
    with pytest.raises(JobTimeoutError) as exc:
        asyncio.run(run_queue(backend, "fal-ai/trellis", {}, POLICY, sleep=sleep))
    assert isinstance(exc.value.__cause__, httpx.ReadTimeout)
    assert classify_error(exc.value) == "TIMEOUT_ERROR"
    assert "polling status" in str(exc.value)
    assert backend.count("status") == 1
    assert backend.count("result") == 0


def test_poll_transport_error_is_backend_error(make_backend, sleep):
    backend = make_backend(status_error=httpx.ConnectError("connection refused"))
    with pytest.raises(BackendJobError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert isinstance(exc.value.__cause__, httpx.ConnectError)
    assert classify_error(exc.value) == "GENERATION_ERROR"


def test_fetch_failure_is_backend_error(make_backend, sleep):
    backend = make_backend(statuses=["COMPLETED"], result_error=httpx.RemoteProtocolError("server hung up"))
    with pytest.raises(BackendJobError) as exc:
        asyncio.run(run_queue(backend, "m", {}, POLICY, sleep=sleep))
    assert isinstance(exc.value.__cause__, httpx.RemoteProtocolError)
    assert "fetching result" in str(exc.value)
    assert backend.count("result") == 1


def test_subscribe_returns_response_and_done_execution(make_backend):
    backend = make_backend(subscribe_response={"data": {"audio": {"url": "https://cdn/a.mp3"}}, "request_id": "r9"})
    response, execution = asyncio.run(run_subscribe(backend, "fal-ai/lyria2", {"prompt": "jazz"}))
    assert response["data"]["audio"]["url"] == "https://cdn/a.mp3"
    assert execution.status == "DONE"
    assert execution.request_id == "r9"
    assert backend.calls == [("subscribe", "fal-ai/lyria2", {"prompt": "jazz"})]


def test_subscribe_failure_is_submission_error(make_backend):
    backend = make_backend(error=RuntimeError("FAL_KEY is not configured (API_KEY missing)"))
    with pytest.raises(SubmissionError):
        asyncio.run(run_subscribe(backend, "m", {}))


def test_state_machine_rejects_leaving_terminal_states():
    ensure_transition_allowed("SUBMITTED", "IN_PROGRESS")
    ensure_transition_allowed("COMPLETED", "DONE")
    with pytest.raises(TransitionError):
        ensure_transition_allowed("DONE", "IN_PROGRESS")
    with pytest.raises(TransitionError):
        ensure_transition_allowed("ERROR", "COMPLETED")
    with pytest.raises(TransitionError):
        ensure_transition_allowed("SUBMITTED", "DONE")
