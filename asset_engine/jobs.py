"""
Chạy 1 job trên backend theo 1 trong 2 protocol:

subscribe: 1 call, block tới khi xong.
queue: submit -> poll status mỗi `interval` giây (tối đa `max_polls` lần) -> fetch result.

Không retry bên trong: lỗi submit, timeout hay FAILED/CANCELLED đều kết thúc job,
caller tự quyết định có generate lại hay không.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Set, Tuple

import httpx

from .errors import BackendJobError, GenerationError, JobTimeoutError, SubmissionError
from .model import JobExecution, JobState
from .utils import get_timestamp_ms

logger = logging.getLogger(__name__)

_ALLOWED: Dict[JobState, Set[JobState]] = {
    "SUBMITTED": {"IN_PROGRESS", "COMPLETED", "ERROR"},
    "IN_PROGRESS": {"IN_PROGRESS", "COMPLETED", "ERROR"},
    "COMPLETED": {"DONE", "ERROR"},
    "DONE": set(),
    "ERROR": set(),
}

_FAILED_STATUSES = ("FAILED", "CANCELLED")


@dataclass(frozen=True)
class TransitionError(Exception):
    from_status: str
    to_status: str

    def __str__(self) -> str:
        return f"invalid transition: {self.from_status} -> {self.to_status}"


def ensure_transition_allowed(from_status: JobState, to_status: JobState) -> None:
    allowed = _ALLOWED.get(from_status, set())
    if to_status not in allowed:
        raise TransitionError(from_status=from_status, to_status=to_status)


def _move(execution: JobExecution, to_status: JobState) -> None:
    ensure_transition_allowed(execution.status, to_status)
    execution.status = to_status


@dataclass(frozen=True)
class QueuePolicy:
    interval: float
    max_polls: int


def _backend_failure(execution: JobExecution, action: str, exc: Exception) -> GenerationError:
    """Lỗi transport khi poll/fetch: job -> ERROR, trả về lỗi có kind rõ ràng."""
    _move(execution, "ERROR")
    message = f"Error {action} job {execution.request_id} for {execution.model_id}: {exc}"
    logger.error("[Jobs] %s", message)
    if isinstance(exc, httpx.TimeoutException):
        return JobTimeoutError(message)
    return BackendJobError(message)


async def run_subscribe(backend, model_id: str, input: Dict[str, Any]) -> Tuple[Dict[str, Any], JobExecution]:
    execution = JobExecution(model_id=model_id, protocol="subscribe", started_at=get_timestamp_ms())
    try:
        response = await backend.subscribe(model_id, input)
    except GenerationError:
        _move(execution, "ERROR")
        raise
    except Exception as e:
        _move(execution, "ERROR")
        logger.error("[Jobs] subscribe %s failed: %s", model_id, e)
        raise SubmissionError(f"Backend call for {model_id} failed: {e}") from e

    _move(execution, "COMPLETED")
    _move(execution, "DONE")
    execution.request_id = (response or {}).get("request_id")
    return response or {}, execution


async def run_queue(
    backend,
    model_id: str,
    input: Dict[str, Any],
    policy: QueuePolicy,
    sleep=asyncio.sleep,
) -> Tuple[Dict[str, Any], JobExecution]:
    execution = JobExecution(model_id=model_id, protocol="queue", started_at=get_timestamp_ms())

    # (a) submit
    try:
        submitted = await backend.submit(model_id, input)
    except Exception as e:
        _move(execution, "ERROR")
        logger.error("[Jobs] submit %s failed: %s", model_id, e)
        raise SubmissionError(f"Submission for {model_id} failed: {e}") from e

    request_id = (submitted or {}).get("request_id")
    if not request_id:
        _move(execution, "ERROR")
        raise SubmissionError(f"{model_id} did not return a request_id")
    execution.request_id = request_id
    logger.info("[Jobs] %s submitted, request_id=%s", model_id, request_id)

    # (b) poll, đúng max_polls lần gọi status
    status = None
    while execution.poll_count < policy.max_polls:
        try:
            polled = await backend.status(model_id, request_id)
        except GenerationError:
            _move(execution, "ERROR")
            raise
        except Exception as e:
            raise _backend_failure(execution, "polling status of", e) from e
        status = (polled or {}).get("status")

        if status == "COMPLETED":
            _move(execution, "COMPLETED")
            break
        if status in _FAILED_STATUSES:
            _move(execution, "ERROR")
            logger.warning("[Jobs] %s %s at poll %d", request_id, status, execution.poll_count + 1)
            raise BackendJobError(f"Job {request_id} for {model_id} ended with status {status}", status=status)

        _move(execution, "IN_PROGRESS")
        await sleep(policy.interval)
        execution.poll_count += 1

    if execution.status != "COMPLETED":
        _move(execution, "ERROR")
        raise JobTimeoutError(
            f"Job {request_id} for {model_id} did not complete in time "
            f"({policy.max_polls} polls, last status {status})"
        )

    # (c) fetch
    try:
        response = await backend.result(model_id, request_id)
    except GenerationError:
        _move(execution, "ERROR")
        raise
    except Exception as e:
        raise _backend_failure(execution, "fetching result of", e) from e
    _move(execution, "DONE")
    response = dict(response or {})
    response.setdefault("request_id", request_id)
    return response, execution
