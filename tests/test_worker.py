import asyncio
import json

import httpx

from asset_engine.engine import GenerationEngine
from asset_engine.worker import JOB_KEY_PREFIX, process_job


def _state(fake_redis, job_id):
    return json.loads(fake_redis.store[f"{JOB_KEY_PREFIX}{job_id}"])


def test_successful_job_is_stored_as_done(make_backend, fake_storage, fake_redis, sleep):
    backend = make_backend(subscribe_response={"data": {"audio": {"url": "https://cdn/a.mp3"}}})
    engine = GenerationEngine(backend=backend, storage=fake_storage, sleep=sleep)
    job = {"job_id": "j1", "operation_id": "text-to-audio", "model_id": "fal-ai/lyria2", "params": {"prompt": "jazz"}, "brand": "acme"}

    asyncio.run(process_job(fake_redis, engine, job))

    state = _state(fake_redis, "j1")
    assert state["status"] == "done"
    assert state["result"]["audio_url"] == "https://cdn/a.mp3"
    assert state["assets"]["audio_url"]["url"] == "https://cdn.example.com/acme/j1/a.mp3"
    assert state["error_code"] is None


def test_failed_job_is_stored_with_error_code(make_backend, fake_storage, fake_redis, sleep):
    backend = make_backend(statuses=["IN_PROGRESS"])
    engine = GenerationEngine(backend=backend, storage=fake_storage, sleep=sleep)
    job = {"job_id": "j2", "operation_id": "image-to-3d", "model_id": "fal-ai/trellis", "params": {"image_url": "https://x/a.png"}}

    asyncio.run(process_job(fake_redis, engine, job))

    state = _state(fake_redis, "j2")
    assert state["status"] == "error"
    assert state["error_code"] == "TIMEOUT_ERROR"
    assert "did not complete in time" in state["error_message"]
    assert backend.count("status") == 300


def test_validation_failure_is_reported(make_backend, fake_storage, fake_redis, sleep):
    engine = GenerationEngine(backend=make_backend(), storage=fake_storage, sleep=sleep)
    job = {"job_id": "j3", "operation_id": "image-to-3d", "model_id": "fal-ai/trellis", "params": {}}

    asyncio.run(process_job(fake_redis, engine, job))

    state = _state(fake_redis, "j3")
    assert state["error_code"] == "VALIDATION_ERROR"
    assert "image_url is required" in state["error_message"]


def test_job_entry_without_ids_is_skipped(make_backend, fake_storage, fake_redis, sleep):
    backend = make_backend()
    engine = GenerationEngine(backend=backend, storage=fake_storage, sleep=sleep)

    asyncio.run(process_job(fake_redis, engine, {"job_id": "j4", "params": {"prompt": "x"}}))
    asyncio.run(process_job(fake_redis, engine, {"operation_id": "text-to-image", "model_id": "fal-ai/flux-1/schnell"}))

    assert fake_redis.store == {}
    assert backend.calls == []


def test_poll_read_timeout_is_stored_as_timeout(make_backend, fake_storage, fake_redis, sleep):
    backend = make_backend(status_error=httpx.ReadTimeout("read timed out"))
    engine = GenerationEngine(backend=backend, storage=fake_storage, sleep=sleep)
    job = {"job_id": "j5", "operation_id": "image-to-3d", "model_id": "fal-ai/trellis", "params": {"image_url": "https://x/a.png"}}

    asyncio.run(process_job(fake_redis, engine, job))

    state = _state(fake_redis, "j5")
    assert state["status"] == "error"
    assert state["error_code"] == "TIMEOUT_ERROR"
    assert "polling status" in state["error_message"]
