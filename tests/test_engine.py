import asyncio

import pytest

from asset_engine.engine import GenerationEngine
from asset_engine.errors import BackendJobError, ResultShapeError, SchemaMismatchError, ValidationError


def _engine(backend, storage, sleep):
    return GenerationEngine(backend=backend, storage=storage, sleep=sleep)


def test_text_to_image_fills_defaults_and_subscribes(make_backend, fake_storage, sleep):
    backend = make_backend(subscribe_response={"data": {"images": [{"url": "https://cdn/fox.png"}]}})
    engine = _engine(backend, fake_storage, sleep)

    result = asyncio.run(engine.generate("text-to-image", "fal-ai/flux-1/schnell", {"prompt": "a red fox"}))

    assert result.asset_url == "https://cdn/fox.png"
    (kind, model_id, payload), = backend.calls
    assert (kind, model_id) == ("subscribe", "fal-ai/flux-1/schnell")
    assert payload["prompt"] == "a red fox"
    assert payload["image_size"] == "landscape_4_3"
    assert payload["num_inference_steps"] == 4
    assert "seed" not in payload


def test_missing_required_field_never_reaches_backend(make_backend, fake_storage, sleep):
    backend = make_backend()
    engine = _engine(backend, fake_storage, sleep)

    with pytest.raises(ValidationError) as exc:
        asyncio.run(engine.generate("image-to-3d", "fal-ai/trellis", {}))
    assert "image_url is required" in exc.value.errors
    assert backend.calls == []


def test_enum_violation_is_validation_error(make_backend, fake_storage, sleep):
    backend = make_backend()
    engine = _engine(backend, fake_storage, sleep)

    with pytest.raises(ValidationError) as exc:
        asyncio.run(
            engine.generate("video-to-video", "fal-ai/video-upscaler", {"video_url": "https://x/v.mp4", "scale": "5"})
        )
    assert exc.value.errors == ["scale must be one of: 2, 3, 4"]
    assert exc.value.code == "VALIDATION_ERROR"
    assert backend.calls == []


def test_model_under_wrong_operation_is_schema_mismatch(make_backend, fake_storage, sleep):
    engine = _engine(make_backend(), fake_storage, sleep)
    with pytest.raises(SchemaMismatchError):
        asyncio.run(engine.generate("text-to-video", "fal-ai/flux-1/schnell", {"prompt": "x"}))


def test_image_to_3d_goes_through_queue(make_backend, fake_storage, sleep):
    backend = make_backend(
        statuses=["IN_QUEUE", "COMPLETED"],
        result_response={"data": {"model_mesh": {"url": "https://cdn/m.glb"}, "timings": {"total": 3}}},
    )
    engine = _engine(backend, fake_storage, sleep)

    result = asyncio.run(engine.generate("image-to-3d", "fal-ai/trellis", {"image_url": "https://x/a.png"}))

    assert result.model_mesh_url == "https://cdn/m.glb"
    assert result.request_id == "req-1"
    assert sleep.delays == [2.0]
    assert [c[0] for c in backend.calls] == ["submit", "status", "status", "result"]


def test_failed_edit_job_stops_at_failing_poll(make_backend, fake_storage, sleep):
    backend = make_backend(statuses=["IN_QUEUE", "IN_PROGRESS", "FAILED"])
    engine = _engine(backend, fake_storage, sleep)

    with pytest.raises(BackendJobError):
        asyncio.run(engine.generate("image-to-image", "fal-ai/flux/dev/image-to-image", {"image_url": "https://x/a.png", "prompt": "p"}))
    assert backend.count("status") == 3
    assert sleep.delays == [1.0, 1.0]


def test_edit_payload_is_mapped(make_backend, fake_storage, sleep):
    backend = make_backend(result_response={"data": {"images": [{"url": "https://cdn/e.png"}]}})
    engine = _engine(backend, fake_storage, sleep)
    asyncio.run(engine.generate("image-to-image", "fal-ai/flux/dev/image-to-image", {"image_url": "https://x/a.png", "prompt": "p", "sync_mode": True}))
    submitted = backend.calls[0][2]
    assert submitted["sync_mode"] is False


def test_completed_job_without_url_is_result_shape_error(make_backend, fake_storage, sleep):
    backend = make_backend(subscribe_response={"data": {"audio": {}}})
    engine = _engine(backend, fake_storage, sleep)
    with pytest.raises(ResultShapeError):
        asyncio.run(engine.generate("text-to-audio", "fal-ai/lyria2", {"prompt": "jazz"}))


def test_generate_and_store_uploads_each_url_once(make_backend, fake_storage, sleep):
    backend = make_backend(result_response={"data": {"images": [{"url": "https://cdn/e.png"}]}})
    engine = _engine(backend, fake_storage, sleep)

    outcome = asyncio.run(
        engine.generate_and_store(
            "image-to-image",
            "fal-ai/flux/dev/image-to-image",
            {"image_url": "https://x/a.png", "prompt": "p"},
            brand="acme",
            session_id="s1",
        )
    )

    assert fake_storage.uploads == [("https://cdn/e.png", "acme", "s1")]
    assert set(outcome.assets) == {"image_url", "asset_url"}
    assert outcome.assets["asset_url"].url == "https://cdn.example.com/acme/s1/e.png"
    assert outcome.warnings == []


def test_storage_failure_degrades_to_original_url(make_backend, failing_storage, sleep):
    storage = failing_storage
    backend = make_backend(subscribe_response={"data": {"video": {"url": "https://cdn/v.mp4"}}})
    engine = _engine(backend, storage, sleep)

    outcome = asyncio.run(engine.generate_and_store("text-to-video", "fal-ai/veo2", {"prompt": "waves"}))

    asset = outcome.assets["video_url"]
    assert asset.fallback
    assert asset.url == "https://cdn/v.mp4"
    assert len(outcome.warnings) == 1
    assert "video_url was not stored persistently" in outcome.warnings[0]
