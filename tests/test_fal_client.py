import asyncio
import json

import httpx
import pytest

from asset_engine.fal_client import FalClient, app_path


def _client(handler, api_key="secret"):
    return FalClient(
        api_key=api_key,
        run_url="https://run.test",
        queue_url="https://queue.test",
        transport=httpx.MockTransport(handler),
    )


def test_app_path_keeps_owner_and_alias():
    assert app_path("fal-ai/flux-1/schnell") == "fal-ai/flux-1"
    assert app_path("fal-ai/trellis") == "fal-ai/trellis"
    assert app_path("workflows/acme/my-flow/run") == "workflows/acme/my-flow"


def test_subscribe_posts_input_with_key_auth():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"images": [{"url": "https://cdn/a.png"}]}, headers={"x-fal-request-id": "r1"})

    out = asyncio.run(_client(handler).subscribe("fal-ai/flux-1/schnell", {"prompt": "fox"}))

    assert seen == {
        "url": "https://run.test/fal-ai/flux-1/schnell",
        "auth": "Key secret",
        "body": {"prompt": "fox"},
    }
    assert out == {"data": {"images": [{"url": "https://cdn/a.png"}]}, "request_id": "r1"}


def test_queue_calls_use_app_path():
    urls = []

    def handler(request):
        urls.append((request.method, str(request.url)))
        if request.method == "POST":
            return httpx.Response(200, json={"request_id": "abc"})
        if request.url.path.endswith("/status"):
            return httpx.Response(200, json={"status": "COMPLETED"})
        return httpx.Response(200, json={"model_mesh": {"url": "https://cdn/m.glb"}})

    client = _client(handler)
    model_id = "fal-ai/hunyuan3d/v2/turbo"
    submitted = asyncio.run(client.submit(model_id, {"input_image_url": "https://x/a.png"}))
    status = asyncio.run(client.status(model_id, "abc"))
    result = asyncio.run(client.result(model_id, "abc"))

    assert submitted["request_id"] == "abc"
    assert status["status"] == "COMPLETED"
    assert result == {"data": {"model_mesh": {"url": "https://cdn/m.glb"}}, "request_id": "abc"}
    assert urls == [
        ("POST", "https://queue.test/fal-ai/hunyuan3d/v2/turbo"),
        ("GET", "https://queue.test/fal-ai/hunyuan3d/requests/abc/status"),
        ("GET", "https://queue.test/fal-ai/hunyuan3d/requests/abc"),
    ]


def test_http_error_is_raised():
    def handler(request):
        return httpx.Response(401, json={"detail": "Unauthorized"})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_client(handler).subscribe("fal-ai/flux-1/schnell", {}))


def test_missing_key_fails_before_any_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(RuntimeError, match="API_KEY"):
        asyncio.run(_client(handler, api_key="").submit("fal-ai/trellis", {}))
    assert calls == []
