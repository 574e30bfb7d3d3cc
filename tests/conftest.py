from typing import Any, Dict, List, Optional

import pytest


class FakeBackend:
    """
    Backend giả: trả response định sẵn cho 4 kiểu call và ghi lại mọi call.
    `error` áp cho subscribe/submit, `status_error`/`result_error` cho poll/fetch.
    `statuses`: list status trả lần lượt cho mỗi lần poll, hết list thì lặp lại phần tử cuối.
    """

    def __init__(
        self,
        subscribe_response: Optional[Dict[str, Any]] = None,
        submit_response: Optional[Dict[str, Any]] = None,
        statuses: Optional[List[str]] = None,
        result_response: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
        status_error: Optional[Exception] = None,
        result_error: Optional[Exception] = None,
    ):
        self.subscribe_response = subscribe_response or {}
        self.submit_response = submit_response if submit_response is not None else {"request_id": "req-1"}
        self.statuses = list(statuses or ["COMPLETED"])
        self.result_response = result_response or {}
        self.error = error
        self.status_error = status_error
        self.result_error = result_error
        self.calls = []

    def count(self, kind: str) -> int:
        return sum(1 for c in self.calls if c[0] == kind)

    async def subscribe(self, model_id, input):
        self.calls.append(("subscribe", model_id, input))
        if self.error:
            raise self.error
        return self.subscribe_response

    async def submit(self, model_id, input):
        self.calls.append(("submit", model_id, input))
        if self.error:
            raise self.error
        return self.submit_response

    async def status(self, model_id, request_id):
        self.calls.append(("status", model_id, request_id))
        if self.status_error:
            raise self.status_error
        polled = self.count("status")
        status = self.statuses[min(polled, len(self.statuses)) - 1]
        return {"status": status}

    async def result(self, model_id, request_id):
        self.calls.append(("result", model_id, request_id))
        if self.result_error:
            raise self.result_error
        return self.result_response


class FakeStorage:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.uploads = []

    async def upload_asset(self, url, brand, session_id):
        from asset_engine.model import StoredAsset

        self.uploads.append((url, brand, session_id))
        if self.fail:
            return StoredAsset(url=url, original_url=url, fallback=True, error="quota exceeded")
        name = url.rsplit("/", 1)[-1]
        return StoredAsset(
            url=f"https://cdn.example.com/{brand}/{session_id}/{name}",
            id=f"{brand}/{session_id}/{name}",
            name=name,
            folder_id=f"{brand}/{session_id}",
            folder_name=session_id,
            original_url=url,
        )


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.lists = {}

    async def set(self, key, value):
        self.store[key] = value

    async def get(self, key):
        return self.store.get(key)

    async def lpush(self, key, value):
        self.lists.setdefault(key, []).insert(0, value)

    async def brpop(self, key):
        return key, self.lists[key].pop()


class SleepRecorder:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def failing_storage():
    return FakeStorage(fail=True)
