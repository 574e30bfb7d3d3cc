import logging
from typing import Any, Dict, Optional

import httpx

from config.settings import settings

logger = logging.getLogger(__name__)

# Các namespace mà app id gồm 3 đoạn thay vì 2
_NAMESPACES = ("workflows", "comfy")


def app_path(model_id: str) -> str:
    """
    "fal-ai/flux-1/schnell" -> "fal-ai/flux-1".
    Endpoint status/result của queue chỉ dùng owner/alias, bỏ phần path con.
    """
    parts = [p for p in model_id.split("/") if p]
    size = 3 if parts and parts[0] in _NAMESPACES else 2
    return "/".join(parts[:size])


class FalClient:
    """
    4 kiểu call tới backend:
      subscribe(model_id, input) -> {"data": ..., "request_id": ...}
      submit(model_id, input)    -> {"request_id": ...}
      status(model_id, id)       -> {"status": ...}
      result(model_id, id)       -> {"data": ..., "request_id": ...}
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        run_url: Optional[str] = None,
        queue_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.FAL_KEY
        self.run_url = (run_url or settings.FAL_RUN_URL).rstrip("/")
        self.queue_url = (queue_url or settings.FAL_QUEUE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.FAL_TIMEOUT
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise RuntimeError("FAL_KEY is not configured (API_KEY missing)")
        return {
            "Authorization": f"Key {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _client(self, timeout: Optional[float] = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout or self.timeout, transport=self.transport)

    @staticmethod
    def _check(r: httpx.Response, what: str) -> None:
        if r.status_code >= 400:
            logger.error("[FalClient] %s returned %s: %s", what, r.status_code, r.text[:500])
        r.raise_for_status()

    async def subscribe(self, model_id: str, input: Dict[str, Any]) -> Dict[str, Any]:
        """
        Gọi đồng bộ: block tới khi backend chạy xong, trả full result 1 lần.
        """
        url = f"{self.run_url}/{model_id}"
        headers = self._headers()
        async with self._client() as client:
            logger.info("[FalClient] subscribe %s", model_id)
            r = await client.post(url, json=input, headers=headers)
            self._check(r, f"subscribe {model_id}")
            return {"data": r.json(), "request_id": r.headers.get("x-fal-request-id")}

    async def submit(self, model_id: str, input: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.queue_url}/{model_id}"
        headers = self._headers()
        async with self._client(timeout=60) as client:
            r = await client.post(url, json=input, headers=headers)
            self._check(r, f"submit {model_id}")
            data = r.json()
            logger.info("[FalClient] submitted %s, request_id=%s", model_id, data.get("request_id"))
            return data

    async def status(self, model_id: str, request_id: str) -> Dict[str, Any]:
        url = f"{self.queue_url}/{app_path(model_id)}/requests/{request_id}/status"
        async with self._client(timeout=30) as client:
            r = await client.get(url, headers=self._headers())
            self._check(r, f"status {request_id}")
            data = r.json()
            logger.debug("[FalClient] %s status=%s", request_id, data.get("status"))
            return data

    async def result(self, model_id: str, request_id: str) -> Dict[str, Any]:
        url = f"{self.queue_url}/{app_path(model_id)}/requests/{request_id}"
        async with self._client(timeout=60) as client:
            r = await client.get(url, headers=self._headers())
            self._check(r, f"result {request_id}")
            return {"data": r.json(), "request_id": request_id}
