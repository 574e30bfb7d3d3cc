import asyncio
import hashlib
import logging
import posixpath
from typing import Optional
from urllib.parse import urlparse

import boto3
import httpx
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config.settings import settings

from .model import StoredAsset
from .utils import gen_job_id, is_http_url

logger = logging.getLogger(__name__)

PRESIGN_EXPIRES = 7 * 24 * 3600


def _url_digest(url: str) -> str:
    # Cùng URL -> cùng key; 2 URL trùng tên file (vd model.glb) không ghi đè nhau
    return hashlib.sha1(url.encode("utf-8")).hexdigest()[:12]


class ObjectStorage:
    """
    Lưu asset đã generate vào bucket S3-compatible (S3 / R2 / MinIO).

    upload_asset(url, brand, session_id) -> StoredAsset
    Lỗi bất kỳ (URL không hợp lệ, chưa cấu hình bucket, download/upload fail)
    -> StoredAsset(fallback=True) giữ URL gốc, không raise.
    """

    def __init__(
        self,
        bucket: Optional[str] = None,
        public_url: Optional[str] = None,
        client=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.bucket = bucket if bucket is not None else settings.STORAGE_BUCKET
        self.public_url = public_url if public_url is not None else settings.STORAGE_PUBLIC_URL
        self._client = client
        self.transport = transport

    def enabled(self) -> bool:
        return bool(self.bucket)

    def _get_client(self):
        if not self.enabled():
            raise RuntimeError("Asset storage is not configured (STORAGE_BUCKET missing)")
        if self._client is None:
            self._client = boto3.client(
                "s3",
                endpoint_url=settings.STORAGE_ENDPOINT,
                aws_access_key_id=settings.STORAGE_ACCESS_KEY_ID,
                aws_secret_access_key=settings.STORAGE_SECRET_ACCESS_KEY,
                region_name="auto",
                config=Config(signature_version="s3v4"),
            )
        return self._client

    def _public_url(self, key: str) -> Optional[str]:
        if not self.public_url:
            return None
        return f"{self.public_url.rstrip('/')}/{key.lstrip('/')}"

    def _object_url(self, client, key: str) -> str:
        url = self._public_url(key)
        if url:
            return url
        # bucket private -> presigned GET
        return client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=PRESIGN_EXPIRES,
        )

    async def _download(self, url: str):
        async with httpx.AsyncClient(timeout=120, follow_redirects=True, transport=self.transport) as client:
            r = await client.get(url)
            r.raise_for_status()
            return r.content, r.headers.get("content-type")

    async def upload_asset(self, url: str, brand: str, session_id: str) -> StoredAsset:
        if not is_http_url(url):
            return self._fallback(url, f"not a hosted URL: {url!r}")

        try:
            client = self._get_client()
            body, content_type = await self._download(url)

            name = posixpath.basename(urlparse(url).path) or gen_job_id()
            folder = f"{brand}/{session_id}"
            key = f"{folder}/{_url_digest(url)}-{name}"
            extra = {"ContentType": content_type} if content_type else {}
            await asyncio.to_thread(client.put_object, Bucket=self.bucket, Key=key, Body=body, **extra)
            stored_url = self._object_url(client, key)
        except (httpx.HTTPError, BotoCoreError, ClientError, RuntimeError) as e:
            return self._fallback(url, str(e))

        logger.info("[Storage] Stored %s -> %s", url, key)
        return StoredAsset(
            url=stored_url,
            id=key,
            name=name,
            folder_id=folder,
            folder_name=session_id,
            folder_url=self._public_url(folder),
            original_url=url,
        )

    @staticmethod
    def _fallback(url: str, reason: str) -> StoredAsset:
        logger.warning("[Storage] Upload failed, keeping original URL %s: %s", url, reason)
        return StoredAsset(url=url, original_url=url, fallback=True, error=reason)
