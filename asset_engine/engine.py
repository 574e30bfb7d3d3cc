import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

from config.settings import settings

from .errors import UploadFallbackWarning, ValidationError
from .fal_client import FalClient
from .jobs import run_queue, run_subscribe
from .model import ExtractedResult, GenerationOutcome, ResolvedJobRequest, StoredAsset
from .registry import ModelRegistry, registry as default_registry
from .resolver import resolve
from .storage import ObjectStorage
from .strategies import STRATEGIES, build_strategies
from .utils import gen_job_id

logger = logging.getLogger(__name__)


class GenerationEngine:
    """
    registry -> resolver -> mapper -> subscribe | submit/poll/fetch -> extractor.

    Engine không giữ state theo request; mỗi generate() tự tạo JobExecution riêng
    nên chạy song song nhiều job trên cùng 1 instance là an toàn.
    """

    def __init__(
        self,
        registry: Optional[ModelRegistry] = None,
        backend=None,
        storage=None,
        sleep=asyncio.sleep,
    ):
        self.registry = registry or default_registry
        self.backend = backend if backend is not None else FalClient()
        self.storage = storage if storage is not None else ObjectStorage()
        self.strategies = STRATEGIES if self.registry is default_registry else build_strategies(self.registry)
        self.sleep = sleep

    def resolve_request(self, operation_id: str, model_id: str, raw: Optional[Mapping[str, Any]]) -> ResolvedJobRequest:
        """
        Chỉ resolve, không gọi backend.
        Raise SchemaMismatchError hoặc ValidationError (đủ list lỗi).
        """
        info = self.registry.require_model(operation_id, model_id)
        outcome = resolve(info, raw or {})
        if not outcome.is_valid:
            logger.info("[Engine] %s rejected: %s", model_id, outcome.errors)
            raise ValidationError(model_id, outcome.errors)
        return ResolvedJobRequest(model_id=model_id, operation=operation_id, input=outcome.cleaned)

    async def generate(self, operation_id: str, model_id: str, raw: Optional[Mapping[str, Any]]) -> ExtractedResult:
        request = self.resolve_request(operation_id, model_id, raw)
        strategy = self.strategies[model_id]
        payload = strategy.mapper(request.input)

        logger.info("[Engine] %s via %s", model_id, strategy.protocol)
        if strategy.protocol == "queue":
            response, execution = await run_queue(self.backend, model_id, payload, strategy.policy, sleep=self.sleep)
        else:
            response, execution = await run_subscribe(self.backend, model_id, payload)

        result = strategy.extractor(model_id, response)
        logger.info(
            "[Engine] %s done (request_id=%s, polls=%d)", model_id, execution.request_id, execution.poll_count
        )
        return result

    async def generate_and_store(
        self,
        operation_id: str,
        model_id: str,
        raw: Optional[Mapping[str, Any]],
        brand: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> GenerationOutcome:
        result = await self.generate(operation_id, model_id, raw)
        brand = brand or settings.DEFAULT_BRAND
        session_id = session_id or gen_job_id()

        # Cùng 1 URL (vd: image_url == asset_url) chỉ upload 1 lần
        uploaded: Dict[str, StoredAsset] = {}
        assets: Dict[str, StoredAsset] = {}
        warnings = []
        for role, url in result.urls().items():
            if url not in uploaded:
                stored = await self.storage.upload_asset(url, brand, session_id)
                uploaded[url] = stored
                if stored.fallback:
                    warnings.append(str(UploadFallbackWarning(role, url, stored.error or "upload failed")))
            assets[role] = uploaded[url]

        return GenerationOutcome(result=result, assets=assets, warnings=warnings)
