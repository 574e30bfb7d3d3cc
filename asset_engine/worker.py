# asset_engine/worker.py

import asyncio
import json
import logging
from typing import Any, Dict

import redis.asyncio as redis

from config.settings import settings

from .engine import GenerationEngine
from .errors import classify_error

logger = logging.getLogger(__name__)

QUEUE_KEY = "asset_jobs"  # danh sách job
JOB_KEY_PREFIX = "job:"   # job:{job_id}


async def get_redis_client() -> redis.Redis:
    return redis.from_url(settings.REDIS_URL, decode_responses=True)


async def set_job_state(rds: redis.Redis, job_id: str, status: str, **fields: Any) -> None:
    state = {
        "status": status,
        "result": None,
        "assets": {},
        "warnings": [],
        "error_code": None,
        "error_message": None,
    }
    state.update(fields)
    await rds.set(f"{JOB_KEY_PREFIX}{job_id}", json.dumps(state))


async def process_job(rds: redis.Redis, engine: GenerationEngine, job_data: Dict[str, Any]) -> None:
    job_id = job_data.get("job_id")
    operation_id = job_data.get("operation_id")
    model_id = job_data.get("model_id")
    if not (job_id and operation_id and model_id):
        # Entry hỏng thì bỏ qua, không để 1 job làm chết worker loop
        logger.error("[Worker] Skipping malformed job entry: %s", job_data)
        return

    logger.info("[Worker] Processing job %s, %s / %s", job_id, operation_id, model_id)

    # Cập nhật trạng thái job -> processing
    await set_job_state(rds, job_id, "processing")

    try:
        outcome = await engine.generate_and_store(
            operation_id,
            model_id,
            job_data.get("params") or {},
            brand=job_data.get("brand"),
            session_id=job_data.get("session_id") or job_id,
        )
    except Exception as e:
        # Nếu lỗi thì lưu trạng thái error, worker vẫn chạy tiếp job khác
        code = classify_error(e)
        logger.exception("[Worker] Job %s failed (%s): %s", job_id, code, e)
        await set_job_state(rds, job_id, "error", error_code=code, error_message=str(e))
        return

    await set_job_state(
        rds,
        job_id,
        "done",
        result=outcome.result.model_dump(),
        assets={role: asset.model_dump() for role, asset in outcome.assets.items()},
        warnings=outcome.warnings,
    )
    logger.info("[Worker] Job %s completed successfully", job_id)


async def worker_loop(worker_id: int, engine: GenerationEngine) -> None:
    rds = await get_redis_client()
    logger.info("[Worker %d] Started", worker_id)

    while True:
        # BRPOP block đến khi có job mới
        _, job_json = await rds.brpop(QUEUE_KEY)
        try:
            job_data = json.loads(job_json)
        except json.JSONDecodeError:
            logger.error("[Worker %d] Invalid job JSON: %s", worker_id, job_json)
            continue
        if not isinstance(job_data, dict):
            logger.error("[Worker %d] Job entry is not an object: %s", worker_id, job_json)
            continue

        await process_job(rds, engine, job_data)


async def main(num_workers: int = 1) -> None:
    engine = GenerationEngine()
    tasks = [asyncio.create_task(worker_loop(i, engine)) for i in range(num_workers)]
    await asyncio.gather(*tasks)


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Mỗi worker = 1 job đồng thời, poll loop của các job chạy độc lập
    asyncio.run(main(num_workers=settings.NUM_WORKERS))
