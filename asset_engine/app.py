# asset_engine/app.py

import json
import logging
from typing import List

from fastapi import FastAPI, HTTPException

from config.settings import settings
from .engine import GenerationEngine
from .errors import SchemaMismatchError, ValidationError
from .model import GenerateRequest, GenerateResponse, JobResult, ModelInfo, OperationInfo
from .registry import registry
from .utils import gen_job_id
from .worker import JOB_KEY_PREFIX, QUEUE_KEY, get_redis_client, set_job_state

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Fal Asset Engine")

# Engine dùng chung, chỉ dùng để resolve đồng bộ, job chạy ở worker
engine = GenerationEngine()


def _not_found(code: str, message: str) -> HTTPException:
    return HTTPException(status_code=404, detail={"code": code, "message": message})


@app.get("/operations", response_model=List[OperationInfo])
async def list_operations():
    return registry.list_operations()


@app.get("/models/{operation_id}", response_model=List[ModelInfo])
async def list_models(operation_id: str):
    if not registry.has_operation(operation_id):
        raise _not_found("OPERATION_NOT_FOUND", f"Unknown operation {operation_id}")
    return registry.get_models_for_operation(operation_id)


@app.get("/model/{operation_id}/{model_id:path}", response_model=ModelInfo)
async def get_model(operation_id: str, model_id: str):
    info = registry.get_model_config(operation_id, model_id)
    if info is None:
        raise _not_found("MODEL_NOT_FOUND", f"Model {model_id} is not supported for operation {operation_id}")
    return info


@app.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest):
    # 1) Resolve ngay, lỗi params trả về đủ list trong 1 response
    try:
        engine.resolve_request(req.operation_id, req.model_id, req.params)
    except SchemaMismatchError as e:
        raise _not_found(e.code, str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "errors": e.errors})

    rds = await get_redis_client()

    # 2) Tạo job_id
    job_id = gen_job_id()

    job_data = {
        "job_id": job_id,
        "operation_id": req.operation_id,
        "model_id": req.model_id,
        "params": req.params,
        "brand": req.brand,
        "session_id": req.session_id,
    }

    # 3) Lưu trạng thái job ban đầu
    await set_job_state(rds, job_id, "waiting")

    # 4) Đẩy job vào queue cho worker xử lý
    await rds.lpush(QUEUE_KEY, json.dumps(job_data))
    logger.info("[API] Queued job %s for %s", job_id, req.model_id)

    return GenerateResponse(job_id=job_id, status="waiting")


@app.get("/result/{job_id}", response_model=JobResult)
async def get_result(job_id: str):
    """
    Trả về trạng thái job + result / assets (nếu xong) hoặc lỗi.
    """
    rds = await get_redis_client()
    data = await rds.get(f"{JOB_KEY_PREFIX}{job_id}")
    if not data:
        raise HTTPException(status_code=404, detail="Job không tồn tại")

    obj = json.loads(data)
    return JobResult(
        job_id=job_id,
        status=obj.get("status", "waiting"),
        result=obj.get("result"),
        assets=obj.get("assets") or {},
        warnings=obj.get("warnings") or [],
        error_code=obj.get("error_code"),
        error_message=obj.get("error_message"),
    )
