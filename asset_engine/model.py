# asset_engine/model.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, Literal, Dict, Any, List

OperationId = Literal[
    "text-to-image",
    "text-to-video",
    "image-to-video",
    "text-to-audio",
    "text-to-speech",
    "image-to-image",
    "video-to-video",
    "image-to-3d",
]

ParamType = Literal["string", "number", "boolean", "array"]

Tier = Literal["budget", "fast", "standard", "premium"]

Protocol = Literal["subscribe", "queue"]

# SUBMITTED -> IN_PROGRESS -> COMPLETED -> DONE, hoặc ERROR
JobState = Literal["SUBMITTED", "IN_PROGRESS", "COMPLETED", "DONE", "ERROR"]

Status = Literal["waiting", "processing", "done", "error"]


class ParameterSpec(BaseModel):
    type: ParamType
    required: bool = False
    options: Optional[List[Any]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    default: Any = None
    items: Optional["ItemSchema"] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @model_validator(mode="after")
    def _required_has_no_default(self):
        if self.required and self.has_default:
            raise ValueError("a required parameter cannot carry a default")
        return self


class ItemSchema(BaseModel):
    """Schema cho từng phần tử object trong field kiểu array (vd: RGB color)."""
    properties: Dict[str, ParameterSpec]


ParameterSpec.model_rebuild()


class ModelSchema(BaseModel):
    id: str
    name: str
    description: str = ""
    operation: OperationId
    parameters: Dict[str, ParameterSpec] = Field(default_factory=dict)


class Pricing(BaseModel):
    price: str
    source: str
    tier: Tier


class ModelInfo(ModelSchema):
    pricing: Optional[Pricing] = None
    current_operation: Optional[OperationId] = None


class OperationInfo(BaseModel):
    id: OperationId
    name: str
    description: str
    model_count: int


class ResolveResult(BaseModel):
    is_valid: bool
    cleaned: Dict[str, Any] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)


class ResolvedJobRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    operation: OperationId
    input: Dict[str, Any]


class JobExecution(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    protocol: Protocol
    request_id: Optional[str] = None
    status: JobState = "SUBMITTED"
    poll_count: int = 0
    started_at: int


class ExtractedResult(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    asset_url: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None
    model_mesh_url: Optional[str] = None
    model_glb_url: Optional[str] = None
    model_glb_pbr_url: Optional[str] = None
    pbr_model_url: Optional[str] = None
    rendered_image_url: Optional[str] = None
    base_model_url: Optional[str] = None
    remeshing_dir_url: Optional[str] = None
    textures: List[str] = Field(default_factory=list)
    timings: Optional[Dict[str, Any]] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    request_id: Optional[str] = None

    def urls(self) -> Dict[str, str]:
        """
        Trả về mọi URL đã có, key là role (textures được đánh số).
        """
        out = {}
        for name, value in self:
            if name.endswith("_url") and value:
                out[name] = value
        for i, url in enumerate(self.textures):
            out[f"texture_{i}"] = url
        return out


class StoredAsset(BaseModel):
    url: str
    id: Optional[str] = None
    name: Optional[str] = None
    folder_id: Optional[str] = None
    folder_name: Optional[str] = None
    folder_url: Optional[str] = None
    original_url: Optional[str] = None
    fallback: bool = False
    error: Optional[str] = None


class GenerationOutcome(BaseModel):
    result: ExtractedResult
    assets: Dict[str, StoredAsset] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


class GenerateRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    operation_id: str
    model_id: str
    params: Dict[str, Any] = Field(default_factory=dict)
    brand: Optional[str] = None
    session_id: Optional[str] = None


class GenerateResponse(BaseModel):
    job_id: str
    status: Status


class JobResult(BaseModel):
    job_id: str
    status: Status
    result: Optional[ExtractedResult] = None
    assets: Dict[str, StoredAsset] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
    error_code: Optional[str] = None
    error_message: Optional[str] = None
