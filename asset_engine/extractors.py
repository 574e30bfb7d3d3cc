"""
Tìm URL output trong response của backend.

Response không đồng nhất giữa các model (kể cả cùng operation), nên mỗi
model/family có 1 danh sách path cố định để dò. Không tìm được URL nào
-> ResultShapeError, không bao giờ trả result rỗng.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from .errors import ResultShapeError
from .model import ExtractedResult
from .registry import registry
from .utils import is_http_url

Path = Tuple[Any, ...]
Extractor = Callable[[str, Dict[str, Any]], ExtractedResult]

MESH_ROLES = ("model_mesh_url", "model_glb_url", "model_glb_pbr_url", "pbr_model_url", "base_model_url")


def dig(obj: Any, path: Path) -> Any:
    for key in path:
        if isinstance(key, int):
            if not isinstance(obj, list) or len(obj) <= key:
                return None
            obj = obj[key]
        else:
            if not isinstance(obj, Mapping):
                return None
            obj = obj.get(key)
        if obj is None:
            return None
    return obj


def _url_at(response: Mapping, path: Path) -> Optional[str]:
    value = dig(response, path)
    return value if is_http_url(value) else None


def _data(response: Mapping) -> Mapping:
    data = response.get("data") if isinstance(response, Mapping) else None
    return data if isinstance(data, Mapping) else {}


def _request_id(response: Mapping) -> Optional[str]:
    return response.get("request_id") if isinstance(response, Mapping) else None


def first_url(paths: Sequence[Path], roles: Sequence[str], metadata: Sequence[str] = ()) -> Extractor:
    """
    Lấy URL đầu tiên hợp lệ theo thứ tự `paths`, gán cho mọi role trong `roles`.
    `metadata`: các key trong data được copy sang result.metadata nếu có.
    """

    def extract(model_id: str, response: Dict[str, Any]) -> ExtractedResult:
        url = None
        for path in paths:
            url = _url_at(response, path)
            if url:
                break
        if not url:
            raise ResultShapeError(f"{model_id} did not return a hosted URL")

        data = _data(response)
        meta = {k: data[k] for k in metadata if data.get(k) is not None}
        return ExtractedResult(**{r: url for r in roles}, metadata=meta, request_id=_request_id(response))

    return extract


def mesh(fields: Dict[str, str], textures: bool = False, timings: bool = False) -> Extractor:
    """
    3D: `fields` = {field trong data: role trong ExtractedResult}.
    Bắt buộc có ít nhất 1 URL mesh.
    """

    def extract(model_id: str, response: Dict[str, Any]) -> ExtractedResult:
        data = _data(response)
        found: Dict[str, Any] = {}
        for field, role in fields.items():
            url = _url_at(data, (field, "url"))
            if url:
                found[role] = url
        if textures and isinstance(data.get("textures"), list):
            found["textures"] = [t["url"] for t in data["textures"] if isinstance(t, Mapping) and is_http_url(t.get("url"))]
        if timings and isinstance(data.get("timings"), Mapping):
            found["timings"] = dict(data["timings"])

        if not any(found.get(role) for role in MESH_ROLES):
            raise ResultShapeError(f"{model_id} did not return a 3D model URL")
        return ExtractedResult(**found, request_id=_request_id(response))

    return extract


_VIDEO = first_url([("data", "video", "url")], ["video_url"])
_AUDIO = first_url([("data", "audio", "url")], ["audio_url"])

OPERATION_EXTRACTORS: Dict[str, Extractor] = {
    "text-to-image": first_url([("data", "images", 0, "url")], ["asset_url"]),
    "text-to-video": _VIDEO,
    "image-to-video": _VIDEO,
    "video-to-video": _VIDEO,
    "text-to-audio": _AUDIO,
    "text-to-speech": first_url([("data", "audio", "url"), ("data", "audio_url")], ["audio_url"]),
    "image-to-image": first_url(
        [("data", "images", 0, "url"), ("images", 0, "url"), ("data", "image", "url")],
        ["image_url", "asset_url"],
    ),
}

_TRIPO = {"model_mesh": "model_mesh_url", "pbr_model": "pbr_model_url", "rendered_image": "rendered_image_url"}
_MESH_ONLY = {"model_mesh": "model_mesh_url"}
_ACE_STEP = first_url([("data", "audio", "url")], ["audio_url"], metadata=("seed", "tags", "lyrics"))
_CASSETTE = first_url([("data", "audio_file", "url")], ["audio_url"])

MODEL_EXTRACTORS: Dict[str, Extractor] = {
    # text-to-audio
    "fal-ai/ace-step": _ACE_STEP,
    "fal-ai/ace-step/prompt-to-audio": _ACE_STEP,
    "CassetteAI/music-generator": _CASSETTE,
    "cassetteai/sound-effects-generator": _CASSETTE,
    # image-to-3d
    "tripo3d/tripo/v2.5/image-to-3d": mesh(_TRIPO),
    "tripo3d/tripo/v2.5/multiview-to-3d": mesh({**_TRIPO, "base_model": "base_model_url"}),
    "fal-ai/hunyuan3d-v21": mesh(
        {"model_glb": "model_glb_url", "model_glb_pbr": "model_glb_pbr_url", "model_mesh": "model_mesh_url"}
    ),
    "fal-ai/hyper3d/rodin": mesh(_MESH_ONLY, textures=True),
    "fal-ai/trellis": mesh(_MESH_ONLY, timings=True),
    "fal-ai/trellis/multi": mesh(_MESH_ONLY, timings=True),
    "fal-ai/hunyuan3d/v2": mesh(_MESH_ONLY),
    "fal-ai/hunyuan3d/v2/multi-view": mesh(_MESH_ONLY),
    "fal-ai/hunyuan3d/v2/turbo": mesh(_MESH_ONLY),
    "fal-ai/triposr": mesh({**_MESH_ONLY, "remeshing_dir": "remeshing_dir_url"}, timings=True),
}


def extractor_for(operation: str, model_id: str) -> Extractor:
    if model_id in MODEL_EXTRACTORS:
        return MODEL_EXTRACTORS[model_id]
    if operation in OPERATION_EXTRACTORS:
        return OPERATION_EXTRACTORS[operation]
    raise KeyError(f"No extractor for {model_id} ({operation})")


def extract(model_id: str, response: Dict[str, Any]) -> ExtractedResult:
    schema = registry.get_schema(model_id)
    if schema is None:
        raise KeyError(f"Unknown model {model_id}")
    return extractor_for(schema.operation, model_id)(model_id, response or {})
