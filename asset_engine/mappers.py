"""
Mapper: input đã resolve -> payload gửi backend, riêng cho từng model.
Mapper không validate lại; mọi key có giá trị None đều bị bỏ.
"""
from typing import Any, Callable, Dict, Iterable, List

Mapper = Callable[[Dict[str, Any]], Dict[str, Any]]

PLAYAI_DEFAULT_VOICE = "Jennifer (English (US)/American)"


def _drop_none(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in payload.items() if v is not None}


def passthrough(params: Dict[str, Any]) -> Dict[str, Any]:
    return _drop_none(dict(params))


def project(*fields: str) -> Mapper:
    """Chỉ giữ các field được liệt kê (theo thứ tự đó)."""

    def mapper(params: Dict[str, Any]) -> Dict[str, Any]:
        return _drop_none({f: params.get(f) for f in fields})

    return mapper


def image_edit(params: Dict[str, Any]) -> Dict[str, Any]:
    payload = dict(params)
    # luôn đi queue flow + URL hosted, không nhận data URI
    payload["sync_mode"] = False
    if "output_format" in payload:
        payload["output_format"] = "png" if payload["output_format"] == "png" else "jpeg"
    return _drop_none(payload)


def playai_tts(params: Dict[str, Any]) -> Dict[str, Any]:
    return _drop_none(
        {
            "input": params.get("text"),
            "voice": params.get("voice") or PLAYAI_DEFAULT_VOICE,
            "seed": params.get("seed"),
        }
    )


def ltx_multiconditioning(params: Dict[str, Any]) -> Dict[str, Any]:
    payload = dict(params)
    if payload.get("images") is not None:
        payload["images"] = [_wrap(item, "image_url") for item in payload["images"]]
    if payload.get("videos") is not None:
        payload["videos"] = [_wrap(item, "video_url") for item in payload["videos"]]
    return _drop_none(payload)


def _wrap(item: Any, key: str) -> Any:
    # đã là object {"image_url": ...} thì giữ nguyên
    if isinstance(item, str):
        return {key: item}
    return item


def split_urls(value: Any) -> List[str]:
    """
    "a, b,,c" -> ["a", "b", "c"]. Nhận cả list (từng phần tử cũng được split).
    """
    if value is None:
        return []
    items: Iterable[Any] = [value] if isinstance(value, str) else value
    out = []
    for item in items:
        for part in str(item).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


def url_list(field: str) -> Mapper:
    def mapper(params: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(params)
        if field in payload and payload[field] is not None:
            payload[field] = split_urls(payload[field])
        return _drop_none(payload)

    return mapper


# TTS: form dùng chung, mỗi model chỉ nhận 1 phần
TTS_MAPPERS: Dict[str, Mapper] = {
    "resemble-ai/chatterboxhd/text-to-speech": project(
        "text", "voice", "audio_url", "exaggeration", "cfg", "high_quality_audio", "seed", "temperature"
    ),
    "fal-ai/orpheus-tts": project("text", "voice", "temperature"),
    "fal-ai/minimax/speech-02-hd": project("text"),
    "fal-ai/minimax/speech-02-turbo": project("text"),
    "fal-ai/dia-tts": project("text"),
    "fal-ai/minimax/voice-clone": project("audio_url", "text"),
    "fal-ai/playai/tts/v3": playai_tts,
    "fal-ai/elevenlabs/tts/turbo-v2.5": project("text", "voice"),
    "fal-ai/chatterbox/text-to-speech": project("text", "audio_url", "exaggeration", "temperature", "cfg", "seed"),
}

MODEL_MAPPERS: Dict[str, Mapper] = {
    **TTS_MAPPERS,
    "fal-ai/ltx-video-13b-distilled/multiconditioning": ltx_multiconditioning,
    "fal-ai/hyper3d/rodin": url_list("input_image_urls"),
    "fal-ai/trellis/multi": url_list("image_urls"),
}

OPERATION_MAPPERS: Dict[str, Mapper] = {
    "image-to-image": image_edit,
}


def mapper_for(operation: str, model_id: str) -> Mapper:
    if model_id in MODEL_MAPPERS:
        return MODEL_MAPPERS[model_id]
    return OPERATION_MAPPERS.get(operation, passthrough)
