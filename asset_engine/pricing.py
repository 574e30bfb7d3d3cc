"""
Bảng giá ước tính theo (operation, model_id), cập nhật giữa 2025.
MP = megapixel, sec = giây video.
"""
from typing import Dict, Optional

from .model import Pricing


def _p(price: str, source: str, tier: str) -> Dict[str, str]:
    return {"price": price, "source": source, "tier": tier}


_VIDEO_RANGE = "~$0.20–0.50/sec"
_MUSIC = "~$0.05–0.10/1K chars"
_TTS = "~$0.05–0.08/1K chars"
_EDIT = "~$0.025–0.05/MP"
_MESH = "~$0.05–0.10/output"

MODEL_PRICING: Dict[str, Dict[str, Dict[str, str]]] = {
    "text-to-image": {
        "fal-ai/hidream-i1-full": _p("$0.05/MP", "Fal.ai", "premium"),
        "fal-ai/ideogram/v2": _p("~$0.05/MP", "Estimated (SDXL/medium tier)", "premium"),
        "fal-ai/stable-diffusion-v35-large": _p("~$0.035/MP", "Fal.ai (SD-3 Medium baseline)", "standard"),
        "fal-ai/omnigen-v2": _p("~$0.05/MP", "Estimated (premium image generation)", "premium"),
        "fal-ai/imagen4/preview": _p("~$0.05/MP", "Estimated (Imagen4 standard)", "premium"),
        "fal-ai/hidream-i1-fast": _p("~$0.025/MP", "Estimated (HiDream-Dev/Fast tier)", "fast"),
        "fal-ai/flux-1/schnell": _p("$0.003/MP", "Fal.ai (fastest tier)", "budget"),
        "fal-ai/imagen4/preview/fast": _p("~$0.025/MP", "Estimated (fast variant pricing)", "fast"),
        "fal-ai/recraft/v2/text-to-image": _p("~$0.025–0.05/MP", "Estimated (affordable typography model)", "standard"),
        "fal-ai/f-lite/standard": _p("~$0.025/MP", "Estimated (efficient lightweight model)", "budget"),
    },
    "text-to-video": {
        "fal-ai/kling-video/v2/master/text-to-video": _p("~$0.25–0.40/sec", "Estimated (high quality)", "premium"),
        "fal-ai/bytedance/seedance/v1/pro/text-to-video": _p("~$0.30/sec", "Estimated (1080p resolution)", "premium"),
        "fal-ai/pixverse/v4/text-to-video/fast": _p("~$0.20/sec", "Estimated (fast tier)", "fast"),
        "fal-ai/pixverse/v4.5/text-to-video": _p("~$0.20–0.40/sec", "Estimated (high quality)", "standard"),
        "fal-ai/wan-pro/text-to-video": _p("~$0.20–0.40/sec", "Estimated (6-second 1080p)", "standard"),
        "fal-ai/luma-dream-machine/ray-2-flash": _p("~$0.40–0.60/sec", "Estimated (state of the art)", "premium"),
        "fal-ai/pika/v2.2/text-to-video": _p("~$0.30/sec", "Estimated (high quality)", "standard"),
        "fal-ai/minimax/hailuo-02/standard/text-to-video": _p("~$0.08–0.10/sec", "Estimated (lower-res variant)", "budget"),
        "fal-ai/veo3": _p("$0.50/sec (audio off), $0.75/sec (audio on)", "Fal.ai", "premium"),
        "fal-ai/veo2": _p("~$0.40/sec", "Estimated (comparable tier)", "premium"),
    },
    "image-to-video": {
        "fal-ai/veo2/image-to-video": _p(_VIDEO_RANGE, "Estimated (similar to text-to-video)", "standard"),
        "fal-ai/wan-pro/image-to-video": _p(_VIDEO_RANGE, "Estimated (6-second 1080p)", "standard"),
        "fal-ai/kling-video/v2.1/standard/image-to-video": _p(_VIDEO_RANGE, "Estimated (standard quality)", "standard"),
        "fal-ai/bytedance/seedance/v1/lite/image-to-video": _p(_VIDEO_RANGE, "Estimated (lite variant)", "budget"),
        "fal-ai/minimax/hailuo-02/pro/image-to-video": _p(_VIDEO_RANGE, "Estimated (pro variant)", "premium"),
        "fal-ai/wan-i2v": _p(_VIDEO_RANGE, "Estimated (advanced controls)", "standard"),
        "fal-ai/pixverse/v4.5/image-to-video": _p(_VIDEO_RANGE, "Estimated (high quality)", "standard"),
        "fal-ai/luma-dream-machine/ray-2-flash/image-to-video": _p(_VIDEO_RANGE, "Estimated (state of the art)", "premium"),
        "fal-ai/magi-distilled/image-to-video": _p(_VIDEO_RANGE, "Estimated (advanced controls)", "standard"),
    },
    "text-to-audio": {
        "fal-ai/lyria2": _p(_MUSIC, "Estimated (music generation)", "standard"),
        "fal-ai/ace-step": _p(_MUSIC, "Estimated (audio generation)", "standard"),
        "CassetteAI/music-generator": _p(_MUSIC, "Estimated (music generation)", "standard"),
        "fal-ai/ace-step/prompt-to-audio": _p(_MUSIC, "Estimated (prompt-to-audio)", "standard"),
        "cassetteai/sound-effects-generator": _p(_MUSIC, "Estimated (sound effects)", "standard"),
        "fal-ai/diffrhythm": _p(_MUSIC, "Estimated (full songs)", "standard"),
        "fal-ai/elevenlabs/sound-effects": _p(_MUSIC, "Estimated (sound effects)", "standard"),
        "fal-ai/yue": _p(_MUSIC, "Estimated (music from lyrics)", "standard"),
        "fal-ai/mmaudio-v2/text-to-audio": _p(_MUSIC, "Estimated (synchronized audio)", "standard"),
        "fal-ai/minimax-music": _p(_MUSIC, "Estimated (music generation)", "standard"),
    },
    "text-to-speech": {
        "resemble-ai/chatterboxhd/text-to-speech": _p(_TTS, "Estimated (high-quality TTS)", "standard"),
        "fal-ai/orpheus-tts": _p(_TTS, "Estimated (expressive TTS)", "standard"),
        "fal-ai/minimax/speech-02-hd": _p(_TTS, "Estimated (HD TTS)", "premium"),
        "fal-ai/dia-tts": _p(_TTS, "Estimated (dialogue TTS)", "standard"),
        "fal-ai/minimax/voice-clone": _p(_TTS, "Estimated (voice cloning)", "premium"),
        "fal-ai/playai/tts/v3": _p(_TTS, "Estimated (voice presets)", "standard"),
        "fal-ai/elevenlabs/tts/turbo-v2.5": _p(_TTS, "Estimated (multi-language)", "standard"),
        "fal-ai/minimax/speech-02-turbo": _p("$0.06/1K chars", "Community pricing database", "fast"),
        "fal-ai/chatterbox/text-to-speech": _p(_TTS, "Estimated (emotive TTS)", "standard"),
    },
    "image-to-image": {
        "fal-ai/image-editing/background-change": _p(_EDIT, "Estimated (similar to text-to-image)", "standard"),
        "fal-ai/image-editing/face-enhancement": _p(_EDIT, "Estimated (professional retouching)", "standard"),
        "fal-ai/image-editing/color-correction": _p(_EDIT, "Estimated (color grading)", "standard"),
        "fal-ai/post-processing/sharpen": _p(_EDIT, "Estimated (sharpening effects)", "standard"),
        "fal-ai/image-editing/object-removal": _p(_EDIT, "Estimated (object removal)", "standard"),
        "fal-ai/flux/dev/image-to-image": _p(_EDIT, "Estimated (high-quality transformation)", "standard"),
        "fal-ai/recraft/v3/image-to-image": _p(_EDIT, "Estimated (advanced editing)", "standard"),
        "fal-ai/luma-photon/modify": _p(_EDIT, "Estimated (creative editing)", "standard"),
        "fal-ai/bytedance/seededit/v3/edit-image": _p(_EDIT, "Estimated (accurate editing)", "standard"),
        "fal-ai/flux-pro/kontext/max/multi": _p(_EDIT, "Estimated (premium editing)", "premium"),
    },
    "video-to-video": {
        "fal-ai/luma-dream-machine/ray-2/modify": _p(_VIDEO_RANGE, "Estimated (similar to text-to-video)", "premium"),
        "fal-ai/wan-vace-14b": _p(_VIDEO_RANGE, "Estimated (inpainting)", "standard"),
        "fal-ai/ltx-video-13b-distilled/multiconditioning": _p(_VIDEO_RANGE, "Estimated (multiconditioning)", "standard"),
        "fal-ai/magi/extend-video": _p(_VIDEO_RANGE, "Estimated (video extension)", "standard"),
        "fal-ai/pixverse/lipsync": _p(_VIDEO_RANGE, "Estimated (lipsync)", "standard"),
        "fal-ai/pixverse/extend/fast": _p(_VIDEO_RANGE, "Estimated (fast extension)", "fast"),
        "fal-ai/fast-animatediff/turbo/video-to-video": _p(_VIDEO_RANGE, "Estimated (turbo video-to-video)", "fast"),
        "fal-ai/video-upscaler": _p(_VIDEO_RANGE, "Estimated (upscaling)", "standard"),
        "fal-ai/amt-interpolation": _p(_VIDEO_RANGE, "Estimated (frame interpolation)", "standard"),
        "fal-ai/ffmpeg-api/merge-audio-video": _p(_VIDEO_RANGE, "Estimated (audio-video merge)", "standard"),
    },
    "image-to-3d": {
        "tripo3d/tripo/v2.5/image-to-3d": _p(_MESH, "Estimated (3D generation)", "premium"),
        "fal-ai/hunyuan3d-v21": _p(_MESH, "Estimated (Tencent 3D)", "premium"),
        "fal-ai/hyper3d/rodin": _p(_MESH, "Estimated (Hyper3D)", "premium"),
        "fal-ai/trellis": _p(_MESH, "Estimated (Trellis 3D)", "premium"),
        "tripo3d/tripo/v2.5/multiview-to-3d": _p(_MESH, "Estimated (multiview 3D)", "premium"),
        "fal-ai/hunyuan3d/v2/multi-view": _p(_MESH, "Estimated (multi-view 3D)", "premium"),
        "fal-ai/trellis/multi": _p(_MESH, "Estimated (multi-image 3D)", "premium"),
        "fal-ai/hunyuan3d/v2": _p(_MESH, "Estimated (Hunyuan3D v2)", "premium"),
        "fal-ai/hunyuan3d/v2/turbo": _p(_MESH, "Estimated (turbo 3D)", "premium"),
        "fal-ai/triposr": _p(_MESH, "Estimated (TripoSR)", "premium"),
    },
}

_TIER_EMOJI = {
    "budget": "💰",
    "fast": "⚡",
    "standard": "📊",
    "premium": "💎",
}


def get_model_pricing(operation: str, model_id: str) -> Optional[Pricing]:
    entry = MODEL_PRICING.get(operation, {}).get(model_id)
    if entry is None:
        return None
    return Pricing(**entry)


def get_operation_pricing(operation: str) -> Dict[str, Pricing]:
    return {mid: Pricing(**entry) for mid, entry in MODEL_PRICING.get(operation, {}).items()}


def format_pricing(pricing) -> str:
    """
    Nhận Pricing hoặc dict thô (vd: JSON từ API) -> "<emoji> <price>".
    """
    if not pricing:
        return "Pricing not available"
    if isinstance(pricing, Pricing):
        pricing = pricing.model_dump()
    emoji = _TIER_EMOJI.get(pricing.get("tier"), "💵")
    return f"{emoji} {pricing.get('price')}"
