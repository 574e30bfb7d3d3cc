OPERATION = "text-to-speech"

# Tất cả model TTS chia sẻ cùng một form; mapper sẽ lọc field theo từng model
_TTS_PARAMS = {
    "text": {"type": "string", "required": True},
    "voice": {"type": "string"},
    "audio_url": {"type": "string"},
    "exaggeration": {"type": "number", "default": 0.25},
    "cfg": {"type": "number", "default": 0.5},
    "high_quality_audio": {"type": "boolean"},
    "seed": {"type": "number"},
    "temperature": {"type": "number", "default": 0.8},
}


def _tts(model_id: str, name: str, description: str) -> dict:
    return {"id": model_id, "name": name, "description": description, "parameters": dict(_TTS_PARAMS)}


MODELS = [
    _tts(
        "resemble-ai/chatterboxhd/text-to-speech",
        "ChatterboxHD TTS",
        "High-quality TTS with voice selection, emotion, and more.",
    ),
    _tts("fal-ai/orpheus-tts", "Orpheus TTS", "Expressive TTS with voice selection and emotion."),
    _tts("fal-ai/minimax/speech-02-hd", "MiniMax Speech 02 HD", "High-definition TTS."),
    _tts("fal-ai/dia-tts", "Dia TTS", "Dialogue TTS with speaker tags."),
    _tts("fal-ai/minimax/voice-clone", "MiniMax Voice Clone", "Clone a voice from reference audio."),
    _tts("fal-ai/playai/tts/v3", "PlayAI TTS v3", "TTS with voice presets."),
    _tts("fal-ai/elevenlabs/tts/turbo-v2.5", "ElevenLabs Turbo v2.5", "Multi-language low-latency TTS."),
    _tts("fal-ai/minimax/speech-02-turbo", "MiniMax Speech 02 Turbo", "Fast TTS."),
    _tts(
        "fal-ai/chatterbox/text-to-speech",
        "Chatterbox TTS",
        "Chatterbox TTS with emotive tags and reference audio.",
    ),
]
