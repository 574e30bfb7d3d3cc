OPERATION = "text-to-audio"

# ACE-Step dùng chung bộ tham số sampling
_ACE_STEP_SAMPLING = {
    "duration": {"type": "number", "default": 60},
    "number_of_steps": {"type": "number", "default": 27},
    "seed": {"type": "number"},
    "scheduler": {"type": "string", "default": "euler"},
    "guidance_type": {"type": "string", "default": "apg"},
    "granularity_scale": {"type": "number", "default": 10},
    "guidance_interval": {"type": "number", "default": 0.5},
    "guidance_interval_decay": {"type": "number", "default": 0},
    "guidance_scale": {"type": "number", "default": 15},
    "minimum_guidance_scale": {"type": "number", "default": 3},
    "tag_guidance_scale": {"type": "number", "default": 5},
    "lyric_guidance_scale": {"type": "number", "default": 1.5},
}

MODELS = [
    {
        "id": "fal-ai/lyria2",
        "name": "Lyria 2 Text-to-Music",
        "description": "Generate music using Google's Lyria 2 text-to-music model.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": "low quality"},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/ace-step",
        "name": "ACE-Step Text-to-Audio",
        "description": "Generate audio from text using the ACE-Step model.",
        "parameters": {
            "tags": {"type": "string", "required": True},
            "lyrics": {"type": "string"},
            **_ACE_STEP_SAMPLING,
        },
    },
    {
        "id": "CassetteAI/music-generator",
        "name": "CassetteAI Music Generator",
        "description": "Generate music from a text prompt using CassetteAI.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "duration": {"type": "number", "required": True},
        },
    },
    {
        "id": "fal-ai/ace-step/prompt-to-audio",
        "name": "ACE-Step Prompt-to-Audio",
        "description": "Generate audio from a prompt using the ACE-Step model.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "instrumental": {"type": "boolean"},
            **_ACE_STEP_SAMPLING,
        },
    },
    {
        "id": "cassetteai/sound-effects-generator",
        "name": "CassetteAI Sound Effects Generator",
        "description": "Generate high-quality sound effects from a prompt using CassetteAI.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "duration": {"type": "number", "required": True},
        },
    },
    {
        "id": "fal-ai/diffrhythm",
        "name": "DiffRhythm",
        "description": "Generate full songs from lyrics using DiffRhythm.",
        "parameters": {
            "lyrics": {"type": "string", "required": True},
            "reference_audio_url": {"type": "string"},
            "style_prompt": {"type": "string"},
            "music_duration": {"type": "string", "options": ["95s", "285s"], "default": "95s"},
            "cfg_strength": {"type": "number", "default": 4},
            "scheduler": {
                "type": "string",
                "options": ["euler", "midpoint", "rk4", "implicit_adams"],
                "default": "euler",
            },
            "num_inference_steps": {"type": "number", "default": 32},
        },
    },
    {
        "id": "fal-ai/elevenlabs/sound-effects",
        "name": "ElevenLabs Sound Effects",
        "description": "Generate sound effects using ElevenLabs advanced model.",
        "parameters": {
            "text": {"type": "string", "required": True},
            "duration_seconds": {"type": "number", "min": 0.5, "max": 22},
            "prompt_influence": {"type": "number", "min": 0, "max": 1, "default": 0.3},
        },
    },
    {
        "id": "fal-ai/yue",
        "name": "YuE",
        "description": "Generate music from lyrics and genres using YuE.",
        "parameters": {
            "lyrics": {"type": "string", "required": True},
            "genres": {"type": "string", "required": True},
        },
    },
    {
        "id": "fal-ai/mmaudio-v2/text-to-audio",
        "name": "MMAudio V2",
        "description": "Generate synchronized audio from text using MMAudio V2.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string"},
            "seed": {"type": "number"},
            "num_steps": {"type": "number", "default": 25},
            "duration": {"type": "number", "default": 8},
            "cfg_strength": {"type": "number", "default": 4.5},
            "mask_away_clip": {"type": "boolean"},
        },
    },
    {
        "id": "fal-ai/minimax-music",
        "name": "MiniMax Music",
        "description": "Generate music from lyrics and reference audio using MiniMax.",
        "parameters": {
            "prompt": {"type": "string", "required": True, "max_length": 600},
            "reference_audio_url": {"type": "string"},
        },
    },
]
