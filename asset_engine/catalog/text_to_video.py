OPERATION = "text-to-video"

_PIXVERSE_RATIOS = ["16:9", "4:3", "1:1", "3:4", "9:16"]
_PIXVERSE_STYLES = ["anime", "3d_animation", "clay", "comic", "cyberpunk"]
_LUMA_RATIOS = ["16:9", "9:16", "4:3", "3:4", "21:9", "9:21"]

MODELS = [
    {
        "id": "fal-ai/kling-video/v2/master/text-to-video",
        "name": "Kling 2.0 Master",
        "description": (
            "Kling 2.0 Master Text to Video API with enhanced text understanding, "
            "motion quality, and visual quality."
        ),
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "duration": {"type": "string", "options": ["5", "10"], "default": "5"},
            "aspect_ratio": {"type": "string", "options": ["16:9", "9:16", "1:1"], "default": "16:9"},
            "negative_prompt": {"type": "string", "default": "blur, distort, and low quality"},
            "cfg_scale": {"type": "number", "min": 0, "max": 2, "default": 0.5},
        },
    },
    {
        "id": "fal-ai/bytedance/seedance/v1/pro/text-to-video",
        "name": "Seedance 1.0 Pro",
        "description": "High quality video generation model developed by Bytedance with 1080p resolution.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {
                "type": "string",
                "options": ["21:9", "16:9", "4:3", "1:1", "3:4", "9:16"],
                "default": "16:9",
            },
            "resolution": {"type": "string", "options": ["480p", "1080p"], "default": "1080p"},
            "duration": {"type": "string", "options": ["5", "10"], "default": "5"},
            "camera_fixed": {"type": "boolean", "default": False},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/pixverse/v4/text-to-video/fast",
        "name": "PixVerse V4 Fast",
        "description": "High quality, fast text-to-video generation with aspect ratio, resolution and style.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": _PIXVERSE_RATIOS, "default": "16:9"},
            "resolution": {"type": "string", "options": ["360p", "540p", "720p"], "default": "720p"},
            "negative_prompt": {"type": "string"},
            "style": {"type": "string", "options": _PIXVERSE_STYLES},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/pixverse/v4.5/text-to-video",
        "name": "PixVerse V4.5",
        "description": "High quality text-to-video generation with style, duration and negative prompt.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": _PIXVERSE_RATIOS, "default": "16:9"},
            "resolution": {"type": "string", "options": ["360p", "540p", "720p", "1080p"], "default": "720p"},
            "duration": {"type": "string", "options": ["5", "8"], "default": "5"},
            "negative_prompt": {"type": "string"},
            "style": {"type": "string", "options": _PIXVERSE_STYLES},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/wan-pro/text-to-video",
        "name": "Wan Pro",
        "description": "Generate a 6-second 1080p video (at 30 FPS) from text using an enhanced version of Wan 2.1.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "seed": {"type": "number"},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/luma-dream-machine/ray-2-flash",
        "name": "Luma Ray2 Flash",
        "description": "Text-to-video generation with aspect ratio, resolution, and looping support.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": _LUMA_RATIOS, "default": "16:9"},
            "loop": {"type": "boolean"},
            "resolution": {"type": "string", "options": ["540p", "720p", "1080p"], "default": "540p"},
            "duration": {"type": "string", "options": ["5s", "9s"], "default": "5s"},
        },
    },
    {
        "id": "fal-ai/pika/v2.2/text-to-video",
        "name": "Pika 2.2",
        "description": "High quality text-to-video generation with resolution and duration options.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "seed": {"type": "number"},
            "negative_prompt": {"type": "string", "default": ""},
            "aspect_ratio": {
                "type": "string",
                "options": ["16:9", "9:16", "1:1", "4:5", "5:4", "3:2", "2:3"],
                "default": "16:9",
            },
            "resolution": {"type": "string", "options": ["720p", "1080p"], "default": "720p"},
            "duration": {"type": "number", "options": [5], "default": 5},
        },
    },
    {
        "id": "fal-ai/minimax/hailuo-02/standard/text-to-video",
        "name": "MiniMax Hailuo-02",
        "description": "Video generation with 768p resolution and prompt optimization.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "duration": {"type": "string", "options": ["6", "10"], "default": "6"},
            "prompt_optimizer": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/veo3",
        "name": "Veo 3",
        "description": "Google's Veo 3 Fast model with prompt enhancement and audio support.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": ["16:9", "9:16", "1:1"], "default": "16:9"},
            "duration": {"type": "string", "options": ["8s"], "default": "8s"},
            "negative_prompt": {"type": "string"},
            "enhance_prompt": {"type": "boolean", "default": True},
            "seed": {"type": "number"},
            "resolution": {"type": "string", "options": ["720p", "1080p"], "default": "720p"},
            "generate_audio": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/veo2",
        "name": "Veo 2",
        "description": "Google's Veo 2 text-to-video model with prompt enhancement.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": ["16:9", "9:16"], "default": "16:9"},
            "duration": {"type": "string", "options": ["5s", "6s", "7s", "8s"], "default": "5s"},
            "negative_prompt": {"type": "string"},
            "enhance_prompt": {"type": "boolean", "default": True},
            "seed": {"type": "number"},
        },
    },
]
