OPERATION = "image-to-video"

_WAN_NEGATIVE = (
    "bright colors, overexposed, static, blurred details, subtitles, style, artwork, painting, "
    "picture, still, overall gray, worst quality, low quality, JPEG compression residue, ugly, "
    "incomplete, extra fingers, poorly drawn hands, poorly drawn faces, deformed, disfigured, "
    "malformed limbs, fused fingers, still picture, cluttered background, three legs, many people "
    "in the background, walking backwards"
)

MODELS = [
    {
        "id": "fal-ai/veo2/image-to-video",
        "name": "Veo 2 Image-to-Video",
        "description": "Animate an input image using Google's Veo 2 model.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "aspect_ratio": {
                "type": "string",
                "options": ["auto", "auto_prefer_portrait", "16:9", "9:16"],
                "default": "auto",
            },
            "duration": {"type": "string", "options": ["5s", "6s", "7s", "8s"], "default": "5s"},
        },
    },
    {
        "id": "fal-ai/wan-pro/image-to-video",
        "name": "Wan Pro",
        "description": "Generate a 6-second 1080p video (at 30 FPS) from an image and text using Wan 2.1.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "seed": {"type": "number"},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/kling-video/v2.1/standard/image-to-video",
        "name": "Kling 2.1 (std)",
        "description": "Kling 2.1 (std) Image to Video API.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "duration": {"type": "string", "options": ["5", "10"], "default": "5"},
            "negative_prompt": {"type": "string", "default": "blur, distort, and low quality"},
            "cfg_scale": {"type": "number", "default": 0.5},
        },
    },
    {
        "id": "fal-ai/bytedance/seedance/v1/lite/image-to-video",
        "name": "Seedance 1.0 Lite",
        "description": "Generate videos from an image and text using Bytedance's Seedance 1.0 Lite model.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "resolution": {"type": "string", "options": ["480p", "720p", "1080p"], "default": "720p"},
            "duration": {"type": "string", "options": ["5", "10"], "default": "5"},
            "camera_fixed": {"type": "boolean"},
            "seed": {"type": "number"},
            "end_image_url": {"type": "string"},
        },
    },
    {
        "id": "fal-ai/minimax/hailuo-02/pro/image-to-video",
        "name": "MiniMax Hailuo-02 (Pro)",
        "description": "Image-to-video generation with 1080p resolution.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "prompt_optimizer": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/wan-i2v",
        "name": "Wan I2V",
        "description": "Image-to-video with prompt, negative prompt, and many controls.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": _WAN_NEGATIVE},
            "num_frames": {"type": "number", "default": 81},
            "frames_per_second": {"type": "number", "default": 16},
            "seed": {"type": "number"},
            "resolution": {"type": "string", "options": ["480p", "720p"], "default": "720p"},
            "num_inference_steps": {"type": "number", "options": [4, 8, 16, 32], "default": 16},
            "enable_safety_checker": {"type": "boolean"},
            "enable_prompt_expansion": {"type": "boolean"},
            "acceleration": {"type": "string", "options": ["none", "regular"], "default": "regular"},
            "aspect_ratio": {"type": "string", "options": ["auto", "16:9", "9:16", "1:1"], "default": "auto"},
        },
    },
    {
        "id": "fal-ai/pixverse/v4.5/image-to-video",
        "name": "PixVerse V4.5",
        "description": "High quality image-to-video with style, aspect ratio, and resolution options.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": ["16:9", "4:3", "1:1", "3:4", "9:16"], "default": "16:9"},
            "resolution": {"type": "string", "options": ["360p", "540p", "720p", "1080p"], "default": "720p"},
            "duration": {"type": "string", "options": ["5", "8"], "default": "5"},
            "negative_prompt": {"type": "string", "default": ""},
            "style": {"type": "string", "options": ["anime", "3d_animation", "clay", "comic", "cyberpunk"]},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/luma-dream-machine/ray-2-flash/image-to-video",
        "name": "Luma Ray2",
        "description": "Image-to-video with aspect ratio, loop, and resolution options.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string"},
            "end_image_url": {"type": "string"},
            "aspect_ratio": {
                "type": "string",
                "options": ["16:9", "9:16", "4:3", "3:4", "21:9", "9:21"],
                "default": "16:9",
            },
            "loop": {"type": "boolean"},
            "resolution": {"type": "string", "options": ["540p", "720p", "1080p"], "default": "540p"},
            "duration": {"type": "string", "options": ["5s"], "default": "5s"},
        },
    },
    {
        "id": "fal-ai/magi-distilled/image-to-video",
        "name": "Magi Distilled",
        "description": "Generate a video from an image with advanced controls.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "num_frames": {"type": "number", "default": 96},
            "seed": {"type": "number"},
            "resolution": {"type": "string", "options": ["480p", "720p"], "default": "720p"},
            "num_inference_steps": {"type": "number", "options": [4, 8, 16, 32], "default": 16},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "aspect_ratio": {"type": "string", "options": ["auto", "16:9", "9:16", "1:1"], "default": "auto"},
        },
    },
]
