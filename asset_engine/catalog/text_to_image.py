OPERATION = "text-to-image"

_IMAGE_SIZES = ["square_hd", "landscape_4_3", "portrait_4_3"]
_ASPECT_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4"]
_OUTPUT_FORMATS = ["jpeg", "png"]

MODELS = [
    {
        "id": "fal-ai/hidream-i1-full",
        "name": "HiDream-I1 Full",
        "description": "SOTA image quality, 17B params, fast",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": ""},
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "square_hd"},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 50},
            "seed": {"type": "number"},
            "guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 5},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": {"type": "string", "options": _OUTPUT_FORMATS, "default": "jpeg"},
        },
    },
    {
        "id": "fal-ai/ideogram/v2",
        "name": "Ideogram V2",
        "description": "Exceptional typography, realistic outputs, commercial/creative use",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "aspect_ratio": {"type": "string", "options": _ASPECT_RATIOS, "default": "1:1"},
            "expand_prompt": {"type": "boolean", "default": True},
            "style": {
                "type": "string",
                "options": ["auto", "cinematic", "photographic", "anime", "digital-art"],
                "default": "auto",
            },
            "seed": {"type": "number"},
            "negative_prompt": {"type": "string", "default": ""},
        },
    },
    {
        "id": "fal-ai/stable-diffusion-v35-large",
        "name": "Stable Diffusion 3.5 Large",
        "description": "Multimodal, high quality, resource-efficient",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": ""},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 28},
            "seed": {"type": "number"},
            "guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 3.5},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": {"type": "string", "options": _OUTPUT_FORMATS, "default": "jpeg"},
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "landscape_4_3"},
        },
    },
    {
        "id": "fal-ai/omnigen-v2",
        "name": "OmniGen V2",
        "description": "Unified, multi-modal, editing, try-on, multi-person",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {
                "type": "string",
                "default": (
                    "(((deformed))), blurry, over saturation, bad anatomy, disfigured, "
                    "poorly drawn face, mutation, mutated, (extra_limb), (ugly), "
                    "(poorly drawn hands), fused fingers, messy drawing, broken legs censor, "
                    "censored, censor_bar"
                ),
            },
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "square_hd"},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 50},
            "seed": {"type": "number"},
            "text_guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 5},
            "image_guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 2},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": {"type": "string", "options": _OUTPUT_FORMATS, "default": "jpeg"},
        },
    },
    {
        "id": "fal-ai/imagen4/preview",
        "name": "Imagen 4 Preview",
        "description": "Google's highest quality image generation model",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": ""},
            "aspect_ratio": {"type": "string", "options": _ASPECT_RATIOS, "default": "1:1"},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/hidream-i1-fast",
        "name": "HiDream-I1 Fast",
        "description": "SOTA quality in 16 steps, optimized for speed/cost",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": ""},
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "square_hd"},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 16},
            "seed": {"type": "number"},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": {"type": "string", "options": _OUTPUT_FORMATS, "default": "jpeg"},
        },
    },
    {
        "id": "fal-ai/flux-1/schnell",
        "name": "FLUX.1 Schnell",
        "description": "Fastest inference, 12B params, good quality",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "landscape_4_3"},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 4},
            "seed": {"type": "number"},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": {"type": "string", "options": _OUTPUT_FORMATS, "default": "png"},
            "acceleration": {"type": "string", "options": ["none", "regular", "high"], "default": "regular"},
        },
    },
    {
        "id": "fal-ai/imagen4/preview/fast",
        "name": "Imagen 4 Fast",
        "description": "Cost-effective, good quality per $",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string", "default": ""},
            "aspect_ratio": {"type": "string", "options": _ASPECT_RATIOS, "default": "1:1"},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/recraft/v2/text-to-image",
        "name": "Recraft V2",
        "description": "Affordable, vector art/typography",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "square_hd"},
            "style": {
                "type": "string",
                "options": ["realistic_image", "vector_art", "typography"],
                "default": "realistic_image",
            },
            "colors": {"type": "array", "default": []},
            "style_id": {"type": "string"},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/f-lite/standard",
        "name": "F Lite Standard",
        "description": "10B params, copyright-safe, SFW, efficient",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {
                "type": "string",
                "default": "Blurry, out of focus, low resolution, bad anatomy, ugly, deformed, poorly drawn, extra limbs",
            },
            "image_size": {"type": "string", "options": _IMAGE_SIZES, "default": "landscape_4_3"},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 28},
            "guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 3.5},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
]
