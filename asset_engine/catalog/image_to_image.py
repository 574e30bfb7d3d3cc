OPERATION = "image-to-image"

_SAFETY_TOLERANCE = {"type": "string", "options": ["1", "2", "3", "4", "5", "6"], "default": "2"}
_OUTPUT_FORMAT = {"type": "string", "options": ["jpeg", "png"], "default": "jpeg"}
_EDIT_ASPECT_RATIO = {
    "type": "string",
    "options": ["21:9", "16:9", "4:3", "3:2", "1:1", "2:3", "3:4", "9:16", "9:21"],
}


def _image_editing(model_id: str, name: str, description: str, prompt_default: str = None) -> dict:
    # background-change / face-enhancement / color-correction / object-removal
    params = {"image_url": {"type": "string", "required": True}}
    if prompt_default is not None:
        params["prompt"] = {"type": "string", "default": prompt_default}
    params.update(
        {
            "guidance_scale": {"type": "number", "min": 0, "max": 20, "default": 3.5},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 30},
            "safety_tolerance": _SAFETY_TOLERANCE,
            "output_format": _OUTPUT_FORMAT,
            "aspect_ratio": _EDIT_ASPECT_RATIO,
            "seed": {"type": "number"},
            "sync_mode": {"type": "boolean", "default": False},
        }
    )
    return {"id": model_id, "name": name, "description": description, "parameters": params}


_COLOR_CHANNEL = {"type": "number", "min": 0, "max": 255, "required": True}

MODELS = [
    _image_editing(
        "fal-ai/image-editing/background-change",
        "Background Change",
        "Replace photo backgrounds with any scene while preserving the main subject.",
        prompt_default="beach sunset with palm trees",
    ),
    _image_editing(
        "fal-ai/image-editing/face-enhancement",
        "Face Enhancement",
        "Professional facial retouching with natural-looking enhancements.",
    ),
    _image_editing(
        "fal-ai/image-editing/color-correction",
        "Color Correction",
        "Professional color grading and tone adjustment for consistent results.",
    ),
    {
        "id": "fal-ai/post-processing/sharpen",
        "name": "Image Sharpening",
        "description": "Apply sharpening effects with three modes: basic, smart, and CAS.",
        "parameters": {
            "image_url": {"type": "string", "required": True},
            "sharpen_mode": {"type": "string", "options": ["basic", "smart", "cas"], "default": "basic"},
            "sharpen_radius": {"type": "number", "min": 1, "max": 10, "default": 1},
            "sharpen_alpha": {"type": "number", "min": 0.1, "max": 2.0, "default": 1},
            "noise_radius": {"type": "number", "min": 1, "max": 20, "default": 7},
            "preserve_edges": {"type": "number", "min": 0.1, "max": 1.0, "default": 0.75},
            "smart_sharpen_strength": {"type": "number", "min": 1, "max": 10, "default": 5},
            "smart_sharpen_ratio": {"type": "number", "min": 0.1, "max": 1.0, "default": 0.5},
            "cas_amount": {"type": "number", "min": 0.1, "max": 2.0, "default": 0.8},
        },
    },
    _image_editing(
        "fal-ai/image-editing/object-removal",
        "Object Removal",
        "Remove unwanted objects from photos with seamless background reconstruction.",
        prompt_default="remove unwanted objects while preserving background",
    ),
    {
        "id": "fal-ai/flux/dev/image-to-image",
        "name": "FLUX Dev Image-to-Image",
        "description": "High-quality image transformation with 12B parameter flow transformer.",
        "parameters": {
            "image_url": {"type": "string", "required": True},
            "prompt": {"type": "string", "required": True},
            "strength": {"type": "number", "min": 0, "max": 1, "default": 0.95},
            "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 40},
            "seed": {"type": "number"},
            "guidance_scale": {"type": "number", "min": 0, "max": 20, "default": 3.5},
            "sync_mode": {"type": "boolean", "default": False},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "output_format": _OUTPUT_FORMAT,
            "acceleration": {"type": "string", "options": ["none", "regular", "high"], "default": "none"},
        },
    },
    {
        "id": "fal-ai/recraft/v3/image-to-image",
        "name": "Recraft V3 Image-to-Image",
        "description": "Advanced image editing with typography and vector art capabilities.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "strength": {"type": "number", "min": 0, "max": 1, "default": 0.5},
            "style": {
                "type": "string",
                "options": ["realistic_image", "digital_illustration", "vector_illustration"],
                "default": "realistic_image",
            },
            "colors": {
                "type": "array",
                "items": {"properties": {"r": _COLOR_CHANNEL, "g": _COLOR_CHANNEL, "b": _COLOR_CHANNEL}},
            },
            "style_id": {"type": "string"},
            "negative_prompt": {"type": "string"},
            "sync_mode": {"type": "boolean", "default": False},
        },
    },
    {
        "id": "fal-ai/luma-photon/modify",
        "name": "Luma Photon Modify",
        "description": "Creative, personalizable image editing with intelligent visual models.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "strength": {"type": "number", "min": 0, "max": 1, "default": 0.8},
            "aspect_ratio": {
                "type": "string",
                "options": ["1:1", "16:9", "9:16", "4:3", "3:4", "21:9", "9:21"],
                "default": "16:9",
            },
        },
    },
    {
        "id": "fal-ai/bytedance/seededit/v3/edit-image",
        "name": "ByteDance SeedEdit V3",
        "description": "Accurate image editing with precise content preservation.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "image_url": {"type": "string", "required": True},
            "guidance_scale": {"type": "number", "min": 0, "max": 20, "default": 0.5},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/flux-pro/kontext/max/multi",
        "name": "FLUX Pro Kontext Max Multi",
        "description": "Premium image editing with multiple image support and improved prompt adherence.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "seed": {"type": "number"},
            "guidance_scale": {"type": "number", "min": 0, "max": 20, "default": 3.5},
            "sync_mode": {"type": "boolean", "default": False},
            "num_images": {"type": "number", "min": 1, "max": 4, "default": 1},
            "output_format": _OUTPUT_FORMAT,
            "safety_tolerance": _SAFETY_TOLERANCE,
            "aspect_ratio": _EDIT_ASPECT_RATIO,
            "image_urls": {"type": "array", "required": True},
        },
    },
]
