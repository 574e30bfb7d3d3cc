OPERATION = "image-to-3d"

_TRIPO_STYLES = [
    "none",
    "person:person2cartoon",
    "object:clay",
    "object:steampunk",
    "animal:venom",
    "object:barbie",
    "object:christmas",
    "gold",
    "ancient_bronze",
]

_TRIPO_COMMON = {
    "seed": {"type": "number"},
    "face_limit": {"type": "number"},
    "pbr": {"type": "boolean", "default": True},
    "texture": {"type": "string", "options": ["no", "standard", "HD"], "default": "standard"},
    "texture_seed": {"type": "number"},
    "auto_size": {"type": "boolean", "default": False},
    "style": {"type": "string", "options": _TRIPO_STYLES},
    "quad": {"type": "boolean", "default": False},
    "texture_alignment": {"type": "string", "options": ["original_image", "geometry"], "default": "original_image"},
    "orientation": {"type": "string", "options": ["default", "align_image"], "default": "default"},
}

_HUNYUAN_COMMON = {
    "seed": {"type": "number"},
    "num_inference_steps": {"type": "number", "min": 1, "max": 100, "default": 50},
    "guidance_scale": {"type": "number", "min": 1, "max": 20, "default": 7.5},
    "octree_resolution": {"type": "number", "min": 64, "max": 512, "default": 256},
    "textured_mesh": {"type": "boolean", "default": False},
}

_TRELLIS_COMMON = {
    "seed": {"type": "number"},
    "ss_guidance_strength": {"type": "number", "min": 0, "max": 20, "default": 7.5},
    "ss_sampling_steps": {"type": "number", "min": 1, "max": 50, "default": 12},
    "slat_guidance_strength": {"type": "number", "min": 0, "max": 20, "default": 3},
    "slat_sampling_steps": {"type": "number", "min": 1, "max": 50, "default": 12},
    "mesh_simplify": {"type": "number", "min": 0, "max": 1, "default": 0.95},
    "texture_size": {"type": "number", "options": [512, 1024, 2048], "default": 1024},
}

MODELS = [
    {
        "id": "tripo3d/tripo/v2.5/image-to-3d",
        "name": "Tripo3D v2.5 Image-to-3D",
        "description": "Generate a 3D model from a single image using Tripo3D.",
        "parameters": {"image_url": {"type": "string", "required": True}, **_TRIPO_COMMON},
    },
    {
        "id": "fal-ai/hunyuan3d-v21",
        "name": "Hunyuan3D v21",
        "description": "Tencent Hunyuan3D v21 single image to 3D.",
        "parameters": {"input_image_url": {"type": "string", "required": True}, **_HUNYUAN_COMMON},
    },
    {
        "id": "fal-ai/hyper3d/rodin",
        "name": "Hyper3D Rodin",
        "description": "Hyper3D Rodin single/multi image to 3D.",
        "parameters": {
            "prompt": {"type": "string", "default": ""},
            "input_image_urls": {"type": "array", "required": True},
            "condition_mode": {"type": "string", "options": ["concat", "fuse"], "default": "concat"},
            "seed": {"type": "number", "min": 0, "max": 65535},
            "geometry_file_format": {
                "type": "string",
                "options": ["glb", "usdz", "fbx", "obj", "stl"],
                "default": "glb",
            },
            "material": {"type": "string", "options": ["PBR", "Shaded"], "default": "PBR"},
            "quality": {"type": "string", "options": ["high", "medium", "low", "extra-low"], "default": "medium"},
            "use_hyper": {"type": "boolean", "default": False},
            "tier": {"type": "string", "options": ["Regular", "Sketch"], "default": "Regular"},
            "TAPose": {"type": "boolean", "default": False},
            "bbox_condition": {"type": "array"},
            "addons": {"type": "string", "options": ["none", "HighPack"], "default": "none"},
        },
    },
    {
        "id": "fal-ai/trellis",
        "name": "Trellis",
        "description": "Trellis single image to 3D.",
        "parameters": {"image_url": {"type": "string", "required": True}, **_TRELLIS_COMMON},
    },
    {
        "id": "tripo3d/tripo/v2.5/multiview-to-3d",
        "name": "Tripo3D v2.5 Multiview-to-3D",
        "description": "Generate a 3D model from multiple views using Tripo3D.",
        "parameters": {
            "front_image_url": {"type": "string", "required": True},
            "left_image_url": {"type": "string"},
            "back_image_url": {"type": "string"},
            "right_image_url": {"type": "string"},
            **_TRIPO_COMMON,
        },
    },
    {
        "id": "fal-ai/hunyuan3d/v2/multi-view",
        "name": "Hunyuan3D v2 Multi-view",
        "description": "Hunyuan3D v2 multi-view image to 3D.",
        "parameters": {
            "front_image_url": {"type": "string", "required": True},
            "back_image_url": {"type": "string"},
            "left_image_url": {"type": "string"},
            **_HUNYUAN_COMMON,
        },
    },
    {
        "id": "fal-ai/trellis/multi",
        "name": "Trellis Multi",
        "description": "Trellis multi-image to 3D.",
        "parameters": {
            "image_urls": {"type": "array", "required": True},
            **_TRELLIS_COMMON,
            "multiimage_algo": {
                "type": "string",
                "options": ["stochastic", "multidiffusion"],
                "default": "stochastic",
            },
        },
    },
    {
        "id": "fal-ai/hunyuan3d/v2",
        "name": "Hunyuan3D v2",
        "description": "Hunyuan3D v2 single image to 3D.",
        "parameters": {"input_image_url": {"type": "string", "required": True}, **_HUNYUAN_COMMON},
    },
    {
        "id": "fal-ai/hunyuan3d/v2/turbo",
        "name": "Hunyuan3D v2 Turbo",
        "description": "Hunyuan3D v2 turbo single image to 3D.",
        "parameters": {"input_image_url": {"type": "string", "required": True}, **_HUNYUAN_COMMON},
    },
    {
        "id": "fal-ai/triposr",
        "name": "TripoSR",
        "description": "TripoSR image to 3D model generation.",
        "parameters": {
            "image_url": {"type": "string", "required": True},
            "output_format": {"type": "string", "options": ["glb", "obj"], "default": "glb"},
            "do_remove_background": {"type": "boolean", "default": True},
            "foreground_ratio": {"type": "number", "min": 0, "max": 1, "default": 0.9},
            "mc_resolution": {"type": "number", "min": 64, "max": 512, "default": 256},
        },
    },
]
