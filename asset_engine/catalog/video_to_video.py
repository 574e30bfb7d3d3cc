OPERATION = "video-to-video"

MODELS = [
    {
        "id": "fal-ai/luma-dream-machine/ray-2/modify",
        "name": "Ray2 Modify Video",
        "description": "Ray2 Modify is a video generative model capable of restyling or retexturing the entire shot.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "prompt": {"type": "string"},
            "image_url": {"type": "string"},
            "mode": {
                "type": "string",
                "options": [
                    "flex_1", "flex_2", "flex_3",
                    "adhere_1", "adhere_2", "adhere_3",
                    "reimagine_1", "reimagine_2", "reimagine_3",
                ],
                "default": "flex_1",
            },
        },
    },
    {
        "id": "fal-ai/wan-vace-14b",
        "name": "Wan VACE 14B",
        "description": "Endpoint for inpainting a video from all supported sources.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "prompt": {"type": "string"},
            "negative_prompt": {"type": "string"},
            "match_input_num_frames": {"type": "boolean", "default": True},
            "num_frames": {"type": "number"},
            "match_input_frames_per_second": {"type": "boolean", "default": True},
            "frames_per_second": {"type": "number"},
            "num_inference_steps": {"type": "number"},
            "guidance_scale": {"type": "number"},
            "seed": {"type": "number"},
            "resolution": {"type": "string", "options": ["480p", "580p", "720p"]},
            "aspect_ratio": {"type": "string", "options": ["auto", "16:9", "1:1", "9:16"]},
            "mask_video_url": {"type": "string"},
            "mask_image_url": {"type": "string"},
            "ref_image_urls": {"type": "array"},
            "enable_safety_checker": {"type": "boolean", "default": True},
            "enable_prompt_expansion": {"type": "boolean", "default": False},
            "preprocess": {"type": "string", "options": ["auto", "none", "resize", "crop"]},
            "acceleration": {"type": "string", "options": ["standard", "fast", "turbo"]},
        },
    },
    {
        "id": "fal-ai/ltx-video-13b-distilled/multiconditioning",
        "name": "LTX Video 13B Multiconditioning",
        "description": "Generate a video from a prompt and any number of images and video.",
        "parameters": {
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string"},
            "images": {"type": "array"},
            "videos": {"type": "array", "required": True},
            "num_frames": {"type": "number"},
            "frame_rate": {"type": "number"},
            "resolution": {"type": "string", "options": ["480p", "720p"]},
            "aspect_ratio": {"type": "string", "options": ["9:16", "1:1", "16:9", "auto"]},
            "seed": {"type": "number"},
            "reverse_video": {"type": "boolean", "default": False},
            "expand_prompt": {"type": "boolean", "default": True},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/magi/extend-video",
        "name": "Magi Extend Video",
        "description": "Generate a video extension.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "prompt": {"type": "string", "required": True},
            "num_frames": {"type": "number"},
            "start_frame": {"type": "number"},
            "resolution": {"type": "string", "options": ["480p", "720p"]},
            "aspect_ratio": {"type": "string", "options": ["16:9", "9:16", "1:1", "4:3"]},
            "num_inference_steps": {"type": "number"},
            "seed": {"type": "number"},
            "enable_safety_checker": {"type": "boolean", "default": True},
        },
    },
    {
        "id": "fal-ai/pixverse/lipsync",
        "name": "Pixverse Lipsync",
        "description": "Create a lipsync video by combining a video with audio.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "audio_url": {"type": "string", "required": True},
            "voice_id": {"type": "string"},
            "text": {"type": "string"},
        },
    },
    {
        "id": "fal-ai/pixverse/extend/fast",
        "name": "Pixverse Extend Fast",
        "description": "Extend a video by generating new content based on its ending using fast mode.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string"},
            "style": {"type": "string", "options": ["anime", "3d_animation", "day", "cyberpunk", "comic"]},
            "resolution": {"type": "string", "options": ["360p", "540p", "720p"]},
            "model": {"type": "string", "options": ["v3.5", "v4", "v4.5"]},
            "seed": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/fast-animatediff/turbo/video-to-video",
        "name": "Fast AnimateDiff Turbo Video-to-Video",
        "description": "Turbo Video To Video.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "prompt": {"type": "string", "required": True},
            "negative_prompt": {"type": "string"},
            "first_n_seconds": {"type": "number"},
            "strength": {"type": "number"},
            "guidance_scale": {"type": "number"},
            "num_inference_steps": {"type": "number"},
            "fps": {"type": "number"},
            "seed": {"type": "number"},
            "motions": {"type": "array"},
        },
    },
    {
        "id": "fal-ai/video-upscaler",
        "name": "Video Upscaler",
        "description": "Upscale a video.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "scale": {"type": "string", "options": ["2", "3", "4"], "required": True},
        },
    },
    {
        "id": "fal-ai/amt-interpolation",
        "name": "AMT Interpolation",
        "description": "Interpolate video frames.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "output_fps": {"type": "number", "required": True},
            "recursive_interpolation_passes": {"type": "number"},
        },
    },
    {
        "id": "fal-ai/ffmpeg-api/merge-audio-video",
        "name": "FFmpeg Merge Audio Video",
        "description": "Combine video and audio into a single file.",
        "parameters": {
            "video_url": {"type": "string", "required": True},
            "audio_url": {"type": "string", "required": True},
            "start_offset": {"type": "number"},
        },
    },
]
