from . import (
    image_to_3d,
    image_to_image,
    image_to_video,
    text_to_audio,
    text_to_image,
    text_to_speech,
    text_to_video,
    video_to_video,
)

# Thứ tự hiển thị cố định
CATALOG_MODULES = [
    text_to_image,
    text_to_video,
    image_to_video,
    text_to_audio,
    text_to_speech,
    image_to_image,
    video_to_video,
    image_to_3d,
]

OPERATIONS = {
    "text-to-image": {
        "name": "Text to Image",
        "description": "Generate images from text",
    },
    "text-to-video": {
        "name": "Text to Video",
        "description": "Generate videos from text prompts with multiple high-quality models",
    },
    "image-to-video": {
        "name": "Image to Video",
        "description": "Generate videos from a single input image and text prompt",
    },
    "text-to-audio": {
        "name": "Text to Audio",
        "description": "Generate music/audio from text prompts",
    },
    "text-to-speech": {
        "name": "Text to Speech",
        "description": "Convert text to speech using a variety of TTS models",
    },
    "image-to-image": {
        "name": "Image to Image",
        "description": "Transform and edit existing images using AI models",
    },
    "video-to-video": {
        "name": "Video to Video",
        "description": "Modify or restyle videos using advanced generative models",
    },
    "image-to-3d": {
        "name": "Image to 3D",
        "description": "Generate a 3D model from a single image",
    },
}

for _module in CATALOG_MODULES:
    OPERATIONS[_module.OPERATION]["models"] = [m["id"] for m in _module.MODELS]
