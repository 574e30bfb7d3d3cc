from frontend.form_values import collect_params

PARAMETERS = {
    "prompt": {"type": "string", "required": True},
    "seed": {"type": "number"},
    "steps": {"type": "number", "default": 4},
    "enable_safety_checker": {"type": "boolean", "default": True},
    "image_urls": {"type": "array"},
    "colors": {"type": "array", "items": {"properties": {"r": {"type": "number"}}}},
}


def test_blank_widgets_are_absent():
    params = collect_params(PARAMETERS, {"prompt": "   ", "seed": None, "image_urls": "", "enable_safety_checker": None})
    assert params == {}


def test_values_are_converted():
    params = collect_params(
        PARAMETERS,
        {
            "prompt": " a red fox ",
            "seed": 42.0,
            "steps": 2.5,
            "enable_safety_checker": False,
            "image_urls": "https://a/1.png, https://a/2.png,",
            "colors": '[{"r": 255}]',
        },
    )
    assert params == {
        "prompt": "a red fox",
        "seed": 42,
        "steps": 2.5,
        "enable_safety_checker": False,
        "image_urls": ["https://a/1.png", "https://a/2.png"],
        "colors": [{"r": 255}],
    }


def test_invalid_json_is_passed_through_for_server_validation():
    assert collect_params(PARAMETERS, {"colors": "red"}) == {"colors": "red"}


def test_undeclared_widgets_are_ignored():
    assert collect_params(PARAMETERS, {"prompt": "x", "other": "y"}) == {"prompt": "x"}
