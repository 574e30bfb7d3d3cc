from asset_engine.model import ModelSchema
from asset_engine.registry import registry
from asset_engine.resolver import resolve


def _schema(**parameters):
    return ModelSchema(id="acme/test", name="Test", operation="text-to-image", parameters=parameters)


def test_all_missing_required_fields_reported_in_one_pass():
    schema = _schema(
        a={"type": "string", "required": True},
        b={"type": "number", "required": True},
        c={"type": "string"},
    )
    out = resolve(schema, {})
    assert not out.is_valid
    assert out.errors == ["a is required", "b is required"]


def test_none_counts_as_missing():
    out = resolve(_schema(a={"type": "string", "required": True}), {"a": None})
    assert out.errors == ["a is required"]


def test_defaults_are_stable_between_calls():
    schema = registry.get_schema("fal-ai/trellis")
    first = resolve(schema, {"image_url": "https://x/a.png"})
    second = resolve(schema, {"image_url": "https://x/a.png"})
    assert first.is_valid
    assert first.cleaned == second.cleaned
    assert first.cleaned["texture_size"] == 1024
    assert "seed" not in first.cleaned


def test_mutating_cleaned_does_not_touch_catalog_default():
    schema = _schema(tags={"type": "array", "default": ["a"]})
    out = resolve(schema, {})
    out.cleaned["tags"].append("b")
    assert resolve(schema, {}).cleaned == {"tags": ["a"]}


def test_fully_specified_valid_input_round_trips():
    schema = registry.get_schema("fal-ai/flux-1/schnell")
    raw = {
        "prompt": "a red fox",
        "image_size": "square_hd",
        "num_inference_steps": 8,
        "seed": 42,
        "num_images": 2,
        "enable_safety_checker": False,
        "output_format": "jpeg",
        "acceleration": "high",
    }
    out = resolve(schema, raw)
    assert out.is_valid, out.errors
    assert out.cleaned == raw


def test_unknown_keys_are_dropped():
    out = resolve(_schema(a={"type": "string"}), {"a": "x", "operation": "text-to-image"})
    assert out.cleaned == {"a": "x"}


def test_no_implicit_type_coercion():
    schema = _schema(
        n={"type": "number"},
        s={"type": "string"},
        b={"type": "boolean"},
        l={"type": "array"},
    )
    out = resolve(schema, {"n": "5", "s": 5, "b": "true", "l": "a,b"})
    assert out.errors == [
        "n must be a number",
        "s must be a string",
        "b must be a boolean",
        "l must be an array",
    ]


def test_boolean_is_not_a_number():
    out = resolve(_schema(n={"type": "number"}), {"n": True})
    assert out.errors == ["n must be a number"]


def test_numeric_bounds_are_inclusive():
    schema = _schema(n={"type": "number", "min": 1, "max": 4})
    assert resolve(schema, {"n": 1}).is_valid
    assert resolve(schema, {"n": 4}).is_valid
    assert resolve(schema, {"n": 0}).errors == ["n must be at least 1"]
    assert resolve(schema, {"n": 4.5}).errors == ["n must be at most 4"]


def test_string_length_bounds():
    schema = registry.get_schema("fal-ai/minimax-music")
    assert resolve(schema, {"prompt": "x" * 600}).is_valid
    out = resolve(schema, {"prompt": "x" * 601})
    assert out.errors == ["prompt must be at most 600 characters"]


def test_string_min_length_is_inclusive():
    schema = _schema(s={"type": "string", "min_length": 3, "max_length": 5})
    assert resolve(schema, {"s": "abc"}).is_valid
    assert resolve(schema, {"s": "abcde"}).is_valid
    assert resolve(schema, {"s": "ab"}).errors == ["s must be at least 3 characters"]
    assert resolve(schema, {"s": ""}).errors == ["s must be at least 3 characters"]


def test_non_finite_numbers_are_rejected():
    schema = registry.get_schema("fal-ai/flux-1/schnell")
    for bad in (float("nan"), float("inf"), float("-inf")):
        out = resolve(schema, {"prompt": "x", "num_inference_steps": bad})
        assert not out.is_valid
        assert out.errors == ["num_inference_steps must be a finite number"]
        assert "num_inference_steps" not in out.cleaned

    unbounded = _schema(n={"type": "number"})
    assert resolve(unbounded, {"n": float("nan")}).errors == ["n must be a finite number"]


def test_string_enum():
    schema = registry.get_schema("fal-ai/video-upscaler")
    out = resolve(schema, {"video_url": "https://x/v.mp4", "scale": "5"})
    assert not out.is_valid
    assert out.errors == ["scale must be one of: 2, 3, 4"]


def test_number_enum():
    schema = registry.get_schema("fal-ai/trellis")
    out = resolve(schema, {"image_url": "https://x/a.png", "texture_size": 999})
    assert out.errors == ["texture_size must be one of: 512, 1024, 2048"]
    assert resolve(schema, {"image_url": "https://x/a.png", "texture_size": 2048}).is_valid


def test_array_of_objects_reports_each_element():
    schema = registry.get_schema("fal-ai/recraft/v3/image-to-image")
    raw = {
        "prompt": "poster",
        "image_url": "https://x/a.png",
        "colors": [{"r": 1, "g": 2, "b": 3}, "red", {"r": 300, "g": 0}],
    }
    out = resolve(schema, raw)
    assert out.errors == [
        "colors[1] must be an object",
        "colors[2].r must be at most 255",
        "colors[2].b is required",
    ]


def test_required_image_url_for_3d():
    out = resolve(registry.get_schema("fal-ai/trellis"), {})
    assert "image_url is required" in out.errors


def test_falsy_values_are_explicit():
    schema = _schema(
        flag={"type": "boolean", "default": True},
        name={"type": "string", "default": "fox"},
        seed={"type": "number", "default": 7},
        tags={"type": "array", "default": ["a"]},
    )
    out = resolve(schema, {"flag": False, "name": "", "seed": 0, "tags": []})
    assert out.cleaned == {"flag": False, "name": "", "seed": 0, "tags": []}


def test_tuple_is_accepted_as_array():
    out = resolve(_schema(l={"type": "array"}), {"l": ("a", "b")})
    assert out.cleaned == {"l": ["a", "b"]}
