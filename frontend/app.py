import os
import time
import datetime
from typing import Any, Dict, Optional
from io import BytesIO

import requests
import streamlit as st
from PIL import Image

from asset_engine.pricing import format_pricing
from frontend.form_values import collect_params

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")

_LONG_TEXT = ("prompt", "text", "lyrics", "negative_prompt")


@st.cache_data(ttl=300)
def fetch_operations():
    resp = requests.get(f"{BACKEND_URL}/operations", timeout=10)
    resp.raise_for_status()
    return resp.json()


@st.cache_data(ttl=300)
def fetch_models(operation_id: str):
    resp = requests.get(f"{BACKEND_URL}/models/{operation_id}", timeout=10)
    resp.raise_for_status()
    return resp.json()


def call_generate(operation_id: str, model_id: str, params: Dict[str, Any], brand: str) -> Dict[str, Any]:
    """Gọi POST /generate -> {job_id} hoặc {errors} nếu params sai"""
    payload = {"operation_id": operation_id, "model_id": model_id, "params": params, "brand": brand}
    resp = requests.post(f"{BACKEND_URL}/generate", json=payload, timeout=30)
    if resp.status_code in (404, 422):
        detail = resp.json().get("detail") or {}
        return {"errors": detail.get("errors") or [detail.get("message", "Request bị từ chối")]}
    resp.raise_for_status()
    return resp.json()


def poll_result(job_id: str, timeout_sec: float = 600.0, poll_interval: float = 2.0):
    """Poll GET /result/{job_id} cho đến khi done/error"""
    start = time.time()
    while True:
        resp = requests.get(f"{BACKEND_URL}/result/{job_id}", timeout=10)
        if resp.status_code == 404:
            return None

        data = resp.json()
        status = data.get("status")

        if status in ("done", "error"):
            return data

        if time.time() - start > timeout_sec:
            return None

        time.sleep(poll_interval)


def download_image(image_url: str):
    """Download ảnh từ URL và convert sang PIL Image"""
    try:
        resp = requests.get(image_url, timeout=30)
        resp.raise_for_status()
        img = Image.open(BytesIO(resp.content)).convert("RGB")
        return img, resp.content
    except (requests.RequestException, OSError) as e:
        st.error(f"Không thể tải ảnh: {e}")
        return None, None


def _label(name: str, spec: Dict[str, Any]) -> str:
    return f"{name} *" if spec.get("required") else name


def _hint(spec: Dict[str, Any]) -> Optional[str]:
    parts = []
    if "default" in spec and spec["default"] is not None:
        parts.append(f"default: {spec['default']}")
    if spec.get("min") is not None or spec.get("max") is not None:
        parts.append(f"range: {spec.get('min')} - {spec.get('max')}")
    if spec.get("type") == "array":
        parts.append("JSON array" if spec.get("items") else "comma separated")
    return ", ".join(parts) or None


def render_widget(model_id: str, name: str, spec: Dict[str, Any]):
    """1 widget / ParameterSpec. Bỏ trống = không truyền."""
    key = f"{model_id}:{name}"
    label = _label(name, spec)
    help_text = _hint(spec)

    if spec.get("options"):
        return st.selectbox(label, spec["options"], index=None, key=key, help=help_text, placeholder="(default)")
    if spec["type"] == "boolean":
        return st.selectbox(label, [True, False], index=None, key=key, help=help_text, placeholder="(default)")
    if spec["type"] == "number":
        return st.number_input(
            label,
            value=None,
            min_value=spec.get("min"),
            max_value=spec.get("max"),
            key=key,
            help=help_text,
        )
    if spec["type"] == "string" and name in _LONG_TEXT:
        return st.text_area(label, key=key, help=help_text, max_chars=spec.get("max_length"))
    return st.text_input(label, key=key, help=help_text)


def show_result(result: Dict[str, Any]):
    extracted = result.get("result") or {}
    assets = result.get("assets") or {}

    for warning in result.get("warnings") or []:
        st.warning(f"⚠️ {warning}")

    def _url(role):
        asset = assets.get(role)
        return asset["url"] if asset else extracted.get(role)

    image_url = _url("asset_url") or _url("image_url") or _url("rendered_image_url")
    if image_url:
        image, img_bytes = download_image(image_url)
        if image:
            st.image(image, caption="✨ Kết quả", use_container_width=True)
            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            st.download_button("⬇️ Tải ảnh", data=img_bytes, file_name=f"asset_{ts}.png", mime="image/png")

    if _url("video_url"):
        st.video(_url("video_url"))
    if _url("audio_url"):
        st.audio(_url("audio_url"))

    # 3D + các URL còn lại: chỉ hiện link
    for role in sorted(set(assets) | {k for k, v in extracted.items() if k.endswith("_url") and v}):
        st.markdown(f"🔗 **{role}**: [{_url(role)}]({_url(role)})")
    for i, url in enumerate(extracted.get("textures") or []):
        st.markdown(f"🧩 texture {i}: [{url}]({url})")
    if extracted.get("metadata"):
        st.json(extracted["metadata"])


# ==========================
# Cấu hình
# ==========================
st.set_page_config(
    page_title="Fal Asset Engine",
    page_icon="🎨",
    layout="wide"
)

st.title("🎨 AI Asset Generator")
st.caption("Tạo ảnh, video, audio, 3D với nhiều model 🖼️🎬🎵")

# ==========================
# Sidebar
# ==========================
with st.sidebar:
    st.header("⚙️ Cài đặt")

    try:
        operations = fetch_operations()
    except requests.RequestException as e:
        st.error(f"❌ Không kết nối được backend: {e}")
        st.stop()

    op = st.selectbox(
        "🎯 Operation",
        operations,
        format_func=lambda o: f"{o['name']} ({o['model_count']})",
    )
    st.caption(op["description"])

    models = fetch_models(op["id"])
    model = st.selectbox(
        "🧠 Model",
        models,
        format_func=lambda m: f"{m['name']} · {format_pricing(m.get('pricing'))}",
    )
    st.caption(model["description"])

    brand = st.text_input("🏷️ Brand", value="default")

    st.markdown("---")
    st.write("🔗 Backend:", BACKEND_URL)

# ==========================
# Form params
# ==========================
with st.form("params"):
    st.subheader(model["name"])
    values = {
        name: render_widget(model["id"], name, spec)
        for name, spec in model["parameters"].items()
    }
    submitted = st.form_submit_button("🚀 Generate", use_container_width=True)

if submitted:
    params = collect_params(model["parameters"], values)
    try:
        queued = call_generate(op["id"], model["id"], params, brand)
    except requests.RequestException as e:
        st.error(f"❌ Lỗi: {e}")
        st.stop()

    if queued.get("errors"):
        for err in queued["errors"]:
            st.error(f"❌ {err}")
        st.stop()

    job_id = queued["job_id"]
    st.success(f"✅ Job ID: `{job_id}`")

    with st.spinner("🎨 AI đang xử lý..."):
        result = poll_result(job_id)

    if not result:
        st.error("⏱️ Hết thời gian chờ. Vui lòng thử lại!")
    elif result.get("status") == "error":
        st.error(f"❌ [{result.get('error_code')}] {result.get('error_message', 'Lỗi không xác định')}")
    else:
        st.success("✅ Hoàn thành!")
        show_result(result)
