# mindflow/client/emotion_heuristic.py
"""
Camera fallback: guess a mood from the brightness and colour temperature of
a single frame.

This is a placeholder, not a vision model. It is only used when the AI
facial analysis is unavailable.
"""
import base64
import io
import random
from typing import Callable, Tuple, Union

import numpy as np
from PIL import Image

# a data URI or bare base64 string is accepted as well as raw pixels
Frame = Union[Image.Image, np.ndarray, bytes, str]


def decode_image(image_base64: str) -> Image.Image:
    if "," in image_base64:
        image_base64 = image_base64.split(",", 1)[1]
    return Image.open(io.BytesIO(base64.b64decode(image_base64)))


def encode_jpeg(frame: Frame) -> str:
    """Base64 JPEG for the AI gateway."""
    img = _to_image(frame).convert("RGB")
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=85)
    return base64.b64encode(buf.getvalue()).decode("ascii")


def _to_image(frame: Frame) -> Image.Image:
    if isinstance(frame, Image.Image):
        return frame
    if isinstance(frame, (bytes, bytearray)):
        return Image.open(io.BytesIO(frame))
    if isinstance(frame, str):
        return decode_image(frame)
    return Image.fromarray(_squeeze_grey(np.asarray(frame, dtype=np.uint8)))


def _squeeze_grey(arr: np.ndarray) -> np.ndarray:
    if arr.ndim == 3 and arr.shape[-1] in (1, 2):
        # grey, or grey + alpha
        return arr[..., 0]
    return arr


def _to_rgb_array(frame: Frame) -> np.ndarray:
    if isinstance(frame, np.ndarray):
        arr = _squeeze_grey(frame)
        if arr.ndim == 2:
            arr = np.stack([arr] * 3, axis=-1)
    else:
        arr = np.asarray(_to_image(frame).convert("RGB"))
    return arr[..., :3].astype(np.float64)


def frame_stats(frame: Frame) -> Tuple[float, float]:
    """(brightness, color_temperature), brightness in 0..1, temperature in -1..1."""
    rgb = _to_rgb_array(frame)
    if rgb.size == 0:
        raise ValueError("empty frame")

    pixels = rgb.reshape(-1, 3)
    avg_brightness = pixels.mean(axis=1).mean()
    avg_red = pixels[:, 0].mean()
    avg_blue = pixels[:, 2].mean()

    return float(avg_brightness / 255.0), float((avg_red - avg_blue) / 255.0)


def classify(brightness: float, color_temperature: float, draw: float) -> str:
    if brightness > 0.6 and color_temperature > 0.1:
        # well lit, warm
        return "happy" if draw > 0.5 else "energetic"
    if brightness > 0.5 and color_temperature > 0:
        return "calm" if draw > 0.5 else "neutral"
    if brightness < 0.4:
        # low light
        return "tired" if draw > 0.5 else "calm"
    if color_temperature < -0.1:
        return "neutral" if draw > 0.3 else "anxious"
    return "neutral"


def estimate_mood(frame: Frame, rng: Callable[[], float] = random.random) -> str:
    brightness, temperature = frame_stats(frame)
    return classify(brightness, temperature, rng())
