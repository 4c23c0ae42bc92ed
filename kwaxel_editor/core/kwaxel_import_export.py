#!/usr/bin/env python3
"""
Import/export adapter for the Kwaxel editor

Import resamples any RGBA source onto the fixed grid with nearest neighbor;
export scales the grid up by an integer multiplier. Neither blends,
dithers nor quantizes colors.
"""

# Standard library imports
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

# Third-party imports
import numpy as np
from PIL import Image, UnidentifiedImageError

from .kwaxel_color import argb_to_rgba, rgba_to_argb
from .kwaxel_constants import (
    DEFAULT_ASSET_NAME,
    EXPORT_FILENAME_TEMPLATE,
    GRID_HEIGHT,
    GRID_WIDTH,
)
from .kwaxel_exceptions import ImageFormatError, ValidationError
from .kwaxel_models import PixelBuffer
from .kwaxel_rasterizer import nearest_indices
from .kwaxel_utils import debug_log

ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_ASSET_PATH = ASSETS_DIR / DEFAULT_ASSET_NAME

RawSamples = Union[bytes, bytearray, memoryview, np.ndarray]


@dataclass(eq=False)
class DecodedImage:
    """Decoded image: dimensions plus row-major RGBA bytes (width * height * 4)"""

    width: int
    height: int
    rgba: np.ndarray


def resample_nearest(samples: np.ndarray, width: int, height: int) -> np.ndarray:
    """Nearest-neighbor resample of an (h, w, C) array to (height, width, C)"""
    rows = nearest_indices(samples.shape[0], height)
    cols = nearest_indices(samples.shape[1], width)
    return samples[rows[:, None], cols[None, :]]


def _as_rgba_array(raw_samples: RawSamples, width: int, height: int) -> np.ndarray:
    """Validate raw RGBA samples and shape them as (height, width, 4)"""
    if isinstance(raw_samples, np.ndarray):
        samples = raw_samples.astype(np.uint8, copy=False).reshape(-1)
    else:
        samples = np.frombuffer(bytes(raw_samples), dtype=np.uint8)

    expected = width * height * 4
    if samples.size != expected:
        raise ImageFormatError(
            f"Expected {expected} RGBA samples for {width}x{height}, got {samples.size}"
        )
    return samples.reshape(height, width, 4)


def import_image(
    raw_samples: RawSamples,
    source_width: int,
    source_height: int,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
) -> PixelBuffer:
    """
    Resample an RGBA image of any size onto a width x height buffer.

    A source with no area produces a transparent buffer.

    Raises:
        ImageFormatError: if the sample count does not match the dimensions
    """
    if source_width <= 0 or source_height <= 0:
        debug_log("IMPORT", f"Empty source {source_width}x{source_height}", "WARNING")
        return PixelBuffer.blank(width, height)

    source = _as_rgba_array(raw_samples, source_width, source_height)
    resampled = resample_nearest(source, width, height)
    debug_log(
        "IMPORT",
        f"Resampled {source_width}x{source_height} to {width}x{height}",
        "DEBUG",
    )
    return PixelBuffer(width=width, height=height, data=rgba_to_argb(resampled))


def import_decoded(decoded: DecodedImage, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> PixelBuffer:
    """Resample a decoded image onto the grid"""
    return import_image(decoded.rgba, decoded.width, decoded.height, width, height)


def _validate_multiplier(multiplier) -> int:
    if isinstance(multiplier, bool) or not isinstance(multiplier, (int, np.integer)):
        raise ValidationError(f"Export multiplier must be an integer, got {multiplier!r}")
    if multiplier < 1:
        raise ValidationError(f"Export multiplier must be positive, got {multiplier}")
    return int(multiplier)


def export_at_scale(buffer: PixelBuffer, multiplier: int) -> np.ndarray:
    """
    Scale the buffer up into a (height * m, width * m, 4) RGBA array.
    Every cell becomes an m x m block of its own color.
    """
    multiplier = _validate_multiplier(multiplier)
    rgba = argb_to_rgba(buffer.data).reshape(buffer.height, buffer.width, 4)
    return np.repeat(np.repeat(rgba, multiplier, axis=0), multiplier, axis=1)


def encode_png(buffer: PixelBuffer, multiplier: int = 1) -> bytes:
    """Encode the buffer as PNG bytes at the given multiplier"""
    samples = export_at_scale(buffer, multiplier)
    # (h, w, 4) uint8 arrays map to RGBA
    image = Image.fromarray(np.ascontiguousarray(samples))
    output = io.BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


def export_filename(multiplier: int, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> str:
    """Deterministic export file name, e.g. kwaxel_32x32_x4.png"""
    return EXPORT_FILENAME_TEMPLATE.format(width=width, height=height, multiplier=multiplier)


def decode_image(data: bytes) -> DecodedImage:
    """
    Decode PNG/JPEG/GIF/... bytes into RGBA samples.

    Raises:
        ImageFormatError: if the data is empty, corrupt or unsupported
    """
    if not data:
        raise ImageFormatError("No image data")

    try:
        with Image.open(io.BytesIO(data)) as image:
            debug_log(
                "IMPORT",
                f"Image opened: size={image.size}, mode={image.mode}, format={image.format}",
                "DEBUG",
            )
            rgba = image.convert("RGBA")
            rgba.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageFormatError(f"Cannot decode image: {e}") from e

    samples = np.asarray(rgba, dtype=np.uint8).reshape(-1)
    return DecodedImage(width=rgba.width, height=rgba.height, rgba=samples)


def load_default_buffer(path: Optional[Union[str, Path]] = None) -> PixelBuffer:
    """
    Load the bundled default sprite resampled to the grid.

    Raises:
        FileNotFoundError, ImageFormatError: if the asset is missing or unreadable
    """
    asset = Path(path) if path is not None else DEFAULT_ASSET_PATH
    decoded = decode_image(asset.read_bytes())
    debug_log("IMPORT", f"Loaded default asset {asset.name}")
    return import_decoded(decoded)
