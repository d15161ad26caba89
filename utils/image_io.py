"""Utility helpers for reading, sniffing and converting input images."""

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import DecodeError, EncodeError
from options import BLACK, RgbaColor

PNG_MIME = "image/png"
JPEG_MIME = "image/jpeg"
UNKNOWN_MIME = "application/octet-stream"

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"
JPEG_QUALITY = 100

logger = logging.getLogger(__name__)


def ensure_image_path(image: str | Path) -> Path:
	"""Validate that the provided path exists and points to a file."""
	path = Path(image).expanduser().resolve()
	if not path.exists():
		raise FileNotFoundError(f"Image path not found: {path}")
	if not path.is_file():
		raise ValueError(f"Image path is not a file: {path}")
	return path


def read_image_bytes(path: str | Path) -> bytes:
	"""Read the whole image file into memory."""
	return Path(path).read_bytes()


def detect_content_type(data: bytes) -> str:
	"""Classify image bytes by their leading signature."""
	if data.startswith(PNG_SIGNATURE):
		return PNG_MIME
	if data.startswith(JPEG_SIGNATURE):
		return JPEG_MIME
	return UNKNOWN_MIME


def png_to_jpeg(data: bytes, background: RgbaColor | None = None) -> bytes:
	"""Convert PNG bytes to maximum-quality JPEG bytes.

	Transparent pixels are composited over an opaque canvas filled with the color channels of
	``background``, or black when none is given. ``background`` is premultiplied, so its alpha
	does not affect the canvas.
	"""
	image = _decode_png(data)
	fill = background or BLACK
	flattened = Image.new("RGBA", image.size, (fill.r, fill.g, fill.b, 255))
	flattened.alpha_composite(image)

	buffer = io.BytesIO()
	try:
		flattened.convert("RGB").save(buffer, format="JPEG", quality=JPEG_QUALITY)
	except (OSError, ValueError) as exc:
		raise EncodeError(f"Failed to encode JPEG: {exc}") from exc
	logger.debug("Converted %sx%s PNG to %s bytes of JPEG", image.width, image.height, buffer.tell())
	return buffer.getvalue()


def _decode_png(data: bytes) -> Image.Image:
	try:
		with Image.open(io.BytesIO(data), formats=["PNG"]) as source:
			source.load()
			return source.convert("RGBA")
	except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
		raise DecodeError(f"Failed to decode PNG: {exc}") from exc
