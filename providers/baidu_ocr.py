"""Baidu API Store OCR provider implementation."""


import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import requests
from pydantic import ValidationError

from config import BaiduCredentials
from errors import NetworkError, ParseError, RecognitionError, UnrecognizedFormatError
from options import OcrOption, RecognitionOptions, build_options
from schemas import OcrResponse, OcrResult
from utils.image_io import JPEG_MIME, PNG_MIME, detect_content_type, png_to_jpeg, read_image_bytes

CLIENT_IP: Final[str] = "10.10.10.0"
NO_TEXT_MESSAGE: Final[str] = "BaiduOCR failed to recognize any text in the image."
FORM_CONTENT_TYPE: Final[str] = "application/x-www-form-urlencoded"


def build_form(jpeg_bytes: bytes, options: RecognitionOptions) -> dict[str, str]:
	"""Assemble the form fields for a single recognition request."""
	return {
		"fromdevice": "pc",
		"clientip": CLIENT_IP,
		"detecttype": "LocateRecognize",
		"languagetype": options.language_type.value,
		"imagetype": "1",
		"image": base64.b64encode(jpeg_bytes).decode("ascii"),
		"version": "v1",
		"sizetype": "small",
	}


def sniff_format(image_bytes: bytes) -> str:
	"""Return ``"png"`` or ``"jpeg"`` from the leading bytes, or fail for anything else."""
	content_type = detect_content_type(image_bytes)
	if content_type == PNG_MIME:
		return "png"
	if content_type == JPEG_MIME:
		return "jpeg"
	raise UnrecognizedFormatError("unrecognized image file format")


def parse_response(body: bytes | str) -> OcrResponse:
	"""Validate the raw response body against the expected JSON shape."""
	try:
		return OcrResponse.model_validate_json(body)
	except ValidationError as exc:
		raise ParseError(f"Unexpected OCR response: {exc}") from exc


def extract_words(response: OcrResponse) -> list[str]:
	"""Return recognized fragments in response order, failing when there are none."""
	if not response.ret_data:
		message = NO_TEXT_MESSAGE
		if response.err_msg:
			message += f" reason: {response.err_msg}"
		raise RecognitionError(message, err_msg=response.err_msg)
	return [item.word for item in response.ret_data]


@dataclass(frozen=True)
class BaiduOcrClient:
	"""Client for the Baidu OCR service. Holds no mutable state and may be shared across threads."""

	credentials: BaiduCredentials

	@property
	def _logger(self) -> logging.Logger:
		return logging.getLogger(self.__class__.__name__)

	def parse_image(self, image_bytes: bytes, *options: OcrOption) -> list[str]:
		"""Recognize text in a PNG or JPEG image, detected from its leading bytes."""
		if sniff_format(image_bytes) == "png":
			return self.parse_png(image_bytes, *options)
		return self.parse_jpeg(image_bytes, *options)

	def parse_png(self, image_bytes: bytes, *options: OcrOption) -> list[str]:
		"""Recognize text in a PNG image, converting it to JPEG first.

		Transparent pixels become black unless a background color option is given.
		"""
		opts = build_options(*options)
		jpeg_bytes = png_to_jpeg(image_bytes, opts.png_background_color)
		return extract_words(self._send(jpeg_bytes, opts))

	def parse_jpeg(self, image_bytes: bytes, *options: OcrOption) -> list[str]:
		"""Recognize text in a JPEG image."""
		return extract_words(self._send(image_bytes, build_options(*options)))

	def parse_image_file(self, path: str | Path, *options: OcrOption) -> list[str]:
		return self.parse_image(read_image_bytes(path), *options)

	def parse_png_file(self, path: str | Path, *options: OcrOption) -> list[str]:
		return self.parse_png(read_image_bytes(path), *options)

	def parse_jpeg_file(self, path: str | Path, *options: OcrOption) -> list[str]:
		return self.parse_jpeg(read_image_bytes(path), *options)

	def recognize(self, image_path: Path, *options: OcrOption, image_format: str = "auto") -> OcrResult:
		"""Recognize text in an image file and keep the per-fragment rectangles."""
		image_bytes = read_image_bytes(image_path)
		if image_format == "auto":
			image_format = sniff_format(image_bytes)

		opts = build_options(*options)
		if image_format == "png":
			image_bytes = png_to_jpeg(image_bytes, opts.png_background_color)
		elif image_format != "jpeg":
			raise ValueError(f"Unsupported image format: {image_format}")

		response = self._send(image_bytes, opts)
		fragments = extract_words(response)
		return OcrResult(
			language_type=opts.language_type.value,
			image_path=str(image_path),
			words=response.ret_data,
			fragments=fragments,
			full_text="\n".join(fragments),
			raw=response.to_wire(),
		)

	def _send(self, jpeg_bytes: bytes, options: RecognitionOptions) -> OcrResponse:
		timeout = self.credentials.timeout
		endpoint = self.credentials.endpoint
		headers = {
			"content-type": FORM_CONTENT_TYPE,
			"apikey": self.credentials.api_key,
		}
		self._logger.debug(
			"Posting %s bytes of JPEG to %s (language=%s, timeout=%s)",
			len(jpeg_bytes),
			endpoint,
			options.language_type.value,
			timeout,
		)
		try:
			response = requests.post(
				endpoint,
				data=build_form(jpeg_bytes, options),
				headers=headers,
				timeout=timeout,
			)
		except requests.RequestException as exc:
			raise NetworkError(f"Baidu OCR request failed: {exc}") from exc

		if not response.ok:
			self._logger.warning("Baidu OCR returned HTTP %s", response.status_code)
		return parse_response(response.content)
