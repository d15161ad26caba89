"""Exceptions raised by the Baidu OCR client."""


class OcrError(RuntimeError):
	"""Base class for recoverable OCR failures."""


class UnrecognizedFormatError(OcrError):
	"""Image bytes are neither PNG nor JPEG."""


class DecodeError(OcrError):
	"""PNG bytes could not be decoded."""


class EncodeError(OcrError):
	"""Decoded image could not be encoded as JPEG."""


class NetworkError(OcrError):
	"""Transport failure while talking to the OCR service, including timeouts."""


class ParseError(OcrError):
	"""Service response is not JSON of the expected shape."""


class RecognitionError(OcrError):
	"""Service answered but recognized no text."""

	def __init__(self, message: str, err_msg: str = "") -> None:
		super().__init__(message)
		self.err_msg = err_msg
