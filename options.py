"""Recognition options applied to a single OCR call.

Options are small callables that mutate a private working record. They are applied in the
order given, so a later option silently overrides an earlier one touching the same field.
"""


from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final


class LanguageType(str, Enum):
	"""Language codes accepted by the ``languagetype`` form field."""

	CHN_ENG = "CHN_ENG"
	ENG = "ENG"
	JAP = "JAP"


@dataclass(frozen=True)
class RgbaColor:
	"""Alpha-premultiplied 8-bit RGBA color.

	The color channels are used as given when filling a background; alpha never dims them.
	"""

	r: int
	g: int
	b: int
	a: int = 255

	def __post_init__(self) -> None:
		for name in ("r", "g", "b", "a"):
			value = getattr(self, name)
			if not isinstance(value, int) or not 0 <= value <= 255:
				raise ValueError(f"Color channel {name} must be an integer in 0..255, got {value!r}")


BLACK: Final[RgbaColor] = RgbaColor(0, 0, 0, 255)


@dataclass(frozen=True)
class RecognitionOptions:
	"""Immutable configuration for one recognition call."""

	language_type: LanguageType = LanguageType.CHN_ENG
	png_background_color: RgbaColor | None = None


@dataclass
class _OptionState:
	language_type: LanguageType = LanguageType.CHN_ENG
	png_background_color: RgbaColor | None = None


@dataclass(frozen=True)
class OcrOption:
	"""A single option; ``apply`` mutates the working record in place."""

	apply: Callable[[_OptionState], None]


def build_options(*options: OcrOption) -> RecognitionOptions:
	"""Apply ``options`` in order over the defaults and freeze the result."""
	state = _OptionState()
	for option in options:
		option.apply(state)
	return RecognitionOptions(
		language_type=state.language_type,
		png_background_color=state.png_background_color,
	)


def set_lang_type_chn_eng() -> OcrOption:
	"""Recognize mixed Chinese and English text. This is the default."""
	return OcrOption(lambda state: setattr(state, "language_type", LanguageType.CHN_ENG))


def set_lang_type_eng() -> OcrOption:
	"""Recognize English only. Use when the image contains no Chinese characters."""
	return OcrOption(lambda state: setattr(state, "language_type", LanguageType.ENG))


def set_lang_type_jap() -> OcrOption:
	"""Recognize Japanese text."""
	return OcrOption(lambda state: setattr(state, "language_type", LanguageType.JAP))


def set_png_background_color(color: RgbaColor | tuple[int, ...] | None) -> OcrOption:
	"""Set the color transparent PNG pixels are flattened onto.

	Accepts an ``RgbaColor``, an RGB or RGBA tuple, or ``None`` to fall back to black.
	"""
	resolved = _coerce_color(color)
	return OcrOption(lambda state: setattr(state, "png_background_color", resolved))


def set_png_background_color_rgba(r: int, g: int, b: int, a: int = 255) -> OcrOption:
	"""Set the PNG background color from individual channel values."""
	return set_png_background_color(RgbaColor(r, g, b, a))


def parse_color(value: str) -> RgbaColor:
	"""Parse ``"R,G,B"`` or ``"R,G,B,A"`` into a color."""
	parts = [part.strip() for part in value.split(",")]
	if len(parts) not in (3, 4):
		raise ValueError(f"Expected R,G,B or R,G,B,A, got {value!r}")
	return RgbaColor(*(int(part) for part in parts))


def _coerce_color(color: RgbaColor | tuple[int, ...] | None) -> RgbaColor | None:
	if color is None or isinstance(color, RgbaColor):
		return color
	if isinstance(color, tuple) and len(color) in (3, 4):
		return RgbaColor(*color)
	raise TypeError(f"Unsupported background color: {color!r}")
