"""Command-line interface for Baidu OCR text recognition."""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from config import AppConfig, configure_logging, load_config
from options import (
	LanguageType,
	OcrOption,
	parse_color,
	set_lang_type_chn_eng,
	set_lang_type_eng,
	set_lang_type_jap,
	set_png_background_color,
)
from providers.baidu_ocr import BaiduOcrClient
from schemas import OcrResult
from utils.image_io import ensure_image_path
from utils.io_json import dump_result, render_result

LANGUAGE_OPTIONS = {
	LanguageType.CHN_ENG.value: set_lang_type_chn_eng,
	LanguageType.ENG.value: set_lang_type_eng,
	LanguageType.JAP.value: set_lang_type_jap,
}


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(description="Recognize text in a JPEG or PNG image with Baidu OCR")
	parser.add_argument("--image", required=True, help="Path to the image file")
	parser.add_argument(
		"--format",
		choices=["auto", "png", "jpeg"],
		default="auto",
		help="Image format; auto detects it from the file contents",
	)
	parser.add_argument("--lang", choices=sorted(LANGUAGE_OPTIONS), default=LanguageType.CHN_ENG.value, help="Recognition language")
	parser.add_argument("--background", type=parse_color, default=None, help="PNG background color as R,G,B or R,G,B,A")
	parser.add_argument("--timeout_ms", type=int, default=None, help="Request timeout in milliseconds (0 default, -1 none)")
	parser.add_argument("--outdir", default=None, help="Directory to store JSON outputs")
	return parser.parse_args(argv)


def build_cli_options(args: argparse.Namespace) -> list[OcrOption]:
	"""Translate CLI switches into recognition options."""
	options = [LANGUAGE_OPTIONS[args.lang]()]
	if args.background is not None:
		options.append(set_png_background_color(args.background))
	return options


def run(args: argparse.Namespace, config: AppConfig) -> OcrResult:
	"""Execute OCR processing for the provided arguments."""
	if not config.baidu:
		raise RuntimeError("Baidu OCR API key is not configured. Set BAIDUOCR_APIKEY.")
	credentials = config.baidu
	if args.timeout_ms is not None:
		credentials = replace(credentials, timeout_ms=args.timeout_ms)

	image_path = ensure_image_path(args.image)
	output_dir = Path(args.outdir).expanduser().resolve() if args.outdir else config.output_dir

	client = BaiduOcrClient(credentials)
	result = client.recognize(image_path, *build_cli_options(args), image_format=args.format)

	output_path = dump_result(result, output_dir)
	logging.info("Saved OCR output to %s", output_path)
	print(render_result(result))
	return result


def main(argv: list[str] | None = None) -> int:
	"""Entry point for the CLI application."""
	config = load_config()
	configure_logging(config.log_level)
	try:
		args = parse_arguments(argv)
		run(args, config)
	except Exception as exc:  # noqa: BLE001
		logging.exception("OCR processing failed: %s", exc)
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
