"""Smoke tests for OCR CLI scaffolding."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from PIL import Image

import config
from main import build_cli_options, main, parse_arguments
from options import LanguageType, RgbaColor, build_options
from providers import baidu_ocr
from schemas import OcrRect, OcrResult, OcrWord


def test_schema_construction() -> None:
	"""Ensure schemas can be instantiated with expected fields."""
	word = OcrWord(word="hello", rect=OcrRect(height="10", left="1", top="2", width="30"))
	result = OcrResult(
		language_type="ENG",
		image_path="/tmp/image.png",
		words=[word],
		fragments=["hello"],
		full_text="hello",
		raw={"sample": True},
	)
	assert result.backend == "baidu"
	assert result.full_text == "hello"
	assert result.words[0].rect.width == "30"


def test_cli_parser_defaults() -> None:
	"""Validate argument parser defaults."""
	args = parse_arguments(["--image", "samples/sample.png"])
	assert args.format == "auto"
	assert args.lang == "CHN_ENG"
	assert args.background is None
	assert args.timeout_ms is None


def test_cli_parser_switches() -> None:
	"""Validate argument parser accepts expected switches."""
	args = parse_arguments(
		[
			"--image",
			"samples/sample.png",
			"--format",
			"png",
			"--lang",
			"ENG",
			"--background",
			"255, 255, 255",
			"--timeout_ms",
			"-1",
			"--outdir",
			"outputs",
		]
	)
	assert args.format == "png"
	assert args.background == RgbaColor(255, 255, 255, 255)
	assert args.timeout_ms == -1

	opts = build_options(*build_cli_options(args))
	assert opts.language_type is LanguageType.ENG
	assert opts.png_background_color == RgbaColor(255, 255, 255, 255)


def test_cli_main_writes_result(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	"""Run the CLI against a stubbed transport and check the saved output."""
	class Response:
		ok = True
		status_code = 200
		content = json.dumps(
			{"errMsg": "", "retData": [{"word": "3560", "rect": {"height": "1", "left": "2", "top": "3", "width": "4"}}]}
		).encode("utf-8")

	sent: list[dict] = []

	def fake_post(url, **kwargs):
		sent.append(kwargs)
		return Response()

	image_path = tmp_path / "captcha.png"
	buffer = io.BytesIO()
	Image.new("RGBA", (10, 10), (0, 0, 0, 0)).save(buffer, format="PNG")
	image_path.write_bytes(buffer.getvalue())

	monkeypatch.setattr(baidu_ocr.requests, "post", fake_post)
	monkeypatch.setenv("BAIDUOCR_APIKEY", "abc")
	monkeypatch.delenv("BAIDUOCR_TIMEOUT_MS", raising=False)
	monkeypatch.setenv("OCR_OUTPUT_DIR", str(tmp_path / "out"))
	monkeypatch.setattr(config, "ENV_FILE", str(tmp_path / "missing.env"))

	exit_code = main(["--image", str(image_path), "--lang", "ENG", "--background", "255,255,255", "--outdir", str(tmp_path / "out")])

	assert exit_code == 0
	assert sent[0]["data"]["languagetype"] == "ENG"
	saved = list((tmp_path / "out").glob("baidu_eng_*.json"))
	assert len(saved) == 1
	assert json.loads(saved[0].read_text(encoding="utf-8"))["fragments"] == ["3560"]
	assert '"3560"' in capsys.readouterr().out


def test_cli_main_without_key_fails(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
	"""Missing credentials are reported through the exit code."""
	monkeypatch.delenv("BAIDUOCR_APIKEY", raising=False)
	monkeypatch.setattr(config, "ENV_FILE", str(tmp_path / "missing.env"))
	monkeypatch.setenv("OCR_OUTPUT_DIR", str(tmp_path / "out"))
	assert main(["--image", str(tmp_path / "x.png")]) == 1
