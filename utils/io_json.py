"""Persistence of recognition results as JSON files."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from schemas import OcrResult

DATE_PATTERN = "%Y%m%d_%H%M%S"

def result_name_hint(result: OcrResult) -> str:
	"""File name prefix such as ``baidu_chn_eng`` for a result."""
	return f"{result.backend}_{result.language_type.lower()}"

def build_output_path(output_dir: Path, name_hint: str) -> Path:
	"""Compose a timestamped ``<hint>_<utc time>.json`` path within the output directory."""
	timestamp = datetime.now(timezone.utc).strftime(DATE_PATTERN)
	return output_dir.joinpath(f"{name_hint}_{timestamp}.json")

def render_result(result: OcrResult) -> str:
	"""Indented JSON for a result, keeping CJK text unescaped."""
	return json.dumps(result.model_dump(), ensure_ascii=False, indent=2)

def dump_result(result: OcrResult, output_dir: Path) -> Path:
	"""Write ``result`` under ``output_dir`` and return the file path."""
	output_dir.mkdir(parents=True, exist_ok=True)
	path = build_output_path(output_dir, result_name_hint(result))
	path.write_text(render_result(result), encoding="utf-8")
	return path
