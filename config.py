"""Configuration for the Baidu OCR client and CLI."""


import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

ENV_FILE: Final[str] = ".env"
DEFAULT_API_PATH: Final[str] = "http://apis.baidu.com/apistore/idlocr/ocr"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 5.0
NO_TIMEOUT: Final[int] = -1
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


def resolve_timeout(timeout_ms: int) -> float | None:
	"""Map a configured timeout in milliseconds to seconds for the HTTP transport.

	``0`` selects the default of five seconds and ``NO_TIMEOUT`` disables the timeout.
	Any other negative value is a programming error.
	"""
	if timeout_ms == 0:
		return DEFAULT_TIMEOUT_SECONDS
	if timeout_ms == NO_TIMEOUT:
		return None
	if timeout_ms < 0:
		raise ValueError(f"Invalid timeout {timeout_ms}ms: use 0 for the default or {NO_TIMEOUT} to disable it")
	return timeout_ms / 1000


@dataclass(frozen=True)
class BaiduCredentials:
	"""Container for Baidu API Store access details."""
	api_key: str
	api_path: str = ""
	timeout_ms: int = 0

	def __post_init__(self) -> None:
		resolve_timeout(self.timeout_ms)

	@property
	def endpoint(self) -> str:
		return self.api_path or DEFAULT_API_PATH

	@property
	def timeout(self) -> float | None:
		return resolve_timeout(self.timeout_ms)


@dataclass(frozen=True)
class AppConfig:
	"""Aggregate configuration for the CLI runtime."""
	baidu: BaiduCredentials | None
	output_dir: Path
	log_level: int = DEFAULT_LOG_LEVEL


def load_config() -> AppConfig:
	"""Load environment-based configuration values.

	Returns:
		AppConfig: Parsed configuration with credentials when available.
	"""
	load_dotenv(ENV_FILE)
	output_dir = Path(os.getenv("OCR_OUTPUT_DIR", "outputs")).resolve()
	log_level = logging.getLevelName(os.getenv("OCR_LOG_LEVEL", "INFO").upper())
	if not isinstance(log_level, int):
		log_level = DEFAULT_LOG_LEVEL

	return AppConfig(
		baidu=_load_baidu_credentials(),
		output_dir=output_dir,
		log_level=log_level,
	)


def configure_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
	"""Configure the root logger for the application."""
	logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def _load_baidu_credentials() -> BaiduCredentials | None:
	"""Load Baidu credentials from the environment if available."""
	api_key = os.getenv("BAIDUOCR_APIKEY")
	if not api_key:
		return None
	timeout_raw = os.getenv("BAIDUOCR_TIMEOUT_MS", "0").strip() or "0"
	try:
		timeout_ms = int(timeout_raw)
	except ValueError as exc:
		raise ValueError(f"BAIDUOCR_TIMEOUT_MS must be an integer, got {timeout_raw!r}") from exc
	return BaiduCredentials(
		api_key=api_key,
		api_path=os.getenv("BAIDUOCR_API_PATH", ""),
		timeout_ms=timeout_ms,
	)
