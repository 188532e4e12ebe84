import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, RunConfig, UnsupportedConfigFormatError

SETTINGS_KEYS = ("concurrency", "verbose", "rewrite")


def load_settings(path: str | Path) -> RunConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Settings file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Settings path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_run_config(pure_path, raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    # An empty YAML document means "use the defaults"
    if raw_file is None:
        return {}

    return _expect_mapping(path, "YAML", raw_file)


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc

    return _expect_mapping(path, "TOML", raw_file)


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    return _expect_mapping(path, "JSON", raw_file)


def _expect_mapping(path: Path, kind: str, raw_file: Any) -> Mapping[str, Any]:
    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {kind} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_run_config(path: Path, raw: Mapping[str, Any]) -> RunConfig:
    if "batchrun" in raw:
        if not isinstance(raw["batchrun"], Mapping):
            raise ConfigError(
                f"{path}: 'batchrun' must be a mapping, got {type(raw['batchrun'])}"
            )
        raw = raw["batchrun"]

    for field in raw.keys():
        if field not in SETTINGS_KEYS:
            raise ConfigError(f"{path}: Can't process: {field}")

    try:
        return RunConfig(**{key: raw[key] for key in SETTINGS_KEYS if key in raw})
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
