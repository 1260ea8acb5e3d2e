"""
設定 YAML 群を読み込み、検証済みの ConfigBundle を生成するローダ。

読み込み順は ``configs/base`` → ``configs/envs/<SERVICE_ENV>`` → 環境変数
（``STORAGE_*``）で、後段ほど優先される。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .container import (
    ConfigBundle,
    ConfigLoader,
    InvalidConfigurationError,
    MissingConfigurationError,
)

# 環境変数名 -> storage セクションのキー
STORAGE_ENV_OVERRIDES: Mapping[str, str] = {
    "STORAGE_BASE_URL": "base_url",
    "STORAGE_TIMEOUT_SECONDS": "timeout_seconds",
    "STORAGE_STRICT_VALIDATION": "strict_validation",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class LoggingConfigModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    version: int


class MetricsConfigModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    provider: str


class StorageConfigModel(BaseModel):
    """storage 設定の最小検証モデル。値の詳細は StorageSettings が検証する。"""

    model_config = ConfigDict(extra="allow")

    base_url: str


class AppConfigModel(BaseModel):
    """
    必須セクション（logging, metrics, storage）の存在と最低限の構造のみを検証し、
    その他のセクションは追加情報として保持する。
    """

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfigModel
    metrics: MetricsConfigModel
    storage: StorageConfigModel


class YamlConfigLoader(ConfigLoader):
    """
    `configs/base` と `configs/envs/<env>` の YAML をロードしマージする実装。
    """

    def __init__(
        self,
        project_root: Path,
        *,
        environment: str | None = None,
        configs_dir_name: str = "configs",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._configs_root = project_root.resolve() / configs_dir_name
        self._environ = os.environ if environ is None else environ
        self._environment = environment or self._environ.get("SERVICE_ENV")

    def load(self) -> ConfigBundle:
        if not self._environment:
            raise MissingConfigurationError(
                "環境変数 'SERVICE_ENV' が未設定のため、設定をロードできません。"
            )

        base_config = self._load_directory(self._configs_root / "base", description="基本設定ディレクトリ")
        env_config = self._load_directory(
            self._configs_root / "envs" / self._environment,
            description=f"環境設定ディレクトリ ({self._environment})",
        )
        _validate_overlay_keys(base_config, env_config)

        merged = _deep_merge(base_config, env_config)
        merged = _deep_merge(merged, {"storage": _storage_overrides(self._environ)})

        try:
            validated = AppConfigModel(**merged)
        except ValidationError as exc:
            raise InvalidConfigurationError("設定値の検証に失敗しました。") from exc

        return ConfigBundle(root=validated.model_dump())

    def _load_directory(self, directory: Path, *, description: str) -> dict[str, Any]:
        if not directory.is_dir():
            raise MissingConfigurationError(f"{description} ({directory}) が存在しません。")

        yaml_files = sorted({*directory.glob("**/*.yml"), *directory.glob("**/*.yaml")})
        if not yaml_files:
            raise MissingConfigurationError(f"{directory} に YAML ファイルが存在しません。")

        accumulator: dict[str, Any] = {}
        for file_path in yaml_files:
            accumulator = _deep_merge(accumulator, _load_yaml(file_path))
        return accumulator


def _load_yaml(file_path: Path) -> Mapping[str, Any]:
    try:
        with file_path.open("r", encoding="utf-8") as fh:
            content = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise InvalidConfigurationError(f"YAML の解析に失敗しました: {file_path}") from exc

    if content is None:
        raise InvalidConfigurationError(f"YAML ファイルが空です: {file_path}")
    if not isinstance(content, Mapping):
        raise InvalidConfigurationError(
            f"YAML ファイルのトップレベルは Mapping である必要があります: {file_path}"
        )
    return content


def _storage_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for variable, key in STORAGE_ENV_OVERRIDES.items():
        raw = environ.get(variable)
        if raw is None or raw == "":
            continue
        if key == "strict_validation":
            overrides[key] = _parse_bool(variable, raw)
        else:
            overrides[key] = raw
    return overrides


def _parse_bool(variable: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"環境変数 {variable} は真偽値で指定してください: {raw!r}")


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """
    ネストされた辞書をマージする。overlay の値が優先される。
    """

    result: dict[str, Any] = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(current, value)
        else:
            result[key] = value
    return result


def _validate_overlay_keys(base: Mapping[str, Any], overlay: Mapping[str, Any], *, path: str = "") -> None:
    """
    環境差分で base に存在しないキーが追加されていないか検証する。
    """

    for key, value in overlay.items():
        dotted = f"{path}{key}"
        if key not in base:
            raise InvalidConfigurationError(
                f"環境差分で未定義の設定キー '{dotted}' が検出されました。"
                " 先に configs/base 配下へ定義を追加してください。"
            )
        if not isinstance(value, Mapping):
            continue
        if not isinstance(base[key], Mapping):
            raise InvalidConfigurationError(f"設定キー '{dotted}' は base では Mapping ではありません。")
        _validate_overlay_keys(base[key], value, path=f"{dotted}.")
