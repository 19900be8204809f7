# === FILE: js_sifter/config.py ===
"""
Loading and validation of the JsSifter run configuration.
The schema is a frozen Pydantic model; values come from a YAML/JSON file,
overridden by whatever the CLI passes in.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    model_validator,
)

__all__ = ["SifterConfig", "load_config"]


class SifterConfig(BaseModel):
    """Configuration of one sifting run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(..., description="Page whose scripts are sifted.")
    spoof: bool = Field(False, description="Present a browser-like identity to the server.")
    timeout: float = Field(10.0, gt=0, description="Timeout of a single request (seconds).")
    user_agent: str = Field("JsSifter/0.1", min_length=1, description="User-Agent when not spoofing.")
    mode: Literal["reachable", "coarse"] = Field(
        "reachable", description="Reachability-based extraction or coarse token dump."
    )
    source_type: Literal["script", "module"] = Field("script", description="How scripts are parsed.")
    tolerant: bool = Field(False, description="Let the parser recover from some errors.")
    output_dir: Path = Field(Path("."), description="Artifacts go to <output_dir>/<domain>/.")
    stoplist_file: Optional[Path] = Field(None, description="Extra stoplist entries, one per line.")
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Upper bound on concurrently analysed scripts (None: unbounded)."
    )

    @model_validator(mode="after")
    def _check_stoplist_exists(self) -> SifterConfig:
        if self.stoplist_file is not None and not self.stoplist_file.is_file():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.stoplist_file)
            )
        return self

    @property
    def domain(self) -> str:
        return self.base_url.host or ""


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def _read_file(path: Union[str, Path]) -> dict[str, Any]:
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> SifterConfig:
    """
    Build a validated SifterConfig from an optional YAML/JSON file.
    Keyword overrides whose value is not None replace file values.
    """
    data: dict[str, Any] = _read_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SifterConfig(**data)
