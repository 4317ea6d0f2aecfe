from __future__ import annotations
import os
import pathlib
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .parser import DEFAULT_DELIMITER

OUTPUT_FORMATS = ("json", "yaml")

def _bool(v: Any, default: bool) -> bool:
    if v is None or v == "":
        return default
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() not in ("0", "false", "no", "off")

def _pick(data: Dict[str, Any], key: str, env: str, default: Any) -> Any:
    v = data.get(key)
    if v is None:
        v = os.getenv(env)
    return default if v is None else v

class NSConfig:
    def __init__(self, root: str, data: Dict[str, Any]):
        self.root = root

        # parsing
        self.delimiter: str = str(_pick(data, "delimiter", "NSPARSE_DELIMITER", DEFAULT_DELIMITER))
        self.encoding: str = str(_pick(data, "encoding", "NSPARSE_ENCODING", "utf-8"))

        # rendering
        self.output_format: str = str(_pick(data, "output_format", "NSPARSE_FORMAT", "json")).lower()
        indent = _pick(data, "indent", "NSPARSE_INDENT", 2)
        try:
            self.indent: int = int(indent)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"indent must be an integer, got {indent!r}") from e
        self.sort_keys: bool = _bool(_pick(data, "sort_keys", "NSPARSE_SORT_KEYS", None), True)

        # diagnostics
        self.debug: bool = _bool(_pick(data, "debug", "NSPARSE_DEBUG", None), False)

        self.validate()

    def validate(self) -> None:
        if not self.delimiter:
            raise ConfigError("delimiter must not be empty")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}")
        if self.indent < 0:
            raise ConfigError(f"indent must be >= 0, got {self.indent}")

    @classmethod
    def config_path(cls, root: str) -> str:
        return os.getenv("NSPARSE_CONFIG") or str(pathlib.Path(root) / ".nsparse" / "config.yaml")

    @classmethod
    def from_root(cls, root: Optional[str] = None) -> "NSConfig":
        root = str(root or os.getcwd())
        conf_path = cls.config_path(root)
        data: Dict[str, Any] = {}
        if pathlib.Path(conf_path).exists():
            try:
                with open(conf_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"cannot read {conf_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{conf_path}: expected a mapping at the top level")
        return cls(root=root, data=data)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "delimiter": self.delimiter,
            "encoding": self.encoding,
            "output_format": self.output_format,
            "indent": self.indent,
            "sort_keys": self.sort_keys,
            "debug": self.debug,
        }
