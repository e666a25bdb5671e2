#!/usr/bin/env python3
"""
options.py
----------
Resolved options bag for a metadata generation run.

Options come from three places, applied in order:
    1. Dataclass defaults
    2. An optional YAML options file (camelCase or snake_case keys)
    3. Command-line overrides

Usage:
    from blogmeta.core.options import GenerateOptions, load_options_file

    options = load_options_file(Path("blogmeta.yaml"))
    options = options.merge({"use_async": True})
    posts_dir = options.resolve(options.post_load_path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from blogmeta.core.exceptions import OptionsError
from blogmeta.core.paths import COMPREHENSIVE_FILE_NAME, POST_LOAD_EXTENSION

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


def _to_snake_case(key: str) -> str:
    """Convert ``comprehensiveLoadPath`` style keys to ``comprehensive_load_path``."""
    return _CAMEL_RE.sub("_", key).lower().replace("-", "_")


def _to_camel_case(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise OptionsError(f"Cannot convert '{value}' to boolean")


def _normalize_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise OptionsError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise OptionsError(f"{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class GenerateOptions:
    """
    Settings consumed by every stage of a generation run.

    Attributes:
        comprehensive_generate_file_name: File name of the written summary
        comprehensive_generate_path: Directory the summary is written to
        comprehensive_load_file_name: File name of the summary to continue from
        comprehensive_load_path: Directory of the summary to continue from
        page_generate_path: Directory for ``*.page.json`` files
        post_generate_path: Directory for published post copies
        post_load_extension: Suffix that marks a post source file
        post_load_path: Directory holding the post sources
        root_directory: Base for every relative path above
        timeout: Asynchronous load budget in milliseconds
        use_async: Drive the pipeline with asyncio
    """

    comprehensive_generate_file_name: str = COMPREHENSIVE_FILE_NAME
    comprehensive_generate_path: str = ""
    comprehensive_load_file_name: str = COMPREHENSIVE_FILE_NAME
    comprehensive_load_path: str = ""
    page_generate_path: str = ""
    post_generate_path: str = ""
    post_load_extension: str = POST_LOAD_EXTENSION
    post_load_path: str = ""
    root_directory: str = "."
    timeout: int = 5000
    use_async: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate option values."""
        object.__setattr__(self, "timeout", _normalize_int(self.timeout, "timeout"))
        object.__setattr__(self, "use_async", _normalize_bool(self.use_async))

        if self.timeout <= 0:
            raise OptionsError(f"timeout must be positive, got {self.timeout}")
        for name in (
            "comprehensive_generate_file_name",
            "comprehensive_load_file_name",
            "post_load_extension",
        ):
            if not getattr(self, name):
                raise OptionsError(f"{name} must not be empty")
        for f in fields(self):
            if f.type == "str":
                value = getattr(self, f.name)
                object.__setattr__(self, f.name, "" if value is None else str(value))

    # ---- Construction ----
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GenerateOptions:
        """
        Build options from a mapping with camelCase or snake_case keys.

        ``None`` values are ignored so unset CLI flags keep their defaults.

        Raises:
            OptionsError: If a key is not a known option
        """
        return cls().merge(mapping)

    def merge(self, overrides: Mapping[str, Any]) -> GenerateOptions:
        """Return a copy with ``overrides`` applied (``None`` values ignored)."""
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _to_snake_case(key)
            if name not in known:
                raise OptionsError(f"Unknown option '{key}'")
            if value is not None:
                changes[name] = value
        return replace(self, **changes)

    # ---- Path helpers ----
    def resolve(self, path: str) -> str:
        """Join a relative path onto ``root_directory``."""
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.root_directory, path))

    def relative(self, path: str) -> str:
        """Map a resolved path back to a root-relative one (``""`` for the root)."""
        root = os.path.abspath(self.root_directory)
        absolute = os.path.abspath(path)
        try:
            relative = os.path.relpath(absolute, root)
        except ValueError:
            return path
        if relative == ".":
            return ""
        if relative.startswith(".."):
            return path
        return relative

    def to_dict(self, camel_case: bool = True) -> Dict[str, Any]:
        """Return the options as a plain dictionary."""
        values = asdict(self)
        if camel_case:
            return {_to_camel_case(k): v for k, v in values.items()}
        return values


def load_options_file(
    path: Path, base: Optional[GenerateOptions] = None
) -> GenerateOptions:
    """
    Load options from a YAML file.

    Args:
        path: Options file path
        base: Options to apply the file on top of (defaults to dataclass defaults)

    Returns:
        Resolved options

    Raises:
        FileNotFoundError: If the file does not exist
        OptionsError: If the file is not a mapping or has unknown keys
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise OptionsError(f"Cannot parse options file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"Options file {path} must contain a mapping")

    try:
        return (base or GenerateOptions()).merge(data)
    except OptionsError as e:
        raise OptionsError(f"{e} in {path}") from e
