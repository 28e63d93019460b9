"""JSON configuration document adapter.

Reads the host's settings document, binds one top-level property into a
SettingsTree and writes an edited tree back into that property only. Writes go
through a temp file in the target directory followed by `os.replace`, so a
failed save never leaves a truncated document behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

from core import IOFailure, ParseFailure, SettingsTree

logger = logging.getLogger("prefs_editor.config")

DEFAULT_SECTION_KEY = "Preferences"


def to_json_value(value: Any) -> Any:
    """Structural JSON copy of `value` (objects with `to_raw()` go through it)."""
    if hasattr(value, "to_raw"):
        value = value.to_raw()
    return json.loads(json.dumps(value))


def update_document(document: Dict[str, Any], section_key: str, new_value: Any) -> Dict[str, Any]:
    """Return a copy of `document` with only `section_key` replaced.

    An empty `section_key` replaces each top-level key carried by `new_value`
    (which must then be an object); other root keys survive either way.
    """
    if not isinstance(document, dict):
        raise TypeError("document must be a JSON object")
    updated = deepcopy(document)
    serialized = to_json_value(new_value)
    if section_key:
        updated[section_key] = serialized
        return updated
    if not isinstance(serialized, dict):
        raise TypeError("replacing the document root requires an object value")
    updated.update(serialized)
    return updated


class ConfigDocumentUpdater:
    def __init__(self, path: Path | str, indent: int = 2):
        self.path = Path(path).expanduser()
        self.indent = indent

    def load(self) -> Dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise IOFailure(self.path, exc.strerror or str(exc)) from exc
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseFailure(self.path, f"line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
        if not isinstance(document, dict):
            raise ParseFailure(self.path, "top-level value is not an object")
        return document

    def load_tree(self, section_key: str = DEFAULT_SECTION_KEY) -> SettingsTree:
        document = self.load()
        raw = document.get(section_key) if section_key else document
        try:
            return SettingsTree.from_raw(raw)
        except (TypeError, ValueError) as exc:
            raise ParseFailure(self.path, f"'{section_key}': {exc}") from exc

    def update(self, document: Dict[str, Any], section_key: str, new_value: Any) -> Dict[str, Any]:
        return update_document(document, section_key, new_value)

    def save(self, section_key: str, new_value: Any) -> Dict[str, Any]:
        """Merge `new_value` into the on-disk document and write it back."""
        document = self.load()
        try:
            updated = self.update(document, section_key, new_value)
            payload = json.dumps(updated, indent=self.indent, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as exc:
            raise ParseFailure(self.path, f"cannot serialize '{section_key}': {exc}") from exc
        self._write_atomic(payload)
        logger.info("Saved '%s' to %s", section_key or "<root>", self.path)
        return updated

    def _write_atomic(self, payload: str) -> None:
        target = self.path
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(target.parent),
                prefix=f".{target.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(target))
        except OSError as exc:
            if tmp_path is not None and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_path)
            raise IOFailure(target, exc.strerror or str(exc)) from exc


__all__ = ["ConfigDocumentUpdater", "DEFAULT_SECTION_KEY", "update_document", "to_json_value"]
