from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


def _require_object(raw: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(raw).__name__}")
    return raw


def _require_list(raw: Any, what: str) -> list:
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"{what} must be a JSON array, got {type(raw).__name__}")
    return list(raw)


def _lookup(raw: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Case-insensitive property lookup (bound documents use `Sections` or `sections`)."""
    if key in raw:
        return raw[key]
    lowered = key.lower()
    for candidate, value in raw.items():
        if str(candidate).lower() == lowered:
            return value
    return default


@dataclass
class Entry:
    name: str
    value: str
    options: Optional[List[str]] = None

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError(f"Entry {self.name!r}: value is required")
        self.value = str(self.value)
        if self.options is not None:
            self.options = [str(opt) for opt in self.options]

    @property
    def has_options(self) -> bool:
        return bool(self.options)

    def choices(self) -> List[str]:
        """Closed set offered by the editor: options, current value first when missing."""
        values = list(self.options or [])
        if self.value and self.value not in values:
            values.insert(0, self.value)
        return values

    def accepts(self, value: str) -> bool:
        if not self.has_options:
            return True
        return value == self.value or value in (self.options or [])

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Entry":
        raw = _require_object(raw, "entry")
        options = _lookup(raw, "options")
        name = str(_lookup(raw, "name", ""))
        return cls(
            name=name,
            value=_lookup(raw, "value", ""),
            options=_require_list(options, f"options of {name!r}") if options is not None else None,
        )

    def to_raw(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "value": self.value}
        if self.options is not None:
            data["options"] = list(self.options)
        return data


@dataclass
class Section:
    name: str
    order: int = 0
    entries: List[Entry] = field(default_factory=list)

    def find_entry(self, name: str) -> Optional[Entry]:
        wanted = (name or "").lower()
        for entry in self.entries:
            if entry.name.lower() == wanted:
                return entry
        return None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Section":
        raw = _require_object(raw, "section")
        entries = _require_list(_lookup(raw, "entries") or [], "entries")
        return cls(
            name=str(_lookup(raw, "name", "")),
            order=int(_lookup(raw, "order", 0) or 0),
            entries=[Entry.from_raw(item) for item in entries],
        )

    def to_raw(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "order": self.order,
            "entries": [entry.to_raw() for entry in self.entries],
        }


@dataclass
class SettingsTree:
    """Sections of named entries, bound from (and serialized back to) JSON."""

    sections: List[Section] = field(default_factory=list)

    def ordered_sections(self) -> List[Section]:
        # sorted() is stable: equal orders keep document order
        return sorted(self.sections, key=lambda s: s.order)

    def find_section(self, name: str) -> Optional[Section]:
        wanted = (name or "").lower()
        for section in self.sections:
            if section.name.lower() == wanted:
                return section
        return None

    def find_entry(self, section_name: str, entry_name: str) -> Optional[Entry]:
        section = self.find_section(section_name)
        if section is None:
            return None
        return section.find_entry(entry_name)

    def iter_entries(self) -> Iterator[Tuple[Section, Entry]]:
        """Every (section, entry) pair in stored section order, then entry order."""
        for section in self.sections:
            for entry in section.entries:
                yield section, entry

    def clone(self) -> "SettingsTree":
        return deepcopy(self)

    def restore(self, snapshot: "SettingsTree") -> None:
        """Replace contents in place so existing references to this tree stay valid."""
        self.sections = deepcopy(snapshot.sections)

    def changed_entries(self, baseline: "SettingsTree") -> List[str]:
        """Names of entries whose value differs from `baseline`."""
        before = {(s.name, e.name): e.value for s, e in baseline.iter_entries()}
        changed: List[str] = []
        for section, entry in self.iter_entries():
            key = (section.name, entry.name)
            if key not in before or before[key] != entry.value:
                changed.append(entry.name)
        return changed

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> "SettingsTree":
        if not raw:
            return cls()
        if not isinstance(raw, Mapping):
            raise ValueError("settings must be a JSON object")
        sections = _require_list(_lookup(raw, "sections") or [], "sections")
        return cls(sections=[Section.from_raw(item) for item in sections])

    def to_raw(self) -> Dict[str, Any]:
        return {"sections": [section.to_raw() for section in self.sections]}


__all__ = ["Entry", "Section", "SettingsTree"]
