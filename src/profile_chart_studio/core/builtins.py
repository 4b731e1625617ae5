from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

BUILTIN_DIR = Path(__file__).resolve().parents[1] / "builtin"
TEMPLATE_DIR = BUILTIN_DIR / "templates"
SAMPLE_DATA_DIR = BUILTIN_DIR / "sample_data"
TEMPLATE_SUFFIX = ".liquid"
SAMPLE_SUFFIX = ".json"


class BuiltinRegistry:
    """Read-only name -> text mapping of bundled templates or datasets."""

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(dict(sorted(entries.items())))

    @classmethod
    def from_directory(cls, directory: Path, suffix: str) -> "BuiltinRegistry":
        entries: dict[str, str] = {}
        if directory.is_dir():
            for path in directory.iterdir():
                if path.is_file() and path.name.endswith(suffix):
                    entries[path.name[: -len(suffix)]] = path.read_text(encoding="utf-8")
        return cls(entries)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def names(self) -> list[str]:
        return list(self._entries.keys())

    def default_name(self) -> str:
        names = self.names()
        return names[0] if names else ""

    def get(self, name: str, fallback: str = "") -> str:
        return self._entries.get(name, fallback)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def options(self) -> list[dict[str, str]]:
        return [{"label": name, "value": name} for name in self._entries]


def load_builtin_templates(directory: Path = TEMPLATE_DIR) -> BuiltinRegistry:
    return BuiltinRegistry.from_directory(directory, TEMPLATE_SUFFIX)


def load_builtin_samples(directory: Path = SAMPLE_DATA_DIR) -> BuiltinRegistry:
    return BuiltinRegistry.from_directory(directory, SAMPLE_SUFFIX)
