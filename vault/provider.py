"""
vault/provider.py — dostarczanie dokumentów markdown z katalogu (vaulta).

Nazwa dokumentu to nazwa pliku z rozszerzeniem ("Notes.md"). Filtr to
podciąg nazwy (case-sensitive); wynik jest posortowany leksykograficznie
po nazwie, przy równych nazwach po ścieżce względnej.

Publiczne API:
  VaultProvider(root, extension, recursive)
    .list_paths(name_filter)  -> list[Path]
    .list_names(name_filter)  -> list[str]
    .read(path)               -> Document   (ProviderError przy błędzie)
    .documents(name_filter)   -> Iterator[Document | ProviderError]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from data_model.documents import Document
from generator.errors import ProviderError


class VaultProvider:
    def __init__(self, root: str | Path, extension: str = ".md", recursive: bool = True) -> None:
        self.root = Path(root)
        self.extension = extension
        self.recursive = recursive

    def list_paths(self, name_filter: str = "") -> list[Path]:
        if not self.root.is_dir():
            return []
        pattern = f"*{self.extension}"
        candidates = self.root.rglob(pattern) if self.recursive else self.root.glob(pattern)
        matched = [p for p in candidates if p.is_file() and name_filter in p.name]
        return sorted(matched, key=lambda p: (p.name, p.relative_to(self.root).as_posix()))

    def list_names(self, name_filter: str = "") -> list[str]:
        return [p.name for p in self.list_paths(name_filter)]

    def read(self, path: str | Path) -> Document:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderError(path.name, str(e)) from e
        return Document(name=path.name, text=text)

    def documents(self, name_filter: str = "") -> Iterator[Document | ProviderError]:
        """
        Zwraca dokumenty w kolejności kolumn. Błąd odczytu jest zwracany
        (nie rzucany) w miejscu dokumentu, żeby wywołujący mógł pominąć kolumnę.
        """
        for path in self.list_paths(name_filter):
            try:
                yield self.read(path)
            except ProviderError as e:
                yield e
