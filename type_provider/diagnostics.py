"""Diagnostics reported back to the configuration host."""
from dataclasses import dataclass
from typing import Dict, Iterable, List

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: str
    summary: str
    detail: str

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity, "summary": self.summary, "detail": self.detail}


class Diagnostics:
    def __init__(self, items: Iterable[Diagnostic] = ()):
        self._items: List[Diagnostic] = list(items)

    def add_error(self, summary: str, detail: str):
        self._items.append(Diagnostic(ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str):
        self._items.append(Diagnostic(WARNING, summary, detail))

    def append(self, diagnostic: Diagnostic):
        self._items.append(diagnostic)

    def extend(self, other: Iterable[Diagnostic]):
        self._items.extend(other)

    def has_error(self) -> bool:
        return any(d.severity == ERROR for d in self._items)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == ERROR]

    def to_list(self) -> List[Dict[str, str]]:
        return [d.to_dict() for d in self._items]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)
