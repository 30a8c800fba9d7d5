## Display state for a rendered roadmap
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

# (keywords, icon) checked in order; first hit wins
_ICON_RULES = [
    (("stage", "phase"), "stage"),
    (("week", "month"), "timeline"),
    (("resource", "tool"), "resources"),
    (("project", "practice"), "project"),
    (("assessment", "test"), "assessment"),
]
DEFAULT_ICON = "calendar"


def section_icon(title: str) -> str:
    t = title.lower()
    for keywords, icon in _ICON_RULES:
        if any(k in t for k in keywords):
            return icon
    return DEFAULT_ICON


def parse_collapsed(param: str | None) -> List[int]:
    """Read a ``collapsed=0,3`` query value. Junk tokens are skipped."""
    if not param:
        return []
    out = []
    for token in param.split(","):
        token = token.strip()
        if token.isdigit():
            out.append(int(token))
    return out


@dataclass(frozen=True)
class ExpansionState:
    """Which sections of a roadmap are open, keyed by section index."""

    expanded: Dict[int, bool] = field(default_factory=dict)

    @classmethod
    def expanded_all(cls, count: int) -> "ExpansionState":
        return cls({i: True for i in range(count)})

    @classmethod
    def from_collapsed(cls, count: int, collapsed: Iterable[int]) -> "ExpansionState":
        closed = set(collapsed)
        return cls({i: i not in closed for i in range(count)})

    @property
    def all_expanded(self) -> bool:
        return all(self.expanded.values())

    def is_expanded(self, index: int) -> bool:
        return self.expanded.get(index, False)

    def toggle(self, index: int) -> "ExpansionState":
        if index not in self.expanded:
            return self
        return ExpansionState({**self.expanded, index: not self.expanded[index]})

    def toggle_all(self) -> "ExpansionState":
        target = not self.all_expanded
        return ExpansionState({i: target for i in self.expanded})

    def collapsed_indices(self) -> List[int]:
        return sorted(i for i, is_open in self.expanded.items() if not is_open)

    def to_query(self) -> str:
        return ",".join(str(i) for i in self.collapsed_indices())
