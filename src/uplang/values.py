"""Value types for UP documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class VString:
    """Scalar or multiline text. Annotations never change the stored text."""

    text: str

    def to_python(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass
class VBlock:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def to_python(self) -> dict[str, Any]:
        return {k: v.to_python() for k, v in self.entries.items()}

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def to_python(self) -> list[Any]:
        return [v.to_python() for v in self.items]

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VTable:
    """Tabular value. Reserved: the parser has no syntax that builds one."""

    columns: list["Value"] = field(default_factory=list)
    rows: list[list["Value"]] = field(default_factory=list)

    def to_python(self) -> dict[str, Any]:
        return {
            "columns": [c.to_python() for c in self.columns],
            "rows": [[v.to_python() for v in row] for row in self.rows],
        }

    def __str__(self) -> str:
        return f"VTable({len(self.columns)} columns, {len(self.rows)} rows)"


Value = Union[VString, VBlock, VList, VTable]
