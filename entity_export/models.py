"""Core data models shared across entity-export components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

MemberMapping = Dict[str, Any]


@dataclass(frozen=True)
class SourceUnit:
    """A source file discovered during the directory walk."""

    path: Path
    extension: str


@dataclass(frozen=True)
class ResolvedType:
    """Fully qualified class reference recovered from a source file."""

    module: str
    name: str

    @property
    def qualname(self) -> str:
        return f"{self.module}.{self.name}"


@dataclass(frozen=True)
class Member:
    """One symbolic member of a type; ``value`` is None when no backing value exists."""

    name: str
    value: Any = None


@dataclass
class ExportOptions:
    """Settings for a single export run."""

    source_root: Path
    output_path: Path
    import_root: Path
    suffix: str = ""
    emit_declarations: bool = False
    ignore: Tuple[str, ...] = ()


@dataclass
class ExtractionResult:
    """Outcome of processing one source file."""

    unit: SourceUnit
    resolved: Optional[ResolvedType] = None
    output_name: Optional[str] = None
    members: MemberMapping = field(default_factory=dict)
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


@dataclass
class ExportReport:
    """Everything produced by an export run."""

    entries: Dict[str, MemberMapping] = field(default_factory=dict)
    results: List[ExtractionResult] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.entries
