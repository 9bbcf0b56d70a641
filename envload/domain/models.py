from dataclasses import dataclass, field
from enum import Enum, IntFlag


class LoadFlags(IntFlag):
    NONE = 0
    PRESERVE = 1
    DONT_OVERWRITE = PRESERVE


@dataclass(frozen=True)
class RawLine:
    line_number: int
    text: str


@dataclass(frozen=True)
class Assignment:
    name: str
    raw_value: str


@dataclass(frozen=True)
class MalformedLine:
    text: str


@dataclass(frozen=True)
class ExpansionResult:
    value: str
    unresolved: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.unresolved


class DiagnosticKind(str, Enum):
    MALFORMED_LINE = "malformed_line"
    UNRESOLVED_REFERENCE = "unresolved_reference"
    REJECTED_ASSIGNMENT = "rejected_assignment"


@dataclass(frozen=True)
class Diagnostic:
    line_number: int
    kind: DiagnosticKind
    text: str
    detail: str = ""

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.UNRESOLVED_REFERENCE:
            return f"Variable {self.detail} is not defined on line {self.line_number}"
        if self.kind is DiagnosticKind.REJECTED_ASSIGNMENT:
            return (
                f"Rejected assignment on line {self.line_number}: "
                f"'{self.text}' ({self.detail})"
            )
        return f"Ignoring ill-formed assignment on line {self.line_number}: '{self.text}'"


@dataclass
class LoadReport:
    path: str | None = None
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
