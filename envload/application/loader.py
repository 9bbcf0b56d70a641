import logging
import os
from typing import Iterable

from envload.application.ports import EnvironmentView
from envload.domain.expander import expand
from envload.domain.line_parser import parse_line
from envload.domain.models import (
    Diagnostic,
    DiagnosticKind,
    LoadFlags,
    LoadReport,
    MalformedLine,
    RawLine,
)

logger = logging.getLogger(__name__)


class Loader:
    def __init__(self, environment: EnvironmentView):
        self._env = environment

    def load_file(
        self, path: str | os.PathLike[str], flags: LoadFlags = LoadFlags.NONE
    ) -> LoadReport:
        """Apply every assignment in ``path``.

        A file that cannot be opened or decoded counts as empty.
        """
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Nothing to load from %s: %s", path, exc)
            return LoadReport(path=os.fspath(path))

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        report = self.load_lines(lines, flags)
        report.path = os.fspath(path)
        return report

    def load_lines(
        self, lines: Iterable[str], flags: LoadFlags = LoadFlags.NONE
    ) -> LoadReport:
        report = LoadReport()
        overwrite = not flags & LoadFlags.PRESERVE
        for number, text in enumerate(lines, start=1):
            self._apply(RawLine(number, text), overwrite, report)
        return report

    def _apply(self, line: RawLine, overwrite: bool, report: LoadReport) -> None:
        parsed = parse_line(line.text)
        if isinstance(parsed, MalformedLine):
            self._diagnose(
                report,
                Diagnostic(line.line_number, DiagnosticKind.MALFORMED_LINE, line.text),
            )
            return

        result = expand(line.line_number, parsed.raw_value, self._env.lookup)
        if not result.ok:
            for token in result.unresolved:
                self._diagnose(
                    report,
                    Diagnostic(
                        line.line_number,
                        DiagnosticKind.UNRESOLVED_REFERENCE,
                        line.text,
                        token,
                    ),
                )
            return

        try:
            written = self._env.set(parsed.name, result.value, overwrite=overwrite)
        except ValueError as exc:
            self._diagnose(
                report,
                Diagnostic(
                    line.line_number,
                    DiagnosticKind.REJECTED_ASSIGNMENT,
                    line.text,
                    str(exc),
                ),
            )
            return

        if written:
            logger.debug("Set %s from line %d", parsed.name, line.line_number)
            report.applied.append(parsed.name)
        else:
            report.skipped.append(parsed.name)

    def _diagnose(self, report: LoadReport, diagnostic: Diagnostic) -> None:
        logger.warning(diagnostic.message)
        report.diagnostics.append(diagnostic)
