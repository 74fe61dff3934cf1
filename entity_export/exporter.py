"""Scan, reflect and render pipeline shared by the export commands."""

from __future__ import annotations

from pathlib import Path

from .emitter import CodeEmitter, declaration_path
from .locator import SOURCE_EXTENSION, iter_source_files
from .logging import get_logger
from .models import ExportOptions, ExportReport, ExtractionResult, SourceUnit
from .naming import NamingPolicy
from .reflection import MemberReflector, importable_from, load_type
from .type_names import TypeNameExtractor


class Exporter:
    """Runs one export mode over a source tree."""

    def __init__(
        self,
        reflector: MemberReflector,
        *,
        readonly: bool = False,
        label: str = "Source",
        extension: str = SOURCE_EXTENSION,
    ) -> None:
        self.reflector = reflector
        self.emitter = CodeEmitter(readonly=readonly)
        self.label = label
        self.extension = extension
        self.logger = get_logger("exporter")

    def collect(self, options: ExportOptions) -> ExportReport:
        """Build the output mapping without writing anything."""
        units = iter_source_files(options.source_root, self.extension, label=self.label)
        extractor = TypeNameExtractor(options.import_root, self.reflector.base_names)
        policy = NamingPolicy(
            ignore=frozenset(options.ignore),
            suffix=options.suffix,
            synthesize_defaults=self.reflector.synthesize_defaults,
        )

        report = ExportReport()
        with importable_from(options.import_root):
            for unit in units:
                result = self._extract(unit, extractor, policy)
                report.results.append(result)
                if result.skipped or result.output_name is None:
                    self.logger.debug("Skipping %s (%s)", unit.path, result.skip_reason)
                    continue
                if result.output_name in report.entries:
                    self.logger.debug(
                        "%s from %s replaces an earlier export", result.output_name, unit.path
                    )
                report.entries[result.output_name] = result.members

        self.logger.debug(
            "Collected %d export(s) from %d file(s)", len(report.entries), len(report.results)
        )
        return report

    def export(self, options: ExportOptions) -> ExportReport:
        """Collect entries and write the module (and declaration) files."""
        report = self.collect(options)
        if report.empty:
            return report

        module_text, declaration_text = self.emitter.render(report.entries)
        output_path = Path(options.output_path)
        _write(output_path, module_text)
        report.written.append(output_path)

        if options.emit_declarations:
            declarations = declaration_path(output_path)
            _write(declarations, declaration_text)
            report.written.append(declarations)
        return report

    def _extract(
        self, unit: SourceUnit, extractor: TypeNameExtractor, policy: NamingPolicy
    ) -> ExtractionResult:
        resolved = extractor.resolve(unit)
        if resolved is None:
            return ExtractionResult(unit=unit, skip_reason="unresolved")

        obj = load_type(resolved)
        if obj is None or not self.reflector.accepts(obj):
            return ExtractionResult(unit=unit, resolved=resolved, skip_reason="unloadable")

        members = policy.normalize(self.reflector.members(obj))
        if not members:
            return ExtractionResult(unit=unit, resolved=resolved, skip_reason="empty")

        return ExtractionResult(
            unit=unit,
            resolved=resolved,
            output_name=policy.output_name(resolved.name),
            members=members,
        )


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


__all__ = ["Exporter"]
