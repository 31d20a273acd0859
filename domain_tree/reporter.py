#!/usr/bin/env python3
"""
Build reporting module.

Handles the console summary, per-artifact export status, and the optional
JSON build report.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .models import BuildResults, ExportOutcome


class BuildReporter:
    """Handles reporting of category tree build results."""

    def __init__(self, report_file: Optional[Union[str, Path]] = None, max_listed: int = 20):
        self.report_file = Path(report_file) if report_file else None
        self.max_listed = max_listed

    def report_results(
        self,
        results: BuildResults,
        outcomes: List[ExportOutcome],
        include_warnings: bool = False,
    ) -> bool:
        """Report results to console (and JSON file if configured). Returns True if all exports succeeded."""
        if self.report_file:
            self._write_json_report(results, outcomes)

        self._display_build_summary(results, include_warnings=include_warnings)
        self._display_export_summary(outcomes)

        return not results.has_errors() and all(outcome.ok for outcome in outcomes)

    def _write_json_report(self, results: BuildResults, outcomes: List[ExportOutcome]) -> None:
        """Write detailed JSON report to file."""
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        report_data["exports"] = [
            {
                "artifact": outcome.artifact,
                "destination": outcome.destination,
                "bytes_written": outcome.bytes_written,
                "error": outcome.error,
            }
            for outcome in outcomes
        ]

        self.report_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.report_file, 'w', encoding='utf-8') as f:
            json.dump(report_data, f, indent=2, default=str)

    def _display_build_summary(self, results: BuildResults, include_warnings: bool = False) -> None:
        """Display summary information on console."""
        forest = results.forest
        print()
        print(f"📊 {forest.total_categories} categories, {len(forest.roots)} roots, "
              f"max depth {forest.max_depth()} ({results.execution_time:.2f}s)")

        type_summary = results.get_summary_by_type()
        if type_summary:
            print("🔍 Issues by type:")
            for issue_type, count in sorted(type_summary.items()):
                print(f"  • {issue_type}: {count}")

        if include_warnings and results.warnings:
            print("⚠️  Warnings:")
            for issue in results.warnings[:self.max_listed]:
                print(f"  • {issue.message}")
            if len(results.warnings) > self.max_listed:
                print(f"  • ... and {len(results.warnings) - self.max_listed} more")
        elif results.warnings:
            print(f"ℹ️  {len(results.warnings)} warning(s) suppressed - run with --include-warnings to see them")

    def _display_export_summary(self, outcomes: List[ExportOutcome]) -> None:
        """Display one status line per exported artifact."""
        print()
        print("📤 Output files:")
        for outcome in outcomes:
            if outcome.ok:
                print(f"  ✅ {outcome.artifact.upper()}: {outcome.destination} ({outcome.bytes_written} bytes)")
            else:
                print(f"  ❌ {outcome.artifact.upper()} export failed: {outcome.error}")
        if self.report_file:
            print(f"📋 Build report: {self.report_file}")
