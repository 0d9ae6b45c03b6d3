"""Run the weather client test-suite and write a Markdown report."""
from __future__ import annotations

import argparse
import datetime as dt
import inspect
import sys
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from weather_client.testing_utils import TestMetadata, resolve_target_details


class ReportingPlugin:
    """Collects test docstrings, ``describe_test`` metadata and outcomes."""

    def __init__(self) -> None:
        self.entries: Dict[str, Dict[str, object]] = {}

    def pytest_collection_modifyitems(self, session, config, items):  # type: ignore[override]
        for item in items:
            func = getattr(item, "function", None)
            self.entries[item.nodeid] = {
                "nodeid": item.nodeid,
                "doc": inspect.getdoc(func) if func else None,
                "metadata": getattr(func, "__test_metadata__", None),
                "outcome": "not-run",
                "duration": 0.0,
                "details": None,
            }

    def pytest_runtest_logreport(self, report):  # type: ignore[override]
        entry = self.entries.setdefault(report.nodeid, {"nodeid": report.nodeid, "outcome": "not-run", "duration": 0.0})
        entry["duration"] = float(entry.get("duration") or 0.0) + float(report.duration or 0.0)
        if report.skipped:
            entry["outcome"] = "skipped"
            entry["details"] = report.longrepr[2] if isinstance(report.longrepr, tuple) else str(report.longrepr)
        elif report.failed:
            entry["outcome"] = "failed" if report.when == "call" else f"error ({report.when})"
            entry["details"] = str(report.longrepr)
        elif report.when == "call":
            entry["outcome"] = "passed"


def build_markdown(plugin: ReportingPlugin, exit_code: int) -> str:
    entries = sorted(plugin.entries.values(), key=lambda entry: str(entry["nodeid"]))
    counts = Counter("error" if str(entry["outcome"]).startswith("error") else entry["outcome"] for entry in entries)
    total_duration = sum(float(entry.get("duration") or 0.0) for entry in entries)
    now = dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

    lines: List[str] = [
        f"# Weather client test report - {now}",
        "",
        f"- Overall status: {'SUCCESS' if exit_code == 0 else 'FAILURE'}",
        f"- Total tests: {len(entries)}",
        "- Outcomes: " + ", ".join(f"{name}={counts.get(name, 0)}" for name in ("passed", "failed", "error", "skipped")),
        f"- Aggregate duration: {total_duration:.2f}s",
        "",
    ]
    for entry in entries:
        lines.append(f"## {entry['nodeid']}")
        lines.append("")
        lines.append(f"- Outcome: {str(entry['outcome']).upper()} ({float(entry.get('duration') or 0.0):.2f}s)")
        if entry.get("doc"):
            lines.append(f"- Test intent: {entry['doc']}")
        metadata: Optional[TestMetadata] = entry.get("metadata")  # type: ignore[assignment]
        if metadata:
            lines.append(f"- Purpose: {metadata.purpose}")
            if metadata.notes:
                lines.append(f"- Notes: {metadata.notes}")
            for target in resolve_target_details(metadata.targets):
                lines.append(f"- Code under test: `{target.display_name}` ({target.module or 'module unknown'})")
                if target.doc:
                    lines.append(f"  - {target.doc.splitlines()[0]}")
        if entry.get("details"):
            lines.append(f"- Details: {entry['details']}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description="Run pytest and emit a Markdown report")
    parser.add_argument("--output", default="reports/test_report.md", help="Relative path for the generated report")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Additional arguments forwarded to pytest")
    args = parser.parse_args()

    plugin = ReportingPlugin()
    exit_code = pytest.main(["tests", *args.pytest_args], plugins=[plugin])
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(build_markdown(plugin, int(exit_code)), encoding="utf-8")
    print(f"Test report written to {output}")
    return int(exit_code)


if __name__ == "__main__":
    raise SystemExit(main())
