"""Helpers shared by the test-suite and the Markdown report generator."""
from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class TargetDetails:
    """Where a piece of code exercised by a test lives, and what it says about itself."""

    display_name: str
    module: Optional[str] = None
    file: Optional[str] = None
    doc: Optional[str] = None


@dataclass(frozen=True)
class TestMetadata:
    __test__ = False  # not a pytest test class

    purpose: str
    notes: Optional[str] = None
    targets: Sequence[Any] = field(default_factory=tuple)


def describe_test(*, purpose: str, targets: Sequence[Any] | None = None, notes: str | None = None):
    """Attach a purpose statement and the client code under test to a pytest function.

    ``generate_test_report.py`` reads the attached ``TestMetadata`` to explain
    each outcome in the report.
    """
    if not purpose:
        raise ValueError("describe_test requires a non-empty purpose")
    metadata = TestMetadata(purpose=purpose, notes=notes, targets=tuple(targets or ()))

    def _decorator(func):
        func.__test_metadata__ = metadata
        return func

    return _decorator


def _describe_target(target: Any) -> TargetDetails:
    if isinstance(target, TargetDetails):
        return target
    if isinstance(target, str):
        return TargetDetails(display_name=target)
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", None) or repr(target)
    try:
        source = inspect.getsourcefile(target)
    except TypeError:
        source = None
    return TargetDetails(
        display_name=name,
        module=getattr(target, "__module__", None),
        file=source,
        doc=inspect.getdoc(target),
    )


def resolve_target_details(targets: Iterable[Any]) -> List[TargetDetails]:
    return [_describe_target(target) for target in targets]


__all__ = ["describe_test", "resolve_target_details", "TargetDetails", "TestMetadata"]
