"""Cheatsheet Service — verify every catalog example and render the cheatsheet as markdown.

Invariants:
    - Verification runs each entry through core run_entry (never executes examples itself)
    - Strict verification raises ExampleFailedError listing every failing title
    - Rendered markdown shows values from verified results when verification ran,
      from entry.expected otherwise
    - Sections appear in Section enum order; empty sections are skipped

Design Decisions:
    - Defaults for title and verification come from Settings so callers can pass nothing
"""

import logging

from immutable_ops.config import get_settings
from immutable_ops.core.cheatsheet_catalog import (
    CATALOG, CheatsheetEntry, EntryResult, entries_for, run_entry,
)
from immutable_ops.core.domain_types import Section
from immutable_ops.core.errors import ExampleFailedError

logger = logging.getLogger(__name__)


def verify_cheatsheet(
    entries: tuple[CheatsheetEntry, ...] = CATALOG, *, strict: bool = True,
) -> list[EntryResult]:
    """Run every entry's example. Raises ExampleFailedError on failures when strict."""
    results = [run_entry(entry) for entry in entries]
    failed = [r for r in results if not r.passed]

    for result in failed:
        logger.warning(
            f"Cheatsheet example failed: {result.entry.title} ({result.reason})",
            extra={
                "entry": result.entry.title,
                "section": result.entry.section.value,
                "error_code": "EXAMPLE_FAILED",
            },
        )
    logger.info(
        f"Cheatsheet verified: {len(results) - len(failed)}/{len(results)} examples hold",
        extra={"passed": len(results) - len(failed), "failed": len(failed)},
    )

    if strict and failed:
        raise ExampleFailedError([r.entry.title for r in failed])
    return results


def render_cheatsheet(
    entries: tuple[CheatsheetEntry, ...] = CATALOG,
    *,
    title: str | None = None,
    verify: bool | None = None,
) -> str:
    """Render entries as a markdown cheatsheet, one section per container family."""
    settings = get_settings()
    title = settings.cheatsheet_title if title is None else title
    verify = settings.cheatsheet_verify if verify is None else verify

    shown: dict[int, object] = {}
    if verify:
        for result in verify_cheatsheet(entries, strict=True):
            shown[id(result.entry)] = result.actual

    lines = [f"# {title}", ""]
    for section in Section:
        section_entries = entries_for(section, entries)
        if not section_entries:
            continue
        lines += [f"## {section.heading}", ""]
        for entry in section_entries:
            value = shown.get(id(entry), entry.expected)
            lines += _render_entry(entry, value)
    return "\n".join(lines).rstrip() + "\n"


def _render_entry(entry: CheatsheetEntry, value: object) -> list[str]:
    return [
        f"### {entry.title}",
        "",
        "```python",
        "# mutates its input",
        entry.mutating,
        "# returns a new value instead",
        entry.pure,
        "```",
        "",
        f"Example: `{entry.example!r}` gives `{value!r}`.",
        "",
    ]
