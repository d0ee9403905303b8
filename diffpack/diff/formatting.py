"""Text rendering for diff entries."""

from __future__ import annotations

INDENT_MARKER = "|\t"


def render_indentation(level: int) -> str:
    return INDENT_MARKER * max(level, 0)


def render_expected_received(expected: str, received: str, level: int) -> str:
    indentation = render_indentation(level)
    return f"{indentation}Received: {received}\n{indentation}Expected: {expected}\n\n"


def render_header(title: str, level: int) -> str:
    return f"{render_indentation(level)}{title}:\n"


def render_count_mismatch(
    expected: str,
    expected_count: int,
    received: str,
    received_count: int,
    level: int,
) -> str:
    """Header plus a nested block carrying ``(<count>) <rendering>`` per side."""
    return render_header("Different count", level) + render_expected_received(
        f"({expected_count}) {expected}",
        f"({received_count}) {received}",
        level + 1,
    )


def render_case_count_mismatch(
    expected: str,
    expected_count: int,
    received: str,
    received_count: int,
    level: int,
) -> str:
    return render_header("Different count", level) + render_expected_received(
        f"{expected} ({expected_count})",
        f"{received} ({received_count})",
        level,
    )


def render_missing_set_elements(elements: list[str], level: int) -> str:
    indentation = render_indentation(level)
    lines = "".join(f"{indentation}SetElement missing: {element}\n" for element in elements)
    return f"{lines}\n"


def render_report(entries: list[str]) -> str:
    """Join entries into one printable report."""
    return "".join(entries)
