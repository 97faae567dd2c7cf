"""Rendering of the implemented-endpoints overview as doc comments."""

from collections.abc import Sequence

from endpoint_overview.coverage import (
    EventSubCoverage,
    HelixCoverage,
    group_by,
    indicator_for,
)
from endpoint_overview.md_table import md_table

DEFAULT_PREFIX = "//! "
LONG_NAME = 40


def as_comment(lines: list[str], prefix: str = DEFAULT_PREFIX) -> str:
    """Prefix every line with the host comment marker."""
    bare = prefix.rstrip()
    return "".join((f"{prefix}{line}" if line else bare) + "\n" for line in lines)


def _details(summary: str, table: list[str], *, open_: bool = False) -> list[str]:
    tag = "<details open>" if open_ else "<details>"
    return [
        f'{tag}<summary style="cursor: pointer">{summary}</summary>',
        "",
        *table,
        "",
        "</details>",
        "",
    ]


def _summary(title: str, results: Sequence[HelixCoverage | EventSubCoverage]) -> str:
    implemented = sum(1 for r in results if r.implemented)
    indicator = indicator_for(implemented, len(results))
    return f"{title} {indicator} {implemented}/{len(results)}"


def _helix_table(results: Sequence[HelixCoverage], *, in_module: bool) -> list[str]:
    rows = []
    for r in results:
        helpers = [f"[`HelixClient::{m}`]" for m in r.methods]
        if in_module:
            helpers = [
                f"{link}(crate::helix::HelixClient::{m})"
                for link, m in zip(helpers, r.methods)
            ]
        helper = ", ".join(helpers) or "-"
        module = "-"
        if r.module:
            module = f"[`{r.item_name}`]" if in_module else f"[`{r.module}`]"
        rows.append([f"[{r.row.name}]({r.row.link})", helper, module])
    return md_table(["Endpoint", "Helper", "Module"], rows)


def render_helix_overview(
    results: Sequence[HelixCoverage], prefix: str = DEFAULT_PREFIX
) -> str:
    """Render the Helix overview, one collapsed block per category."""
    lines: list[str] = []
    for category, group in group_by(results, lambda r: r.row.category).items():
        table = _helix_table(group, in_module=False)
        lines += _details(_summary(category, group), table)
    return as_comment(lines, prefix)


def render_helix_module_overview(
    category: str, results: Sequence[HelixCoverage], prefix: str = DEFAULT_PREFIX
) -> str:
    """Render the expanded overview placed in a single endpoint module."""
    lines = _details(
        _summary(category, results), _helix_table(results, in_module=True), open_=True
    )
    return as_comment(lines, prefix)


def _eventsub_name(r: EventSubCoverage) -> str:
    name = f"`{r.row.name}`"
    if len(r.row.name) >= LONG_NAME:
        name = f'<span style="font-size: 0.9em">{name}</span>'
    return f"[{name}]({r.row.link})"


def render_eventsub_overview(
    results: Sequence[EventSubCoverage], prefix: str = DEFAULT_PREFIX
) -> str:
    """Render the EventSub overview, one collapsed block per category."""
    lines: list[str] = []
    for category, group in group_by(results, lambda r: r.row.category).items():
        rows = []
        for r in group:
            sub = "-"
            if r.subscription:
                sub = f"[{r.subscription_name}]({r.subscription})"
            payload = f"[{r.payload_name}]({r.payload})" if r.payload else "-"
            rows.append([_eventsub_name(r), f"{sub}<br>{payload}"])
        table = md_table(
            ["Name", "Subscription<br>Payload"], rows, align=["---", ":---"]
        )
        title = f'<code style="color: var(--link-color)">{category}.*</code>'
        lines += _details(_summary(title, group), table)
    return as_comment(lines, prefix)
