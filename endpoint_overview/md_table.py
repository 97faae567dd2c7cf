"""Utility for generating Markdown tables."""


def md_table(
    headers: list[str], rows: list[list[str]], align: list[str] | None = None
) -> list[str]:
    """Generate the lines of a Markdown table.

    `align` holds one separator per column (`---`, `:---`, ...).
    """
    if not rows:
        return []
    seps = align or ["---"] * len(headers)
    out = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(seps) + "|",
    ]
    out.extend("| " + " | ".join(r) + " |" for r in rows)
    return out
