"""Post-fetch text formatters."""

from collections.abc import Callable

ADGUARDHOME = "adguardhome"


def format_adguardhome(content: str) -> str:
    """Rewrite a domain list into AdGuard Home blocking rules.

    Lines starting with ``.`` become ``||domain^``, other lines pass
    through, blank lines are dropped. No trailing newline is produced.
    """
    lines = []
    for line in content.splitlines():
        if not line.strip():
            continue
        if line.startswith("."):
            lines.append(f"||{line[1:]}^")
        else:
            lines.append(line)
    return "\n".join(lines)


FORMATTERS: dict[str, Callable[[str], str]] = {
    ADGUARDHOME: format_adguardhome,
}


def handle_format(content: str, format_type: str | None) -> str:
    """Apply the formatter named by ``format_type`` (case-insensitive).

    Unknown or missing format types return the content unchanged.
    """
    if not format_type:
        return content
    formatter = FORMATTERS.get(format_type.lower())
    if formatter is None:
        return content
    return formatter(content)
