"""Extension table resource."""

from mime_registry.services import get_registry


async def list_extensions_resource() -> str:
    """List extension overrides and registered charsets.

    Returns:
        Formatted table of ``.ext -> mime`` lines followed by charsets.
    """
    registry = get_registry()
    extensions = registry.extensions()
    charsets = registry.charsets()

    lines = ["Registered Extensions", "=" * 40, ""]
    if extensions:
        width = max(len(ext) for ext in extensions) + 1
        for ext, mime in sorted(extensions.items()):
            lines.append(f"  .{ext:<{width}} {mime}")
    else:
        lines.append("  (none)")

    lines.extend(["", "Charsets", "-" * 40])
    for mime, charset in sorted(charsets.items()):
        lines.append(f"  {mime}: {charset}")

    return "\n".join(lines)
