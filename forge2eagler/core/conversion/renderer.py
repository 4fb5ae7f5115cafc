"""Rendering of converter sections as ModAPI script lines.

Output here is unformatted; indentation and blank-line handling belong
to the formatter, which runs once over the assembled buffer.
"""

from typing import Iterable, List, Sequence

from .extractor import ModMetadata

LISTENER_MARKER = "ModAPI.addEventListener"


def render_metadata(metadata: ModMetadata) -> List[str]:
    """One ``ModAPI.meta`` call per present field, none when all are absent."""
    lines = []
    if metadata.mod_id is not None:
        lines.append(f'ModAPI.meta.title("{metadata.mod_id}");')
    if metadata.version is not None:
        lines.append(f'ModAPI.meta.version("{metadata.version}");')
    if metadata.name is not None:
        lines.append(f'ModAPI.meta.description("{metadata.name}");')
    if metadata.description is not None:
        if metadata.name is not None:
            description = f"{metadata.description} - {metadata.name}"
        else:
            description = metadata.description
        lines.append(f'ModAPI.meta.description("{description}");')
    return lines


def render_requires(modules: Iterable[str]) -> List[str]:
    return [f"ModAPI.require('{module}');" for module in modules]


def render_listener(
    category: str,
    body: str,
    handler_name: str,
    guard_objects: Sequence[str] = ("ModAPI.minecraft", "ModAPI.player"),
) -> str:
    """Wrap a rewritten body in an event listener registration.

    The body runs only when every guard object exists, inside a
    try/catch that reports the originating handler.
    """
    lines = [f"{LISTENER_MARKER}('{category}', (event) => {{"]
    if guard_objects:
        condition = " || ".join(f"!{name}" for name in guard_objects)
        lines.append(f"  if ({condition}) return;")
        lines.append("")
    lines.extend([
        "  try {",
        f"    {body}",
        "  } catch (error) {",
        f"    console.error('[{handler_name}] Error:', error);",
        "  }",
        "});",
    ])
    return "\n".join(lines)
