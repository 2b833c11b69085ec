"""
Rendering of translation bundles into the ``$.msg`` jQuery plugin.

The layout of the generated script is consumed by existing pages, so the
template below must stay byte-for-byte stable: tab indentation, one
assignment per line and a separator line after every three assignments.
"""

from __future__ import annotations

from collections.abc import Mapping

from .types import RenderedScript, TranslationBundle

INDENT = "\t\t"
ASSIGNMENTS_PER_GROUP = 3
MISSING_KEY_MARKER = "??[' + key + ']??"

SCRIPT_HEADER = (
    "jQuery( function($)\n"
    "{\n"
    "\t$.msg = function (key)\n"
    "\t{\n"
    "\t\tvar m = new Array();\n\n"
)

SCRIPT_FOOTER = (
    "\n\t\tvar msg = m[key];\n\t"
    f"\n\t\tmsg = (msg == undefined) ? ('{MISSING_KEY_MARKER}') : msg;\n\t"
    "\n\t\treturn msg;\n\t"
    "}\n"
    "});"
)


def escape_value(value: str) -> str:
    """
    Escape a translation so it can be embedded in a script string literal.

    Single quotes become ``\\'`` and line feeds become the two characters
    ``\\n``. Other characters are emitted unchanged.
    """
    return value.replace("'", "\\'").replace("\n", "\\n")


def render_assignments(messages: Mapping[str, str]) -> str:
    """Render the ``m["key"] = "value";`` block, grouped in threes."""
    lines: list[str] = []
    for index, (key, value) in enumerate(messages.items()):
        if index and index % ASSIGNMENTS_PER_GROUP == 0:
            lines.append(INDENT)
        lines.append(f'{INDENT}m["{key}"] = "{escape_value(value)}";')

    return "\n".join(lines) + "\n\t"


def render_bundle(bundle: TranslationBundle) -> RenderedScript | None:
    """
    Render a bundle into the ``$.msg`` lookup script.

    Args:
        bundle: Bundle to render; keys are emitted in the bundle's order

    Returns:
        The rendered script, or None if the bundle has no keys
    """
    if bundle.is_empty:
        return None

    content = SCRIPT_HEADER + render_assignments(bundle.messages) + SCRIPT_FOOTER
    return RenderedScript(locale=bundle.locale, content=content)
