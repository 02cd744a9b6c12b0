"""Markdown to HTML conversion for model replies."""

import re

CODE_BLOCK_CLASSES = "bg-gray-950 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs"
INLINE_CODE_CLASSES = "bg-gray-900 text-pink-400 px-1.5 py-0.5 rounded text-xs"
LINK_CLASSES = "text-sky-400 underline"

_UNORDERED_ITEM = re.compile(r"^[-*]\s+")
_ORDERED_ITEM = re.compile(r"^\d+\.\s+")
_HEADING = re.compile(r"^(#{1,3})\s+(.+)$")
_HEADING_SIZES = {1: "text-lg", 2: "text-base", 3: "text-sm"}


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _wrap_list_items(text: str, item: re.Pattern[str], tag: str, classes: str) -> str:
    """Group consecutive lines matching ``item`` into one HTML list."""
    result: list[str] = []
    in_list = False
    for line in text.split("\n"):
        stripped = line.strip()
        if item.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{classes}">')
                in_list = True
            result.append(f"<li>{item.sub('', stripped)}</li>")
            continue
        if in_list:
            result.append(f"</{tag}>")
            in_list = False
        result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return "\n".join(result)


def _render_heading(match: re.Match[str]) -> str:
    size = _HEADING_SIZES[len(match.group(1))]
    return f'<div class="{size} font-semibold mt-2">{match.group(2)}</div>'


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports: headings, bold, italic, inline code, code blocks, links, lists.
    Input is escaped first so model output can never inject markup.
    """
    text = escape_html(text)

    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        rf'<pre class="{CODE_BLOCK_CLASSES}"><code>\2</code></pre>',
        text,
    )
    text = re.sub(r"`([^`]+)`", rf'<code class="{INLINE_CODE_CLASSES}">\1</code>', text)

    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)
    text = re.sub(r"(?<![\w*])\*([^*\n]+)\*", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"<em>\1</em>", text)

    text = re.sub(
        r"\[([^\]]+)\]\(([^)\s]+)\)",
        rf'<a href="\2" class="{LINK_CLASSES}" target="_blank">\1</a>',
        text,
    )

    text = "\n".join(_HEADING.sub(_render_heading, line) for line in text.split("\n"))

    text = _wrap_list_items(text, _UNORDERED_ITEM, "ul", "list-disc list-inside my-2 space-y-1")
    text = _wrap_list_items(text, _ORDERED_ITEM, "ol", "list-decimal list-inside my-2 space-y-1")

    return text.replace("\n", "<br>")
