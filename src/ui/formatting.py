"""Markdown rendering for assistant messages.

Backend answers are LLM output with light markdown. Supports bold, italic,
inline code, code blocks, links and bullet/numbered lists.
"""

import html
import re

_CODE_BLOCK = re.compile(r"```(\w*)\n?([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_BOLD = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
_ITALIC = re.compile(r"\*([^*\n]+)\*|(?<!\w)_([^_\n]+)_(?!\w)")
_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)")
_BULLET = re.compile(r"^[-*]\s+")
_NUMBERED = re.compile(r"^\d+\.\s+")

_PRE_CLASSES = "bg-gray-800 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs"
_CODE_CLASSES = "bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs"


def _wrap_lists(lines: list[str], marker: re.Pattern[str], tag: str, classes: str) -> list[str]:
    """Group consecutive lines matching ``marker`` into one HTML list."""
    result: list[str] = []
    in_list = False
    for line in lines:
        stripped = line.strip()
        if marker.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{classes}">')
                in_list = True
            result.append(f"<li>{marker.sub('', stripped)}</li>")
            continue
        if in_list:
            result.append(f"</{tag}>")
            in_list = False
        result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return result


def markdown_to_html(text: str) -> str:
    """Convert a markdown answer to HTML for the chat bubble."""
    text = html.escape(text)

    text = _CODE_BLOCK.sub(rf'<pre class="{_PRE_CLASSES}"><code>\2</code></pre>', text)
    text = _INLINE_CODE.sub(rf'<code class="{_CODE_CLASSES}">\1</code>', text)

    # Lists first so "* item" markers are not read as italics
    lines = text.split("\n")
    lines = _wrap_lists(lines, _BULLET, "ul", "list-disc list-inside my-2 space-y-1")
    lines = _wrap_lists(lines, _NUMBERED, "ol", "list-decimal list-inside my-2 space-y-1")
    text = "\n".join(lines)

    text = _BOLD.sub(lambda m: f"<strong>{m.group(1) or m.group(2)}</strong>", text)
    text = _ITALIC.sub(lambda m: f"<em>{m.group(1) or m.group(2)}</em>", text)
    text = _LINK.sub(r'<a href="\2" class="text-blue-600 underline" target="_blank">\1</a>', text)

    return text.replace("\n", "<br>")


def plain_to_html(text: str) -> str:
    """Escape a user message and keep its line breaks."""
    return html.escape(text).replace("\n", "<br>")
