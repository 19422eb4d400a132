"""
Markdown to Block Kit conversion
Basic implementation for common markdown patterns in bot replies
"""

import re
from typing import List, Optional

from .blocks import Block, DividerBlock, HeaderBlock, SectionBlock
from .text import Markdown, PlainText

_NUMBERED_ITEM = re.compile(r'^(\d+)\.\s+(.*)$')
_BOLD = re.compile(r'\*\*(.+?)\*\*')


def section(text: str, block_id: Optional[str] = None) -> SectionBlock:
    """Create a section block with mrkdwn text"""
    return SectionBlock(text=Markdown(text=text), block_id=block_id)


def header(text: str, block_id: Optional[str] = None) -> HeaderBlock:
    """Create a header block"""
    return HeaderBlock(text=PlainText(text=text, emoji=True), block_id=block_id)


def markdown_to_blocks(markdown: str) -> List[Block]:
    """
    Convert markdown text to Slack Block Kit blocks

    Handles "# " headers, "##"/"###" sub-headers (rendered bold), bullet and
    numbered lists, "---" dividers, fenced code and plain paragraphs.
    """
    blocks: List[Block] = []
    list_items: List[str] = []

    def flush_list():
        if list_items:
            blocks.append(section('\n'.join(list_items)))
            list_items.clear()

    lines = markdown.split('\n')
    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        i += 1

        if not stripped:
            flush_list()
            continue

        if stripped.startswith('```'):
            flush_list()
            code_lines = []
            while i < len(lines) and not lines[i].strip().startswith('```'):
                code_lines.append(lines[i])
                i += 1
            i += 1  # closing fence
            blocks.append(section(f"```{chr(10).join(code_lines)}```"))
            continue

        if line.startswith('# '):
            flush_list()
            blocks.append(header(line[2:].strip()))
        elif line.startswith(('## ', '### ')):
            flush_list()
            blocks.append(section(f"*{line.lstrip('#').strip()}*"))
        elif stripped in ('---', '***', '___'):
            flush_list()
            blocks.append(DividerBlock())
        elif stripped.startswith(('- ', '* ', '• ')):
            list_items.append(f"• {_to_mrkdwn(stripped[2:].strip())}")
        elif _NUMBERED_ITEM.match(stripped):
            number, item = _NUMBERED_ITEM.match(stripped).groups()
            list_items.append(f"{number}. {_to_mrkdwn(item)}")
        else:
            flush_list()
            blocks.append(section(_to_mrkdwn(line)))

    flush_list()
    return blocks


def _to_mrkdwn(text: str) -> str:
    # **bold** -> *bold*
    return _BOLD.sub(r'*\1*', text)
