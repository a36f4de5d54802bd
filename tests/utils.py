"""Test utilities for the mdsnow test suite.

This module provides shared Markdown samples and helpers for inspecting
converted markup.
"""

import re

from mdsnow import convert

MARKDOWN_SAMPLES = {
    # Headers
    "headers": "# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6",
    "single_header": "# Hello World",
    # Text formatting
    "bold": "**bold text**",
    "italic": "*italic text*",
    "bold_italic": "***bold and italic***",
    "strikethrough": "~~strikethrough~~",
    "highlight": "==highlighted text==",
    # Code
    "inline_code": "`inline code`",
    "code_block": "```javascript\nconst x = 1;\nconsole.log(x);\n```",
    "code_block_no_lang": "```\nPlain code block\n```",
    # Lists
    "unordered_list": "- Item 1\n- Item 2\n- Item 3",
    "ordered_list": "1. First\n2. Second\n3. Third",
    # Links and images
    "link": "[Link text](https://example.com)",
    "image": "![Alt text](https://example.com/image.png)",
    # Blockquotes
    "blockquote": "> This is a quote\n> spanning multiple lines",
    # Tables
    "table": "| Header 1 | Header 2 |\n|----------|----------|\n| Cell 1   | Cell 2   |\n| Cell 3   | Cell 4   |",
    "table_simple": "| Col 1 | Col 2 |\n|-------|-------|\n| A | B |",
    # Horizontal rule
    "horizontal_rule": "---",
    # Mixed content
    "mixed": (
        "# Title\n\nThis is a paragraph with **bold** and *italic* text.\n\n"
        "```javascript\nconst code = true;\n```\n\n- List item 1\n- List item 2\n\n"
        "> [!NOTE]\n> Important note here"
    ),
    # Edge cases
    "empty": "",
    "special_chars": "Text with <html> & \"quotes\" and 'apostrophes'",
    "underscore_vs_italic": "file_name_here vs *italic* text",
    # Complex scenarios
    "nested_formatting": "**Bold with *italic* inside**",
    "code_with_markdown": "```\n# This should not be a header\n**Not bold**\n```",
    "link_in_bold": "**[Bold link](https://example.com)**",
}

# One alert block per built-in type, keyed by alert name
ALERT_SAMPLES = {
    "important": ("> [!IMPORTANT]\n> This is important", "This is important"),
    "success": ("> [!SUCCESS]\n> Operation succeeded", "Operation succeeded"),
    "warning": ("> [!WARNING]\n> This is a warning", "This is a warning"),
    "note": ("> [!NOTE]\n> This is a note", "This is a note"),
    "tip": ("> [!TIP]\n> Here's a tip", "Here's a tip"),
    "attention": ("> [!ATTENTION]\n> Pay attention", "Pay attention"),
    "caution": ("> [!CAUTION]\n> Be cautious", "Be cautious"),
    "blocker": ("> [!BLOCKER]\n> This blocks progress", "This blocks progress"),
    "status": ("> [!STATUS]\n> Current status", "Current status"),
    "question": ("> [!QUESTION]\n> Is this working?", "Is this working?"),
}


def convert_bare(markdown_text: str, **kwargs) -> str:
    """Convert Markdown without the [code] wrapper, CSS or pretty printing."""
    return convert(markdown_text, skip_code_tags=True, skip_pretty_print=True, **kwargs)


def count_tags(markup: str, tag: str) -> int:
    """Count opening ``<tag>`` elements, with or without attributes."""
    return len(re.findall(rf"<{tag}[\s>]", markup))


def style_blocks(output: str) -> list[str]:
    """Return the ``<style>`` blocks prepended to a wrapped conversion."""
    return re.findall(r'<style type="text/css">\n[\s\S]*?</style>\n', output)
