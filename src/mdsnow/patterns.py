#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Compiled regular expressions shared by the conversion passes.

The span patterns are used twice: once by the content protector to hide
spans from the inline formatter, and once by the structural converter to
render them. Keeping a single definition guarantees that what is protected
is exactly what is later rendered.
"""

from __future__ import annotations

import re

# Fenced code block; group 1 is the (discarded) language tag, group 2 the body
FENCED_CODE_BLOCK_RE = re.compile(r"```([\w+#.-]*)\n([\s\S]*?)```")

# Inline code span, no backticks inside
INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")

# ![alt](url)
IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

# [text](url)
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

# 1-6 hashes followed by at least one space or tab
HEADER_RE = re.compile(r"^(#{1,6})[ \t]+(.*)$", re.MULTILINE)

HORIZONTAL_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})[ \t]*$", re.MULTILINE)

UNORDERED_LIST_MARKER_RE = re.compile(r"^[-*][ \t]+")
ORDERED_LIST_MARKER_RE = re.compile(r"^\d+\.[ \t]+")

# Rendered code block, as produced by the code fence pass
PRE_CODE_REGION_RE = re.compile(r"(<pre><code>[\s\S]*?</code></pre>)")

# Rendered inline code span
INLINE_CODE_ELEMENT_RE = re.compile(r"<code>[^\n]*?</code>")

# Raw fenced block, as present before the code fence pass
FENCED_CODE_REGION_RE = re.compile(r"(```[\w+#.-]*\n[\s\S]*?```)")

# Maximal run of lines that start and end with a pipe
TABLE_RUN_RE = re.compile(r"(?:^\|[^\n]*\|[ \t]*$\n?)+", re.MULTILINE)

TABLE_SEPARATOR_CELL_RE = re.compile(r"^-+$")
