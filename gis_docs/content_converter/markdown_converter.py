"""HTML to Markdown conversion by ordered pattern substitution.

The converter never builds a DOM. It runs a fixed sequence of regex
substitutions over the page text, each stage working on the output of the
previous one:

    1. strip document scaffolding and non-content elements (script, style, ...)
    2. strip chrome regions (nav, aside, header, footer), unwrap containers
    3. headings, paragraphs, blockquotes
    4. code (fenced and inline)
    5. bold / italic
    6. links
    7. lists
    8. tables
    9. line breaks and horizontal rules
   10. form elements
   11. entity decoding
   12. whitespace normalization

Fenced code bodies are set aside in stage 4 and put back after whitespace
normalization, so their line breaks and indentation survive verbatim.
"""

import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, List, Optional, Sequence, Union

Replacement = Union[str, Callable[[Match], str]]

_FLAGS = re.IGNORECASE | re.DOTALL


@dataclass(frozen=True)
class ConversionRule:
    """A compiled HTML pattern and the Markdown it is rewritten to.

    Attributes:
        pattern: Compiled regex matching one HTML construct
        replacement: re.sub template string or callable taking the match
        repeat: Re-apply until the text stops changing (innermost-first
            rewriting of nestable elements such as lists and tables)
    """
    pattern: Pattern
    replacement: Replacement
    repeat: bool = False

    def apply(self, text: str) -> str:
        result = self.pattern.sub(self.replacement, text)
        while self.repeat and result != text:
            text = result
            result = self.pattern.sub(self.replacement, text)
        return result


def _rule(pattern: str, replacement: Replacement, repeat: bool = False) -> ConversionRule:
    return ConversionRule(re.compile(pattern, _FLAGS), replacement, repeat)


def _element(tag: str) -> str:
    """Pattern for <tag ...>content</tag>, content captured as group 1."""
    return rf'<{tag}\b[^>]*>(.*?)</{tag}\s*>'


def _tags(*tags: str) -> str:
    """Pattern for any opening or closing tag of the given names."""
    return rf'</?(?:{"|".join(tags)})\b[^>]*>'


def _collapse(text: str) -> str:
    return ' '.join(text.split())


# ── Entity table ────────────────────────────────────────────────────────────

ENTITY_TABLE = {
    '&lt;': '<',
    '&gt;': '>',
    '&amp;': '&',
    '&quot;': '"',
    '&#34;': '"',
    '&#39;': "'",
    '&#x27;': "'",
    '&apos;': "'",
    '&nbsp;': ' ',
    '&#160;': ' ',
    '&copy;': '©',
    '&reg;': '®',
    '&trade;': '™',
    '&mdash;': '—',
    '&ndash;': '–',
    '&hellip;': '…',
    '&laquo;': '«',
    '&raquo;': '»',
}

_ENTITY_RE = re.compile(r'&(?:[A-Za-z]+|#\d+|#[xX][0-9A-Fa-f]+);')


def decode_entities(text: str) -> str:
    """Replace the references in ENTITY_TABLE in a single pass.

    A single pass means '&amp;lt;' becomes '&lt;' and is not decoded again.
    References missing from the table are left as they are.
    """
    return _ENTITY_RE.sub(lambda m: ENTITY_TABLE.get(m.group(0), m.group(0)), text)


_BLANK_RUN_RE = re.compile(r'\n\s*\n\s*\n')


def normalize_whitespace(text: str) -> str:
    """Collapse three or more newlines (whitespace-only lines included) to one blank line."""
    return _BLANK_RUN_RE.sub('\n\n', text)


# ── Stage 1-3: scaffolding, chrome, block structure ─────────────────────────

def _heading(match: Match) -> str:
    text = _collapse(match.group(2))
    if not text:
        return '\n'
    return '\n' + '#' * int(match.group(1)) + ' ' + text + '\n\n'


def _blockquote(match: Match) -> str:
    lines = match.group(1).strip().split('\n')
    quoted = '\n'.join(('> ' + line.strip()).rstrip() for line in lines)
    return '\n' + quoted + '\n\n'


_SCAFFOLDING_RULES = [
    _rule(r'<!DOCTYPE[^>]*>', ''),
    _rule(r'<!--.*?-->', ''),
    _rule(_element('head'), ''),
    _rule(_tags('html', 'body'), ''),
    *[
        _rule(_element(tag), '')
        for tag in ('script', 'style', 'noscript', 'svg', 'video', 'iframe')
    ],
    _rule(r'<(?:meta|link)\b[^>]*>', ''),
]

_CHROME_RULES = [
    *[_rule(_element(tag), '') for tag in ('nav', 'aside', 'header', 'footer')],
    _rule(_tags('main', 'section', 'article', 'div'), '\n'),
    _rule(_tags('span', 'button'), ''),
]

_BLOCK_RULES = [
    _rule(r'<h([1-6])\b[^>]*>(.*?)</h\1\s*>', _heading),
    _rule(_element('p'), lambda m: m.group(1).strip() + '\n\n'),
    _rule(_element('blockquote'), _blockquote),
]


# ── Stage 4: code ───────────────────────────────────────────────────────────

_LANGUAGE_CLASS = r'''\bclass\s*=\s*["'][^"']*?\blanguage-([\w#+.-]+)[^"']*["']'''
_BR_RE = re.compile(r'<br\b[^>]*>', re.IGNORECASE)
# A placeholder at the start of a line carries that line's indentation
# (list nesting) onto every line of the restored body.
_PLACEHOLDER_RE = re.compile(r'(^[ \t]*)?\x00(\d+)\x00', re.MULTILINE)
# Fences that ended up inside a table cell, restored as inline code.
_CELL_PLACEHOLDER_RE = re.compile(r'\x01(\d+)\x01')
_CELL_FENCE_RE = re.compile(r'```[\w#+.-]*\s*\x00(\d+)\x00\s*```')


def _inline_code(line: str) -> str:
    if '`' in line:
        return f'`` {line} ``'
    return f'`{line}`'


class _FenceStore:
    """Holds fenced code bodies out of the text while later stages run."""

    def __init__(self):
        self._bodies: List[str] = []

    def fence(self, body: str, language: str = '') -> str:
        body = _BR_RE.sub('\n', body).strip('\n')
        self._bodies.append(body)
        return f'\n```{language}\n\x00{len(self._bodies) - 1}\x00\n```\n\n'

    def body(self, index: str) -> str:
        return decode_entities(self._bodies[int(index)])

    def restore(self, text: str) -> str:
        text = _CELL_PLACEHOLDER_RE.sub(self._restore_cell, text)
        return _PLACEHOLDER_RE.sub(self._restore_block, text)

    def _restore_block(self, match: Match) -> str:
        indent = match.group(1) or ''
        lines = self.body(match.group(2)).split('\n')
        return '\n'.join(indent + line if line else line for line in lines)

    def _restore_cell(self, match: Match) -> str:
        """One code span per body line, joined by <br> to keep the row on one line."""
        lines = [line.strip() for line in self.body(match.group(1)).split('\n')]
        return '<br>'.join(
            _inline_code(line.replace('|', '\\|')) for line in lines if line
        )

    def rules(self) -> List[ConversionRule]:
        return [
            _rule(
                rf'<pre\b[^>]*>\s*<code\b[^>]*?{_LANGUAGE_CLASS}[^>]*>(.*?)</code\s*>\s*</pre\s*>',
                lambda m: self.fence(m.group(2), m.group(1)),
            ),
            _rule(
                r'<pre\b[^>]*>\s*<code\b[^>]*>(.*?)</code\s*>\s*</pre\s*>',
                lambda m: self.fence(m.group(1)),
            ),
            _rule(
                rf'<code\b[^>]*?{_LANGUAGE_CLASS}[^>]*>(.*?)</code\s*>',
                lambda m: self.fence(m.group(2), m.group(1)),
            ),
            _rule(_element('code'), r'`\1`'),
            _rule(_element('pre'), lambda m: self.fence(m.group(1))),
        ]


# ── Stage 5-10: inline, links, lists, tables, breaks, forms ─────────────────

def _link(match: Match) -> str:
    text = _collapse(match.group(3))
    if not text:
        return ''
    return f'[{text}]({match.group(2).strip()})'


_LIST_ITEM_START_RE = re.compile(r'<li\b[^>]*>', _FLAGS)
_LIST_ITEM_END_RE = re.compile(r'</li\s*>', _FLAGS)


def _loose_text(html: str) -> str:
    lines = _LIST_ITEM_END_RE.sub('', html).split('\n')
    return '\n'.join(line.strip() for line in lines if line.strip())


def _list(match: Match) -> str:
    """Rewrite one list; an item runs to its </li>, the next <li> or the list end.

    Text outside the items is kept as plain lines in place.
    """
    ordered = match.group(1).lower() == 'ol'
    chunks = _LIST_ITEM_START_RE.split(match.group(2))

    lead = _loose_text(chunks[0])
    lines = []
    for number, chunk in enumerate(chunks[1:], start=1):
        item, *rest = _LIST_ITEM_END_RE.split(chunk, maxsplit=1)
        marker = f'{number}.' if ordered else '-'
        item_lines = [line for line in item.strip().split('\n') if line.strip()]
        indent = '\n' + ' ' * (len(marker) + 1)
        lines.append(f'{marker} ' + indent.join(item_lines))
        tail = _loose_text(rest[0]) if rest else ''
        if tail:
            lines.append(tail)

    result = '\n'
    if lead:
        result += lead + '\n\n'
    if lines:
        result += '\n'.join(lines) + '\n\n'
    return result if result.strip() else ''


_CAPTION_RE = re.compile(_element('caption'), _FLAGS)
_ROW_RE = re.compile(_element('tr'), _FLAGS)
_CELL_RE = re.compile(r'<(t[hd])\b[^>]*>(.*?)</\1\s*>', _FLAGS)


def _table_row(row_html: str) -> Optional[str]:
    cells = _CELL_RE.findall(row_html)
    if not cells:
        return None
    texts = [_table_cell(text) for _, text in cells]
    row = '| ' + ' | '.join(texts) + ' |'
    if all(tag.lower() == 'th' for tag, _ in cells):
        row += '\n| ' + ' | '.join('---' for _ in cells) + ' |'
    return row


def _table_cell(html: str) -> str:
    text = _collapse(html).replace('|', '\\|')
    return _CELL_FENCE_RE.sub(lambda m: f'\x01{m.group(1)}\x01', text)


_TABLE_SECTION_RE = re.compile(_tags('tr', 'thead', 'tbody', 'tfoot'), _FLAGS)


def _table(match: Match) -> str:
    inner = match.group(1)
    parts = []

    caption = _CAPTION_RE.search(inner)
    if caption:
        parts.append(f'*{_collapse(caption.group(1))}*')
        inner = _CAPTION_RE.sub('', inner)

    # Text sitting outside any cell (or a table with no rows at all).
    loose = _collapse(_TABLE_SECTION_RE.sub(' ', _CELL_RE.sub(' ', inner)))
    if loose:
        parts.append(loose)

    rows = [row for row in map(_table_row, _ROW_RE.findall(inner)) if row]
    if rows:
        parts.append('\n'.join(rows))

    if not parts:
        return ''
    return '\n\n' + '\n\n'.join(parts) + '\n\n'


_EMPHASIS_RULES = [
    _rule(r'<(strong|b)\b[^>]*>(.*?)</\1\s*>', r'**\2**'),
    _rule(r'<(em|i)\b[^>]*>(.*?)</\1\s*>', r'*\2*'),
]

_LINK_RULES = [
    _rule(r'''<a\b[^>]*?(?<![\w-])href\s*=\s*(["'])(.*?)\1[^>]*>(.*?)</a\s*>''', _link),
    _rule(_element('a'), r'\1'),
]

_LIST_RULES = [
    _rule(r'<(ul|ol)\b[^>]*>((?:(?!<(?:ul|ol)\b).)*?)</\1\s*>', _list, repeat=True),
]

_TABLE_RULES = [
    _rule(_element('colgroup'), ''),
    _rule(r'<col\b[^>]*>', ''),
    _rule(r'<table\b[^>]*>((?:(?!<table\b).)*?)</table\s*>', _table, repeat=True),
    _rule(_tags('thead', 'tbody', 'tfoot'), ''),
    _rule(_element('caption'), lambda m: f'\n*{_collapse(m.group(1))}*\n'),
]

_BREAK_RULES = [
    _rule(r'<br\b[^>]*>', '\n'),
    _rule(r'<hr\b[^>]*>', '\n\n---\n\n'),
]

_FORM_RULES = [
    *[_rule(_element(tag), '') for tag in ('form', 'textarea', 'select')],
    _rule(r'<input\b[^>]*>', ''),
    _rule(_element('legend'), lambda m: f'\n**{_collapse(m.group(1))}**\n'),
    _rule(_tags('option', 'label', 'fieldset'), ''),
]

STRUCTURE_RULES = _SCAFFOLDING_RULES + _CHROME_RULES + _BLOCK_RULES
INLINE_RULES = (
    _EMPHASIS_RULES + _LINK_RULES + _LIST_RULES + _TABLE_RULES + _BREAK_RULES + _FORM_RULES
)


def _apply(text: str, rules: Sequence[ConversionRule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


class MarkdownConverter:
    """Converts documentation HTML into Markdown.

    Conversion is a pure function of the input string: the converter holds
    no state between calls and never raises on malformed markup. Tags that
    no rule recognizes are passed through unchanged.

    Example:
        >>> MarkdownConverter().html_to_markdown("<h2>Overview</h2><p>Hello</p>")
        '## Overview\\n\\nHello'
    """

    def html_to_markdown(self, html: str) -> str:
        """Convert an HTML document or fragment to Markdown.

        Args:
            html: Raw HTML text

        Returns:
            Trimmed Markdown text ("" for empty input)
        """
        if not html:
            return ""

        fences = _FenceStore()
        # NUL and SOH are reserved for fence placeholders
        text = html.replace('\x00', '').replace('\x01', '')

        text = _apply(text, STRUCTURE_RULES)
        text = _apply(text, fences.rules())
        text = _apply(text, INLINE_RULES)
        text = decode_entities(text)
        text = normalize_whitespace(text)
        text = fences.restore(text)

        return text.strip()


def html_to_markdown(html: str) -> str:
    """Convert HTML to Markdown with a default MarkdownConverter."""
    return MarkdownConverter().html_to_markdown(html)
