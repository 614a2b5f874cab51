"""Content conversion module for HTML → markdown conversion.

This module provides the MarkdownConverter, an ordered regex substitution
pipeline that turns documentation pages into Markdown.
"""

from .markdown_converter import (
    ConversionRule,
    ENTITY_TABLE,
    MarkdownConverter,
    decode_entities,
    html_to_markdown,
)

__all__ = [
    'ConversionRule',
    'ENTITY_TABLE',
    'MarkdownConverter',
    'decode_entities',
    'html_to_markdown',
]
