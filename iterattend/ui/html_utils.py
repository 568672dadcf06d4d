"""Utilities for preparing HTML snippets before rendering in Streamlit."""
import html
from textwrap import dedent
from typing import Any


def html_block(template: str) -> str:
    """
    Flatten multi-line HTML so Streamlit renders it as markup.

    Lines indented by four or more spaces would otherwise be treated as
    Markdown code blocks.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def escape(value: Any) -> str:
    """Escape API-supplied text for embedding in HTML."""
    return html.escape(str(value), quote=True)
