"""junit2md.render.markdown

Markdown building blocks shared by the report renderers.

Every helper returns a string fragment that ends with a blank line and does
not start with one, so renderers can simply concatenate fragments in order.
Headers use the setext style (underlined titles), which keeps the raw text
readable in CI logs.
"""

from __future__ import annotations

INDENT = "    "

_ANCHOR_PREFIX = "c-"


def h1(title: str) -> str:
    return _setext_header(title, "=")


def h2(title: str) -> str:
    return _setext_header(title, "-")


def h3(title: str) -> str:
    return f"### {title} ###\n\n"


def _setext_header(title: str, underline: str) -> str:
    return f"{title}\n{underline * len(title)}\n\n"


def indent(text: str, prefix: str = INDENT) -> str:
    """Prefix ``text`` and every line following a newline with ``prefix``."""
    return prefix + text.replace("\n", "\n" + prefix)


def details(summary: str, body: str) -> str:
    """Collapsible ``<details>`` block with an indented (code) body.

    Indenting the body turns it into a code block, so stack traces with
    pipes, asterisks or HTML do not leak into the surrounding Markdown.
    """

    return (
        "<details>\n"
        f"{INDENT}<summary>{summary}</summary>\n"
        "\n"
        f"{indent(body)}\n"
        "\n"
        "</details>\n\n"
    )


def anchor_id(index: int) -> str:
    return f"{_ANCHOR_PREFIX}{index}"


def anchor(index: int) -> str:
    return f'<a id="{anchor_id(index)}"/>\n\n'


def anchor_link(index: int) -> str:
    return f"[[{index}]](#{anchor_id(index)})"


def table_text(text: str) -> str:
    """Escape ``|`` so free text (e.g. ``test_x[a|b]``) stays in one table cell."""
    return text.replace("|", "\\|")
