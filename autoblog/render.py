"""HTML output for finished posts."""

from __future__ import annotations

import html

from .models import FinalDocument

_STYLESHEET = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
           line-height: 1.7; color: #333; background-color: #ffffff; margin: 0; padding: 2rem; }
    .container { max-width: 800px; margin: auto; background-color: #f9fafb; border-radius: 8px;
                 padding: 2.5rem; border: 1px solid #e5e7eb; }
    h1, h2, h3 { color: #111827; }
    h1 { font-size: 2.25rem; margin-bottom: 1em; line-height: 1.2; }
    h2, h3 { border-bottom: 2px solid #e5e7eb; padding-bottom: 0.3em; margin-top: 1.5em; }
    p { margin-bottom: 1.2em; }
    a { color: #06b6d4; text-decoration: none; }
    a:hover { text-decoration: underline; }
    blockquote { border-left: 4px solid #06b6d4; padding-left: 1rem; margin: 1.5em 0; color: #6b7280; font-style: italic; }
    figure { margin: 2em 0; text-align: center; }
    figure img { max-width: 100%; height: auto; border-radius: 8px; }
    figure figcaption { font-size: 0.8em; color: #888; margin-top: 0.5em; }
    .tags { margin-top: 3rem; padding-top: 1.5rem; border-top: 1px solid #e5e7eb; color: #6b7280; }
"""


def compose_fragment(document: FinalDocument) -> str:
    """Title heading plus body, ready to paste into a blog editor."""
    return f"<h1>{html.escape(document.title)}</h1>\n{document.body}"


def compose_html(document: FinalDocument) -> str:
    """Generate a standalone HTML page for the post."""
    title = html.escape(document.title)
    tag_line = ""
    if document.tags:
        tag_line = '\n      <p class="tags">' + html.escape(", ".join(document.tags)) + "</p>"
    return (
        "<!DOCTYPE html>\n"
        '<html lang="ko">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <title>{title}</title>\n"
        f"  <style>{_STYLESHEET}  </style>\n"
        "</head>\n"
        "<body>\n"
        '  <div class="container">\n'
        '    <div class="post-content">\n'
        f"      <h1>{title}</h1>\n"
        f"{document.body.strip()}"
        f"{tag_line}\n"
        "    </div>\n"
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )
