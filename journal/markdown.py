"""Minimal markdown to HTML conversion for entry previews.

This is a chain of regex substitutions over the whole text, not a markdown
parser: lists are not nested, raw HTML in the source passes through untouched
and each list item is wrapped in its own ``<ul>``/``<ol>``. Entries are trusted,
single-user content.
"""

import re

_RULES = [
    # Headers
    (re.compile(r'^# (.*)$', re.M), r'<h1>\1</h1>'),
    (re.compile(r'^## (.*)$', re.M), r'<h2>\1</h2>'),
    (re.compile(r'^### (.*)$', re.M), r'<h3>\1</h3>'),
    # Bold, then italic
    (re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'\*(.*?)\*'), r'<em>\1</em>'),
    # Lists
    (re.compile(r'^- (.*)$', re.M), r'<ul><li>\1</li></ul>'),
    (re.compile(r'^[0-9]+\. (.*)$', re.M), r'<ol><li>\1</li></ol>'),
    # Blockquotes
    (re.compile(r'^> (.*)$', re.M), r'<blockquote>\1</blockquote>'),
    # Fenced code, then inline code
    (re.compile(r'```([\s\S]*?)```'), r'<pre><code>\1</code></pre>'),
    (re.compile(r'`(.*?)`'), r'<code>\1</code>'),
    # Links
    (re.compile(r'\[(.*?)\]\((.*?)\)'), r'<a href="\2">\1</a>'),
    # Blank lines close a paragraph
    (re.compile(r'^\s*$', re.M), '</p><p>'),
]


def render_markdown(text: str) -> str:
    """Convert *text* to an HTML fragment."""
    html = (text or '').replace('\r\n', '\n')
    for pattern, replacement in _RULES:
        html = pattern.sub(replacement, html)
    html = html.replace('\n', '<br>')

    if not html.startswith('<h') and not html.startswith('<p>'):
        html = '<p>' + html
    if not html.endswith('</p>'):
        html = html + '</p>'

    return html.replace('</ul><ul>', '').replace('</ol><ol>', '')
