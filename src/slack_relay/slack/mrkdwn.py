"""Standard Markdown to Slack mrkdwn conversion.

Slack already renders *bold*, _italic_, ~~strikethrough~~, `code` and fenced
code blocks, so only inline links need rewriting: [label](url) -> <url|label>.
"""

import re

# [label](http(s)://...) with no "]" in the label and no ")" in the URL.
# Nested or malformed link syntax simply doesn't match and is left alone.
MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\((https?://[^)]+)\)")


def markdown_to_mrkdwn(text: str) -> str:
    """Rewrite every Markdown inline link in ``text`` as a Slack link."""
    return MARKDOWN_LINK_PATTERN.sub(r"<\2|\1>", text)
