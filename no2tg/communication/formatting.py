"""Rich text to Telegram MarkdownV2 converter.

MarkdownV2 inline entities:
  *bold*, _italic_, __underline__, ~strikethrough~,
  `inline code`, [text](url)

Every literal character in _ * [ ] ( ) > ~ # + - = | { } . ! \\ must be
escaped with a preceding backslash. Literal text is escaped exactly once,
before any delimiter is wrapped around it.
"""

import re

from ..models import ContentBlock, RichTextRun, Style

_RESERVED_RE = re.compile(r'([_*\[\]()>~#+\-=|{}.!\\])')

# Applied innermost first, so bold ends up next to the link and
# strikethrough outermost: [x](u) → *[x](u)* → _*[x](u)*_ → ...
_WRAP_ORDER = (
    (Style.BOLD, '*'),
    (Style.ITALIC, '_'),
    (Style.UNDERLINE, '__'),
    (Style.STRIKETHROUGH, '~'),
)

TABLE_SEPARATOR = ' | '


def escape(text: str) -> str:
    """Backslash-escape MarkdownV2 reserved characters in literal text."""
    return _RESERVED_RE.sub(r'\\\1', text)


def build_link(label: str, url: str) -> str:
    """Build an inline link. ``label`` must already be escaped or composed."""
    return f'[{label}]({url})'


def compose(run: RichTextRun) -> str:
    """Render one rich-text run as MarkdownV2 inline markup.

    Code spans are literal monospace: link and other styles are dropped.
    Otherwise the link is applied first, then bold, italic, underline and
    strikethrough in that fixed order, whatever order the flags came in.
    """
    text = escape(run.text)

    if run.has(Style.CODE):
        return f'`{text}`'

    if run.href:
        text = build_link(text, run.href)
    for flag, delimiter in _WRAP_ORDER:
        if run.has(flag):
            text = f'{delimiter}{text}{delimiter}'
    return text


def compose_runs(runs) -> str:
    """Compose a run sequence with no separator between runs."""
    return ''.join(compose(run) for run in runs)


def _translate_block(block: ContentBlock) -> str:
    text = compose_runs(block.runs)
    # A literal " | " typed by the author marks a pseudo-table row,
    # which after escaping reads " \| ".
    separator = escape(TABLE_SEPARATOR)
    if separator in text:
        text = '\n'.join(text.split(separator))
    return text


def translate(blocks) -> str:
    """Translate content blocks into a MarkdownV2 body.

    Empty blocks are skipped, the rest become blank-line separated
    paragraphs, and the result is stripped.
    """
    paragraphs = [_translate_block(block) for block in blocks if not block.is_empty]
    return '\n\n'.join(paragraphs).strip()
