"""
Code snippet renderer - Highlighted, copyable code blocks.

Features:
- Closed set of supported grammars, keyed by the authored language tag
- Pygments tokenization into styled spans
- Plain-text fallback for unknown tags (never an error)
- Copy payload identical to the authored source text
"""

from dataclasses import dataclass
from typing import Optional
import html
import logging

from pygments import format as format_tokens
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.token import Text

logger = logging.getLogger(__name__)


# Language tag -> Pygments lexer alias
SUPPORTED_LANGUAGES = {
    "javascript": "javascript",
    "typescript": "typescript",
    "bash": "bash",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "dockerfile": "docker",
    "nginx": "nginx",
    "python": "python",
    "html": "html",
    "yaml": "yaml",
    "text": "text",
}

# Alternate spellings authors use for the same grammar
LANGUAGE_ALIASES = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "sh": "bash",
    "shell": "bash",
    "docker": "dockerfile",
    "yml": "yaml",
}

DEFAULT_LANGUAGE = "javascript"

# Span classes are prefixed so they cannot collide with page CSS
_FORMATTER = HtmlFormatter(nowrap=True, classprefix="tok-")


@dataclass(frozen=True)
class DisplayBlock:
    """Rendered code block."""
    language: str            # tag as authored
    grammar: Optional[str]   # canonical grammar name, None for the fallback
    body_html: str           # contents of <code>, spans or escaped text
    copy_text: str           # exactly the authored code

    @property
    def highlighted(self) -> bool:
        return self.grammar is not None and self.grammar != "text"

    @property
    def label(self) -> str:
        return self.grammar or self.language or "text"


def resolve_grammar(language: Optional[str]) -> Optional[str]:
    """Map a language tag to a supported grammar name, or None if unsupported."""
    if not language:
        return None
    tag = language.strip().lower()
    tag = LANGUAGE_ALIASES.get(tag, tag)
    return tag if tag in SUPPORTED_LANGUAGES else None


def _align_tokens(code: str, tokens):
    """
    Re-slice lexer tokens over the authored text.

    Lexers turn CRLF into LF and may append a final newline. Each token is
    mapped back onto `code`, so CRLF line endings survive and nothing past
    the end of the source is emitted.
    """
    pos = 0
    for ttype, value in tokens:
        if pos >= len(code):
            break
        chunk = []
        for ch in value:
            if pos >= len(code):
                break
            if ch == "\n" and code.startswith("\r\n", pos):
                chunk.append("\r\n")
                pos += 2
            else:
                chunk.append(code[pos])
                pos += 1
        if chunk:
            yield ttype, "".join(chunk)
    if pos < len(code):
        yield Text, code[pos:]


def _tokenize(code: str, grammar: str) -> str:
    lexer = get_lexer_by_name(SUPPORTED_LANGUAGES[grammar], stripnl=False, ensurenl=False)
    body = format_tokens(_align_tokens(code, lexer.get_tokens(code)), _FORMATTER)
    # HtmlFormatter terminates the last line even when the source does not
    if not code.endswith("\n") and body.endswith("\n"):
        body = body[:-1]
    return body


def render_snippet(code: str, language: Optional[str] = DEFAULT_LANGUAGE) -> DisplayBlock:
    """
    Render a (code, language) pair.

    Args:
        code: Raw source text; never modified
              (LF and CRLF line endings are both kept as written)
        language: Authored language tag

    Returns:
        DisplayBlock with highlighted spans, or escaped plain text when the
        tag has no grammar
    """
    grammar = resolve_grammar(language)
    if grammar is None:
        logger.debug(f"No grammar for language tag {language!r}, rendering as plain text")
        body = html.escape(code, quote=False)
    elif grammar == "text":
        body = html.escape(code, quote=False)
    else:
        body = _tokenize(code, grammar)
    return DisplayBlock(
        language=language or "",
        grammar=grammar,
        body_html=body,
        copy_text=code,
    )


def render_display_block(block: DisplayBlock, title: Optional[str] = None) -> str:
    """Render a DisplayBlock as HTML with header, copy button and code body."""
    header_label = html.escape(title or block.label)
    copy_payload = html.escape(block.copy_text, quote=True)
    highlight_class = " code-highlighted" if block.highlighted else " code-plain"
    return (
        f'<div class="code-block{highlight_class}" data-language="{html.escape(block.label)}">'
        f'<div class="code-header">'
        f'<span class="code-language">{header_label}</span>'
        f'<button type="button" class="copy-button" title="Copy code" '
        f'data-copy="{copy_payload}">Copy</button>'
        f'</div>'
        f'<pre class="code-body"><code>{block.body_html}</code></pre>'
        f'</div>'
    )


def render_code_block(code: str, language: Optional[str] = DEFAULT_LANGUAGE, title: Optional[str] = None) -> str:
    """Shortcut: render_snippet followed by render_display_block."""
    return render_display_block(render_snippet(code, language), title=title)


def get_snippet_css() -> str:
    """Get CSS styles for code blocks, including Pygments token colors."""
    token_css = HtmlFormatter(style="monokai", classprefix="tok-").get_style_defs(".code-body")
    return f"""
    <style>
    .code-block {{
        margin: 1em 0;
        border-radius: 8px;
        overflow: hidden;
    }}
    .code-header {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        background: #1f2937;
        padding: 0.5em 1em;
    }}
    .code-language {{
        font-size: 0.85em;
        color: #9ca3af;
    }}
    .copy-button {{
        font-size: 0.85em;
        color: #9ca3af;
        background: none;
        border: none;
        cursor: pointer;
    }}
    .copy-button:hover {{
        color: #ffffff;
    }}
    .code-body {{
        margin: 0;
        padding: 1em;
        overflow-x: auto;
        background: #111827;
        color: #f3f4f6;
        font-size: 0.9em;
    }}
    {token_css}
    </style>
    """


def get_copy_script() -> str:
    """Script wiring every .copy-button to the clipboard."""
    return """
    <script>
    document.addEventListener("click", function (event) {
        var button = event.target.closest(".copy-button");
        if (!button) { return; }
        navigator.clipboard.writeText(button.dataset.copy).then(function () {
            button.textContent = "\\u2713 Copied";
            setTimeout(function () { button.textContent = "Copy"; }, 2000);
        });
    });
    </script>
    """
