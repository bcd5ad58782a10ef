"""Plain-text extraction from untrusted HTML.

Everything here is regex based and tolerant of broken markup: unknown
entities are left untouched and unbalanced tags are simply not matched.
"""

import re


ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&#x27;": "'",
    "&rsquo;": "'",
    "&lsquo;": "'",
    "&rdquo;": '"',
    "&ldquo;": '"',
}

_ENTITY_RE = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[a-zA-Z]+);")
_SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def _replace_entity(match: re.Match) -> str:
    entity = match.group(0)
    known = ENTITIES.get(entity) or ENTITIES.get(entity.lower())
    if known is not None:
        return known
    if entity.startswith("&#"):
        body = entity[2:-1]
        try:
            codepoint = int(body[1:], 16) if body[:1] in ("x", "X") else int(body)
            return chr(codepoint)
        except (ValueError, OverflowError):
            return entity
    return entity


def decode_entities(text: str) -> str:
    """Decode HTML entities in one pass, so `&amp;lt;` becomes `&lt;`."""
    return _ENTITY_RE.sub(_replace_entity, text)


def strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def clean_fragment(fragment: str) -> str:
    """Title/snippet cleanup: trim, drop tags, decode entities."""
    return decode_entities(strip_tags(fragment.strip())).strip()


def extract_text(html: str) -> str:
    """Readable text of a page with scripts, styles and markup removed."""
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    text = decode_entities(text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
