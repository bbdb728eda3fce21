"""Markup helpers for translated strings.

Translators never see real markup. A source string such as

    See <a href="/docs" class="link">the docs</a> or <br/> call us.

is translated with numbered placeholders instead:

    Voir <0>la documentation</0> ou <1/> appelez-nous.

interpolate() puts the real tags back, taking them in order of appearance
from the reference string. sanitize() strips every tag outside a small
allow-list from translated HTML.

Both are built on iter_tags(), a small explicit scanner: no shared regex
match state, and quoted attribute values may contain ">".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nroutes.constants import ALLOWED_TAGS, INTEGRATION_NAME
from i18nroutes.enums import TagKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = ["Tag", "interpolate", "iter_tags", "sanitize"]

logger = logging.getLogger(__name__)

_NAME_EXTRA = frozenset("-_:.")
_NAME_END = frozenset(" \t\r\n\f/>")


@dataclass(frozen=True, slots=True)
class Tag:
    """One tag found by iter_tags().

    Attributes:
        kind: Open, self-closing, or closing
        name: Tag name as written (e.g., "a", "0")
        attributes: Attribute span with its leading whitespace, trailing
            whitespace and self-closing "/" removed (e.g., ' href="/x"')
        start: Offset of "<"
        end: Offset just past ">" (or end of input when unterminated)
        raw: Source text of the tag
        terminated: False when input ended before ">"
    """

    kind: TagKind
    name: str
    attributes: str
    start: int
    end: int
    raw: str
    terminated: bool = True


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char in _NAME_EXTRA


def _attribute_end(text: str, pos: int, *, quotes: bool = True) -> int:
    """Offset of the ">" or "<" ending the attribute span at pos, else len(text).

    A quote only opens an attribute value right after "=". A value whose
    quote never closes is rescanned with quotes ignored.
    """
    size = len(text)
    quote = ""
    after_equals = False
    i = pos
    while i < size:
        char = text[i]
        if quote:
            if char == quote:
                quote = ""
        elif quotes and after_equals and char in "\"'":
            quote = char
        elif char in "<>":
            return i
        if not char.isspace():
            after_equals = char == "="
        i += 1
    if quote:
        return _attribute_end(text, pos, quotes=False)
    return size


def iter_tags(text: str) -> Iterator[Tag]:
    """Yield every tag in text, in order.

    A tag starts with "<" (or "</") immediately followed by a letter or
    digit. "a < b" is text, not a tag, and so is a candidate interrupted
    by another "<" before its ">". Quoted attribute values ('title="a > b"')
    may contain ">".

    Example:
        >>> [(t.kind, t.name) for t in iter_tags('<b>x</b><br/>')]
        [('open', 'b'), ('close', 'b'), ('self_closing', 'br')]
    """
    size = len(text)
    pos = 0
    while (start := text.find("<", pos)) != -1:
        i = start + 1
        closing = i < size and text[i] == "/"
        if closing:
            i += 1

        name_start = i
        while i < size and _is_name_char(text[i]):
            i += 1
        name = text[name_start:i]
        if not name or not name[0].isalnum() or (i < size and text[i] not in _NAME_END):
            pos = start + 1
            continue

        attr_start = i
        i = _attribute_end(text, i)
        if i < size and text[i] == "<":
            # Another tag starts before this one closes: "<5 l'unité <b>" is text.
            pos = i
            continue

        terminated = i < size
        end = i + 1 if terminated else size
        attributes = text[attr_start:i].rstrip()
        if closing:
            kind = TagKind.CLOSE
        elif attributes.endswith("/"):
            kind = TagKind.SELF_CLOSING
            attributes = attributes[:-1].rstrip()
        else:
            kind = TagKind.OPEN

        yield Tag(kind, name, attributes, start, end, text[start:end], terminated)
        pos = end


def interpolate(localized_string: str, reference_string: str) -> str:
    """Replace numbered placeholders with the reference string's tags.

    ``<i>`` becomes the i-th start tag of reference_string with its
    attributes, ``<i/>`` its self-closing form, and ``</i>`` its closing
    tag. Placeholders without a matching reference tag are left as they are.

    Args:
        localized_string: Translation containing placeholders
        reference_string: Source markup carrying the real tags

    Returns:
        Interpolated string; localized_string unchanged (with a warning)
        when reference_string has no tags

    Example:
        >>> interpolate("Click <0>here</0>", 'See <a href="/x">this</a>')
        'Click <a href="/x">here</a>'
    """
    reference_tags = [
        tag
        for tag in iter_tags(reference_string)
        if tag.terminated and tag.kind is not TagKind.CLOSE
    ]
    if not reference_tags:
        logger.warning(
            "[%s]: reference string has no HTML tags to interpolate; "
            "use the translation directly",
            INTEGRATION_NAME,
        )
        return localized_string

    parts: list[str] = []
    pos = 0
    for tag in iter_tags(localized_string):
        if not (tag.terminated and tag.name.isdecimal() and not tag.attributes):
            continue
        index = int(tag.name)
        if index >= len(reference_tags):
            continue
        real = reference_tags[index]
        parts.append(localized_string[pos : tag.start])
        match tag.kind:
            case TagKind.OPEN:
                parts.append(f"<{real.name}{real.attributes}>")
            case TagKind.SELF_CLOSING:
                parts.append(f"<{real.name}{real.attributes} />")
            case TagKind.CLOSE:
                parts.append(f"</{real.name}>")
        pos = tag.end
    parts.append(localized_string[pos:])
    return "".join(parts)


def sanitize(text: str, allowed: Iterable[str] = ALLOWED_TAGS) -> str:
    """Remove every tag whose name is not in allowed.

    Only tags are removed; the text between them is kept. Allowed tags pass
    through verbatim, attributes included. Names compare case-insensitively.

    Example:
        >>> sanitize('<script>x</script><b class="k">bold</b>')
        'x<b class="k">bold</b>'
    """
    allow = frozenset(name.lower() for name in allowed)
    parts: list[str] = []
    pos = 0
    for tag in iter_tags(text):
        parts.append(text[pos : tag.start])
        if tag.name.lower() in allow:
            parts.append(tag.raw)
        pos = tag.end
    parts.append(text[pos:])
    return "".join(parts)
