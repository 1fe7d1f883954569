import html
import re
from typing import Any, Iterable, List, Optional, Tuple

import inflection

DEFAULT_ELLIPSIS = " …"

# elements without a closing tag
VOID_TAGS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

DEFAULT_ALLOWED_TAGS = (
    "a",
    "abbr",
    "acronym",
    "address",
    "b",
    "bdo",
    "big",
    "blockquote",
    "br",
    "caption",
    "cite",
    "code",
    "dd",
    "del",
    "div",
    "dl",
    "dt",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "img",
    "ins",
    "kbd",
    "li",
    "ol",
    "p",
    "pre",
    "q",
    "s",
    "samp",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    "u",
    "ul",
)

TAG_PATTERN = re.compile(r"(<[^>]+>)")
TAG_NAME_PATTERN = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)")
LINE_BREAKS_PATTERN = re.compile(r"[\t\n\r]+")


def humanize_type(type_name: str) -> str:
    """
    Human readable label for a content element type.

    >>> humanize_type("accordionStart")
    'Accordion start'

    :param type_name:
    :return:
    """
    return inflection.humanize(inflection.underscore(type_name))


def escape_html(text: Any) -> str:
    """Escape &, <, >, double and single quotes like htmlspecialchars."""
    return html.escape(as_text(text), quote=True).replace("&#x27;", "&#039;")


def as_text(value: Any) -> str:
    """
    Convert a scalar to text the way PHP string conversion does.

    :param value:
    :return:
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def is_blank(value: Any) -> bool:
    """
    True for values PHP considers empty.

    >>> is_blank("0")
    True
    >>> is_blank("Intro")
    False
    """
    if value is None or value is False:
        return True
    if isinstance(value, (list, dict, tuple, str)) and len(value) == 0:
        return True
    return value == "0" or (isinstance(value, (int, float)) and value == 0)


def join_values(values: Iterable[Any], separator: str = ", ") -> str:
    return separator.join(as_text(v) for v in values)


def substr(text: str, max_length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """
    Cut text after max_length characters, regardless of word boundaries.

    :param text:
    :param max_length:
    :param ellipsis: appended when something was cut
    :return:
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + ellipsis


def visible_length(text: str) -> int:
    """Number of characters a browser shows; an entity counts as one."""
    return len(html.unescape(text))


def strip_tags(text: str, allowed_tags: Iterable[str] = ()) -> str:
    allowed = {t.lower() for t in allowed_tags}

    def _keep(m: re.Match) -> str:
        name = _tag_name(m.group(1))
        # "<" not followed by a tag name is plain text
        if name is None or name in allowed:
            return m.group(1)
        return ""

    # unterminated tags are dropped too
    text = TAG_PATTERN.sub(_keep, text)
    return re.sub(r"<[^>]*$", "", text)


def substr_html(
    text: str,
    max_length: int,
    ellipsis: str = DEFAULT_ELLIPSIS,
    allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS,
) -> str:
    """
    Shorten an HTML fragment to max_length visible characters.

    Words are never split, except a leading word that is longer than
    max_length on its own. Allowed tags are preserved and any element still
    open at the cut is closed.

    >>> substr_html("<p>The quick <b>brown</b> fox</p>", 15)
    '<p>The quick <b>brown</b></p> …'

    :param text: HTML fragment
    :param max_length: maximum number of visible characters
    :param ellipsis: appended when content was removed
    :param allowed_tags: tags that survive stripping
    :return:
    """
    text = LINE_BREAKS_PATTERN.sub(" ", text)
    text = strip_tags(text, allowed_tags)
    text = re.sub(r" +", " ", text)

    output: List[str] = []
    open_tags: List[str] = []
    tag_buffer: List[str] = []
    char_count = 0
    truncated = False
    for chunk in TAG_PATTERN.split(text):
        if not chunk:
            continue
        if TAG_PATTERN.fullmatch(chunk):
            tag_buffer.append(chunk)
            continue
        kept, cut = _take_words(chunk, max_length - char_count, first=char_count == 0)
        if cut and not kept.strip():
            truncated = True
            break
        if not kept:
            continue
        for tag in tag_buffer:
            _track_tag(tag, open_tags)
        output.extend(tag_buffer)
        tag_buffer = []
        if cut:
            output.append(kept.rstrip())
            truncated = True
            break
        output.append(kept)
        char_count += visible_length(kept)
    else:
        # trailing tags, e.g. closing tags after the last text chunk
        for tag in tag_buffer:
            _track_tag(tag, open_tags)
        output.extend(tag_buffer)
    if truncated:
        _strip_trailing_space(output)
    output.extend(f"</{name}>" for name in reversed(open_tags))
    result = "".join(output).strip()
    if truncated:
        result += ellipsis
    return result


def _take_words(chunk: str, budget: int, first: bool) -> Tuple[str, bool]:
    """
    Take as many whole words of chunk as fit in budget visible characters.

    :return: kept text and whether anything was left out
    """
    if visible_length(chunk) <= budget:
        return chunk, False
    if not chunk.strip():
        return "", False
    if budget <= 0:
        return "", True
    leading = " " if chunk.startswith(" ") else ""
    words = chunk.split()
    kept: List[str] = []
    count = len(leading)
    for word in words:
        word_length = visible_length(word) + (1 if kept else 0)
        if count + word_length > budget:
            break
        kept.append(word)
        count += word_length
    if not kept and first:
        # a single overlong word is cut so the result is never empty
        return leading + html.escape(html.unescape(words[0])[: budget - len(leading)], quote=False), True
    if not kept:
        return "", True
    return leading + " ".join(kept), True


def _strip_trailing_space(output: List[str]) -> None:
    for i in range(len(output) - 1, -1, -1):
        if TAG_PATTERN.fullmatch(output[i]):
            continue
        output[i] = output[i].rstrip()
        return


def _tag_name(tag: str) -> Optional[str]:
    m = TAG_NAME_PATTERN.match(tag)
    return m.group(1).lower() if m else None


def _track_tag(tag: str, open_tags: List[str]) -> None:
    name = _tag_name(tag)
    if name is None or name in VOID_TAGS or tag.rstrip().endswith("/>"):
        return
    if tag.startswith("</"):
        # close the most recently opened element of that name
        for i in range(len(open_tags) - 1, -1, -1):
            if open_tags[i] == name:
                del open_tags[i]
                break
    else:
        open_tags.append(name)
