"""Cell text utilities: ANSI handling, width measurement, cutting and wrapping.

Every size the layout engine works with is a *visual* size: the number of
terminal columns a string occupies once escape sequences are removed, tabs
are expanded and wide / zero-width grapheme clusters are accounted for.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth


DEFAULT_TAB_WIDTH = 4

# Inserted where a wide character cannot be split to fit a narrow column
REPLACEMENT_CHAR = "�"


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;:]*[A-Za-z]"                 # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"     # OSC (hyperlinks, titles)
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"      # APC
)

_SGR_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    if "\x1b" not in text:
        return text
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Width cache (capped at 1024 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 1024


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Control characters, combining marks and format characters are zero
    width. Emoji sequences (VS16, ZWJ, skin tones, flags) are two columns.
    Everything else is delegated to ``wcwidth`` on the first code point,
    with unknown code points counted as zero.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    category = unicodedata.category(first)
    if category.startswith("M") or category == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


# ---------------------------------------------------------------------------
# Tokenizing
# ---------------------------------------------------------------------------

def iter_tokens(text: str) -> Iterator[tuple[str, int, bool]]:
    """Split a single line into ``(chunk, width, is_escape)`` tokens.

    Escape sequences come out whole with zero width; visible text comes out
    one grapheme cluster at a time.
    """
    pos = 0
    for match in _STRIP_RE.finditer(text):
        if match.start() > pos:
            for g in grapheme.graphemes(text[pos : match.start()]):
                yield g, grapheme_width(g), False
        yield match.group(0), 0, True
        pos = match.end()
    if pos < len(text):
        for g in grapheme.graphemes(text[pos:]):
            yield g, grapheme_width(g), False


class _SgrState:
    """Remembers the SGR codes opened since the last reset."""

    def __init__(self) -> None:
        self.codes: list[str] = []

    def feed(self, code: str) -> None:
        if not code.startswith("\x1b[") or not code.endswith("m"):
            return
        params = code[2:-1]
        if params in ("", "0"):
            self.codes.clear()
        else:
            self.codes.append(code)

    @property
    def active(self) -> str:
        return "".join(self.codes)

    @property
    def reset(self) -> str:
        return _SGR_RESET if self.codes else ""


# ---------------------------------------------------------------------------
# Lines and widths
# ---------------------------------------------------------------------------

def get_lines(text: str) -> list[str]:
    """Split cell text into its visual lines. Empty text is one empty line."""
    return text.split("\n")


def count_lines(text: str) -> int:
    return text.count("\n") + 1


def expand_tabs(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Replace tabs with *tab_width* spaces and drop carriage returns."""
    if "\t" in text:
        text = text.replace("\t", " " * tab_width)
    if "\r" in text:
        text = text.replace("\r", "")
    return text


def string_width(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Calculate the visible width of a single *line*.

    * Strips ANSI escape sequences.
    * Expands tabs to *tab_width* columns.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not line:
        return 0

    stripped = expand_tabs(strip_ansi(line), tab_width)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += grapheme_width(g)

    return _cache_width(stripped, total)


def text_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Width of the widest line of a multi-line *text*."""
    if "\n" not in text:
        return string_width(text, tab_width)
    return max(string_width(line, tab_width) for line in get_lines(text))


# ---------------------------------------------------------------------------
# Cutting and truncation
# ---------------------------------------------------------------------------

def cut_str(line: str, width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Return the longest prefix of *line* that fits in *width* columns.

    Tabs are expanded to *tab_width* spaces first. Escape sequences are
    kept; a wide character that straddles the boundary is replaced by
    replacement characters so the result fills the width exactly. An
    SGR state left open by the cut is closed with a reset.
    """
    if width <= 0:
        return ""
    line = expand_tabs(line, tab_width)
    if string_width(line) <= width:
        return line

    parts: list[str] = []
    state = _SgrState()
    cols = 0
    for chunk, w, is_code in iter_tokens(line):
        if is_code:
            if cols < width:
                parts.append(chunk)
                state.feed(chunk)
            continue
        if cols + w > width:
            parts.append(REPLACEMENT_CHAR * (width - cols))
            cols = width
            continue
        if cols >= width:
            continue
        parts.append(chunk)
        cols += w

    parts.append(state.reset)
    return "".join(parts)


def make_suffix(suffix: str, width: int, limit: str | tuple[str, str] = "cut") -> tuple[str, int]:
    """Fit a truncation *suffix* into *width* columns.

    Returns the suffix to use and the width left for the text itself. When
    the suffix does not fit, *limit* decides: ``"cut"`` shortens it,
    ``"ignore"`` drops it and ``("replace", ch)`` fills the width with *ch*.
    """
    suffix_width = string_width(suffix)
    if width > suffix_width:
        return suffix, width - suffix_width

    if limit == "ignore":
        return "", width
    if isinstance(limit, tuple) and limit[0] == "replace":
        return limit[1] * width, 0
    return cut_str(suffix, width), 0


def truncate_text(
    text: str,
    width: int,
    suffix: str = "",
    limit: str | tuple[str, str] = "cut",
    multiline: bool = False,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Truncate *text* so that it fits within *width* visible columns.

    Text that already fits is returned unchanged. Otherwise the text is cut
    and *suffix* appended, the suffix counting towards the width. Without
    *multiline* the whole cell is cut as one line, so anything after the
    first line break is lost; with it every line is cut on its own.
    """
    if text_width(text, tab_width) <= width:
        return text

    suffix, rest = make_suffix(suffix, width, limit)

    def one(line: str) -> str:
        if string_width(line, tab_width) <= width:
            return line
        if rest == 0:
            return suffix
        return cut_str(line, rest, tab_width) + suffix

    if multiline:
        return "\n".join(one(line) for line in get_lines(text))
    return one(get_lines(text)[0] if "\n" in text else text)


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------

def wrap_text(
    text: str,
    width: int,
    keep_words: bool = False,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Re-flow *text* into lines of at most *width* columns.

    Tabs are expanded to *tab_width* spaces and embedded newlines are kept.
    With *keep_words* lines are only broken at whitespace unless a single
    word is wider than *width*, in which case that word is split. ANSI state
    is re-applied on continuation lines and reset at the end of each
    produced line.
    """
    if width <= 0:
        return ""

    out: list[str] = []
    state = _SgrState()
    for line in get_lines(expand_tabs(text, tab_width)):
        if keep_words:
            out.extend(_wrap_keeping_words(line, width, state))
        else:
            out.extend(_wrap_basic(line, width, state))
    return "\n".join(out)


def _wrap_basic(line: str, width: int, state: _SgrState) -> list[str]:
    result: list[str] = []
    current = [state.active]
    cols = 0

    for chunk, w, is_code in iter_tokens(line):
        if is_code:
            current.append(chunk)
            state.feed(chunk)
            continue

        if cols + w > width:
            if w > width:
                # A wide character that can never fit: fill the rest instead.
                if cols == width:
                    result.append("".join(current) + state.reset)
                    current = [state.active]
                    cols = 0
                current.append(REPLACEMENT_CHAR * (width - cols))
                cols = width
                continue
            result.append("".join(current) + state.reset)
            current = [state.active]
            cols = 0

        current.append(chunk)
        cols += w

    result.append("".join(current) + state.reset)
    return result


def _wrap_keeping_words(line: str, width: int, state: _SgrState) -> list[str]:
    result: list[str] = []
    current = [state.active]
    cols = 0

    def flush() -> None:
        nonlocal current, cols
        result.append("".join(current) + state.reset)
        current = [state.active]
        cols = 0

    for word in _split_words(line):
        word_width = sum(w for _, w, _ in word)
        is_space = all(is_code or chunk.isspace() for chunk, _, is_code in word)

        if is_space:
            if cols == 0 and result:
                # Whitespace at a break is dropped; keep only its escapes.
                for chunk, _, is_code in word:
                    if is_code:
                        current.append(chunk)
                        state.feed(chunk)
                continue
            if cols + word_width > width:
                for chunk, _, is_code in word:
                    if is_code:
                        current.append(chunk)
                        state.feed(chunk)
                flush()
                continue
        elif cols + word_width > width:
            if cols > 0:
                flush()
            if word_width > width:
                split = _wrap_basic("".join(chunk for chunk, _, _ in word), width, state)
                result.extend(split[:-1])
                tail = split[-1]
                if tail.endswith(_SGR_RESET) and state.codes:
                    tail = tail[: -len(_SGR_RESET)]
                current = [tail]
                cols = string_width(tail)
                continue

        for chunk, w, is_code in word:
            current.append(chunk)
            if is_code:
                state.feed(chunk)
            cols += w

    result.append("".join(current) + state.reset)
    return result


def _split_words(line: str) -> list[list[tuple[str, int, bool]]]:
    """Group tokens into alternating runs of words and whitespace."""
    words: list[list[tuple[str, int, bool]]] = []
    current: list[tuple[str, int, bool]] = []
    current_space: bool | None = None

    for token in iter_tokens(line):
        chunk, _, is_code = token
        if is_code:
            current.append(token)
            continue
        space = chunk.isspace()
        if current_space is not None and space != current_space:
            words.append(current)
            current = []
        current.append(token)
        current_space = space

    if current:
        words.append(current)
    return words


def longest_word_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Width of the widest whitespace-separated word in *text*."""
    plain = expand_tabs(strip_ansi(text), tab_width)
    return max((string_width(word) for word in plain.split()), default=0)


# ---------------------------------------------------------------------------
# Trimming and padding
# ---------------------------------------------------------------------------

def trim_text(line: str) -> str:
    """Strip surrounding whitespace from *line*, keeping escape sequences."""
    if "\x1b" not in line:
        return line.strip()

    tokens = list(iter_tokens(line))
    visible = [i for i, (chunk, _, is_code) in enumerate(tokens) if not is_code and not chunk.isspace()]
    if not visible:
        return "".join(chunk for chunk, _, is_code in tokens if is_code)

    first, last = visible[0], visible[-1]
    kept = [
        chunk
        for i, (chunk, _, is_code) in enumerate(tokens)
        if is_code or first <= i <= last
    ]
    return "".join(kept)


def count_empty_lines(text: str) -> tuple[int, int, int]:
    """Return ``(content_lines, blank_top, blank_bottom)`` of *text*.

    ``content_lines`` counts everything between the first and last non-blank
    line inclusive.
    """
    lines = get_lines(text)
    blank = [not strip_ansi(line).strip() for line in lines]
    if all(blank):
        return 0, len(lines), 0

    top = blank.index(False)
    bottom = blank[::-1].index(False)
    return len(lines) - top - bottom, top, bottom


def increase_width(
    text: str,
    width: int,
    fill: str = " ",
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Right-pad every line of *text* with *fill* up to *width* columns."""
    lines = []
    for line in get_lines(text):
        missing = width - string_width(line, tab_width)
        lines.append(line + fill * missing if missing > 0 else line)
    return "\n".join(lines)
