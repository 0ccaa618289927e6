"""Preprocessing of CSS text, per http://drafts.csswg.org/css-syntax/#input-preprocessing.

Classification (see `code_points`) and decoding (see `escapes`) work on preprocessed as well as raw text; preprocessing is for callers who want the code point stream the specification assumes, e.g. before checking a serialization against the original value.
"""

from ..utils import CP, join
from .code_points import is_surrogate

from collections.abc import Iterator

def filter_code_points(text: str) -> Iterator[CP]:
    """Yield the code points of `text` filtered, one per code point of the filtered stream.

    A carriage return followed by a line feed yields a single line feed, so the filtered stream may be shorter than `text`, never longer.

    See http://drafts.csswg.org/css-syntax/#css-filter-code-points.
    """
    for i, cp in enumerate(text):
        match cp:
            case '\r' if text[i + 1:i + 2] == '\n':
                pass # The line feed that follows stands for the pair
            case '\r' | '\f':
                yield '\n'
            case '\0':
                yield '\ufffd'
            case _ if is_surrogate(cp):
                yield '\ufffd'
            case _:
                yield cp

def preprocess(text: str) -> str:
    """Filter all code points of some text.

    E.g. `preprocess('a\\r\\nb\\0')` returns `'a\\nb\\ufffd'`.
    """
    return join(filter_code_points(text))
