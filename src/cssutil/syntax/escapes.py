"""Decoding of escaped code points in CSS text, the inverse of what `..serializing` does when it escapes characters.

The procedures follow those of the tokenizer in the [Syntax] specification (see section 4.3) which deal with escapes, but aren't a tokenizer -- they decode text known to be (part of) a single identifier or string, e.g. for verifying a serialization reads back as the value that was serialized.

Errors that the specification calls "parse errors" are reported by calling the `parser_error` procedure passed by the caller (see `..utils.parser_error` for the default), after which decoding continues as the specification instructs. Input that can't be decoded at all, raises `ParseError`.
"""

from ..utils import CP, join, ParseError, parser_error
from .code_points import is_hex_digit, is_lower_than_max_code_point_ordinal, is_newline, is_surrogate_ordinal, is_whitespace, starts_valid_escape

from collections.abc import Callable

def consume_escaped_code_point(text: str, index: int, *, parser_error: Callable[..., None] = parser_error) -> tuple[CP, int]:
    """Decode the escape the backslash preceding `text[index]` starts.

    The caller is expected to have verified, using `code_points.starts_valid_escape`, that the backslash and what follows it, is a valid escape.

    See http://drafts.csswg.org/css-syntax/#consume-escaped-code-point.

    :param text: Text containing the escape
    :param index: Offset of the code point following the backslash
    :param parser_error: Procedure to call on encountering a parse error
    :returns: A 2-tuple of the decoded code point and the offset of the code point following the escape
    """
    assert index > 0 and text[index - 1] == '\\'
    cp = text[index:index + 1]
    match cp:
        case _ if is_hex_digit(cp):
            end = index + 1
            while end < len(text) and is_hex_digit(text[end]) and end - index < 6:
                end += 1
            num = int(text[index:end], 16)
            if text[end:end + 2] == '\r\n': # The pair would have been filtered into a single newline during preprocessing
                end += 2
            elif is_whitespace(text[end:end + 1]):
                end += 1
            return ('\ufffd' if (num == 0 or is_surrogate_ordinal(num) or not is_lower_than_max_code_point_ordinal(num)) else chr(num)), end
        case '':
            parser_error()
            return '\ufffd', index
        case _:
            return cp, index + 1

def unescape(text: str, *, parser_error: Callable[..., None] = parser_error) -> str:
    """Decode all escapes in some text, e.g. the serialization of an identifier.

    E.g. `unescape('\\\\31 st')` returns `'1st'`. A backslash followed by a newline is not a valid escape and is left as is.
    """
    result: list[CP] = []
    i = 0
    while i < len(text):
        if starts_valid_escape(text[i], text[i + 1:i + 2]):
            cp, i = consume_escaped_code_point(text, i + 1, parser_error=parser_error)
            result.append(cp)
        else:
            result.append(text[i])
            i += 1
    return join(result)

def parse_string(text: str, *, parser_error: Callable[..., None] = parser_error) -> str:
    """Read a quoted string, e.g. one produced by `serializing.serialize_string`, back into the value it denotes.

    Either kind of quote may enclose the string. An escaped newline continues the string on the next line and contributes nothing to the value.

    See http://drafts.csswg.org/css-syntax/#consume-string-token.

    :param text: The entire quoted string, including the quotes
    :param parser_error: Procedure to call on encountering a parse error; the closing quote missing is one, for example
    :raises ParseError: If `text` isn't a quoted string, has anything after the closing quote, or contains an unescaped newline (which the specification makes a `<bad-string-token>` of)
    """
    ending_cp = text[0:1]
    if ending_cp not in ('"', '\''):
        raise ParseError(f"Expected a quoted string, got {text!r}")
    index = 1
    def next(n: int) -> str:
        """See http://drafts.csswg.org/css-syntax/#next-input-code-point."""
        return text[index:index + n]
    def consume(n: int) -> str:
        nonlocal index
        cps = next(n)
        index += len(cps)
        return cps
    value: list[CP] = []
    while True:
        match consume(1):
            case cp if cp == ending_cp:
                break
            case '':
                parser_error()
                break
            case cp if is_newline(cp):
                raise ParseError(f"Unescaped newline at offset {index - 1} of {text!r}")
            case '\\':
                match next(1):
                    case '':
                        pass
                    case cp if is_newline(cp):
                        consume(2 if next(2) == '\r\n' else 1)
                    case _:
                        cp, index = consume_escaped_code_point(text, index, parser_error=parser_error)
                        value.append(cp)
            case _ as cp:
                value.append(cp)
    if next(1):
        raise ParseError(f"Unexpected text after the closing quote at offset {index} of {text!r}")
    return join(value)
