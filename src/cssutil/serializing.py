"""Implement the "Common Serializing Idioms" of the ["CSS Object Model"](http://drafts.csswg.org/cssom-1/#common-serializing-idioms) specification.

The procedures here turn text into syntactically valid CSS -- identifiers, strings, `url(...)` and `local(...)` functions, and lists thereof. A serialization is one valid form of the value, not necessarily the only one; e.g. `"a\\"b"` and `"a\\22 b"` both denote the string `a"b`, and only the former is ever produced.

Serialization is lossy for NULL (U+0000), which is replaced with U+FFFD REPLACEMENT CHARACTER, as mandated. Code points which aren't Unicode scalar values (lone surrogates), while possible in Python strings, are passed through like any other non-ASCII code point, without error; use `syntax.code_points.is_surrogate` to detect these beforehand if that is a concern.
"""

from .syntax.code_points import is_digit, is_letter, is_non_ascii_code_point
from .utils import CP, intersperse, join

from collections.abc import Iterable, Iterator

def escape_character(cp: CP) -> str:
    """See http://drafts.csswg.org/cssom-1/#escape-a-character."""
    return '\\' + cp

def escape_character_as_code_point(cp: CP) -> str:
    """Escape a code point with its value in hexadecimal notation.

    The value is written with the smallest possible number of lowercase hex digits, and the escape is always terminated with a space, whether or not whatever follows it would have been mistaken for part of the escape. E.g. `escape_character_as_code_point('a')` returns `'\\\\61 '`.

    See http://drafts.csswg.org/cssom-1/#escape-a-character-as-code-point.
    """
    return f'\\{ord(cp):x} '

def _is_control_code_point(cp: CP) -> bool:
    """Determine if a code point is in the range U+0001 to U+001F or is U+007F, the range both identifier and string serialization escape as code point."""
    return ('\u0001' <= cp <= '\u001f') or cp == '\u007f'

def serialize_identifier(identifier: str) -> str:
    """Serialize an identifier, so that it is parsed as an `<ident-token>` with the value of `identifier`.

    The rules are applied per character, in order, first match wins -- the positional rules concerning the first two characters thus take precedence over the character class rule that would otherwise have a digit or a hyphen appear verbatim.

    E.g. `serialize_identifier('1st')` returns `'\\\\31 st'`, `serialize_identifier('-')` returns `'\\\\-'` while `serialize_identifier('-webkit-box')` returns the identifier unchanged.

    Note that the procedure is not idempotent -- an identifier that was already serialized will have its backslashes (and spaces) escaped again.

    See http://drafts.csswg.org/cssom-1/#serialize-an-identifier.
    """
    def serialized_code_points() -> Iterator[str]:
        for i, cp in enumerate(identifier):
            match (i, cp):
                case (_, '\0'):
                    yield '\ufffd'
                case _ if _is_control_code_point(cp):
                    yield escape_character_as_code_point(cp)
                case (0, _) if is_digit(cp):
                    yield escape_character_as_code_point(cp)
                case (1, _) if is_digit(cp) and identifier[0] == '-':
                    yield escape_character_as_code_point(cp)
                case (0, '-') if len(identifier) == 1:
                    yield escape_character(cp)
                case (_, '-' | '_'):
                    yield cp
                case _ if is_non_ascii_code_point(cp) or is_digit(cp) or is_letter(cp):
                    yield cp
                case _:
                    yield escape_character(cp)
    return join(serialized_code_points())

def serialize_string(string: str) -> str:
    """Serialize a string, so that it is parsed as a `<string-token>` with the value of `string`.

    The result is always enclosed in double quotes, so the single quote (U+0027) is never escaped.

    See http://drafts.csswg.org/cssom-1/#serialize-a-string.
    """
    def serialized_code_points() -> Iterator[str]:
        yield '"'
        for cp in string:
            match cp:
                case '\0':
                    yield '\ufffd'
                case _ if _is_control_code_point(cp):
                    yield escape_character_as_code_point(cp)
                case '"' | '\\':
                    yield escape_character(cp)
                case _:
                    yield cp
        yield '"'
    return join(serialized_code_points())

def serialize_url(url: str) -> str:
    """See http://drafts.csswg.org/cssom-1/#serialize-a-url."""
    return 'url(' + serialize_string(url) + ')'

def serialize_local(local: str) -> str:
    """See http://drafts.csswg.org/cssom-1/#serialize-a-local."""
    return 'local(' + serialize_string(local) + ')'

def serialize_comma_separated_list(items: Iterable[str]) -> str:
    """Concatenate items in list order, separating them with a comma followed by a single space.

    See http://drafts.csswg.org/cssom-1/#serialize-a-comma-separated-list.
    """
    return join(intersperse(*items, separator=', '))

def serialize_whitespace_separated_list(items: Iterable[str]) -> str:
    """See http://drafts.csswg.org/cssom-1/#serialize-a-whitespace-separated-list."""
    return join(intersperse(*items, separator=' '))
