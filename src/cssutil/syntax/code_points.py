"""Classification of code points, per the "Tokenizer definitions" of http://drafts.csswg.org/css-syntax/#tokenizer-definitions and the surrogate definitions of http://infra.spec.whatwg.org/#code-points.

Every predicate taking a code point (`CP`) accepts the empty string, the EOF code point, and returns `False` for it. Comparison is done on the code points themselves (`'0' <= cp <= '9'`), which for single code point strings is the same as comparing their ordinals.

Predicates that only make sense on ordinals -- a `str` can't hold a value above U+10FFFF to begin with -- come additionally in an `_ordinal` variant taking an `int`.

# Deviations

* `is_newline` is true not only for U+000A LINE FEED, but also for U+000D CARRIAGE RETURN and U+000C FORM FEED; the specification can afford to define a newline as just the line feed because it mandates the other two be converted during preprocessing (see `preprocessing.filter_code_points`) -- for preprocessed input the difference is thus immaterial, while code points from input that wasn't preprocessed are still classified sensibly
"""

from ..utils import CP

def is_digit(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#digit."""
    return ('0' <= cp <= '9')

def is_hex_digit(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#hex-digit."""
    return is_digit(cp) or ('A' <= cp <= 'F') or ('a' <= cp <= 'f')

def is_uppercase_letter(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#uppercase-letter."""
    return ('A' <= cp <= 'Z')

def is_lowercase_letter(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#lowercase-letter."""
    return ('a' <= cp <= 'z')

def is_letter(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#letter."""
    return is_uppercase_letter(cp) or is_lowercase_letter(cp)

def is_non_ascii_code_point(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#non-ascii-code-point."""
    return cp >= '\u0080'

def is_ident_start_code_point(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#ident-start-code-point."""
    return is_letter(cp) or is_non_ascii_code_point(cp) or cp == '_'

def is_ident_code_point(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#ident-code-point."""
    return is_ident_start_code_point(cp) or is_digit(cp) or cp == '-'

def is_non_printable_code_point(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#non-printable-code-point."""
    return '\u0000' <= cp <= '\u0008' or cp == '\u000b' or '\u000e' <= cp <= '\u001f' or cp == '\u007f'

def is_newline(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#newline, and the deviation noted for the module."""
    return cp in ('\n', '\r', '\f')

def is_whitespace(cp: CP) -> bool:
    """See http://drafts.csswg.org/css-syntax/#whitespace."""
    return is_newline(cp) or cp in ('\t', ' ')

max_code_point = 0x10ffff # See http://drafts.csswg.org/css-syntax/#maximum-allowed-code-point

def is_lower_than_max_code_point_ordinal(o: int) -> bool:
    """Determine if an ordinal does not exceed the maximum allowed code point, U+10FFFF.

    Note the specification's "greater than the maximum allowed code point" condition is the negation of this; the name, however awkward, expresses that the maximum itself is allowed.
    """
    return o <= max_code_point

def is_lower_than_max_code_point(cp: CP) -> bool:
    """See `is_lower_than_max_code_point_ordinal`; true for every non-empty `str` code point, by construction of Python strings."""
    return bool(cp) and is_lower_than_max_code_point_ordinal(ord(cp))

def is_leading_surrogate_ordinal(o: int) -> bool:
    """See http://infra.spec.whatwg.org/#leading-surrogate."""
    return 0xd800 <= o <= 0xdbff

def is_trailing_surrogate_ordinal(o: int) -> bool:
    """See http://infra.spec.whatwg.org/#trailing-surrogate."""
    return 0xdc00 <= o <= 0xdfff

def is_surrogate_ordinal(o: int) -> bool:
    """See http://infra.spec.whatwg.org/#surrogate."""
    return is_leading_surrogate_ordinal(o) or is_trailing_surrogate_ordinal(o)

def is_leading_surrogate(cp: CP) -> bool:
    """See `is_leading_surrogate_ordinal`."""
    return ('\ud800' <= cp <= '\udbff')

def is_trailing_surrogate(cp: CP) -> bool:
    """See `is_trailing_surrogate_ordinal`."""
    return ('\udc00' <= cp <= '\udfff')

def is_surrogate(cp: CP) -> bool:
    """Determine if a code point is a so-called surrogate code point.

    Python strings may well contain these -- e.g. `'\\ud800'` or text decoded with the `surrogateescape` error handler -- even though they aren't Unicode scalar values.

    For definition of said "surrogate", see http://infra.spec.whatwg.org/#surrogate.
    """
    return is_leading_surrogate(cp) or is_trailing_surrogate(cp)

def starts_valid_escape(first: CP, second: CP) -> bool:
    """Check if two code points are a valid escape.

    Unlike its counterpart in the specification, the procedure is not bound to any stream: the caller passes the two code points, e.g. the current and the next input code point. Since EOF (`''`) is not a newline, a backslash at the end of input _is_ a valid escape (which "consume an escaped code point" then deals with as a parse error).

    See http://drafts.csswg.org/css-syntax/#starts-with-a-valid-escape.
    """
    return first == '\\' and not is_newline(second)

def would_start_ident_sequence(first: CP, second: CP = '', third: CP = '') -> bool:
    """Check if three code points would start an ident sequence.

    See http://drafts.csswg.org/css-syntax/#would-start-an-identifier.
    """
    match first:
        case '-':
            return is_ident_start_code_point(second) or second == '-' or starts_valid_escape(second, third)
        case _ if is_ident_start_code_point(first):
            return True
        case '\\':
            return starts_valid_escape(first, second)
        case _:
            return False

def would_start_number(first: CP, second: CP = '', third: CP = '') -> bool:
    """Check if three code points would start a number.

    See http://drafts.csswg.org/css-syntax/#starts-with-a-number.
    """
    match first:
        case '+' | '-':
            return is_digit(second) or (second == '.' and is_digit(third))
        case '.':
            return is_digit(second)
        case _:
            return is_digit(first)
