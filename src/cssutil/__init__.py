"""Lexical primitives of CSS text aligned with [CSS] specification(s): classification of code points, and escaping and serialization of identifiers, strings and the like.

The names most callers need are available directly from the package; see `syntax.code_points`, `syntax.preprocessing`, `syntax.escapes` and `serializing` for the rest.
"""

from .serializing import escape_character, escape_character_as_code_point, serialize_comma_separated_list, serialize_identifier, serialize_local, serialize_string, serialize_url, serialize_whitespace_separated_list
from .syntax.code_points import is_digit, is_hex_digit, is_ident_code_point, is_ident_start_code_point, is_leading_surrogate, is_leading_surrogate_ordinal, is_letter, is_lower_than_max_code_point, is_lower_than_max_code_point_ordinal, is_lowercase_letter, is_newline, is_non_ascii_code_point, is_non_printable_code_point, is_surrogate, is_surrogate_ordinal, is_trailing_surrogate, is_trailing_surrogate_ordinal, is_uppercase_letter, is_whitespace, starts_valid_escape, would_start_ident_sequence, would_start_number
from .syntax.escapes import parse_string, unescape
from .syntax.preprocessing import filter_code_points, preprocess
from .utils import ParseError
