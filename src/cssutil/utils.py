"""Set of constructs to aid the rest of the package, of both the package-specific and the general kind that would otherwise warrant third-party dependencies."""

from sys import stderr
from traceback import print_stack

from collections.abc import Iterable
from typing import TypeAlias, TypeVar

T = TypeVar('T')

CP: TypeAlias = str # [Unicode] code points are strings of length 1, with the empty string standing for the so-called EOF code point (see http://drafts.csswg.org/css-syntax/#eof-code-point); Python strings are sequences of code points, not of UTF-16 code units, so surrogate pairs never arise from indexing one

def intersperse(*items: T, separator: T) -> Iterable[T]:
    """Yield items with a separator yielded between each item.

    E.g. `intersperse("foo", "bar", "baz", separator="-")` will yield "foo", "-", "bar", "-", then "baz". No items yield nothing, one item yields just that item.

    Owing to a mere design choice, this procedure demands, by the type checker, that the separator be of a type co-variant with the type of items in the sequence, with the latter assumed to be homogenous (items are all of the same type).

    :param items: A sequence (items are assumed to be of the same type or share a super-type)
    :param separator: A value to yield between yielding each item in the sequence
    """
    it = iter(items)
    for item in it:
        yield item
        break
    for item in it:
        yield separator
        yield item

def join(iterable: Iterable[str]) -> str:
    """Join a sequence into a string."""
    return ''.join(iterable)

class ParseError(RuntimeError):
    """A [catch-all] class of errors that occur during or otherwise related to parsing, for conditions that cannot be recovered from the way a CSS "parse error" can."""
    pass

def parser_error() -> None:
    """Report a parse error met while decoding escapes, the default for the `parser_error` keyword argument of `syntax.escapes` procedures.

    Only two conditions are reported this way: a backslash at the very end of the text (decoded as U+FFFD) and a quoted string missing its closing quote. Decoding carries on after either, so the report is the stack of the call that met it. Pass e.g. `lambda: None` to ignore these, or a callable that collects them.

    See http://drafts.csswg.org/css-syntax/#parse-error.
    """
    print_stack() # A convenience, retained even in "release" mode (in absense of a better way to communicate and handle parser errors)
    stderr.write('\nDecoding of CSS text encountered a parse error.\n')
    if __debug__: # When debugging parse errors in an "interactive" terminal, load the debugger and suspend execution, for convenience
        from sys import stdin
        if stdin.isatty():
            breakpoint()
