"""Source-like text for callables used in verification expressions.

Lambdas are rendered from their own source: the defining file is parsed
with ast and the lambda node is located by line number and parameter
names. Named callables render as their qualified name.
"""

from __future__ import annotations

import ast
import linecache
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import CodeType

LAMBDA_NAME = "<lambda>"


def describe_callable(fn: Callable[..., object]) -> str:
    """Render a callable the way it was written.

    Args:
        fn: Function, lambda or other callable

    Returns:
        Lambda source (e.g. "lambda msg: 'x' in msg"), qualified name,
        or "<lambda>" when the source cannot be located
    """
    code: CodeType | None = getattr(fn, "__code__", None)
    if code is not None and code.co_name == LAMBDA_NAME:
        return lambda_source(code) or LAMBDA_NAME

    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name:
        return str(name)
    return repr(fn)


def lambda_source(code: CodeType) -> str | None:
    """Locate and unparse the lambda compiled into code.

    When several lambdas with the same parameters start on the same
    line, the first one wins.

    Args:
        code: Code object of a lambda

    Returns:
        Unparsed lambda text, None if source is unavailable
    """
    tree = _parse_source("".join(linecache.getlines(code.co_filename)))
    if tree is None:
        return None

    params = code.co_varnames[: code.co_argcount + code.co_kwonlyargcount]
    for node in ast.walk(tree):
        if not isinstance(node, ast.Lambda) or node.lineno != code.co_firstlineno:
            continue
        names = tuple(a.arg for a in (*node.args.posonlyargs, *node.args.args, *node.args.kwonlyargs))
        if names == params:
            return ast.unparse(node)
    return None


@lru_cache(maxsize=64)
def _parse_source(source: str) -> ast.Module | None:
    if not source:
        return None
    try:
        return ast.parse(source)
    except SyntaxError:
        return None
