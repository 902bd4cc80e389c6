from __future__ import annotations

"""
Lightweight indexer for kons source files without evaluating code.

We scan the token stream for top-level definitions:
- (defun name (params...) body) -> function
- (setf name value)             -> variable

and collect syntax problems with their positions: unmatched parentheses,
characters the reader does not accept, and whatever else the real reader
rejects. The scan tolerates partial buffers so it can run on every edit.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from kons.reader.parser import TOKEN_RE, read_all
from kons.types.errors import KonsSyntaxError

DEFINING_FORMS = {"defun": "function", "setf": "var"}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[SyntaxProblem] = field(default_factory=list)
    paren_balance: int = 0


def _iter_tokens(text: str) -> Iterator[Tuple[str, str, int]]:
    """Yield (kind, value, offset); unreadable characters come out as kind "invalid"."""
    pos = 0
    n = len(text)
    while pos < n:
        if text[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(text, pos)
        if not m:
            yield "invalid", text[pos], pos
            pos += 1
            continue
        kind = m.lastgroup
        if kind != "comment":
            yield kind, m.group(kind), pos
        pos = m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _problem(text: str, message: str, offset: int) -> SyntaxProblem:
    line, col = _position_from_offset(text, offset)
    return SyntaxProblem(message=message, line=line, col=col)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))
    open_parens: List[int] = []

    for i, (kind, value, offset) in enumerate(tokens):
        if kind == "lparen":
            if not open_parens and i + 2 < len(tokens):
                head_kind, head, _ = tokens[i + 1]
                name_kind, name, name_offset = tokens[i + 2]
                if head_kind == "symbol" and head in DEFINING_FORMS and name_kind == "symbol":
                    line, col = _position_from_offset(text, name_offset)
                    idx.symbols[name] = SymbolDef(
                        name=name, kind=DEFINING_FORMS[head], line=line, col=col
                    )
            open_parens.append(offset)
            idx.paren_balance += 1
        elif kind == "rparen":
            idx.paren_balance -= 1
            if open_parens:
                open_parens.pop()
            else:
                idx.errors.append(_problem(text, "Unmatched ')'", offset))
        elif kind == "invalid":
            idx.errors.append(_problem(text, f"Unexpected char {value!r}", offset))

    for offset in open_parens:
        idx.errors.append(_problem(text, "Unmatched '('", offset))

    # Anything the positional scan missed (e.g. a dangling quote) still gets reported
    if not idx.errors:
        try:
            read_all(text)
        except KonsSyntaxError as exc:
            idx.errors.append(SyntaxProblem(message=str(exc), line=0, col=0))

    return idx


# Signatures for hover/signature help without eval
SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote expr)",
    "setf": "(setf name value)",
    "cond": "(cond (test result) ...)",
    "defun": "(defun name (params) body)",
    "lambda": "(lambda (params) body)",
}

PRIMITIVE_SIGNATURES: Dict[str, str] = {
    "+": "(+ &rest ints)",
    "-": "(- x &rest ints)",
    "*": "(* &rest ints)",
    "/": "(/ x &rest ints)",
    ">": "(> a b)",
    "<": "(< a b)",
    ">=": "(>= a b)",
    "<=": "(<= a b)",
    "=": "(= a b)",
    "not": "(not x)",
    "cons": "(cons x xs)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "count": "(count xs)",
    "length": "(length xs)",
    "list": "(list &rest xs)",
    "null": "(null x)",
    "atom": "(atom x)",
}

BUILTIN_SIGNATURES: Dict[str, str] = {**SPECIAL_FORM_SIGNATURES, **PRIMITIVE_SIGNATURES}

