from __future__ import annotations

"""
A minimal pygls-based Language Server for kons.

Features:
- Text synchronization and document store
- Diagnostics: reader errors with positions (unmatched parens, unreadable chars)
- Hover: builtin signatures and top-level definitions
- Completion: builtins and top-level definitions
- Signature Help: for builtins and special forms
- Document Symbols: from indexer

Buffers are never evaluated; everything comes from a static index.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
    SymbolKind,
    TextDocumentSyncKind,
)

from kons.config import get_log_level
from kons_lsp.indexer import (
    BUILTIN_SIGNATURES,
    PRIMITIVE_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    DocumentIndex,
    build_index,
)

logger = logging.getLogger(__name__)

SOURCE = "kons-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class KonsLanguageServer(LanguageServer):
    CMD_NAME = "kons-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full
        )
        self.documents: Dict[str, DocumentState] = {}


ls = KonsLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: KonsLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update_document(ls, uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: KonsLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # Full sync: the last change carries the whole buffer
        text = params.content_changes[-1].text
    else:
        state = ls.documents.get(uri)
        text = state.text if state else ""
    _update_document(ls, uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: KonsLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update_document(ls: KonsLanguageServer, uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definitions, %d problems", uri, len(idx.symbols), len(idx.errors))
    ls.publish_diagnostics(uri, make_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def make_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(problem.line, problem.col),
            message=problem.message,
            severity=DiagnosticSeverity.Error,
            source=SOURCE,
        )
        for problem in idx.errors
    ]


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: KonsLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    if not word:
        return None

    if word in SPECIAL_FORM_SIGNATURES:
        contents = f"special form {SPECIAL_FORM_SIGNATURES[word]}"
    elif word in PRIMITIVE_SIGNATURES:
        contents = f"primitive {PRIMITIVE_SIGNATURES[word]}"
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word}: {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(ls: KonsLanguageServer, params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig)
        for name, sig in SPECIAL_FORM_SIGNATURES.items()
    ]
    items.extend(
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in PRIMITIVE_SIGNATURES.items()
    )
    state = ls.documents.get(params.text_document.uri)
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(ls: KonsLanguageServer, params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    callee = extract_callee_name(get_line_prefix(state.text, params.position))
    sig = BUILTIN_SIGNATURES.get(callee) if callee else None
    if not sig:
        return None

    params_text = sig[sig.find(" ") + 1 : sig.rfind(")")] if " " in sig else ""
    parameters = [ParameterInformation(label=p) for p in params_text.split(" ") if p]
    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(ls: KonsLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---

def get_line_prefix(text: str, pos: Position) -> str:
    # Return the text from start of line up to pos
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return ""
    return lines[pos.line][: pos.character]


def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    delimiters = " \t()'\n\r"
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in delimiters:
        start -= 1
    end = min(pos.character, len(line))
    while end < len(line) and line[end] not in delimiters:
        end += 1
    return line[start:end] or None


def extract_callee_name(prefix: str) -> Optional[str]:
    # find last '(' and take the token that follows
    lp = prefix.rfind("(")
    if lp == -1:
        return None
    tail = prefix[lp + 1 :].split()
    return tail[0] if tail else None


def main() -> None:
    logging.basicConfig(level=get_log_level())
    ls.start_io()


if __name__ == "__main__":
    main()
