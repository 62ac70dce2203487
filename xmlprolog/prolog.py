"""The role state machine for the prolog of an XML document.

Tokens of the prolog (and of an external DTD subset) are fed in one at a
time; each is answered with the :class:`~xmlprolog.tokens.Role` it plays at
that point. A token that cannot appear where it does yields ``Role.ERROR``,
after which the machine answers every further token with ``Role.NONE``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

from .declarations import DeclarationHandlers
from .tokens import Role, Token

__all__ = ["PrologState"]

TokenInput = Union[Token, Tuple[Token, str]]


def _declaration_keyword(text: str) -> str:
    """Return the name after the ``<!`` of a declaration-open token."""
    return text[2:]


class PrologState(DeclarationHandlers):
    """Tracks where in the prolog or external subset the input has got to."""

    def __init__(self, external_entity: bool = False) -> None:
        self.level = 0
        self.role_none = Role.NONE
        self.include_level = 0
        self.in_entity_value = False
        if external_entity:
            self.reset_external_entity()
        else:
            self.reset()

    def reset(self) -> None:
        """Start over at the beginning of a document entity."""
        self.handler = self._prolog0
        self.document_entity = True
        self.include_level = 0
        self.in_entity_value = False

    def reset_external_entity(self) -> None:
        """Start over at the beginning of an external parameter entity."""
        self.handler = self._external_subset0
        self.document_entity = False
        self.include_level = 0

    def token_role(self, tok: Token, text: str = "") -> Role:
        """Return the role of token ``tok`` whose source text is ``text``."""
        if not isinstance(tok, Token):
            raise TypeError(f"expected a Token, got {tok!r}")
        return self.handler(tok, text)

    def roles(self, tokens: Iterable[TokenInput]) -> Iterator[Role]:
        """Yield the role of each token in turn.

        Items are either ``(token, text)`` pairs or bare tokens, whose text
        is taken to be empty.
        """
        for item in tokens:
            if isinstance(item, Token):
                yield self.token_role(item, "")
            else:
                tok, text = item
                yield self.token_role(tok, text)

    # -- document prolog ----------------------------------------------

    def _start_doctype(self, tok: Token, text: str) -> Role:
        if _declaration_keyword(text) != "DOCTYPE":
            return self._common(tok)
        self.handler = self._doctype0
        return Role.DOCTYPE_NONE

    def _prolog0(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            self.handler = self._prolog1
            return Role.NONE
        if tok is Token.XML_DECL:
            self.handler = self._prolog1
            return Role.XML_DECL
        if tok is Token.PI:
            self.handler = self._prolog1
            return Role.PI
        if tok is Token.COMMENT:
            self.handler = self._prolog1
            return Role.COMMENT
        if tok is Token.BOM:
            return Role.NONE
        if tok is Token.DECL_OPEN:
            return self._start_doctype(tok, text)
        if tok is Token.INSTANCE_START:
            self.handler = self._error
            return Role.INSTANCE_START
        return self._common(tok)

    def _prolog1(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.PI:
            return Role.PI
        if tok is Token.COMMENT:
            return Role.COMMENT
        if tok is Token.BOM:
            return Role.NONE
        if tok is Token.DECL_OPEN:
            return self._start_doctype(tok, text)
        if tok is Token.INSTANCE_START:
            self.handler = self._error
            return Role.INSTANCE_START
        return self._common(tok)

    def _prolog2(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.PI:
            return Role.PI
        if tok is Token.COMMENT:
            return Role.COMMENT
        if tok is Token.INSTANCE_START:
            self.handler = self._error
            return Role.INSTANCE_START
        return self._common(tok)

    # -- document type declaration ------------------------------------

    def _doctype0(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok in (Token.NAME, Token.PREFIXED_NAME):
            self.handler = self._doctype1
            return Role.DOCTYPE_NAME
        return self._common(tok)

    def _doctype1(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok is Token.OPEN_BRACKET:
            self.handler = self._internal_subset
            return Role.DOCTYPE_INTERNAL_SUBSET
        if tok is Token.DECL_CLOSE:
            self.handler = self._prolog2
            return Role.DOCTYPE_CLOSE
        if tok is Token.NAME:
            if text == "SYSTEM":
                self.handler = self._doctype3
                return Role.DOCTYPE_NONE
            if text == "PUBLIC":
                self.handler = self._doctype2
                return Role.DOCTYPE_NONE
        return self._common(tok)

    def _doctype2(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok is Token.LITERAL:
            self.handler = self._doctype3
            return Role.DOCTYPE_PUBLIC_ID
        return self._common(tok)

    def _doctype3(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok is Token.LITERAL:
            self.handler = self._doctype4
            return Role.DOCTYPE_SYSTEM_ID
        return self._common(tok)

    def _doctype4(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok is Token.OPEN_BRACKET:
            self.handler = self._internal_subset
            return Role.DOCTYPE_INTERNAL_SUBSET
        if tok is Token.DECL_CLOSE:
            self.handler = self._prolog2
            return Role.DOCTYPE_CLOSE
        return self._common(tok)

    def _doctype5(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.DOCTYPE_NONE
        if tok is Token.DECL_CLOSE:
            self.handler = self._prolog2
            return Role.DOCTYPE_CLOSE
        return self._common(tok)

    # -- subsets ------------------------------------------------------

    def _internal_subset(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.DECL_OPEN:
            role = self._begin_declaration(_declaration_keyword(text))
            if role is not None:
                return role
            return self._common(tok)
        if tok is Token.PI:
            return Role.PI
        if tok is Token.COMMENT:
            return Role.COMMENT
        if tok is Token.PARAM_ENTITY_REF:
            return Role.PARAM_ENTITY_REF
        if tok is Token.CLOSE_BRACKET:
            self.handler = self._doctype5
            return Role.DOCTYPE_NONE
        if tok is Token.NONE:
            return Role.NONE
        return self._common(tok)

    def _external_subset0(self, tok: Token, text: str) -> Role:
        self.handler = self._external_subset1
        if tok is Token.XML_DECL:
            return Role.TEXT_DECL
        return self._external_subset1(tok, text)

    def _external_subset1(self, tok: Token, text: str) -> Role:
        if tok is Token.COND_SECT_OPEN:
            self.handler = self._cond_sect0
            return Role.NONE
        if tok is Token.COND_SECT_CLOSE:
            if self.include_level == 0:
                return self._common(tok)
            self.include_level -= 1
            return Role.NONE
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.CLOSE_BRACKET:
            return self._common(tok)
        if tok is Token.NONE:
            if self.include_level:
                return self._common(tok)
            return Role.NONE
        return self._internal_subset(tok, text)

    # -- conditional sections -----------------------------------------

    def _cond_sect0(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.NAME:
            if text == "INCLUDE":
                self.handler = self._cond_sect1
                return Role.NONE
            if text == "IGNORE":
                self.handler = self._cond_sect2
                return Role.NONE
        return self._common(tok)

    def _cond_sect1(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.OPEN_BRACKET:
            self.handler = self._external_subset1
            self.include_level += 1
            return Role.NONE
        return self._common(tok)

    def _cond_sect2(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return Role.NONE
        if tok is Token.OPEN_BRACKET:
            self.handler = self._external_subset1
            return Role.IGNORE_SECT
        return self._common(tok)