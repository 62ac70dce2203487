"""Role handlers for markup declarations in a DTD.

The handlers cover ENTITY, NOTATION, ATTLIST and ELEMENT declarations.
They are written as a mixin. The class that uses it supplies the
``_internal_subset`` and ``_external_subset1`` handlers that a finished
declaration returns to.

Most states are described by a table of moves. A move maps a token,
or a token together with the keyword it spells, to the state to enter
and the role to report.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from .tokens import ATTRIBUTE_TYPES, Role, Token, attribute_type_role

__all__ = ["DeclarationHandlers"]

Handler = Callable[[Token, str], Role]

# Targets of a move besides a handler name.
_CLOSE = "close"  # wait for the closing '>' of the declaration
_TOP = "top"  # the declaration is complete
_STAY = None  # keep the current state

Target = Optional[str]
Move = Tuple[Target, Role]
Moves = Dict[Union[Token, Tuple[Token, str]], Move]

_NAMES = (Token.NAME, Token.PREFIXED_NAME)
_ENUM_TOKENS = (Token.NMTOKEN, Token.NAME, Token.PREFIXED_NAME)

_CONTENT_ELEMENT_ROLES = {
    Token.NAME: Role.CONTENT_ELEMENT,
    Token.PREFIXED_NAME: Role.CONTENT_ELEMENT,
    Token.NAME_QUESTION: Role.CONTENT_ELEMENT_OPT,
    Token.NAME_ASTERISK: Role.CONTENT_ELEMENT_REP,
    Token.NAME_PLUS: Role.CONTENT_ELEMENT_PLUS,
}

_GROUP_CLOSE_ROLES = {
    Token.CLOSE_PAREN: Role.GROUP_CLOSE,
    Token.CLOSE_PAREN_ASTERISK: Role.GROUP_CLOSE_REP,
    Token.CLOSE_PAREN_QUESTION: Role.GROUP_CLOSE_OPT,
    Token.CLOSE_PAREN_PLUS: Role.GROUP_CLOSE_PLUS,
}

_DECLARATIONS = {
    "ENTITY": ("_entity0", Role.ENTITY_NONE),
    "ATTLIST": ("_attlist0", Role.ATTLIST_NONE),
    "ELEMENT": ("_element0", Role.ELEMENT_NONE),
    "NOTATION": ("_notation0", Role.NOTATION_NONE),
}


def _each(tokens: Iterable[Token], move: Move) -> Moves:
    return {tok: move for tok in tokens}


def _content_elements(target: str) -> Moves:
    return {tok: (target, role) for tok, role in _CONTENT_ELEMENT_ROLES.items()}


def _external_id(none_role: Role, system: str, public: str) -> Moves:
    return {
        (Token.NAME, "SYSTEM"): (system, none_role),
        (Token.NAME, "PUBLIC"): (public, none_role),
    }


def _literal(target: Target, role: Role) -> Moves:
    return {Token.LITERAL: (target, role)}


def _state(none_role: Role, moves: Moves) -> Handler:
    """Build a handler that follows ``moves`` and skips white space."""

    def handler(self: "DeclarationHandlers", tok: Token, text: str) -> Role:
        return self._transition(tok, text, none_role, moves)

    return handler


def _entity_value_or_id(system: str, public: str) -> Moves:
    return {
        **_external_id(Role.ENTITY_NONE, system, public),
        **_literal(_CLOSE, Role.ENTITY_VALUE),
    }


_ELEMENT1_MOVES: Moves = {
    (Token.NAME, "EMPTY"): (_CLOSE, Role.CONTENT_EMPTY),
    (Token.NAME, "ANY"): (_CLOSE, Role.CONTENT_ANY),
    Token.OPEN_PAREN: ("_element2", Role.GROUP_OPEN),
}

_ELEMENT2_MOVES: Moves = {
    (Token.POUND_NAME, "PCDATA"): ("_element3", Role.CONTENT_PCDATA),
    Token.OPEN_PAREN: ("_element6", Role.GROUP_OPEN),
    **_content_elements("_element7"),
}

_ELEMENT6_MOVES: Moves = {
    Token.OPEN_PAREN: (_STAY, Role.GROUP_OPEN),
    **_content_elements("_element7"),
}

_ELEMENT7_MOVES: Moves = {
    Token.COMMA: ("_element6", Role.GROUP_SEQUENCE),
    Token.OR: ("_element6", Role.GROUP_CHOICE),
}


class DeclarationHandlers:
    """State-machine steps for the declarations of a document type."""

    handler: Handler
    level: int = 0
    role_none: Role = Role.NONE
    document_entity: bool = True

    _internal_subset: Handler
    _external_subset1: Handler

    # -- shared steps -------------------------------------------------

    def _set_top_level(self) -> None:
        self.handler = (
            self._internal_subset if self.document_entity else self._external_subset1
        )

    def _close_with(self, role_none: Role) -> None:
        self.handler = self._decl_close
        self.role_none = role_none

    def _common(self, tok: Token) -> Role:
        if not self.document_entity and tok is Token.PARAM_ENTITY_REF:
            return Role.INNER_PARAM_ENTITY_REF
        self.handler = self._error
        return Role.ERROR

    def _error(self, tok: Token, text: str) -> Role:
        return Role.NONE

    def _transition(self, tok: Token, text: str, none_role: Role, moves: Moves) -> Role:
        if tok is Token.PROLOG_S:
            return none_role
        keyword = text[1:] if tok is Token.POUND_NAME else text
        move = moves.get((tok, keyword)) or moves.get(tok)
        if move is None:
            return self._common(tok)
        target, role = move
        if target == _CLOSE:
            self._close_with(none_role)
        elif target == _TOP:
            self._set_top_level()
        elif target is not _STAY:
            self.handler = getattr(self, target)
        return role

    def _decl_close(self, tok: Token, text: str) -> Role:
        if tok is Token.PROLOG_S:
            return self.role_none
        if tok is Token.DECL_CLOSE:
            self._set_top_level()
            return self.role_none
        return self._common(tok)

    def _begin_declaration(self, keyword: str) -> Optional[Role]:
        """Enter the declaration named by ``keyword``; None if it names none."""
        entry = _DECLARATIONS.get(keyword)
        if entry is None:
            return None
        target, role = entry
        self.handler = getattr(self, target)
        return role

    # -- ENTITY -------------------------------------------------------

    _entity0 = _state(
        Role.ENTITY_NONE,
        {
            Token.PERCENT: ("_entity1", Role.ENTITY_NONE),
            Token.NAME: ("_entity2", Role.GENERAL_ENTITY_NAME),
        },
    )
    _entity1 = _state(Role.ENTITY_NONE, {Token.NAME: ("_entity7", Role.PARAM_ENTITY_NAME)})
    _entity2 = _state(Role.ENTITY_NONE, _entity_value_or_id("_entity4", "_entity3"))
    _entity3 = _state(Role.ENTITY_NONE, _literal("_entity4", Role.ENTITY_PUBLIC_ID))
    _entity4 = _state(Role.ENTITY_NONE, _literal("_entity5", Role.ENTITY_SYSTEM_ID))
    _entity5 = _state(
        Role.ENTITY_NONE,
        {
            Token.DECL_CLOSE: (_TOP, Role.ENTITY_COMPLETE),
            (Token.NAME, "NDATA"): ("_entity6", Role.ENTITY_NONE),
        },
    )
    _entity6 = _state(Role.ENTITY_NONE, {Token.NAME: (_CLOSE, Role.ENTITY_NOTATION_NAME)})
    _entity7 = _state(Role.ENTITY_NONE, _entity_value_or_id("_entity9", "_entity8"))
    _entity8 = _state(Role.ENTITY_NONE, _literal("_entity9", Role.ENTITY_PUBLIC_ID))
    _entity9 = _state(Role.ENTITY_NONE, _literal("_entity10", Role.ENTITY_SYSTEM_ID))
    _entity10 = _state(
        Role.ENTITY_NONE, {Token.DECL_CLOSE: (_TOP, Role.ENTITY_COMPLETE)}
    )

    # -- NOTATION -----------------------------------------------------

    _notation0 = _state(Role.NOTATION_NONE, {Token.NAME: ("_notation1", Role.NOTATION_NAME)})
    _notation1 = _state(
        Role.NOTATION_NONE, _external_id(Role.NOTATION_NONE, "_notation3", "_notation2")
    )
    _notation2 = _state(Role.NOTATION_NONE, _literal("_notation4", Role.NOTATION_PUBLIC_ID))
    _notation3 = _state(Role.NOTATION_NONE, _literal(_CLOSE, Role.NOTATION_SYSTEM_ID))
    _notation4 = _state(
        Role.NOTATION_NONE,
        {
            **_literal(_CLOSE, Role.NOTATION_SYSTEM_ID),
            Token.DECL_CLOSE: (_TOP, Role.NOTATION_NO_SYSTEM_ID),
        },
    )

    # -- ATTLIST ------------------------------------------------------

    _attlist0 = _state(Role.ATTLIST_NONE, _each(_NAMES, ("_attlist1", Role.ATTLIST_ELEMENT_NAME)))
    _attlist1 = _state(
        Role.ATTLIST_NONE,
        {
            Token.DECL_CLOSE: (_TOP, Role.ATTLIST_NONE),
            **_each(_NAMES, ("_attlist2", Role.ATTRIBUTE_NAME)),
        },
    )
    _attlist2 = _state(
        Role.ATTLIST_NONE,
        {
            **{
                (Token.NAME, keyword): ("_attlist8", attribute_type_role(index))
                for index, keyword in enumerate(ATTRIBUTE_TYPES)
            },
            (Token.NAME, "NOTATION"): ("_attlist5", Role.ATTLIST_NONE),
            Token.OPEN_PAREN: ("_attlist3", Role.ATTLIST_NONE),
        },
    )
    _attlist3 = _state(
        Role.ATTLIST_NONE, _each(_ENUM_TOKENS, ("_attlist4", Role.ATTRIBUTE_ENUM_VALUE))
    )
    _attlist4 = _state(
        Role.ATTLIST_NONE,
        {
            Token.CLOSE_PAREN: ("_attlist8", Role.ATTLIST_NONE),
            Token.OR: ("_attlist3", Role.ATTLIST_NONE),
        },
    )
    _attlist5 = _state(Role.ATTLIST_NONE, {Token.OPEN_PAREN: ("_attlist6", Role.ATTLIST_NONE)})
    _attlist6 = _state(
        Role.ATTLIST_NONE, {Token.NAME: ("_attlist7", Role.ATTRIBUTE_NOTATION_VALUE)}
    )
    _attlist7 = _state(
        Role.ATTLIST_NONE,
        {
            Token.CLOSE_PAREN: ("_attlist8", Role.ATTLIST_NONE),
            Token.OR: ("_attlist6", Role.ATTLIST_NONE),
        },
    )
    # Default value of an attribute.
    _attlist8 = _state(
        Role.ATTLIST_NONE,
        {
            (Token.POUND_NAME, "IMPLIED"): ("_attlist1", Role.IMPLIED_ATTRIBUTE_VALUE),
            (Token.POUND_NAME, "REQUIRED"): ("_attlist1", Role.REQUIRED_ATTRIBUTE_VALUE),
            (Token.POUND_NAME, "FIXED"): ("_attlist9", Role.ATTLIST_NONE),
            **_literal("_attlist1", Role.DEFAULT_ATTRIBUTE_VALUE),
        },
    )
    _attlist9 = _state(Role.ATTLIST_NONE, _literal("_attlist1", Role.FIXED_ATTRIBUTE_VALUE))

    # -- ELEMENT ------------------------------------------------------

    _element0 = _state(Role.ELEMENT_NONE, _each(_NAMES, ("_element1", Role.ELEMENT_NAME)))

    def _element1(self, tok: Token, text: str) -> Role:
        if tok is Token.OPEN_PAREN:
            self.level = 1
        return self._transition(tok, text, Role.ELEMENT_NONE, _ELEMENT1_MOVES)

    def _element2(self, tok: Token, text: str) -> Role:
        if tok is Token.OPEN_PAREN:
            self.level = 2
        return self._transition(tok, text, Role.ELEMENT_NONE, _ELEMENT2_MOVES)

    _element3 = _state(
        Role.ELEMENT_NONE,
        {
            Token.CLOSE_PAREN: (_CLOSE, Role.GROUP_CLOSE),
            Token.CLOSE_PAREN_ASTERISK: (_CLOSE, Role.GROUP_CLOSE_REP),
            Token.OR: ("_element4", Role.ELEMENT_NONE),
        },
    )
    _element4 = _state(Role.ELEMENT_NONE, _each(_NAMES, ("_element5", Role.CONTENT_ELEMENT)))
    _element5 = _state(
        Role.ELEMENT_NONE,
        {
            Token.CLOSE_PAREN_ASTERISK: (_CLOSE, Role.GROUP_CLOSE_REP),
            Token.OR: ("_element4", Role.ELEMENT_NONE),
        },
    )

    def _element6(self, tok: Token, text: str) -> Role:
        if tok is Token.OPEN_PAREN:
            self.level += 1
        return self._transition(tok, text, Role.ELEMENT_NONE, _ELEMENT6_MOVES)

    def _element7(self, tok: Token, text: str) -> Role:
        if tok in _GROUP_CLOSE_ROLES:
            self.level -= 1
            if self.level == 0:
                self._close_with(Role.ELEMENT_NONE)
            return _GROUP_CLOSE_ROLES[tok]
        return self._transition(tok, text, Role.ELEMENT_NONE, _ELEMENT7_MOVES)