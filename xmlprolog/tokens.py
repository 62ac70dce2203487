"""Token kinds fed to the prolog role machine and the roles it reports."""

from __future__ import annotations

import enum

__all__ = ["ATTRIBUTE_TYPES", "Role", "Token", "attribute_type_role"]


class Token(enum.Enum):
    """Kinds of prolog tokens that the role machine distinguishes."""

    NONE = enum.auto()
    PROLOG_S = enum.auto()
    XML_DECL = enum.auto()
    PI = enum.auto()
    COMMENT = enum.auto()
    BOM = enum.auto()
    DECL_OPEN = enum.auto()
    DECL_CLOSE = enum.auto()
    INSTANCE_START = enum.auto()
    NAME = enum.auto()
    PREFIXED_NAME = enum.auto()
    NMTOKEN = enum.auto()
    POUND_NAME = enum.auto()
    NAME_QUESTION = enum.auto()
    NAME_ASTERISK = enum.auto()
    NAME_PLUS = enum.auto()
    LITERAL = enum.auto()
    PERCENT = enum.auto()
    PARAM_ENTITY_REF = enum.auto()
    OPEN_BRACKET = enum.auto()
    CLOSE_BRACKET = enum.auto()
    OPEN_PAREN = enum.auto()
    CLOSE_PAREN = enum.auto()
    CLOSE_PAREN_ASTERISK = enum.auto()
    CLOSE_PAREN_QUESTION = enum.auto()
    CLOSE_PAREN_PLUS = enum.auto()
    OR = enum.auto()
    COMMA = enum.auto()
    COND_SECT_OPEN = enum.auto()
    COND_SECT_CLOSE = enum.auto()


class Role(enum.IntEnum):
    """The meaning a token has at its position in the prolog."""

    ERROR = -1
    NONE = 0
    XML_DECL = 1
    INSTANCE_START = 2
    DOCTYPE_NONE = 3
    DOCTYPE_NAME = 4
    DOCTYPE_SYSTEM_ID = 5
    DOCTYPE_PUBLIC_ID = 6
    DOCTYPE_INTERNAL_SUBSET = 7
    DOCTYPE_CLOSE = 8
    GENERAL_ENTITY_NAME = 9
    PARAM_ENTITY_NAME = 10
    ENTITY_NONE = 11
    ENTITY_VALUE = 12
    ENTITY_SYSTEM_ID = 13
    ENTITY_PUBLIC_ID = 14
    ENTITY_COMPLETE = 15
    ENTITY_NOTATION_NAME = 16
    NOTATION_NONE = 17
    NOTATION_NAME = 18
    NOTATION_SYSTEM_ID = 19
    NOTATION_NO_SYSTEM_ID = 20
    NOTATION_PUBLIC_ID = 21
    ATTRIBUTE_NAME = 22
    ATTRIBUTE_TYPE_CDATA = 23
    ATTRIBUTE_TYPE_ID = 24
    ATTRIBUTE_TYPE_IDREF = 25
    ATTRIBUTE_TYPE_IDREFS = 26
    ATTRIBUTE_TYPE_ENTITY = 27
    ATTRIBUTE_TYPE_ENTITIES = 28
    ATTRIBUTE_TYPE_NMTOKEN = 29
    ATTRIBUTE_TYPE_NMTOKENS = 30
    ATTRIBUTE_ENUM_VALUE = 31
    ATTRIBUTE_NOTATION_VALUE = 32
    ATTLIST_NONE = 33
    ATTLIST_ELEMENT_NAME = 34
    IMPLIED_ATTRIBUTE_VALUE = 35
    REQUIRED_ATTRIBUTE_VALUE = 36
    DEFAULT_ATTRIBUTE_VALUE = 37
    FIXED_ATTRIBUTE_VALUE = 38
    ELEMENT_NONE = 39
    ELEMENT_NAME = 40
    CONTENT_ANY = 41
    CONTENT_EMPTY = 42
    CONTENT_PCDATA = 43
    GROUP_OPEN = 44
    GROUP_CLOSE = 45
    GROUP_CLOSE_REP = 46
    GROUP_CLOSE_OPT = 47
    GROUP_CLOSE_PLUS = 48
    GROUP_CHOICE = 49
    GROUP_SEQUENCE = 50
    CONTENT_ELEMENT = 51
    CONTENT_ELEMENT_REP = 52
    CONTENT_ELEMENT_OPT = 53
    CONTENT_ELEMENT_PLUS = 54
    PI = 55
    COMMENT = 56
    TEXT_DECL = 57
    IGNORE_SECT = 58
    INNER_PARAM_ENTITY_REF = 59
    PARAM_ENTITY_REF = 60


ATTRIBUTE_TYPES: tuple[str, ...] = (
    "CDATA",
    "ID",
    "IDREF",
    "IDREFS",
    "ENTITY",
    "ENTITIES",
    "NMTOKEN",
    "NMTOKENS",
)


def attribute_type_role(index: int) -> Role:
    """Return the role for the attribute type at ``index`` in ATTRIBUTE_TYPES."""
    if not 0 <= index < len(ATTRIBUTE_TYPES):
        raise ValueError(f"no attribute type at index {index}")
    return Role(Role.ATTRIBUTE_TYPE_CDATA + index)