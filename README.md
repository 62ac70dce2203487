# xmlprolog

`xmlprolog` works out what each token of an XML document's prolog, or of an
external DTD subset, means at the place where it appears. A tokenizer can say
"this is a name" or "this is a literal". The role machine goes further and
says "this name is the element being declared" or "this literal is the system
identifier of an external entity".

The package also provides two character tables that go with this work:

- a test for XML name-start and name characters;
- a classifier for the bytes of UTF-8 input.

## Installing

```
pip install xmlprolog
```

To run the tests as well:

```
pip install "xmlprolog[test]"
pytest
```

The package has no runtime dependencies.

## Modules

- `xmlprolog.tokens` holds the `Token` enumeration (the kinds of token the
  machine tells apart) and the `Role` integer enumeration (the roles it
  reports). It also holds `ATTRIBUTE_TYPES`, the tuple
  `("CDATA", "ID", "IDREF", "IDREFS", "ENTITY", "ENTITIES", "NMTOKEN", "NMTOKENS")`,
  and `attribute_type_role(index)`, which returns the role for the type at that
  position and raises `ValueError` for an index outside the tuple.
- `xmlprolog.namechars` provides `is_name_start_char(char)`,
  `is_name_char(char)` and `is_valid_name(text)`.
- `xmlprolog.bytetypes` provides the `ByteType` enumeration,
  `utf8_byte_type(byte)` and `sequence_length(byte)`.
- `xmlprolog.declarations` holds `DeclarationHandlers`, the state handlers
  for `ENTITY`, `NOTATION`, `ATTLIST` and `ELEMENT` declarations. It is a
  base class for `PrologState`; it is not used on its own.
- `xmlprolog.prolog` holds `PrologState`, the state machine you feed tokens
  to. It covers the document prolog, the document type declaration, the
  internal subset, the external subset and `INCLUDE`/`IGNORE` conditional
  sections.

## Using the role machine

Each token is given as a `Token` kind together with its source text. For
declaration-open tokens the text includes the leading `<!`, and for
`POUND_NAME` tokens it includes the leading `#`, as a tokenizer would produce
them. Keywords such as `DOCTYPE`, `SYSTEM` or `#PCDATA` are compared exactly,
with case significant.

```python
from xmlprolog.prolog import PrologState
from xmlprolog.tokens import Token

state = PrologState()
tokens = [
    (Token.DECL_OPEN, "<!DOCTYPE"),
    (Token.PROLOG_S, " "),
    (Token.NAME, "doc"),
    (Token.PROLOG_S, " "),
    (Token.OPEN_BRACKET, "["),
    (Token.DECL_OPEN, "<!ELEMENT"),
    (Token.PROLOG_S, " "),
    (Token.NAME, "doc"),
    (Token.PROLOG_S, " "),
    (Token.OPEN_PAREN, "("),
    (Token.POUND_NAME, "#PCDATA"),
    (Token.CLOSE_PAREN, ")"),
    (Token.DECL_CLOSE, ">"),
    (Token.CLOSE_BRACKET, "]"),
    (Token.DECL_CLOSE, ">"),
    (Token.INSTANCE_START, "<"),
]

print([role.name for role in state.roles(tokens)])
```

This prints:

```
['DOCTYPE_NONE', 'DOCTYPE_NONE', 'DOCTYPE_NAME', 'DOCTYPE_NONE',
 'DOCTYPE_INTERNAL_SUBSET', 'ELEMENT_NONE', 'ELEMENT_NONE', 'ELEMENT_NAME',
 'ELEMENT_NONE', 'GROUP_OPEN', 'CONTENT_PCDATA', 'GROUP_CLOSE',
 'ELEMENT_NONE', 'DOCTYPE_NONE', 'DOCTYPE_CLOSE', 'INSTANCE_START']
```

- `token_role(tok, text="")` handles one token and returns its `Role`. It
  raises `TypeError` if `tok` is not a `Token`.
- `roles(tokens)` is a generator over an iterable whose items are either
  `(tok, text)` pairs or bare `Token` values (taken to have empty text).

A token that is not allowed where it appears yields `Role.ERROR`. After that
the machine stays in its error state and answers every later token with
`Role.NONE`. The one exception: when parsing an external entity, a
parameter-entity reference in a place where nothing else fits yields
`Role.INNER_PARAM_ENTITY_REF` instead of an error, and the state is kept.
After `INSTANCE_START` the prolog is over, and later tokens also give
`Role.NONE`.

To parse an external DTD subset or external parameter entity, create the
state with `PrologState(external_entity=True)`. An XML declaration as its
first token gives `Role.TEXT_DECL`. Conditional sections are recognised only
there: `INCLUDE` sections are tracked by depth, so an unmatched
`COND_SECT_CLOSE`, or the end of input (`Token.NONE`) inside an open
`INCLUDE` section, is an error. An `IGNORE` section's opening bracket gives
`Role.IGNORE_SECT`.

`reset()` starts over at the beginning of a document entity.
`reset_external_entity()` starts over at the beginning of an external entity.

## Character tables

```python
from xmlprolog.namechars import is_valid_name, is_name_start_char
from xmlprolog.bytetypes import utf8_byte_type, sequence_length, ByteType

is_valid_name("xml:lang")        # True
is_name_start_char("1")          # False
utf8_byte_type(0xC3)             # ByteType.LEAD2
sequence_length(0xE2)            # 3
```

The name tests follow the XML 1.0 (fourth edition) name-character classes
for the Basic Multilingual Plane. Characters above U+FFFF are never name
characters. `is_name_start_char` and `is_name_char` raise `ValueError` unless
they are given exactly one character. `is_valid_name` returns `False` for an
empty string.

`utf8_byte_type` accepts any value from 0 to 255, and raises `ValueError`
for anything else:

| bytes       | type       |
|-------------|------------|
| 0x00–0x7F   | `ASCII`    |
| 0x80–0xBF   | `TRAIL`    |
| 0xC0–0xDF   | `LEAD2`    |
| 0xE0–0xEF   | `LEAD3`    |
| 0xF0–0xF4   | `LEAD4`    |
| 0xF5–0xFD   | `NONXML`   |
| 0xFE–0xFF   | `MALFORM`  |

`sequence_length` returns 1, 2, 3 or 4 for bytes that can start a sequence.
It raises `ValueError` for trail, non-XML and malformed bytes.

## What this package does not do

There is no tokenizer. You must split the input into `Token` values yourself.
There is also no XML parser: nothing reads element content, expands entities,
decodes encodings or checks validity. The role machine does not check the
text of literals. It also does not check that `,` and `|` are not mixed
within one content-model group. There is no command-line tool.