import pytest

from xmlprolog.prolog import PrologState
from xmlprolog.tokens import Role, Token

S = (Token.PROLOG_S, " ")


def run(tokens, external_entity=False):
    return list(PrologState(external_entity).roles(tokens))


def test_system_doctype_then_instance():
    tokens = [
        (Token.DECL_OPEN, "<!DOCTYPE"),
        S,
        (Token.NAME, "doc"),
        S,
        (Token.NAME, "SYSTEM"),
        S,
        (Token.LITERAL, '"doc.dtd"'),
        (Token.DECL_CLOSE, ">"),
        (Token.INSTANCE_START, "<"),
    ]
    assert run(tokens) == [
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NAME,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_SYSTEM_ID,
        Role.DOCTYPE_CLOSE,
        Role.INSTANCE_START,
    ]


def test_public_doctype():
    tokens = [
        (Token.DECL_OPEN, "<!DOCTYPE"),
        S,
        (Token.NAME, "doc"),
        S,
        (Token.NAME, "PUBLIC"),
        S,
        (Token.LITERAL, '"-//x//y"'),
        S,
        (Token.LITERAL, '"doc.dtd"'),
        (Token.DECL_CLOSE, ">"),
    ]
    roles = run(tokens)
    assert roles[6] is Role.DOCTYPE_PUBLIC_ID
    assert roles[8] is Role.DOCTYPE_SYSTEM_ID
    assert roles[-1] is Role.DOCTYPE_CLOSE


def test_internal_subset_with_entity():
    tokens = [
        (Token.DECL_OPEN, "<!DOCTYPE"),
        S,
        (Token.NAME, "d"),
        S,
        (Token.OPEN_BRACKET, "["),
        (Token.DECL_OPEN, "<!ENTITY"),
        S,
        (Token.NAME, "e"),
        S,
        (Token.LITERAL, '"v"'),
        (Token.DECL_CLOSE, ">"),
        (Token.CLOSE_BRACKET, "]"),
        (Token.DECL_CLOSE, ">"),
        (Token.INSTANCE_START, "<"),
    ]
    assert run(tokens) == [
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_NAME,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_INTERNAL_SUBSET,
        Role.ENTITY_NONE,
        Role.ENTITY_NONE,
        Role.GENERAL_ENTITY_NAME,
        Role.ENTITY_NONE,
        Role.ENTITY_VALUE,
        Role.ENTITY_NONE,
        Role.DOCTYPE_NONE,
        Role.DOCTYPE_CLOSE,
        Role.INSTANCE_START,
    ]


def test_internal_subset_after_declaration_accepts_another():
    tokens = [
        (Token.DECL_OPEN, "<!DOCTYPE"),
        (Token.NAME, "d"),
        (Token.OPEN_BRACKET, "["),
        (Token.DECL_OPEN, "<!ELEMENT"),
        S,
        (Token.NAME, "d"),
        S,
        (Token.NAME, "EMPTY"),
        (Token.DECL_CLOSE, ">"),
        (Token.PARAM_ENTITY_REF, "%p;"),
        (Token.COMMENT, "<!-- c -->"),
        (Token.PI, "<?p?>"),
    ]
    roles = run(tokens)
    assert roles[7] is Role.CONTENT_EMPTY
    assert roles[8] is Role.ELEMENT_NONE
    assert roles[9:] == [Role.PARAM_ENTITY_REF, Role.COMMENT, Role.PI]


def test_unknown_declaration_in_internal_subset_is_error():
    state = PrologState()
    list(state.roles([(Token.DECL_OPEN, "<!DOCTYPE"), (Token.NAME, "d"),
                      (Token.OPEN_BRACKET, "[")]))
    assert state.token_role(Token.DECL_OPEN, "<!BOGUS") is Role.ERROR


def test_prolog_start_tokens():
    assert run([(Token.XML_DECL, "<?xml?>")]) == [Role.XML_DECL]
    assert run([(Token.PI, "<?p?>")]) == [Role.PI]
    assert run([(Token.COMMENT, "<!---->")]) == [Role.COMMENT]


def test_bom_keeps_initial_state_so_xml_decl_still_allowed():
    assert run([(Token.BOM, ""), (Token.XML_DECL, "<?xml?>")]) == [
        Role.NONE,
        Role.XML_DECL,
    ]


def test_xml_decl_after_whitespace_is_error():
    assert run([S, (Token.XML_DECL, "<?xml?>")]) == [Role.NONE, Role.ERROR]


def test_error_state_answers_none():
    state = PrologState()
    assert state.token_role(Token.NAME, "x") is Role.ERROR
    assert state.token_role(Token.INSTANCE_START, "<") is Role.NONE
    assert state.token_role(Token.XML_DECL, "<?xml?>") is Role.NONE


def test_decl_open_that_is_not_doctype_is_error():
    assert run([(Token.DECL_OPEN, "<!ELEMENT")]) == [Role.ERROR]


def test_after_doctype_only_misc_and_instance():
    tokens = [
        (Token.DECL_OPEN, "<!DOCTYPE"),
        (Token.NAME, "d"),
        (Token.DECL_CLOSE, ">"),
        S,
        (Token.COMMENT, "<!---->"),
        (Token.DECL_OPEN, "<!DOCTYPE"),
    ]
    roles = run(tokens)
    assert roles[3:] == [Role.NONE, Role.COMMENT, Role.ERROR]


def test_external_entity_text_decl_and_declaration():
    tokens = [
        (Token.XML_DECL, "<?xml encoding='utf-8'?>"),
        (Token.DECL_OPEN, "<!ENTITY"),
        S,
        (Token.NAME, "e"),
        S,
        (Token.LITERAL, '"v"'),
        (Token.DECL_CLOSE, ">"),
        (Token.COND_SECT_OPEN, "<!["),
        (Token.NAME, "INCLUDE"),
        (Token.OPEN_BRACKET, "["),
        (Token.COND_SECT_CLOSE, "]]>"),
        (Token.NONE, ""),
    ]
    roles = run(tokens, external_entity=True)
    assert roles[0] is Role.TEXT_DECL
    assert roles[5] is Role.ENTITY_VALUE
    assert roles[6:] == [Role.ENTITY_NONE] + [Role.NONE] * 5


def test_external_entity_without_text_decl():
    assert run([(Token.DECL_OPEN, "<!NOTATION")], external_entity=True) == [
        Role.NOTATION_NONE
    ]


def test_ignore_section():
    tokens = [
        (Token.COND_SECT_OPEN, "<!["),
        S,
        (Token.NAME, "IGNORE"),
        S,
        (Token.OPEN_BRACKET, "["),
    ]
    assert run(tokens, external_entity=True)[-1] is Role.IGNORE_SECT


def test_unbalanced_cond_sect_close_is_error():
    assert run([(Token.COND_SECT_CLOSE, "]]>")], external_entity=True) == [
        Role.ERROR
    ]


def test_end_inside_include_section_is_error():
    tokens = [
        (Token.COND_SECT_OPEN, "<!["),
        (Token.NAME, "INCLUDE"),
        (Token.OPEN_BRACKET, "["),
        (Token.NONE, ""),
    ]
    assert run(tokens, external_entity=True)[-1] is Role.ERROR


def test_close_bracket_in_external_subset_is_error():
    assert run([S, (Token.CLOSE_BRACKET, "]")], external_entity=True) == [
        Role.NONE,
        Role.ERROR,
    ]


def test_param_entity_ref_inside_declaration_of_external_entity():
    tokens = [(Token.DECL_OPEN, "<!ENTITY"), (Token.PARAM_ENTITY_REF, "%p;")]
    assert run(tokens, external_entity=True) == [
        Role.ENTITY_NONE,
        Role.INNER_PARAM_ENTITY_REF,
    ]
    assert run([(Token.DECL_OPEN, "<!DOCTYPE"), (Token.NAME, "d"),
                (Token.OPEN_BRACKET, "["), *tokens])[-1] is Role.ERROR


def test_reset_returns_to_document_start():
    state = PrologState(external_entity=True)
    assert state.document_entity is False
    state.reset()
    assert state.document_entity is True
    assert state.token_role(Token.XML_DECL, "<?xml?>") is Role.XML_DECL


def test_reset_external_entity_after_error():
    state = PrologState()
    assert state.token_role(Token.NAME, "x") is Role.ERROR
    state.reset_external_entity()
    assert state.token_role(Token.XML_DECL, "<?xml?>") is Role.TEXT_DECL


def test_roles_accepts_bare_tokens():
    assert run([Token.PROLOG_S, Token.INSTANCE_START]) == [
        Role.NONE,
        Role.INSTANCE_START,
    ]


def test_token_role_rejects_non_token():
    with pytest.raises(TypeError):
        PrologState().token_role("NAME", "x")