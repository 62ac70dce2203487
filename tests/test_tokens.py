import pytest

from xmlprolog.tokens import ATTRIBUTE_TYPES, Role, attribute_type_role


def test_first_attribute_type_is_cdata():
    assert attribute_type_role(0) is Role.ATTRIBUTE_TYPE_CDATA


def test_last_attribute_type_is_nmtokens():
    assert attribute_type_role(len(ATTRIBUTE_TYPES) - 1) is Role.ATTRIBUTE_TYPE_NMTOKENS


def test_attribute_type_roles_match_names():
    for index, keyword in enumerate(ATTRIBUTE_TYPES):
        assert attribute_type_role(index).name == "ATTRIBUTE_TYPE_" + keyword


def test_attribute_type_roles_are_consecutive():
    first = attribute_type_role(0).value
    for index in range(len(ATTRIBUTE_TYPES)):
        assert attribute_type_role(index).value == first + index


def test_attribute_type_roles_sit_between_name_and_enum_value():
    assert attribute_type_role(0).value == Role.ATTRIBUTE_NAME.value + 1
    last = attribute_type_role(len(ATTRIBUTE_TYPES) - 1)
    assert last.value + 1 == Role.ATTRIBUTE_ENUM_VALUE.value


def test_attribute_type_roles_are_distinct():
    roles = {attribute_type_role(i) for i in range(len(ATTRIBUTE_TYPES))}
    assert len(roles) == len(ATTRIBUTE_TYPES)


@pytest.mark.parametrize("index", [-1, len(ATTRIBUTE_TYPES)])
def test_attribute_type_role_out_of_range(index):
    with pytest.raises(ValueError):
        attribute_type_role(index)