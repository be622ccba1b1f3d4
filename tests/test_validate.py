import pytest

from modinha import Modinha, ValidationError, validate


def paths(result):
    return [e.path for e in result.errors]


def test_valid_subject(user_schema):
    result = validate({"name": "ana", "role": "admin", "prefs": {"theme": "x"}}, user_schema)
    assert result.valid and bool(result)
    assert result.raise_for_errors() is result


def test_missing_required(user_schema):
    result = validate({}, user_schema)
    assert not result.valid
    assert paths(result) == ["name"]
    assert str(result.errors[0]) == '"name" is missing.'


def test_type_enum_and_nested_errors():
    schema = {
        "age": {"type": "integer", "minimum": 0, "maximum": 150},
        "nick": {"type": ["string", "null"], "pattern": "^[a-z]+$"},
        "role": {"enum": ["user", "admin"]},
        "prefs": {"properties": {"size": {"type": "number", "required": True}}},
    }
    result = validate({"age": 200, "nick": "Ana", "role": "root", "prefs": {}}, schema)
    assert paths(result) == ["age", "nick", "role", "prefs.size"]
    messages = [e.message for e in result.errors]
    assert messages[0] == '"age" must be a number between 0 and 150'
    assert messages[1] == '"nick" must be a string matching regex "^[a-z]+$"'


def test_type_checked_before_range():
    result = validate({"age": "old"}, {"age": {"type": "integer", "minimum": 0}})
    assert [e.message for e in result.errors] == ['"age" must be integer']


def test_nested_must_be_object():
    result = validate({"prefs": 3}, {"prefs": {"properties": {}}})
    assert [e.message for e in result.errors] == ['"prefs" must be an object']


def test_null_allowed_by_type():
    assert validate({"nick": None}, {"nick": {"type": ["string", "null"]}}).valid


def test_raise_for_errors():
    result = validate({}, {"a": {"required": True}})
    with pytest.raises(ValidationError) as info:
        result.raise_for_errors()
    assert info.value.result is result
    assert str(info.value) == '"a" is missing.'


def test_definition_and_instance_entry_points(User):
    assert not User.validate({"role": "root"}).valid
    user = User.initialize({"name": "ana"})
    assert user.validate().valid
    user["role"] = "root"
    assert paths(user.validate()) == ["role"]


def test_validation_error_is_reexported():
    assert Modinha.ValidationError is ValidationError
