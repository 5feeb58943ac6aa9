from data_type_registry import (
    DataTypeHandler,
    FailureReason,
    ValidationFailure,
    make_property,
    validate_property,
    validate_property_list,
)

from conftest import NUMBER_TYPE, UNREGISTERED_TYPE


def _paths(failures):
    return [(f.property, f.reason) for f in failures]


def test_duplicate_key_reported_once_and_both_elements_validated(validator, number_type):
    failures = []
    values = [make_property("k", NUMBER_TYPE, 1), make_property("k", NUMBER_TYPE, 2)]

    assert validator.validate_property_list("props", values, failures, container="owner")

    assert failures == [
        ValidationFailure(property="props[1].key", reason=FailureReason.DUPLICATE_KEY, details={"key": "k"})
    ]
    assert number_type == [("props[0]", 1, "owner"), ("props[1]", 2, "owner")]


def test_empty_or_absent_list_is_valid(validator):
    for values in (None, [], ()):
        failures = []
        assert validator.validate_property_list("props", values, failures)
        assert failures == []


def test_non_sequence_list_fails_without_inspecting_further(validator):
    failures = []
    assert not validator.validate_property_list("props", {"key": "k"}, failures)
    assert _paths(failures) == [("props", FailureReason.BE_ARRAY)]


def test_unregistered_type_is_permissive(validator):
    failures = []
    value = make_property("anything", UNREGISTERED_TYPE, {"deeply": ["nested", {"shape": None}]})

    assert validator.validate_property("prop", value, failures)
    assert failures == []


def test_delegated_failure_is_rooted_at_property_name(registry, validator):
    def reject(property_name, value, failures, container=None):
        failures.append(ValidationFailure(property=property_name, reason="custom.rejected"))
        return False

    registry.register(NUMBER_TYPE, lambda: DataTypeHandler(type=NUMBER_TYPE, validate=reject))
    failures = []

    assert validator.validate_property("prop", make_property("k", NUMBER_TYPE, "v"), failures)
    assert _paths(failures) == [("prop", "custom.rejected")]


def test_non_object_property(validator):
    failures = []
    assert not validator.validate_property("prop", "not a record", failures)
    assert _paths(failures) == [("prop", FailureReason.BE_OBJECT)]


def test_structural_checks_do_not_short_circuit(validator):
    failures = []
    assert not validator.validate_property("prop", {"key": "", "type": "Number"}, failures)
    assert _paths(failures) == [
        ("prop.key", FailureReason.BE_TEXT),
        ("prop.type", FailureReason.BE_URL),
        ("prop.value", FailureReason.BE_NOT_EMPTY),
    ]


def test_invalid_type_skips_delegation(registry, validator):
    calls = []
    registry.register("Number", lambda: DataTypeHandler(type="Number", validate=lambda *args: calls.append(args)))

    failures = []
    validator.validate_property("prop", make_property("k", "Number", 1), failures)

    assert calls == []
    assert _paths(failures) == [("prop.type", FailureReason.BE_URL)]


def test_handler_without_validator_is_not_called(registry, validator):
    registry.register(NUMBER_TYPE, lambda: DataTypeHandler(type=NUMBER_TYPE, schema={"type": "number"}))
    failures = []
    assert validator.validate_property("prop", make_property("k", NUMBER_TYPE, "text"), failures)
    assert failures == []


def test_falsy_values_are_not_empty(validator):
    for value in (0, False, "", []):
        failures = []
        assert validator.validate_property("prop", make_property("k", UNREGISTERED_TYPE, value), failures)
        assert failures == []


def test_failures_follow_element_order(validator):
    failures = []
    values = [
        {"key": "a", "type": "bad"},
        "oops",
        make_property("a", UNREGISTERED_TYPE, 1),
    ]

    assert validator.validate_property_list("props", values, failures)
    assert _paths(failures) == [
        ("props[0].type", FailureReason.BE_URL),
        ("props[0].value", FailureReason.BE_NOT_EMPTY),
        ("props[1]", FailureReason.BE_OBJECT),
        ("props[2].key", FailureReason.DUPLICATE_KEY),
    ]


def test_check_property_list_wraps_result(validator):
    values = [make_property("k", UNREGISTERED_TYPE, 1), make_property("k", UNREGISTERED_TYPE, 2)]
    result = validator.check_property_list("props", values)

    assert result.structurally_valid
    assert not result.is_valid
    assert not result
    assert result.reasons_for("props[1].key") == [FailureReason.DUPLICATE_KEY]


def test_check_property_valid(validator):
    result = validator.check_property("prop", make_property("k", UNREGISTERED_TYPE, 1))
    assert result.is_valid
    assert result.failures == []


def test_module_functions_accept_registry(registry, number_type):
    failures = []
    assert validate_property("prop", make_property("k", NUMBER_TYPE, 5), failures, registry=registry)
    assert validate_property_list("props", [make_property("k", NUMBER_TYPE, 6)], failures, registry=registry)
    assert failures == []
    assert [value for _, value, _ in number_type] == [5, 6]
