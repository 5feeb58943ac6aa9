import asyncio

import pytest

from data_type_registry import (
    DataTypeHandler,
    DataTypeHandlerFactory,
    FailureReason,
    ValidationFailure,
    ValidationResult,
    make_property,
    validate_property,
)


def test_schema_given_directly():
    handler = DataTypeHandler(type="t", schema={"type": "string"})
    assert not handler.has_deferred_schema
    assert handler.get_schema() == {"type": "string"}
    assert asyncio.run(handler.resolve_schema()) == {"type": "string"}


def test_schema_behind_sync_accessor():
    handler = DataTypeHandler(type="t", schema=lambda: {"type": "integer"})
    assert handler.has_deferred_schema
    assert handler.get_schema() == {"type": "integer"}
    assert asyncio.run(handler.resolve_schema()) == {"type": "integer"}


def test_schema_absent():
    handler = DataTypeHandler(type="t")
    assert handler.get_schema() is None
    assert asyncio.run(handler.resolve_schema()) is None


def test_validation_result_flags():
    failure = ValidationFailure(property="p", reason=FailureReason.BE_TEXT)

    assert ValidationResult(structurally_valid=True).is_valid
    assert not ValidationResult(structurally_valid=True, failures=[failure]).is_valid
    assert not ValidationResult(structurally_valid=False).is_valid


@pytest.fixture
def default_registry_type():
    type_id = "https://example.org/types/Always"
    DataTypeHandlerFactory.register(type_id, lambda: DataTypeHandler(
        type=type_id,
        validate=lambda name, value, failures, container=None: failures.append(
            ValidationFailure(property=name, reason="always")
        ),
    ))
    yield type_id
    DataTypeHandlerFactory.unregister(type_id)


def test_module_function_uses_process_wide_registry(default_registry_type):
    failures = []
    assert validate_property("p", make_property("k", default_registry_type, 1), failures)
    assert [(f.property, f.reason) for f in failures] == [("p", "always")]
