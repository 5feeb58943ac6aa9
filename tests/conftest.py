import pytest

from data_type_registry import DataTypeHandler, PropertyValidator, create_data_type_handler_factory
from data_type_registry.bootstrap import register_all_types
from data_type_registry.config import RegistryConfig
from data_type_registry.models import json_schema_loader


NUMBER_TYPE = "https://example.org/types/Number"
UNREGISTERED_TYPE = "https://example.org/types/Unknown"


@pytest.fixture(autouse=True)
def _clear_schema_cache():
    json_schema_loader.clear_cache()
    yield
    json_schema_loader.clear_cache()


@pytest.fixture
def registry():
    # Isolated from the process-wide registry
    return create_data_type_handler_factory()


@pytest.fixture
def validator(registry):
    return PropertyValidator(registry)


@pytest.fixture
def builtin_registry(registry):
    return register_all_types(registry, RegistryConfig(declarations_dir=None))


@pytest.fixture
def builtin_validator(builtin_registry):
    return PropertyValidator(builtin_registry)


@pytest.fixture
def number_type(registry):
    """Registers NUMBER_TYPE with a validator recording every value it sees."""
    seen = []

    def validate(property_name, value, failures, container=None):
        seen.append((property_name, value, container))
        return True

    registry.register(NUMBER_TYPE, lambda: DataTypeHandler(type=NUMBER_TYPE, validate=validate))
    return seen
