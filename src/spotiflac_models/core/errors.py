from typing import Any, Optional


class ModelMappingError(Exception):
    """A JSON payload could not be turned into a model object."""

    def __init__(self, model: str, field: Optional[str], value: Any, message: str):
        where = f"{model}.{field}" if field else model
        super().__init__(f"{where}: {message}")
        self.model = model
        self.field = field
        self.value = value
        self.message = message


class TypeMismatch(ModelMappingError):
    """The JSON value has the wrong kind for the declared field type."""


class UnknownEnumValue(ModelMappingError):
    """A tag string (or integer) is not part of the closed enumeration."""


class UnsupportedModelType(ModelMappingError):
    """A valid type tag that no model class is registered for."""


class InvalidJson(ModelMappingError):
    """Raw text handed to a mapper is not a JSON document."""
