# spotiflac_models/models/base.py
"""
Shared plumbing for every API model object.

Each model is a frozen pydantic model whose fields carry the wire names of
the Spotify Web API. On top of that every model gets:

* ``Model.builder()`` - a fluent, mutable staging object with one
  ``set_<field>`` method per field and a terminal ``build()``;
* ``Model.from_json(obj)`` - mapping of an already decoded JSON value,
  ``None`` in, ``None`` out;
* ``model.to_json()`` - the inverse, in wire format.

Absent values are ``None``. An explicit JSON ``null`` and a missing key are
the same thing; an empty string or an empty array are not.
"""

import json
import logging
import typing
from functools import lru_cache, partial
from typing import Annotated, Any, Dict, FrozenSet, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints, ValidationError
from pydantic_core import PydanticCustomError

from spotiflac_models.core.config import settings
from spotiflac_models.core.errors import InvalidJson, ModelMappingError, TypeMismatch, UnknownEnumValue

log = logging.getLogger(__name__)

M = TypeVar("M", bound="AbstractModelObject")

# pydantic error types that mean "not one of the known tags"
_ENUM_ERROR_TYPES = {"enum", "unknown_enum_value"}

# ISO 3166-1 alpha-2 shape; the API also uses user-assigned codes such as XK
CountryCode = Annotated[str, StringConstraints(strict=True, pattern=r"^[A-Z]{2}$")]


def enum_by_name(enum_cls):
    """
    Annotated enum type matched by upper-cased member name.

    ``"track"``, ``"Track"`` and ``"TRACK"`` all resolve to
    ``ModelObjectType.TRACK``. Anything that is not a string is rejected
    before pydantic gets a chance to coerce it.
    """

    def _validate(value):
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "enum_tag_type",
                "{enum} tag must be a string",
                {"enum": enum_cls.__name__},
            )
        try:
            return enum_cls[value.upper()]
        except KeyError:
            raise PydanticCustomError(
                "unknown_enum_value",
                "'{tag}' is not a known {enum}",
                {"tag": value, "enum": enum_cls.__name__},
            ) from None

    return Annotated[enum_cls, BeforeValidator(_validate)]


def enum_by_value(enum_cls):
    """
    Annotated integer enum type matched by value.

    Only JSON integers are accepted; ``"1"``, ``1.0`` and ``true`` are
    type mismatches rather than coerced members.
    """

    def _validate(value):
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, int) or isinstance(value, bool):
            raise PydanticCustomError(
                "enum_tag_type",
                "{enum} value must be an integer",
                {"enum": enum_cls.__name__},
            )
        try:
            return enum_cls(value)
        except ValueError:
            raise PydanticCustomError(
                "unknown_enum_value",
                "{value} is not a known {enum}",
                {"value": value, "enum": enum_cls.__name__},
            ) from None

    return Annotated[enum_cls, BeforeValidator(_validate)]


def _is_collection(annotation) -> bool:
    origin = typing.get_origin(annotation)
    if origin is typing.Union:
        return any(_is_collection(arg) for arg in typing.get_args(annotation) if arg is not type(None))
    return origin is tuple


@lru_cache(maxsize=None)
def collection_fields(model_cls) -> FrozenSet[str]:
    """Names of the multi-valued fields of a model class."""
    return frozenset(
        name for name, info in model_cls.model_fields.items() if _is_collection(info.annotation)
    )


def mapping_error(model_cls, exc: ValidationError) -> ModelMappingError:
    """Translate the first pydantic error into our own taxonomy."""
    errors = exc.errors()
    first = errors[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    error_cls = UnknownEnumValue if first["type"] in _ENUM_ERROR_TYPES else TypeMismatch
    message = first["msg"]
    if len(errors) > 1:
        message = f"{message} (and {len(errors) - 1} more)"
    return error_cls(model_cls.__name__, field, first.get("input"), message)


def report_failure(error: ModelMappingError) -> None:
    if settings.log_mapping_failures:
        log.warning(f"Failed to map {error.model}: {error}")


class ModelBuilder(Generic[M]):
    """
    Mutable staging area for one model object.

    Setters are generated from the model's fields: ``set_duration_ms(...)``,
    ``set_available_markets(...)`` and so on. Each returns the builder so
    calls can be chained; calling one twice keeps the last value.
    Multi-valued setters take varargs or a single list/tuple. ``None``
    puts the field back to absent. Nothing is validated.
    """

    def __init__(self, model_cls: Type[M]):
        self._model_cls = model_cls
        self._values: Dict[str, Any] = {}

    def __getattr__(self, name: str):
        # __dict__ is still empty while copy/pickle probe the instance
        model_cls = self.__dict__.get("_model_cls")
        if model_cls is not None and name.startswith("set_"):
            field_name = name[len("set_"):]
            if field_name in model_cls.model_fields:
                return partial(self._set, field_name)
        raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")

    def __dir__(self):
        setters = {f"set_{name}" for name in self._model_cls.model_fields}
        return sorted(set(super().__dir__()) | setters)

    def __repr__(self):
        return f"<{type(self).__name__} {self._model_cls.__name__} {self._values!r}>"

    def _set(self, field_name: str, *values) -> "ModelBuilder[M]":
        if field_name in collection_fields(self._model_cls):
            if len(values) == 1 and (values[0] is None or isinstance(values[0], (list, tuple))):
                value = None if values[0] is None else tuple(values[0])
            else:
                value = tuple(values)
        elif len(values) != 1:
            raise TypeError(f"set_{field_name}() takes exactly one value ({len(values)} given)")
        else:
            value = values[0]

        if value is None:
            self._values.pop(field_name, None)
        else:
            self._values[field_name] = value
        return self

    def build(self) -> M:
        return self._model_cls.model_construct(**self._values)


class AbstractModelObject(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def builder(cls: Type[M]) -> ModelBuilder[M]:
        return ModelBuilder(cls)

    @classmethod
    def from_json(cls: Type[M], json_object: Any) -> Optional[M]:
        """
        Build an instance from a decoded JSON object.

        Returns ``None`` for a ``None`` root. Raises ``TypeMismatch`` or
        ``UnknownEnumValue`` when a present value does not fit its field.
        """
        if json_object is None:
            return None
        try:
            return cls.model_validate(json_object)
        except ValidationError as exc:
            error = mapping_error(cls, exc)
            report_failure(error)
            raise error from exc

    @classmethod
    def from_json_array(cls: Type[M], json_array: Any) -> Optional[Tuple[Optional[M], ...]]:
        if json_array is None:
            return None
        if not isinstance(json_array, (list, tuple)):
            error = TypeMismatch(
                cls.__name__, None, json_array,
                f"expected a JSON array, got {type(json_array).__name__}",
            )
            report_failure(error)
            raise error
        return tuple(cls.from_json(item) for item in json_array)

    @classmethod
    def from_json_string(cls: Type[M], text: str) -> Optional[M]:
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as exc:
            error = InvalidJson(cls.__name__, None, text, str(exc))
            report_failure(error)
            raise error from exc
        return cls.from_json(payload)

    def to_json(self) -> Dict[str, Any]:
        """Wire-format dict; absent fields are left out."""
        # Builder output is unvalidated, e.g. a raw "track" string in an enum field
        return self.model_dump(mode="json", exclude_none=True, warnings=False)
