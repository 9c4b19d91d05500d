# spotiflac_models/models/registry.py
"""
Dispatch on the ``type`` tag for endpoints that mix resource kinds,
e.g. personalization top items (artists or tracks).
"""
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from spotiflac_models.core.errors import TypeMismatch, UnknownEnumValue, UnsupportedModelType
from spotiflac_models.models.base import AbstractModelObject, report_failure
from spotiflac_models.models.enums import ModelObjectType
from spotiflac_models.models.specification import Album, Artist, AudioFeatures, Track

log = logging.getLogger(__name__)

MODEL_TYPES: Dict[ModelObjectType, Type[AbstractModelObject]] = {
    ModelObjectType.ALBUM: Album,
    ModelObjectType.ARTIST: Artist,
    ModelObjectType.AUDIO_FEATURES: AudioFeatures,
    ModelObjectType.TRACK: Track,
}


def _fail(error):
    report_failure(error)
    return error


def model_class_for(tag: str) -> Type[AbstractModelObject]:
    try:
        object_type = ModelObjectType[tag.upper()]
    except KeyError:
        raise _fail(UnknownEnumValue("ModelObjectType", "type", tag, f"'{tag}' is not a known ModelObjectType")) from None
    if object_type not in MODEL_TYPES:
        raise _fail(UnsupportedModelType("ModelObjectType", "type", tag, f"no model registered for '{object_type.value}'"))
    return MODEL_TYPES[object_type]


def from_json_by_type(json_object: Any) -> Optional[AbstractModelObject]:
    if json_object is None:
        return None
    if not isinstance(json_object, Mapping):
        raise _fail(TypeMismatch("ModelObjectType", None, json_object, "expected a JSON object"))

    tag = json_object.get("type")
    if not isinstance(tag, str):
        raise _fail(TypeMismatch("ModelObjectType", "type", tag, "a string type tag is required to pick a model"))

    model_cls = model_class_for(tag)
    log.debug(f"Dispatching type '{tag}' to {model_cls.__name__}")
    return model_cls.from_json(json_object)


def from_json_array_by_type(json_array: Any) -> Optional[Tuple[Optional[AbstractModelObject], ...]]:
    if json_array is None:
        return None
    if not isinstance(json_array, (list, tuple)):
        raise _fail(TypeMismatch("ModelObjectType", None, json_array, "expected a JSON array"))
    return tuple(from_json_by_type(item) for item in json_array)
