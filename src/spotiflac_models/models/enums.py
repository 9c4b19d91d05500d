# spotiflac_models/models/enums.py
from enum import Enum, IntEnum

from spotiflac_models.models.base import enum_by_name, enum_by_value


class ModelObjectType(str, Enum):
    """Resource-type tags found in the ``type`` field of API objects."""
    ALBUM = "album"
    ARTIST = "artist"
    AUDIO_FEATURES = "audio_features"
    EPISODE = "episode"
    GENRE = "genre"
    PLAYLIST = "playlist"
    PLAYLIST_TRACK = "playlist_track"
    SHOW = "show"
    TRACK = "track"
    USER = "user"


class AlbumType(str, Enum):
    ALBUM = "album"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"
    SINGLE = "single"


class ReleaseDatePrecision(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Modality(IntEnum):
    """Musical mode as reported by audio analysis (0 = minor, 1 = major)."""
    MINOR = 0
    MAJOR = 1


# Field types: tag strings matched case-insensitively against member names.
ObjectTypeTag = enum_by_name(ModelObjectType)
AlbumTypeTag = enum_by_name(AlbumType)
ReleaseDatePrecisionTag = enum_by_name(ReleaseDatePrecision)

# Integer-valued on the wire (0/1); strings, floats and booleans are rejected.
ModalityValue = enum_by_value(Modality)
