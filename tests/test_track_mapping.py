import logging

import pytest
from pydantic import ValidationError

from spotiflac_models.core.config import settings
from spotiflac_models.core.errors import InvalidJson, TypeMismatch, UnknownEnumValue
from spotiflac_models.models.enums import AlbumType, ModelObjectType, ReleaseDatePrecision
from spotiflac_models.models.specification import AlbumSimplified, ArtistSimplified, Track

SAMPLE_TRACK = {
    "album": {
        "album_type": "single",
        "artists": [
            {
                "external_urls": {"spotify": "https://open.spotify.com/artist/6sFIWsNpZYqfjUpaCgueju"},
                "href": "https://api.spotify.com/v1/artists/6sFIWsNpZYqfjUpaCgueju",
                "id": "6sFIWsNpZYqfjUpaCgueju",
                "name": "Carly Rae Jepsen",
                "type": "artist",
                "uri": "spotify:artist:6sFIWsNpZYqfjUpaCgueju",
            }
        ],
        "available_markets": ["DE", "US", "XK"],
        "external_urls": {"spotify": "https://open.spotify.com/album/0tGPJ0bkWOUmH7MEOR77qc"},
        "href": "https://api.spotify.com/v1/albums/0tGPJ0bkWOUmH7MEOR77qc",
        "id": "0tGPJ0bkWOUmH7MEOR77qc",
        "images": [
            {"height": 640, "url": "https://i.scdn.co/image/ab67616d0000b273", "width": 640},
            {"height": 64, "url": "https://i.scdn.co/image/ab67616d00004851", "width": 64},
        ],
        "name": "Cut To The Feeling",
        "release_date": "2017-05-26",
        "release_date_precision": "day",
        "total_tracks": 1,
        "type": "album",
        "uri": "spotify:album:0tGPJ0bkWOUmH7MEOR77qc",
    },
    "artists": [
        {
            "external_urls": {"spotify": "https://open.spotify.com/artist/6sFIWsNpZYqfjUpaCgueju"},
            "href": "https://api.spotify.com/v1/artists/6sFIWsNpZYqfjUpaCgueju",
            "id": "6sFIWsNpZYqfjUpaCgueju",
            "name": "Carly Rae Jepsen",
            "type": "artist",
            "uri": "spotify:artist:6sFIWsNpZYqfjUpaCgueju",
        }
    ],
    "available_markets": ["DE", "US", "XK"],
    "disc_number": 1,
    "duration_ms": 207959,
    "explicit": False,
    "external_ids": {"isrc": "USUM71703861"},
    "external_urls": {"spotify": "https://open.spotify.com/track/11dFghVXANMlKmJXsNCbNl"},
    "href": "https://api.spotify.com/v1/tracks/11dFghVXANMlKmJXsNCbNl",
    "id": "11dFghVXANMlKmJXsNCbNl",
    "is_local": False,
    "is_playable": True,
    "linked_from": {
        "external_urls": {"spotify": "https://open.spotify.com/track/6kLCHFM39wkFjOuyPGLGeQ"},
        "href": "https://api.spotify.com/v1/tracks/6kLCHFM39wkFjOuyPGLGeQ",
        "id": "6kLCHFM39wkFjOuyPGLGeQ",
        "type": "track",
        "uri": "spotify:track:6kLCHFM39wkFjOuyPGLGeQ",
    },
    "restrictions": {"reason": "market"},
    "name": "Cut To The Feeling",
    "popularity": 63,
    "preview_url": "https://p.scdn.co/mp3-preview/3eb16018c2a700240e9dfb8817b6f2d041f15eb1",
    "track_number": 1,
    "type": "track",
    "uri": "spotify:track:11dFghVXANMlKmJXsNCbNl",
}


def test_from_json_builds_full_track():
    track = Track.from_json(SAMPLE_TRACK)

    assert isinstance(track, Track)
    assert track.id == "11dFghVXANMlKmJXsNCbNl"
    assert track.name == "Cut To The Feeling"
    assert track.duration_ms == 207959
    assert track.explicit is False
    assert track.is_playable is True
    assert track.type is ModelObjectType.TRACK
    assert track.available_markets == ("DE", "US", "XK")
    assert track.external_ids.isrc == "USUM71703861"
    assert track.external_ids.upc is None
    assert track.linked_from.id == "6kLCHFM39wkFjOuyPGLGeQ"
    assert track.restrictions.reason == "market"

    album = track.album
    assert isinstance(album, AlbumSimplified)
    assert album.album_type is AlbumType.SINGLE
    assert album.release_date_precision is ReleaseDatePrecision.DAY
    assert [image.width for image in album.images] == [640, 64]

    assert len(track.artists) == 1
    artist = track.artists[0]
    assert isinstance(artist, ArtistSimplified)
    assert artist.name == "Carly Rae Jepsen"
    assert artist.type is ModelObjectType.ARTIST


def test_none_root_maps_to_none():
    assert Track.from_json(None) is None


def test_empty_object_leaves_every_field_absent():
    track = Track.from_json({})

    assert track is not None
    assert all(getattr(track, name) is None for name in Track.model_fields)


def test_explicit_null_is_same_as_missing_key():
    assert Track.from_json({"name": None, "album": None, "artists": None}) == Track.from_json({})


def test_empty_collection_is_not_absent():
    assert Track.from_json({"available_markets": []}).available_markets == ()
    assert Track.from_json({"artists": []}).artists == ()
    assert Track.from_json({}).available_markets is None


def test_empty_string_is_not_absent():
    track = Track.from_json({"name": "", "popularity": 0})

    assert track.name == ""
    assert track.popularity == 0


def test_enum_tags_are_case_insensitive():
    upper = Track.from_json({"type": "TRACK"})
    lower = Track.from_json({"type": "track"})

    assert upper.type is ModelObjectType.TRACK
    assert upper == lower


def test_unknown_enum_tag_fails():
    with pytest.raises(UnknownEnumValue) as excinfo:
        Track.from_json({"type": "bogus"})

    assert excinfo.value.model == "Track"
    assert excinfo.value.field == "type"
    assert excinfo.value.value == "bogus"


def test_non_string_enum_tag_is_a_type_mismatch():
    with pytest.raises(TypeMismatch):
        Track.from_json({"type": 7})


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"duration_ms": "207959"}, "duration_ms"),
        ({"duration_ms": True}, "duration_ms"),
        ({"explicit": "false"}, "explicit"),
        ({"name": 42}, "name"),
        ({"album": "0tGPJ0bkWOUmH7MEOR77qc"}, "album"),
        ({"artists": "Carly Rae Jepsen"}, "artists"),
        ({"artists": [None]}, "artists.0"),
        ({"available_markets": ["usa"]}, "available_markets.0"),
    ],
)
def test_wrong_json_kind_is_a_type_mismatch(payload, field):
    with pytest.raises(TypeMismatch) as excinfo:
        Track.from_json(payload)

    assert excinfo.value.field == field
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_non_object_root_is_a_type_mismatch():
    with pytest.raises(TypeMismatch) as excinfo:
        Track.from_json(["not", "an", "object"])

    assert excinfo.value.field is None


def test_nested_failure_reports_full_path():
    payload = {"album": {"artists": [{"id": "ar1", "type": "bogus"}]}}

    with pytest.raises(UnknownEnumValue) as excinfo:
        Track.from_json(payload)

    assert excinfo.value.field == "album.artists.0.type"


def test_multiple_failures_are_counted_in_message():
    with pytest.raises(TypeMismatch) as excinfo:
        Track.from_json({"name": 1, "uri": 2})

    assert "(and 1 more)" in str(excinfo.value)


def test_nested_composition():
    track = Track.from_json({"album": {"id": "a1"}, "artists": [{"id": "ar1"}]})

    assert track.album.id == "a1"
    assert len(track.artists) == 1
    assert track.artists[0].id == "ar1"
    assert AlbumSimplified.from_json(track.album.to_json()) == track.album
    assert ArtistSimplified.from_json(track.artists[0].to_json()) == track.artists[0]


def test_unknown_keys_are_ignored():
    track = Track.from_json({"id": "t1", "content_rating": "explicit"})

    assert track.id == "t1"
    assert not hasattr(track, "content_rating")


def test_mapping_is_deterministic():
    first = Track.from_json(SAMPLE_TRACK)
    second = Track.from_json(SAMPLE_TRACK)

    assert first == second
    assert first is not second
    assert hash(first) == hash(second)


def test_round_trip_through_wire_format():
    track = Track.from_json(SAMPLE_TRACK)

    assert track.to_json() == SAMPLE_TRACK
    assert Track.from_json(track.to_json()) == track


def test_to_json_leaves_out_absent_fields():
    assert Track.from_json({"id": "t1", "available_markets": []}).to_json() == {
        "id": "t1",
        "available_markets": [],
    }


def test_records_are_immutable():
    track = Track.from_json(SAMPLE_TRACK)

    with pytest.raises(ValidationError):
        track.name = "Something else"
    with pytest.raises(ValidationError):
        track.album.name = "Something else"
    assert isinstance(track.artists, tuple)


def test_from_json_string():
    track = Track.from_json_string('{"id": "t1", "type": "Track", "duration_ms": 1000}')

    assert track.id == "t1"
    assert track.type is ModelObjectType.TRACK
    assert Track.from_json_string("null") is None


def test_from_json_string_rejects_malformed_text():
    with pytest.raises(InvalidJson):
        Track.from_json_string("{not json")


def test_from_json_array():
    tracks = Track.from_json_array([{"id": "t1"}, {"id": "t2"}])

    assert [track.id for track in tracks] == ["t1", "t2"]
    assert Track.from_json_array([]) == ()
    assert Track.from_json_array(None) is None


def test_from_json_array_rejects_objects():
    with pytest.raises(TypeMismatch):
        Track.from_json_array({"id": "t1"})


def test_mapping_failure_is_logged(caplog):
    caplog.set_level(logging.WARNING, logger="spotiflac_models")

    with pytest.raises(TypeMismatch):
        Track.from_json({"duration_ms": "long"})

    assert "Failed to map Track" in caplog.text


def test_mapping_failure_logging_can_be_disabled(caplog, monkeypatch):
    monkeypatch.setattr(settings, "log_mapping_failures", False)
    caplog.set_level(logging.WARNING, logger="spotiflac_models")

    with pytest.raises(TypeMismatch):
        Track.from_json({"duration_ms": "long"})

    assert caplog.text == ""
