# spotiflac_models/models/specification.py
"""
Objects of the Spotify Web API object model: artists, albums, tracks,
audio features, paging envelopes and search results.
"""
from typing import Generic, Optional, Tuple, TypeVar

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

from spotiflac_models.models.base import AbstractModelObject, CountryCode
from spotiflac_models.models.enums import (
    AlbumTypeTag,
    ModalityValue,
    ObjectTypeTag,
    ReleaseDatePrecisionTag,
)
from spotiflac_models.models.miscellaneous import Restrictions

T = TypeVar("T", bound=AbstractModelObject)


class ExternalId(AbstractModelObject):
    isrc: Optional[StrictStr] = None
    ean: Optional[StrictStr] = None
    upc: Optional[StrictStr] = None


class ExternalUrl(AbstractModelObject):
    spotify: Optional[StrictStr] = None


class Image(AbstractModelObject):
    height: Optional[StrictInt] = None
    url: Optional[StrictStr] = None
    width: Optional[StrictInt] = None


class Followers(AbstractModelObject):
    href: Optional[StrictStr] = None
    total: Optional[StrictInt] = None


class ArtistSimplified(AbstractModelObject):
    external_urls: Optional[ExternalUrl] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class Artist(AbstractModelObject):
    external_urls: Optional[ExternalUrl] = None
    followers: Optional[Followers] = None
    genres: Optional[Tuple[StrictStr, ...]] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    images: Optional[Tuple[Image, ...]] = None
    name: Optional[StrictStr] = None
    popularity: Optional[StrictInt] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class TrackLink(AbstractModelObject):
    """The originally requested track when the API relinked it for a market."""
    external_urls: Optional[ExternalUrl] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class AlbumSimplified(AbstractModelObject):
    album_group: Optional[AlbumTypeTag] = None
    album_type: Optional[AlbumTypeTag] = None
    artists: Optional[Tuple[ArtistSimplified, ...]] = None
    available_markets: Optional[Tuple[CountryCode, ...]] = None
    external_urls: Optional[ExternalUrl] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    images: Optional[Tuple[Image, ...]] = None
    name: Optional[StrictStr] = None
    release_date: Optional[StrictStr] = None
    release_date_precision: Optional[ReleaseDatePrecisionTag] = None
    restrictions: Optional[Restrictions] = None
    total_tracks: Optional[StrictInt] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class TrackSimplified(AbstractModelObject):
    artists: Optional[Tuple[ArtistSimplified, ...]] = None
    available_markets: Optional[Tuple[CountryCode, ...]] = None
    disc_number: Optional[StrictInt] = None
    duration_ms: Optional[StrictInt] = None
    explicit: Optional[StrictBool] = None
    external_urls: Optional[ExternalUrl] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    is_local: Optional[StrictBool] = None
    is_playable: Optional[StrictBool] = None
    linked_from: Optional[TrackLink] = None
    restrictions: Optional[Restrictions] = None
    name: Optional[StrictStr] = None
    preview_url: Optional[StrictStr] = None
    track_number: Optional[StrictInt] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class Track(AbstractModelObject):
    """
    Full track object, as returned by ``/tracks/{id}`` and track searches.

    ``is_playable``, ``linked_from`` and ``restrictions`` are only sent when
    the request named a market. ``preview_url`` is often absent.
    """
    album: Optional[AlbumSimplified] = None
    artists: Optional[Tuple[ArtistSimplified, ...]] = None
    available_markets: Optional[Tuple[CountryCode, ...]] = None
    disc_number: Optional[StrictInt] = None
    duration_ms: Optional[StrictInt] = None
    explicit: Optional[StrictBool] = None
    external_ids: Optional[ExternalId] = None
    external_urls: Optional[ExternalUrl] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    is_local: Optional[StrictBool] = None
    is_playable: Optional[StrictBool] = None
    linked_from: Optional[TrackLink] = None
    restrictions: Optional[Restrictions] = None
    name: Optional[StrictStr] = None
    popularity: Optional[StrictInt] = None
    preview_url: Optional[StrictStr] = None
    track_number: Optional[StrictInt] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class Paging(AbstractModelObject, Generic[T]):
    """
    Offset-based page of items; parametrize with the item model,
    e.g. ``Paging[TrackSimplified].from_json(...)``.
    """
    href: Optional[StrictStr] = None
    items: Optional[Tuple[T, ...]] = None
    limit: Optional[StrictInt] = None
    next: Optional[StrictStr] = None
    offset: Optional[StrictInt] = None
    previous: Optional[StrictStr] = None
    total: Optional[StrictInt] = None

    @classmethod
    def from_json(cls, json_object):
        # Bare Paging would validate items as field-less records and drop their data
        if not cls.__pydantic_generic_metadata__["args"]:
            raise TypeError("Paging must be parametrized with its item model, e.g. Paging[Track]")
        return super().from_json(json_object)


class Album(AbstractModelObject):
    album_type: Optional[AlbumTypeTag] = None
    artists: Optional[Tuple[ArtistSimplified, ...]] = None
    available_markets: Optional[Tuple[CountryCode, ...]] = None
    external_ids: Optional[ExternalId] = None
    external_urls: Optional[ExternalUrl] = None
    genres: Optional[Tuple[StrictStr, ...]] = None
    href: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    images: Optional[Tuple[Image, ...]] = None
    label: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    popularity: Optional[StrictInt] = None
    release_date: Optional[StrictStr] = None
    release_date_precision: Optional[ReleaseDatePrecisionTag] = None
    restrictions: Optional[Restrictions] = None
    total_tracks: Optional[StrictInt] = None
    tracks: Optional[Paging[TrackSimplified]] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None


class AudioFeatures(AbstractModelObject):
    acousticness: Optional[StrictFloat] = None
    analysis_url: Optional[StrictStr] = None
    danceability: Optional[StrictFloat] = None
    duration_ms: Optional[StrictInt] = None
    energy: Optional[StrictFloat] = None
    id: Optional[StrictStr] = None
    instrumentalness: Optional[StrictFloat] = None
    key: Optional[StrictInt] = None
    liveness: Optional[StrictFloat] = None
    loudness: Optional[StrictFloat] = None
    mode: Optional[ModalityValue] = None
    speechiness: Optional[StrictFloat] = None
    tempo: Optional[StrictFloat] = None
    time_signature: Optional[StrictInt] = None
    track_href: Optional[StrictStr] = None
    type: Optional[ObjectTypeTag] = None
    uri: Optional[StrictStr] = None
    valence: Optional[StrictFloat] = None


class SearchResult(AbstractModelObject):
    """Body of ``/search``; only the requested result types are present."""
    albums: Optional[Paging[AlbumSimplified]] = None
    artists: Optional[Paging[Artist]] = None
    tracks: Optional[Paging[Track]] = None
