"""
Collection entities.

Entities representing the titles a user has watched, with their personal
rating and the metadata copied from TMDB at the time they were added.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


def _integral_id(value: Any) -> Optional[int]:
    """TMDB ids are integers; anything else (random mock ids, text) is treated as absent."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _optional_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _optional_names(value: Any) -> Optional[tuple[str, ...]]:
    if not isinstance(value, (list, tuple)):
        return None
    return tuple(str(name) for name in value if name)


class MediaKind(Enum):
    """
    Kind of title stored in the collection.

    Values:
        MOVIE: Feature film
        SERIES: TV series (TMDB media_type "tv")
    """

    MOVIE = "movie"
    SERIES = "series"

    @classmethod
    def from_provider_type(cls, media_type: Optional[str]) -> Optional["MediaKind"]:
        """Map a TMDB media_type ("movie", "tv", "person"...) to a MediaKind."""
        if media_type == "movie":
            return cls.MOVIE
        if media_type == "tv":
            return cls.SERIES
        return None


class UserRating(Enum):
    """
    Personal rating of a watched title.

    Values:
        LOVE: "Love This!"
        UP: "I Like It"
        DOWN: "Not For Me"
    """

    LOVE = "love"
    UP = "up"
    DOWN = "down"


@dataclass
class CollectionEntry:
    """
    A watched title owned by the collection store.

    Attributes:
        local_id: Opaque identifier minted at creation, never reused
        provider_id: TMDB ID (None for legacy/manual entries)
        title: Display title (never empty)
        media_kind: Movie or series
        poster_ref: Relative TMDB poster path
        backdrop_ref: Relative TMDB backdrop path
        overview: Plot summary (may be empty)
        release_date: ISO date (YYYY-MM-DD, or YYYY-01-01 for year-only data)
        user_rating: Personal rating, None when unrated
        date_added: ISO date of creation, immutable
        provider_rating: TMDB vote average (0-10)
        cast: Billed cast in provider order, None when the field is missing
        director: Director, or creator(s) for series
        genres: Genre names in provider order, None when the field is missing
    """

    local_id: str
    title: str
    media_kind: MediaKind
    date_added: str
    provider_id: Optional[int] = None
    poster_ref: Optional[str] = None
    backdrop_ref: Optional[str] = None
    overview: str = ""
    release_date: Optional[str] = None
    user_rating: Optional[UserRating] = None
    provider_rating: Optional[float] = None
    cast: Optional[tuple[str, ...]] = None
    director: Optional[str] = None
    genres: Optional[tuple[str, ...]] = None

    @property
    def year(self) -> Optional[int]:
        """Release year extracted from release_date."""
        if self.release_date and len(self.release_date) >= 4 and self.release_date[:4].isdigit():
            return int(self.release_date[:4])
        return None

    @property
    def missing_fields(self) -> tuple[str, ...]:
        """Names of the fields introduced after the first schema that are still missing."""
        missing = []
        if self.genres is None:
            missing.append("genres")
        if self.cast is None:
            missing.append("cast")
        if self.director is None:
            missing.append("director")
        return tuple(missing)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the persisted/exported JSON shape.

        Keys follow the storage format of the original web application so
        that existing payloads keep loading. Missing legacy fields are
        omitted rather than written as empty values.
        """
        data: dict[str, Any] = {
            "id": self.local_id,
            "tmdb_id": self.provider_id,
            "title": self.title,
            "type": self.media_kind.value,
            "poster": self.poster_ref,
            "backdrop": self.backdrop_ref,
            "overview": self.overview,
            "releaseDate": self.release_date,
            "rating": self.user_rating.value if self.user_rating else None,
            "dateWatched": self.date_added,
            "tmdbRating": self.provider_rating,
        }
        if self.cast is not None:
            data["cast"] = list(self.cast)
        if self.director is not None:
            data["director"] = self.director
        if self.genres is not None:
            data["genres"] = list(self.genres)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CollectionEntry":
        """
        Build an entry from its persisted JSON shape.

        Optional fields holding an unusable value (non-integral tmdb_id,
        non-numeric tmdbRating, cast or genres not a list) are read as absent.

        Raises:
            KeyError: If a mandatory key (id, title, type, dateWatched) is missing
            ValueError: If type or rating hold an unknown value, or title is empty
        """
        title = str(data["title"]).strip()
        if not title:
            raise ValueError("Entry title must not be empty")

        rating = data.get("rating")

        return cls(
            local_id=str(data["id"]),
            provider_id=_integral_id(data.get("tmdb_id")),
            title=title,
            media_kind=MediaKind(data["type"]),
            poster_ref=data.get("poster"),
            backdrop_ref=data.get("backdrop"),
            overview=data.get("overview") or "",
            release_date=data.get("releaseDate"),
            user_rating=UserRating(rating) if rating else None,
            date_added=str(data["dateWatched"]),
            provider_rating=_optional_float(data.get("tmdbRating")),
            cast=_optional_names(data.get("cast")),
            director=data.get("director"),
            genres=_optional_names(data.get("genres")),
        )
