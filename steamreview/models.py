"""Review and game data records, and conversion from Steam API payloads."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

_INF_WORDS = ("inf", "infinity")


def flexible_float(value: Any) -> float:
    """Read a number that may arrive as a JSON number or a numeric string.

    Anything that cannot be read as a number becomes 0.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return 0.0 if math.isinf(number) else number
    if isinstance(value, str):
        if not value or value != value.strip() or "_" in value:
            return 0.0
        try:
            number = float(value)
        except ValueError:
            return 0.0
        if math.isinf(number) and value.lstrip("+-").lower() not in _INF_WORDS:
            return 0.0
        return number
    return 0.0


def _mapping(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


def _str(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    return value if isinstance(value, str) else ""


def _int(raw: Mapping[str, Any], key: str) -> int:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _bool(raw: Mapping[str, Any], key: str) -> bool:
    return raw.get(key) is True


def _str_list(raw: Mapping[str, Any], key: str) -> list[str]:
    value = raw.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _rfc3339(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = moment.utcoffset()
    if offset is None:
        return text
    minutes = int(offset.total_seconds()) // 60
    if minutes == 0:
        return text + "Z"
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def _list_or_none(values: list[str]) -> list[str] | None:
    return list(values) if values else None


@dataclass
class AuthorData:
    """The reviewer as reported alongside a review."""

    steam_id: str = ""
    num_games_owned: int = 0
    num_reviews: int = 0
    playtime_forever: int = 0
    playtime_last_two_weeks: int = 0
    playtime_at_review: int = 0
    last_played: int = 0


@dataclass
class ReviewData:
    """One user review in the form the tool stores and reports."""

    recommendation_id: str = ""
    author: AuthorData = field(default_factory=AuthorData)
    language: str = ""
    review: str = ""
    timestamp_created: int = 0
    timestamp_updated: int = 0
    voted_up: bool = False
    votes_up: int = 0
    votes_funny: int = 0
    weighted_score: float = 0.0
    comment_count: int = 0
    steam_purchase: bool = False
    received_for_free: bool = False
    written_during_ea: bool = False
    developer_response: str = ""
    timestamp_dev_response: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation; empty developer replies are omitted."""
        data: dict[str, Any] = {
            "recommendation_id": self.recommendation_id,
            "author": asdict(self.author),
            "language": self.language,
            "review": self.review,
            "timestamp_created": self.timestamp_created,
            "timestamp_updated": self.timestamp_updated,
            "voted_up": self.voted_up,
            "votes_up": self.votes_up,
            "votes_funny": self.votes_funny,
            "weighted_vote_score": self.weighted_score,
            "comment_count": self.comment_count,
            "steam_purchase": self.steam_purchase,
            "received_for_free": self.received_for_free,
            "written_during_early_access": self.written_during_ea,
        }
        if self.developer_response:
            data["developer_response"] = self.developer_response
        if self.timestamp_dev_response:
            data["timestamp_dev_responded"] = self.timestamp_dev_response
        return data


@dataclass
class GameDetails:
    """Store-page information about a game."""

    app_id: str = ""
    name: str = ""
    description: str = ""
    publisher: list[str] = field(default_factory=list)
    developer: list[str] = field(default_factory=list)
    release_date: str = ""
    price: str = ""
    currency: str = ""
    tags: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    header_image: str = ""
    website: str = ""
    required_age: int = 0
    is_free: bool = False
    retrieved_at: datetime = field(default_factory=lambda: datetime.now().astimezone())

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation; empty lists become null."""
        return {
            "app_id": self.app_id,
            "name": self.name,
            "description": self.description,
            "publisher": _list_or_none(self.publisher),
            "developer": _list_or_none(self.developer),
            "release_date": self.release_date,
            "price": self.price,
            "currency": self.currency,
            "tags": _list_or_none(self.tags),
            "categories": _list_or_none(self.categories),
            "genres": _list_or_none(self.genres),
            "header_image": self.header_image,
            "website": self.website,
            "required_age": self.required_age,
            "is_free": self.is_free,
            "retrieved_at": _rfc3339(self.retrieved_at),
        }


def convert_steam_review(raw: Mapping[str, Any]) -> ReviewData:
    """Build a ReviewData from one entry of the review endpoint's ``reviews`` list."""
    author = _mapping(raw.get("author"))
    return ReviewData(
        recommendation_id=_str(raw, "recommendationid"),
        author=AuthorData(
            steam_id=_str(author, "steamid"),
            num_games_owned=_int(author, "num_games_owned"),
            num_reviews=_int(author, "num_reviews"),
            playtime_forever=_int(author, "playtime_forever"),
            playtime_last_two_weeks=_int(author, "playtime_last_two_weeks"),
            playtime_at_review=_int(author, "playtime_at_review"),
            last_played=_int(author, "last_played"),
        ),
        language=_str(raw, "language"),
        review=_str(raw, "review"),
        timestamp_created=_int(raw, "timestamp_created"),
        timestamp_updated=_int(raw, "timestamp_updated"),
        voted_up=_bool(raw, "voted_up"),
        votes_up=_int(raw, "votes_up"),
        votes_funny=_int(raw, "votes_funny"),
        weighted_score=flexible_float(raw.get("weighted_vote_score")),
        comment_count=_int(raw, "comment_count"),
        steam_purchase=_bool(raw, "steam_purchase"),
        received_for_free=_bool(raw, "received_for_free"),
        written_during_ea=_bool(raw, "written_during_early_access"),
        developer_response=_str(raw, "developer_response"),
        timestamp_dev_response=_int(raw, "timestamp_dev_responded"),
    )


def _descriptions(raw: Mapping[str, Any], key: str) -> list[str]:
    entries = raw.get(key)
    if not isinstance(entries, list):
        return []
    return [_str(_mapping(entry), "description") for entry in entries]


def convert_to_game_details(app_id: str, response: Mapping[str, Any]) -> GameDetails:
    """Build GameDetails from one app's entry of the store ``appdetails`` response."""
    data = _mapping(response.get("data"))
    price_overview = _mapping(data.get("price_overview"))
    release = _mapping(data.get("release_date"))
    is_free = _bool(data, "is_free")

    price, currency = "Free", ""
    formatted = _str(price_overview, "final_formatted")
    if not is_free and formatted:
        price, currency = formatted, _str(price_overview, "currency")

    description = (
        _str(data, "short_description")
        or _str(data, "about_the_game")
        or _str(data, "detailed_description")
    )
    description = description.replace("<br>", "\n").replace("<p>", "").replace("</p>", "\n")

    return GameDetails(
        app_id=app_id,
        name=_str(data, "name"),
        description=description,
        publisher=_str_list(data, "publishers"),
        developer=_str_list(data, "developers"),
        release_date=_str(release, "date"),
        price=price,
        currency=currency,
        categories=_descriptions(data, "categories"),
        genres=_descriptions(data, "genres"),
        header_image=_str(data, "header_image"),
        website=_str(data, "website"),
        required_age=_int(data, "required_age"),
        is_free=is_free,
        retrieved_at=datetime.now().astimezone(),
    )