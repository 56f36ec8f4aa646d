"""Client for the Steam review, app-list and store app-detail endpoints."""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol
from urllib.parse import urlencode

import requests

from . import messages as msg
from .config import FILTER_ALL, FILTER_RECENT, FILTER_UPDATED
from .i18n import t, tf
from .models import GameDetails, ReviewData, convert_steam_review, convert_to_game_details

APP_LIST_URL = "https://api.steampowered.com/ISteamApps/GetAppList/v2/"
REVIEWS_URL = "https://store.steampowered.com/appreviews/"
APP_DETAILS_URL = "https://store.steampowered.com/api/appdetails"

REVIEWS_PER_PAGE = 100
REQUEST_DELAY = 1.0
_TIMEOUT = 60


class SteamAPIError(Exception):
    """Raised when a Steam endpoint cannot be reached or gives an unusable answer."""


class _VerboseSink(Protocol):
    def verbose(self, message: object) -> None: ...


def _say(verbose: bool, logger: _VerboseSink | None, message: str) -> None:
    if verbose and logger is not None:
        logger.verbose(message)


def _get(url: str, failure_key: str) -> requests.Response:
    try:
        return requests.get(url, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise SteamAPIError(tf(failure_key, exc)) from exc


def _decode_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise SteamAPIError(tf(msg.MSG_ERROR_JSON_DECODE, exc)) from exc


def _wanted_languages(languages: Iterable[str] | None) -> set[str] | None:
    """Lower-cased set of requested languages, or None when no filtering applies."""
    wanted = {language.lower() for language in languages or ()}
    if not wanted or "all" in wanted:
        return None
    return wanted


def _language_param(languages: Sequence[str] | None) -> str:
    if not languages or any(language.lower() == "all" for language in languages):
        return "all"
    return ",".join(languages)


def _filter_params(filter_: str) -> dict[str, str]:
    if filter_ == FILTER_RECENT:
        return {"filter": "recent", "day_range": "0"}
    if filter_ == FILTER_UPDATED:
        return {"filter": "updated", "day_range": "0"}
    # Ordering by helpfulness; 365 days is the widest window the endpoint allows.
    return {"filter": "all", "day_range": "365"}


def get_app_id_by_name(game_name: str) -> str:
    """Look up the App ID of the game whose name matches *game_name*, ignoring case."""
    response = _get(APP_LIST_URL, msg.MSG_ERROR_STEAM_API_FETCH)
    payload = _decode_json(response)
    applist = payload.get("applist") if isinstance(payload, Mapping) else None
    apps = applist.get("apps") if isinstance(applist, Mapping) else None
    wanted = game_name.casefold()
    for app in apps if isinstance(apps, list) else ():
        if not isinstance(app, Mapping):
            continue
        name = app.get("name")
        if isinstance(name, str) and name.casefold() == wanted:
            app_id = app.get("appid", 0)
            return str(int(app_id)) if isinstance(app_id, (int, float)) else "0"
    raise SteamAPIError(tf(msg.MSG_ERROR_GAME_NOT_FOUND, game_name))


def fetch_reviews_page(
    app_id: str,
    cursor: str = "*",
    num_per_page: int = REVIEWS_PER_PAGE,
    filter_: str = FILTER_ALL,
    languages: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Fetch one page of reviews and return the decoded response."""
    params = {
        "json": "1",
        "cursor": cursor,
        "num_per_page": str(num_per_page),
        "review_type": "all",
        "purchase_type": "all",
        "language": _language_param(languages),
        **_filter_params(filter_),
    }
    url = f"{REVIEWS_URL}{app_id}?{urlencode(sorted(params.items()))}"
    response = _get(url, msg.MSG_ERROR_HTTP_REQUEST)
    if response.status_code != 200:
        raise SteamAPIError(tf(msg.MSG_ERROR_HTTP_STATUS, response.status_code))

    payload = _decode_json(response)
    if not isinstance(payload, dict):
        raise SteamAPIError(tf(msg.MSG_ERROR_JSON_DECODE, "unexpected response shape"))
    success = payload.get("success", 0)
    if isinstance(success, bool) or not isinstance(success, int):
        success = 0
    if success != 1:
        raise SteamAPIError(tf(msg.MSG_ERROR_STEAM_API_RESPONSE, success))
    return payload


def filter_reviews_by_language(
    reviews: Iterable[ReviewData], languages: Iterable[str] | None
) -> list[ReviewData]:
    """Keep only reviews written in one of *languages*; "all" or none keeps everything."""
    wanted = _wanted_languages(languages)
    if wanted is None:
        return list(reviews)
    return [review for review in reviews if review.language.lower() in wanted]


def fetch_all_reviews(
    app_id: str,
    max_reviews: int = 100,
    verbose: bool = False,
    languages: Sequence[str] | None = None,
    filter_: str = FILTER_ALL,
    logger: _VerboseSink | None = None,
    delay: float = REQUEST_DELAY,
) -> list[ReviewData]:
    """Page through the reviews of *app_id*; *max_reviews* of 0 means no limit."""
    wanted = _wanted_languages(languages)
    collected: list[ReviewData] = []
    cursor = "*"

    _say(verbose, logger, tf(msg.MSG_VERBOSE_REVIEW_FETCH_START, app_id))
    while True:
        _say(verbose, logger, tf(msg.MSG_VERBOSE_REVIEW_PROGRESS, len(collected), cursor))
        try:
            page = fetch_reviews_page(app_id, cursor, REVIEWS_PER_PAGE, filter_, languages)
        except SteamAPIError as exc:
            raise SteamAPIError(tf(msg.MSG_ERROR_REVIEW_FETCH, exc)) from exc

        raw_reviews = page.get("reviews")
        if not isinstance(raw_reviews, list) or not raw_reviews:
            _say(verbose, logger, t(msg.MSG_VERBOSE_NO_MORE_REVIEWS))
            break

        for raw in raw_reviews:
            if not isinstance(raw, Mapping):
                continue
            language = raw.get("language")
            language = language if isinstance(language, str) else ""
            if wanted is not None and language.lower() not in wanted:
                continue
            collected.append(convert_steam_review(raw))
            if 0 < max_reviews <= len(collected):
                _say(verbose, logger, tf(msg.MSG_VERBOSE_MAX_REVIEWS_REACHED, max_reviews))
                return collected[:max_reviews]

        next_cursor = page.get("cursor")
        next_cursor = next_cursor if isinstance(next_cursor, str) else ""
        if not next_cursor or next_cursor == cursor:
            _say(verbose, logger, t(msg.MSG_VERBOSE_CURSOR_NOT_CHANGED))
            break
        cursor = next_cursor
        time.sleep(delay)

    _say(verbose, logger, tf(msg.MSG_VERBOSE_TOTAL_REVIEWS_FETCHED, len(collected)))
    return collected


def get_reviews_by_game_name(
    game_name: str,
    max_reviews: int = 100,
    verbose: bool = False,
    languages: Sequence[str] | None = None,
    filter_: str = FILTER_ALL,
    logger: _VerboseSink | None = None,
    delay: float = REQUEST_DELAY,
) -> tuple[list[ReviewData], str]:
    """Resolve *game_name* to an App ID and fetch its reviews; returns (reviews, app_id)."""
    try:
        app_id = get_app_id_by_name(game_name)
    except SteamAPIError as exc:
        raise SteamAPIError(tf(msg.MSG_ERROR_APP_ID_FETCH, exc)) from exc
    _say(verbose, logger, tf(msg.MSG_VERBOSE_GAME_REVIEW_FETCH, game_name, app_id))
    reviews = fetch_all_reviews(app_id, max_reviews, verbose, languages, filter_, logger, delay)
    return reviews, app_id


def get_game_details(
    app_id: str, verbose: bool = False, logger: _VerboseSink | None = None
) -> GameDetails:
    """Fetch the store-page details of *app_id*."""
    _say(verbose, logger, tf(msg.MSG_VERBOSE_GAME_DETAILS_FETCH, app_id))
    response = _get(f"{APP_DETAILS_URL}?appids={app_id}&l=japanese", msg.MSG_ERROR_STEAM_STORE_FETCH)
    payload = _decode_json(response)
    if not isinstance(payload, Mapping):
        raise SteamAPIError(tf(msg.MSG_ERROR_JSON_DECODE, "unexpected response shape"))

    entry = payload.get(app_id)
    if entry is None:
        raise SteamAPIError(tf(msg.MSG_ERROR_APP_DATA_NOT_FOUND, app_id))
    if not isinstance(entry, Mapping) or entry.get("success") is not True:
        raise SteamAPIError(tf(msg.MSG_ERROR_GAME_DETAILS_FAIL, app_id))

    details = convert_to_game_details(app_id, entry)
    _say(verbose, logger, tf(msg.MSG_VERBOSE_GAME_DETAILS_OBTAINED, details.name))
    return details