"""Application constants and run configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

VERSION = "v0.5.2"
APP_NAME = "Steam Reviews CLI Tool"

# Review ordering filters understood by the Steam review endpoint.
FILTER_ALL = "all"
FILTER_RECENT = "recent"
FILTER_UPDATED = "updated"

FILE_EXT_JSON = ".json"
FILE_EXT_TXT = ".txt"


@dataclass
class Config:
    """Settings for one run, as given on the command line."""

    app_id: str = ""
    game_name: str = ""
    max_reviews: int = 100
    languages: list[str] = field(default_factory=lambda: ["japanese"])
    output_dir: str = "output"
    verbose: bool = False
    split_by_lang: bool = False
    output_json: bool = False
    filter: str = FILTER_ALL