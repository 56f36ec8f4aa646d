"""Language detection, message lookup and printf-style formatting."""

from __future__ import annotations

import json
import math
import os
import re
from collections.abc import Mapping
from decimal import Decimal

from .messages import messages_for

SUPPORTED_LANGUAGES = frozenset({"en", "ja"})
DEFAULT_LANGUAGE = "en"

_APP_LANG_VAR = "STEAM_REVIEW_LANG"
_STANDARD_LANG_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")

_VERB = re.compile(r"%([-+# 0]*)(\d*)(?:\.(\d*))?([a-zA-Z%])")
_LANG_SEPARATORS = re.compile(r"[_.\-]")


def normalize_language(language: str) -> str:
    """Reduce a locale string such as ``ja_JP.UTF-8`` to its language code."""
    lowered = language.lower()
    parts = [part for part in _LANG_SEPARATORS.split(lowered) if part]
    return parts[0] if parts else lowered


def is_supported_language(language: str) -> bool:
    """Return True if messages exist for *language*."""
    return language in SUPPORTED_LANGUAGES


def detect_language(environ: Mapping[str, str] | None = None) -> str:
    """Pick the interface language from the environment, English by default."""
    env = os.environ if environ is None else environ
    for name in (_APP_LANG_VAR, *_STANDARD_LANG_VARS):
        value = env.get(name, "")
        if value:
            normalized = normalize_language(value)
            if is_supported_language(normalized):
                return normalized
    return DEFAULT_LANGUAGE


def _go_float(value: float) -> str:
    """Render a float the way the default value verb does (shortest %g)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    digits = digits.rstrip("0") or "0"
    prefix = "-" if sign else ""
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _go_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float):
        return _go_float(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return "map[" + " ".join(f"{_go_value(k)}:{_go_value(v)}" for k, v in items) + "]"
    return str(value)


def _bad_verb(verb: str, value: object) -> str:
    return f"%!{verb}({type(value).__name__}={_go_value(value)})"


def _format_one(value: object, flags: str, width: str, precision: str | None, verb: str) -> str:
    precision_part = "" if precision is None else f".{precision or 0}"
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)

    if verb in "dxXo":
        if not isinstance(value, int) or isinstance(value, bool):
            return _bad_verb(verb, value)
        return f"%{flags}{width}{verb}" % value
    if verb in "feEgGF":
        if not is_number:
            return _bad_verb(verb, value)
        return f"%{flags}{width}{precision_part}{verb.lower() if verb == 'F' else verb}" % float(value)

    if verb == "t":
        if not isinstance(value, bool):
            return _bad_verb(verb, value)
        text = "true" if value else "false"
    elif verb in "svw":
        text = _go_value(value)
        if precision is not None:
            text = text[: int(precision or 0)]
    elif verb == "q":
        text = json.dumps(_go_value(value), ensure_ascii=False)
    else:
        return _bad_verb(verb, value)
    pad_flags = "-" if "-" in flags else ""
    return f"%{pad_flags}{width}s" % text


def go_format(template: str, *args: object) -> str:
    """Expand printf-style verbs (%s %d %v %w %t %f %q %%) in *template*."""
    pieces: list[str] = []
    position = 0
    remaining = iter(args)
    sentinel = object()
    for match in _VERB.finditer(template):
        pieces.append(template[position : match.start()])
        position = match.end()
        flags, width, precision, verb = match.groups()
        if verb == "%":
            pieces.append("%")
            continue
        value = next(remaining, sentinel)
        if value is sentinel:
            pieces.append(f"%!{verb}(MISSING)")
            continue
        pieces.append(_format_one(value, flags, width, precision, verb))
    pieces.append(template[position:])
    return "".join(pieces)


class Localizer:
    """Looks up messages for one language, falling back to English."""

    def __init__(self, language: str, messages: Mapping[str, str]) -> None:
        self.language = language
        self.messages = dict(messages)

    def t(self, key: str) -> str:
        """Return the message for *key*, or the key itself if unknown."""
        message = self.messages.get(key)
        if message is not None:
            return message
        if self.language != DEFAULT_LANGUAGE:
            fallback = messages_for(DEFAULT_LANGUAGE).get(key)
            if fallback is not None:
                return fallback
        return key

    def tf(self, key: str, *args: object) -> str:
        """Return the message for *key* with *args* formatted into it."""
        return go_format(self.t(key), *args)


_current: Localizer | None = None


def init(environ: Mapping[str, str] | None = None) -> Localizer:
    """Set up the process-wide localizer from the environment."""
    global _current
    language = detect_language(environ)
    _current = Localizer(language, messages_for(language))
    return _current


def reset() -> None:
    """Forget the process-wide localizer."""
    global _current
    _current = None


def get_current_language() -> str:
    """Return the active language code, English if not yet initialised."""
    return DEFAULT_LANGUAGE if _current is None else _current.language


def _localizer() -> Localizer:
    return _current if _current is not None else init()


def t(key: str) -> str:
    """Translate *key* with the process-wide localizer."""
    return _localizer().t(key)


def tf(key: str, *args: object) -> str:
    """Translate and format *key* with the process-wide localizer."""
    return _localizer().tf(key, *args)