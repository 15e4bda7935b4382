"""Candidate word providers for the digest crossword."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, MIN_WORD_LENGTH
from ..core.exceptions import CrosswordError, WordSourceError
from ..io.gemini_client import GeminiClient
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

BASE_WORDS = ("HAPPY", "JOY", "SMILE", "HOPE", "PEACE", "FRIEND", "LOVE", "WARM", "KIND", "CHEER")
CITY_WORD_MAX_LENGTH = 10
DEFAULT_WORD_LIMIT = 25
LLM_WORD_RE = re.compile(r"^[A-Z]{3,12}$")


def season_for(day: date) -> str:
    """Return the northern-hemisphere meteorological season for ``day``."""

    if 3 <= day.month <= 5:
        return "spring"
    if 6 <= day.month <= 8:
        return "summer"
    if 9 <= day.month <= 11:
        return "fall"
    return "winter"


@dataclass
class WordRequest:
    """Context handed to every word source."""

    city: str = ""
    state: str = ""
    holidays: Sequence[str] = ()
    limit: int = DEFAULT_WORD_LIMIT
    today: Optional[date] = None

    @property
    def location_name(self) -> str:
        return f"{self.city}, {self.state}" if self.state else self.city

    @property
    def day(self) -> date:
        return self.today or date.today()

    @property
    def season(self) -> str:
        return season_for(self.day)


@dataclass
class WordEntry:
    """A candidate word with its optional clue."""

    word: str
    clue: str = ""
    source: str = "unknown"


@dataclass
class WordSourceOutput:
    entries: List[WordEntry] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [entry.word for entry in self.entries]

    @property
    def clues(self) -> Dict[str, str]:
        return {entry.word: entry.clue for entry in self.entries if entry.clue}


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def generate(self, request: WordRequest) -> WordSourceOutput:
        ...


class BaseWordSource:
    """Always-available positive words plus the city name when it fits."""

    def __init__(self, base_words: Sequence[str] = BASE_WORDS) -> None:
        self.base_words = [clean_word(word) for word in base_words]

    def generate(self, request: WordRequest) -> WordSourceOutput:
        words = list(self.base_words)
        city_word = clean_word(request.city)[:CITY_WORD_MAX_LENGTH]
        if city_word:
            words.append(city_word)
        entries = [
            WordEntry(word=word, source="base")
            for word in words
            if MIN_WORD_LENGTH <= len(word) <= DEFAULT_GRID_SIZE
        ]
        return WordSourceOutput(entries=entries)


class UserWordListSource:
    """Returns a user-supplied list of ``WORD`` or ``WORD:Clue`` entries."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._entries: List[WordEntry] = []
        for item in raw_words:
            item = item.strip()
            if not item:
                continue
            word, _, clue = item.partition(":")
            word = clean_word(word)
            if word:
                self._entries.append(WordEntry(word=word, clue=clue.strip(), source="user"))

    def generate(self, request: WordRequest) -> WordSourceOutput:
        return WordSourceOutput(entries=list(self._entries))


class GeminiWordSource:
    """LLM-backed generator of local, upbeat crossword words with clues."""

    SYSTEM_PROMPT = (
        "You generate crossword puzzle words. Return simple, positive words that "
        "elderly people would enjoy and recognize. Words must be 3-12 letters, all "
        "caps, letters only (no spaces, hyphens, or special characters). Include a "
        "good mix of easy (3-5 letters) and medium (6-8 letters) words, with a few "
        "longer challenging words (9-12 letters)."
    )

    WORDS_PROMPT = (
        "Generate {limit} crossword words for {location}.\n\n"
        "Categories to include:\n"
        "- Local landmarks, neighborhoods, famous streets\n"
        "- Local foods, restaurants, or cuisine types\n"
        "- Regional traditions or cultural words\n"
        "- Seasonal words for {season}\n"
        "- Words related to upcoming holidays: {holidays}\n"
        "- The city/state name if they fit\n"
        "- Positive, feel-good words\n"
        "- Nature words (trees, birds, flowers local to the area)\n\n"
        'Return as JSON: {{"words": [{{"word": "WORD", "clue": "Brief clue"}}]}}\n\n'
        "Words must be 3-12 letters, uppercase, only A-Z characters. "
        "Make clues short and clear."
    )

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        self._client = client

    def generate(self, request: WordRequest) -> WordSourceOutput:
        if not request.city:
            raise WordSourceError("Gemini word source needs a city")
        client = self._client or GeminiClient()
        self._client = client
        text = client.generate_json(self.render_prompt(request), system=self.SYSTEM_PROMPT)
        output = self.parse_response(text, request.limit)
        LOGGER.info(
            "Gemini produced %s usable words for %s", len(output.entries), request.location_name
        )
        return output

    @classmethod
    def render_prompt(cls, request: WordRequest) -> str:
        holidays = ", ".join(request.holidays) or "none upcoming"
        return cls.WORDS_PROMPT.format(
            limit=request.limit,
            location=request.location_name,
            season=request.season,
            holidays=holidays,
        )

    @staticmethod
    def parse_response(text: str, limit: int = DEFAULT_WORD_LIMIT) -> WordSourceOutput:
        stripped = (text or "").strip()
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            inner = lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:]
            stripped = "\n".join(inner).strip()
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            LOGGER.warning("Gemini word payload not JSON; falling back to empty")
            return WordSourceOutput()

        items = data.get("words", []) if isinstance(data, dict) else data
        entries: List[WordEntry] = []
        for item in items if isinstance(items, list) else []:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            clue = item.get("clue") or ""
            if isinstance(word, str) and LLM_WORD_RE.match(word):
                entries.append(WordEntry(word=word, clue=str(clue), source="gemini"))
        return WordSourceOutput(entries=entries[:limit])


def merge_word_sources(
    primary: Optional[WordSource],
    fallbacks: Sequence[WordSource],
    request: WordRequest,
    target: int = DEFAULT_WORD_LIMIT,
) -> WordSourceOutput:
    """Collect words from ``primary`` then ``fallbacks`` until ``target`` is met.

    Entries are deduplicated on their normalized word; the first clue seen
    for a word wins. A source that raises is logged and skipped.
    """

    collected: List[WordEntry] = []
    seen: set[str] = set()

    def extend(output: WordSourceOutput) -> None:
        for entry in output.entries:
            key = clean_word(entry.word)
            if not key or key in seen:
                continue
            collected.append(WordEntry(word=key, clue=entry.clue, source=entry.source))
            seen.add(key)
            if len(collected) >= target:
                break

    sources = ([primary] if primary is not None else []) + list(fallbacks)
    for source in sources:
        if len(collected) >= target:
            break
        try:
            extend(source.generate(request))
        except (CrosswordError, RuntimeError) as exc:
            LOGGER.warning("Word source %s failed: %s", type(source).__name__, exc)

    return WordSourceOutput(entries=collected[:target])
