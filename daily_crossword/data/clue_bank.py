"""Built-in clues for words that show up in most daily digests."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .normalization import clean_word


FALLBACK_CLUE_TEMPLATE = "A word meaning {word}"

SEASONAL_CLUES = {
    "SNOW": "White winter precipitation",
    "COLD": "Low temperature feeling",
    "FROST": "Ice crystals on windows",
    "COZY": "Warm and comfortable",
    "WARM": "Pleasant temperature",
    "SCARF": "Winter neck garment",
    "FIRE": "Keeps you warm in winter",
    "COCOA": "Hot chocolate drink",
    "BLOOM": "Flowers do this in spring",
    "RAIN": "Water from clouds",
    "GREEN": "Color of spring grass",
    "BIRDS": "They sing in the morning",
    "FRESH": "New and clean",
    "SUNNY": "Bright and cheerful weather",
    "GARDEN": "Place to grow flowers",
    "TULIP": "Spring flower from Holland",
    "BEACH": "Sandy shore by water",
    "SWIM": "Activity in water",
    "PICNIC": "Outdoor meal",
    "RELAX": "Rest and unwind",
    "BREEZE": "Gentle wind",
    "FUN": "Enjoyable time",
    "LEAVES": "They fall in autumn",
    "CRISP": "Fresh autumn air",
    "APPLE": "Red fruit, popular in fall",
    "HARVEST": "Gathering crops",
    "GOLDEN": "Color of autumn leaves",
    "COOL": "Pleasantly cold",
    "AUTUMN": "Fall season",
}

HOLIDAY_CLUES = {
    "PARTY": "Celebration gathering",
    "CHEERS": "Toast at celebrations",
    "HAPPY": "Feeling of joy",
    "YEAR": "365 days",
    "LOVE": "Deep affection",
    "HEART": "Symbol of love",
    "ROSES": "Romantic flowers",
    "SWEET": "Sugar taste",
    "BUNNY": "Easter animal",
    "EGGS": "Easter hunt items",
    "SPRING": "Season after winter",
    "JOY": "Great happiness",
    "FLAG": "National symbol",
    "FREE": "Liberty",
    "PRIDE": "National feeling",
    "STARS": "Lights in the night sky",
    "CANDY": "Sweet treats",
    "TREAT": "Special reward",
    "PUMPKIN": "Orange fall vegetable",
    "THANKS": "Gratitude",
    "FAMILY": "Loved ones at home",
    "FEAST": "Large meal",
    "TURKEY": "Thanksgiving bird",
    "GIFTS": "Presents",
    "CHEER": "Holiday happiness",
    "TREE": "Christmas decoration",
    "MERRY": "Happy, festive",
    "SANTA": "Gift giver at Christmas",
}

POSITIVE_CLUES = {
    "SMILE": "Happy facial expression",
    "HOPE": "Positive expectation",
    "PEACE": "Calm and quiet",
    "KIND": "Caring and gentle",
    "FRIEND": "Close companion",
    "CARE": "Look after someone",
    "GOOD": "Positive quality",
}

CALENDAR_CLUES = {
    "SUNDAY": "First day of the week",
    "MONDAY": "Start of work week",
    "TUESDAY": "Second work day",
    "WEDNESDAY": "Middle of the week",
    "THURSDAY": "Fourth work day",
    "FRIDAY": "Last work day",
    "SATURDAY": "Weekend day",
    "JANUARY": "First month",
    "FEBRUARY": "Shortest month",
    "MARCH": "Spring begins",
    "APRIL": "Showers month",
    "MAY": "Fifth month",
    "JUNE": "Start of summer",
    "JULY": "Independence month",
    "AUGUST": "Late summer month",
    "SEPTEMBER": "Back to school month",
    "OCTOBER": "Halloween month",
    "NOVEMBER": "Thanksgiving month",
    "DECEMBER": "Holiday month",
}

CLUE_BANK: Dict[str, str] = {
    **SEASONAL_CLUES,
    **HOLIDAY_CLUES,
    **POSITIVE_CLUES,
    **CALENDAR_CLUES,
}


def merge_clue_banks(
    custom: Optional[Mapping[str, str]] = None,
    builtin: Mapping[str, str] = CLUE_BANK,
) -> Dict[str, str]:
    """Overlay ``custom`` onto ``builtin``; custom keys are normalized first."""

    merged = dict(builtin)
    for word, clue in (custom or {}).items():
        key = clean_word(word)
        if key:
            merged[key] = clue
    return merged


def fallback_clue(word: str) -> str:
    return FALLBACK_CLUE_TEMPLATE.format(word=word.lower())


def resolve_clue(word: str, bank: Mapping[str, str]) -> str:
    """Return the bank clue for ``word`` or the generated fallback."""
    return bank.get(word) or fallback_clue(word)


__all__ = ["CLUE_BANK", "merge_clue_banks", "fallback_clue", "resolve_clue"]
