"""Months: Polish and Czech month names mapped to English abbreviations."""
import re
from typing import Dict

# Nominative and genitive forms -> abbreviation understood by dateutil
MONTH_WORDS: Dict[str, str] = {
    # Polish
    "styczeń": "Jan", "stycznia": "Jan",
    "luty": "Feb", "lutego": "Feb",
    "marzec": "Mar", "marca": "Mar",
    "kwiecień": "Apr", "kwietnia": "Apr",
    "maj": "May", "maja": "May",
    "czerwiec": "Jun", "czerwca": "Jun",
    "lipiec": "Jul", "lipca": "Jul",
    "sierpień": "Aug", "sierpnia": "Aug",
    "wrzesień": "Sep", "września": "Sep",
    "październik": "Oct", "października": "Oct",
    "listopad": "Nov", "listopada": "Nov",
    "grudzień": "Dec", "grudnia": "Dec",
    # Czech
    "leden": "Jan", "ledna": "Jan",
    "únor": "Feb", "února": "Feb",
    "březen": "Mar", "března": "Mar",
    "duben": "Apr", "dubna": "Apr",
    "květen": "May", "května": "May",
    "červen": "Jun", "června": "Jun",
    "červenec": "Jul", "července": "Jul",
    "srpen": "Aug", "srpna": "Aug",
    "září": "Sep",
    "říjen": "Oct", "října": "Oct",
    "listopadu": "Nov",
    "prosinec": "Dec", "prosince": "Dec",
}

_WORD = re.compile(r"\w+")


def replace_month_words(text: str) -> str:
    """Replace every whole-word month name in `text` with its English abbreviation.

    Matching is case-insensitive; words not in MONTH_WORDS are left untouched.
    """
    if not text:
        return text
    return _WORD.sub(lambda m: MONTH_WORDS.get(m.group(0).lower(), m.group(0)), text)
