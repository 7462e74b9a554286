"""Text normalization shared by the keyword matchers."""
import unicodedata
from typing import Iterable, List, Optional


def fold_text(text: Optional[str]) -> str:
    """Lower-case and strip accents so 'Sauté' matches 'saute'."""
    if not isinstance(text, str) or not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def matched_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """Distinct keywords occurring in `text` as substrings (both sides folded)."""
    haystack = fold_text(text)
    found = []
    for keyword in keywords:
        needle = fold_text(keyword)
        if needle and needle in haystack and needle not in found:
            found.append(needle)
    return found


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return bool(matched_keywords(text, keywords))
