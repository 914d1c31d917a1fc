"""Retrieval post-processing - theme inference, dedup, rerank."""

import re
from collections.abc import Iterable

from rag_client import RetrievedChunk

GENERAL_THEME = "algemeen"

THEME_KEYWORDS: list[tuple[str, list[str]]] = [
    ("economie", ["economie", "financ", "belasting", "werk", "baan", "inkomen", "ondernemen", "budget", "geld"]),
    ("onderwijs", ["onderwijs", "school", "universiteit", "student", "leraar", "opleiding", "studie"]),
    ("zorg", ["zorg", "gezondheid", "medisch", "dokter", "ziekenhuis", "psychisch"]),
    ("klimaat", ["klimaat", "milieu", "energie", "duurzaam", "co2", "uitstoot", "groen", "natuur"]),
    ("veiligheid", ["veiligheid", "politie", "criminaliteit", "terrorisme", "defensie", "leger"]),
    ("migratie", ["migratie", "asiel", "vluchtelingen", "immigratie", "integratie", "grenzen"]),
    ("europa", ["europa", "eu ", "europese unie", "brussel", "europeaan"]),
    ("wonen", ["wonen", "woningbouw", "huren", "hypotheek", "vastgoed", "huizen"]),
    ("digitalisering", ["digitaal", "internet", "ai ", "technologie", "cyber", "data", "privacy"]),
]

# Characters of content that identify a duplicate chunk
DEDUP_PREFIX = 200


def infer_theme(question: str) -> str:
    """First theme with a keyword in the question."""
    text = question.lower()
    for theme, keywords in THEME_KEYWORDS:
        if any(k in text for k in keywords):
            return theme
    return GENERAL_THEME


def deduplicate(chunks: Iterable[RetrievedChunk]) -> list[RetrievedChunk]:
    """Drop chunks whose normalized leading text was already seen."""
    seen: set[str] = set()
    result = []
    for chunk in chunks:
        key = re.sub(r"\s+", " ", chunk.content[:DEDUP_PREFIX]).strip()
        if key and key not in seen:
            seen.add(key)
            result.append(chunk)
    return result


def rerank(chunks: Iterable[RetrievedChunk], question: str) -> list[RetrievedChunk]:
    """Order by question-word overlap; longer words count more."""
    words = [w for w in re.findall(r"\w+", question.lower()) if len(w) > 2]

    def relevance(chunk: RetrievedChunk) -> float:
        content = chunk.content.lower()
        score = sum(content.count(w) * len(w) / 10 for w in words)
        return score * chunk.quality

    return sorted(chunks, key=relevance, reverse=True)
