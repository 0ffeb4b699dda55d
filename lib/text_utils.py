from __future__ import annotations

import re
from typing import Iterable


def normalize_text(text: str) -> str:
    """Normalize text for comparisons.

    Lowercases and collapses whitespace.
    """
    return " ".join((text or "").strip().lower().split())


def collapse_spaces(text: str) -> str:
    return " ".join((text or "").split())


def tokenize(text: str) -> list[str]:
    """Tokenize text into simple alphanumeric tokens.

    This is a lightweight tokenizer intended for similarity checks and hashtags.
    """
    normalized = normalize_text(text)
    tokens: list[str] = []
    current: list[str] = []

    for ch in normalized:
        if ch.isalnum():
            current.append(ch)
        else:
            if current:
                tokens.append("".join(current))
                current = []

    if current:
        tokens.append("".join(current))

    return tokens


def dedupe_preserve_order(items: Iterable[str]) -> list[str]:
    """Deduplicate strings preserving order (case-insensitive via normalize_text)."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        key = normalize_text(item)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(collapse_spaces(item))
    return out


def truncate_title_max_chars(title: str, max_chars: int) -> str:
    s = collapse_spaces(title)
    if not s:
        return s
    if len(s) <= max_chars:
        return s
    cut = s[:max_chars].rstrip()
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0].rstrip()
    return cut.rstrip(" .!?,;:-")


def slugify(text: str) -> str:
    s = (text or "").lower().strip()
    s = s.replace("’", "").replace("'", "")
    s = re.sub(r"[^a-z0-9\s-]", "", s)
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


def headline_case(text: str) -> str:
    """Capitalize the first letter of each word, leaving acronyms and inner caps alone.

    'ai-assisted design systems' -> 'Ai-assisted Design Systems'
    'SaaS pricing' -> 'SaaS Pricing'
    """
    words = collapse_spaces(text).split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words if w)


def lower_first(text: str) -> str:
    """Lowercase the first character unless the first word looks like an acronym."""
    s = (text or "").strip()
    if not s:
        return s
    first = s.split(" ", 1)[0]
    if len(first) > 1 and first[1:2].isupper():
        return s
    return s[:1].lower() + s[1:]


def hashtag_token(phrase: str, *, max_chars: int = 30) -> str:
    """Turn a keyword phrase into a hashtag: non-alphanumerics stripped, words camel-joined.

    'cold brew' -> '#ColdBrew'
    'ai design workflow' -> '#AiDesignWorkflow'
    'crème brûlée' -> '#CrèmeBrûlée'
    Returns '' when nothing alphanumeric remains.
    """
    words = re.findall(r"[^\W_]+", phrase or "")
    joined = "".join(w[:1].upper() + w[1:] for w in words)
    if not joined:
        return ""
    return "#" + joined[:max_chars]
