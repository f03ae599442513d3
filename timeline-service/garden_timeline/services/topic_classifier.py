"""
topic_classifier.py — Keyword-dictionary topic classification.

A document gets every topic for which ANY keyword is a substring of its
lowercased original content. Zero, one or many topics per document.

Dictionaries are configuration, not code: one TopicTable per language,
loaded from topic_keywords.json (or injected directly by the caller).

Asset layout:
    {
      "version": 1,
      "languages": {
        "en": {"topics": [{"label": "Design", "keywords": ["courtyard", ...]}, ...]},
        "fa": {"topics": [...]}
      }
    }
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple

from garden_timeline.utils.normalize import lower_for_matching

logger = logging.getLogger(__name__)


class TopicConfigError(ValueError):
    """The topic dictionary asset is malformed."""


class UnsupportedLanguageError(KeyError):
    """No topic table is configured for the requested language."""

    def __init__(self, language: str, available: Iterable[str] = ()):
        self.language = language
        self.available = sorted(available)
        super().__init__(language)

    def __str__(self) -> str:
        return (
            f"Unsupported language '{self.language}'. "
            f"Available: {', '.join(self.available) or 'none'}"
        )


@dataclass(frozen=True)
class Topic:
    label: str
    keywords: FrozenSet[str]

    def matches(self, lowered_content: str) -> bool:
        return any(keyword in lowered_content for keyword in self.keywords)


@dataclass(frozen=True)
class TopicTable:
    """Ordered, immutable topic dictionary for one language."""
    language: str
    topics: Tuple[Topic, ...]

    @property
    def labels(self) -> List[str]:
        return [t.label for t in self.topics]

    def classify(self, content: str) -> List[str]:
        """Labels of every topic matched by ``content``, in table order."""
        lowered = lower_for_matching(content)
        if not lowered:
            return []
        return [t.label for t in self.topics if t.matches(lowered)]

    @classmethod
    def from_mapping(
        cls, language: str, topics: Mapping[str, Iterable[str]]
    ) -> "TopicTable":
        """Build a table from ``{label: keywords}``; label order is kept."""
        return cls(
            language=language,
            topics=tuple(
                _make_topic(label, keywords, language)
                for label, keywords in topics.items()
            ),
        )


def _make_topic(label: Any, keywords: Any, language: str) -> Topic:
    if not isinstance(label, str) or not label.strip():
        raise TopicConfigError(f"[{language}] topic label must be a non-empty string")
    if isinstance(keywords, str) or not isinstance(keywords, Iterable):
        raise TopicConfigError(f"[{language}] keywords of '{label}' must be a list")

    cleaned = set()
    for kw in keywords:
        if not isinstance(kw, str):
            raise TopicConfigError(f"[{language}] non-string keyword in '{label}'")
        kw = kw.strip().lower()
        if kw:
            cleaned.add(kw)
    if not cleaned:
        raise TopicConfigError(f"[{language}] topic '{label}' has no keywords")
    return Topic(label=label.strip(), keywords=frozenset(cleaned))


def parse_topic_config(raw: Mapping[str, Any]) -> Dict[str, TopicTable]:
    """Validate a decoded topic asset and build one TopicTable per language."""
    if not isinstance(raw, Mapping):
        raise TopicConfigError("topic config must be a JSON object")
    languages = raw.get("languages")
    if not isinstance(languages, Mapping) or not languages:
        raise TopicConfigError("topic config needs a non-empty 'languages' object")

    tables: Dict[str, TopicTable] = {}
    for language, block in languages.items():
        entries = block.get("topics") if isinstance(block, Mapping) else None
        if not isinstance(entries, list) or not entries:
            raise TopicConfigError(f"[{language}] needs a non-empty 'topics' list")

        topics = []
        seen = set()
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise TopicConfigError(f"[{language}] topic entries must be objects")
            topic = _make_topic(entry.get("label"), entry.get("keywords"), language)
            if topic.label in seen:
                raise TopicConfigError(f"[{language}] duplicate topic label '{topic.label}'")
            seen.add(topic.label)
            topics.append(topic)

        tables[language] = TopicTable(language=language, topics=tuple(topics))
    return tables


def load_topic_tables(path: str) -> Dict[str, TopicTable]:
    """Read and validate the topic dictionary asset at ``path``."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise TopicConfigError(f"topic config is not valid JSON: {e}") from e

    tables = parse_topic_config(raw)
    logger.info(
        "[TOPICS] Loaded v%s from %s: %s",
        raw.get("version", "?"),
        path,
        ", ".join(f"{lang}={len(t.topics)}" for lang, t in tables.items()),
    )
    return tables


def get_table(tables: Mapping[str, TopicTable], language: str) -> TopicTable:
    try:
        return tables[language]
    except KeyError:
        raise UnsupportedLanguageError(language, tables.keys()) from None
