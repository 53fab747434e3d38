"""Knowledge base module: question-pattern routing over the built-in fact tables"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from . import builtin_knowledge

logger = logging.getLogger(__name__)

PATTERN_FOLLOW_UP = "\n\nWould you like to know more about this topic? 🤓"
DIRECT_FOLLOW_UP = "\n\nIs there anything else you'd like to learn about?"

# Shortest cleaned text that may be matched *inside* a longer key
MIN_PARTIAL_MATCH = 4

_PUNCT_RE = re.compile(r"[^\w\s]")


def normalize(text: str) -> str:
    """Lowercase, drop punctuation and stop words."""
    words = _PUNCT_RE.sub('', text.lower()).split()
    return ' '.join(w for w in words if w not in builtin_knowledge.STOP_WORDS)


def _index(table: Dict[str, str]) -> List[Tuple[str, str]]:
    """Normalize table keys once, keeping table order."""
    return [(normalize(key), fact) for key, fact in table.items()]


class KnowledgeBase:
    """
    Static fact lookup.

    query() first routes the message by question prefix ("what is",
    "who is", ...) to a matching table; if nothing matches it falls
    back to a direct definition lookup on the whole message.
    """

    def __init__(self,
                 definitions: Dict[str, str] = None,
                 people: Dict[str, str] = None,
                 events: Dict[str, str] = None,
                 processes: Dict[str, str] = None,
                 locations: Dict[str, str] = None):
        self.definitions = _index(definitions or builtin_knowledge.DEFINITIONS)
        self.people = _index(people or builtin_knowledge.PEOPLE)
        self.events = dict(events or builtin_knowledge.EVENTS)
        self.processes = dict(processes or builtin_knowledge.PROCESSES)
        self.locations = _index(locations or builtin_knowledge.LOCATIONS)

        # Prefix → sub-lookup, checked in this order
        self.patterns: List[Tuple[str, Callable[[str], Optional[str]]]] = [
            ('what is', self.lookup_definition),
            ('tell me about', self.lookup_definition),
            ('explain', self.lookup_definition),
            ('who is', self.lookup_person),
            ('when did', self.lookup_event),
            ('how does', self.lookup_process),
            ('where is', self.lookup_location),
        ]

    # ── Public API ────────────────────────────────────────────────────────────

    def query(self, text: str) -> Optional[str]:
        """Return a fact with a follow-up invitation, or None."""
        lowered = text.lower()

        for prefix, lookup in self.patterns:
            if prefix not in lowered:
                continue
            remainder = lowered.replace(prefix, '', 1).strip()
            fact = lookup(remainder)
            if fact:
                logger.info(f"Knowledge hit via {prefix!r}: {remainder!r}")
                return fact + PATTERN_FOLLOW_UP

        fact = self.lookup_definition(lowered)
        if fact:
            logger.info(f"Knowledge hit via direct lookup: {text!r}")
            return fact + DIRECT_FOLLOW_UP

        return None

    def lookup_definition(self, text: str) -> Optional[str]:
        return self._lookup(self.definitions, text)

    def lookup_person(self, text: str) -> Optional[str]:
        return self._lookup(self.people, text)

    def lookup_location(self, text: str) -> Optional[str]:
        return self._lookup(self.locations, text)

    def lookup_event(self, text: str) -> Optional[str]:
        """Match an event whose first two words appear in the text."""
        lowered = text.lower()
        for key, fact in self.events.items():
            if ' '.join(key.split()[:2]) in lowered:
                return fact
        return None

    def lookup_process(self, text: str) -> Optional[str]:
        """Match a process whose first word appears in the text."""
        lowered = text.lower()
        for key, fact in self.processes.items():
            if key.split()[0] in lowered:
                return fact
        return None

    def get_stats(self) -> Dict[str, int]:
        return {
            "definitions": len(self.definitions),
            "people": len(self.people),
            "events": len(self.events),
            "processes": len(self.processes),
            "locations": len(self.locations),
        }

    # ── Matching ──────────────────────────────────────────────────────────────

    @staticmethod
    def _lookup(entries: List[Tuple[str, str]], text: str) -> Optional[str]:
        """
        Exact match on the cleaned text, then substring containment in
        either direction. The cleaned text must be at least
        MIN_PARTIAL_MATCH characters to match inside a longer key. The
        first key in table order wins, so keys that contain one another
        resolve by position rather than by best fit.
        """
        cleaned = normalize(text)
        if not cleaned:
            return None

        for key, fact in entries:
            if key == cleaned:
                return fact

        for key, fact in entries:
            if key in cleaned:
                return fact
            if len(cleaned) >= MIN_PARTIAL_MATCH and cleaned in key:
                return fact

        return None
