"""Conversation memory: bounded rolling history of turns"""

import logging
from typing import Dict, List, NamedTuple, Optional

from . import config

logger = logging.getLogger(__name__)

USER = "user"
BOT = "bot"


class Turn(NamedTuple):
    """Single conversation turn"""

    role: str  # 'user' or 'bot'
    text: str


class ConversationContext:
    """
    Rolling conversation history.
    Oldest turns are evicted first once the cap is exceeded.
    """

    def __init__(self, max_turns: int = None):
        self.max_turns = config.MAX_CONVERSATION_HISTORY if max_turns is None else max_turns
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be at least 1, got {self.max_turns}")
        self.history: List[Turn] = []

    def __len__(self) -> int:
        return len(self.history)

    def add_turn(self, role: str, text: str) -> Turn:
        """Append a turn and evict the oldest ones beyond the cap."""
        if role not in (USER, BOT):
            raise ValueError(f"Unknown role: {role!r}")
        turn = Turn(role, text)
        self.history.append(turn)
        self._evict()
        return turn

    def add_user_turn(self, text: str) -> Turn:
        return self.add_turn(USER, text)

    def add_bot_turn(self, text: str) -> Turn:
        return self.add_turn(BOT, text)

    def _evict(self):
        overflow = len(self.history) - self.max_turns
        if overflow > 0:
            self.history = self.history[overflow:]
            logger.debug(f"Evicted {overflow} turn(s) from history")

    def get_recent(self, n: Optional[int] = None) -> List[Turn]:
        """Get the last n turns (all of them when n is None)."""
        if n is None:
            return list(self.history)
        if n <= 0:
            return []
        return self.history[-n:]

    def count_user_turns(self, n: int = config.ENTHUSIASM_WINDOW) -> int:
        """Number of user turns among the last n turns."""
        return sum(1 for turn in self.get_recent(n) if turn.role == USER)

    def get_context_string(self, n: int = 6) -> str:
        """Recent turns as a readable transcript."""
        lines = []
        for turn in self.get_recent(n):
            prefix = "User" if turn.role == USER else "Bot"
            lines.append(f"{prefix}: {turn.text}")
        return "\n".join(lines)

    def clear(self):
        """Clear conversation history"""
        self.history = []
        logger.info("Conversation history cleared")

    def get_summary(self) -> Dict:
        """Get conversation summary"""
        user_turns = sum(1 for turn in self.history if turn.role == USER)
        return {
            "total_turns": len(self.history),
            "user_turns": user_turns,
            "bot_turns": len(self.history) - user_turns,
            "max_turns": self.max_turns,
        }
