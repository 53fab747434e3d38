"""Configuration module for scriptbot"""

from dataclasses import dataclass

# Conversation settings
MAX_CONVERSATION_HISTORY = 20   # turns (user + bot) kept in memory
ENTHUSIASM_WINDOW = 6           # recent turns inspected for enthusiasm
ENTHUSIASM_MIN_USER_TURNS = 3   # strictly more than 2 user turns
ENTHUSIASM_PROBABILITY = 0.3

# Search settings
SEARCH_DELAY = 1.0       # seconds of simulated network latency
SEARCH_TIMEOUT = 15      # seconds before a live search is abandoned
MAX_SEARCH_RESULTS = 3
MIN_SEARCH_QUERY_LENGTH = 2

# Web request settings (live search provider only)
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
REQUEST_TIMEOUT = 10  # seconds
INSTANT_ANSWER_URL = "https://api.duckduckgo.com/"

# Response delay per speed setting, in seconds
RESPONSE_DELAYS = {
    "fast": 0.5,
    "normal": 1.5,
    "slow": 3.0,
}
DEFAULT_RESPONSE_SPEED = "normal"

# CLI settings
CLI_PROMPT = "You"
CLI_ASSISTANT = "AI Assistant"
CLI_WIDTH = 62


@dataclass
class ChatSettings:
    """User-facing display settings consumed by the front-end, never by the pipeline."""

    bot_name: str = CLI_ASSISTANT
    response_speed: str = DEFAULT_RESPONSE_SPEED
    show_timestamps: bool = True
    show_typing_indicator: bool = True

    @property
    def response_delay(self) -> float:
        """Seconds to wait before asking the pipeline for a reply."""
        return RESPONSE_DELAYS.get(self.response_speed, RESPONSE_DELAYS[DEFAULT_RESPONSE_SPEED])
