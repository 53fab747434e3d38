"""Topic classification and templated replies"""

import logging
import random
import re
from typing import Dict, List, Sequence

from . import config
from .conversation import ConversationContext

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = 'default'
FALLBACK_REPLY = "I'm listening! What would you like to know or talk about?"

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  TOPIC KEYWORDS (checked in this order)
# ═══════════════════════════════════════════════════════════════════════════════

TOPICS: Dict[str, List[str]] = {
    'greeting': ['hello', 'hi', 'hey', 'good morning', 'good afternoon', 'good evening'],
    'farewell': ['bye', 'goodbye', 'see you', 'farewell', 'take care'],
    'thanks': ['thank you', 'thanks', 'appreciate', 'grateful'],
    'programming': ['code', 'programming', 'javascript', 'python', 'html', 'css',
                    'algorithm', 'function'],
    'math': ['calculate', 'math', 'mathematics', 'equation', 'solve', 'number'],
    'weather': ['weather', 'temperature', 'rain', 'sunny', 'cloudy', 'forecast'],
    'jokes': ['joke', 'funny', 'humor', 'laugh', 'comedy'],
    'facts': ['fact', 'interesting', 'tell me about', 'explain', 'what is'],
    'help': ['help', 'assist', 'support', 'how to', 'can you'],
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 2  REPLY TEMPLATES
# ═══════════════════════════════════════════════════════════════════════════════

RESPONSES: Dict[str, List[str]] = {
    'greeting': [
        "Hello! How can I help you today? 😊",
        "Hi there! What would you like to talk about?",
        "Hey! I'm here to assist you with anything you need.",
        "Good to see you! How can I make your day better?",
    ],
    'farewell': [
        "Goodbye! Have a wonderful day! 👋",
        "See you later! Feel free to come back anytime.",
        "Take care! It was great chatting with you.",
        "Farewell! Hope I was helpful today.",
    ],
    'thanks': [
        "You're very welcome! Happy to help! 😊",
        "No problem at all! That's what I'm here for.",
        "My pleasure! Is there anything else you'd like to know?",
        "Glad I could help! Feel free to ask more questions.",
    ],
    'programming': [
        "I'd love to help with programming! What language or concept are you working with?",
        "Programming is fascinating! Are you looking for help with a specific problem or learning something new?",
        "Great choice! Coding opens up so many possibilities. What programming topic interests you?",
        "I'm here to help with your coding journey! What would you like to explore?",
    ],
    'math': [
        "Math can be fun! What kind of problem are you working on?",
        "I'm ready to help with mathematics! What calculation or concept do you need assistance with?",
        "Numbers and equations are my specialty! What mathematical challenge can I help you solve?",
        "Let's tackle some math together! What do you need help calculating or understanding?",
    ],
    'weather': [
        "I don't have access to real-time weather data, but I can help you understand weather patterns! What would you like to know?",
        "Weather is always interesting to discuss! While I can't give current conditions, I can explain meteorological concepts.",
        "I'd love to chat about weather! Though I don't have live data, I can share weather-related information.",
        "Weather talk! I can't provide current forecasts, but I'm happy to discuss climate and weather science.",
    ],
    'jokes': [
        "Why don't scientists trust atoms? Because they make up everything! 😄",
        "I told my computer a joke about UDP... I don't know if it got it! 💻",
        "Why did the programmer quit his job? He didn't get arrays! 🤓",
        "What do you call a bear with no teeth? A gummy bear! 🐻",
        "Why don't eggs tell jokes? They'd crack each other up! 🥚",
    ],
    'facts': [
        "Here's a fun fact: Honey never spoils! Archaeologists have found edible honey in ancient Egyptian tombs! 🍯",
        "Did you know? Octopuses have three hearts and blue blood! 🐙",
        "Interesting fact: Bananas are berries, but strawberries aren't! 🍌",
        "Cool fact: A group of flamingos is called a 'flamboyance'! 🦩",
        "Amazing fact: There are more possible games of chess than atoms in the observable universe! ♟️",
    ],
    'help': [
        "I'm here to help! I can assist with:\n• General questions and conversations\n• Programming and technology\n• Math problems\n• Creative writing\n• Fun facts and jokes\n\nWhat would you like help with?",
        "Happy to assist! I can help you with various topics like coding, math, general questions, or just have a friendly chat. What interests you?",
        "I'm your AI assistant! I can provide information, help solve problems, answer questions, or just chat. How can I help you today?",
        "Need assistance? I'm here for you! Whether it's learning something new, solving a problem, or having a conversation, I'm ready to help.",
    ],
    DEFAULT_TOPIC: [
        "That's interesting! Tell me more about that.",
        "I'd love to learn more about your thoughts on this topic.",
        "That's a great point! What else would you like to discuss?",
        "Interesting perspective! How can I help you explore this further?",
        FALLBACK_REPLY,
        "That's fascinating! Is there a specific aspect you'd like to dive deeper into?",
        "Thanks for sharing! What questions do you have about this?",
        "I appreciate you bringing that up! How can I assist you with it?",
    ],
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 3  FLAVOR TEXT
# ═══════════════════════════════════════════════════════════════════════════════

JAVASCRIPT_HINT = (
    "\n\nJavaScript is a versatile language! Are you working on web development, "
    "Node.js, or something else?"
)
PYTHON_HINT = (
    "\n\nPython is excellent for beginners and experts alike! What kind of project "
    "are you working on?"
)
NUMBERS_HINT = (
    "\n\nI see you mentioned some numbers! Feel free to share the specific calculation "
    "you need help with."
)
ENTHUSIASM = [
    "\n\nI'm really enjoying our conversation! 😊",
    "\n\nYou ask great questions!",
    "\n\nThis is a fun discussion!",
    "\n\nI love chatting with curious people like you!",
]

_DIGIT_RE = re.compile(r'\d')


def _check_tables(topics: Dict[str, Sequence[str]], responses: Dict[str, Sequence[str]]):
    if not responses.get(DEFAULT_TOPIC):
        raise ValueError(f"Response table needs a non-empty {DEFAULT_TOPIC!r} entry")
    missing = [t for t in topics if not responses.get(t)]
    if missing:
        raise ValueError(f"Topics without reply templates: {', '.join(missing)}")


class TopicClassifier:
    """Maps a message to the first topic whose keyword it contains."""

    def __init__(self, topics: Dict[str, List[str]] = None):
        self.topics = topics or TOPICS

    def classify(self, text: str) -> str:
        lowered = text.lower()
        for topic, keywords in self.topics.items():
            if any(keyword in lowered for keyword in keywords):
                return topic
        return DEFAULT_TOPIC


class ResponseTemplates:
    """
    Picks templated replies and decorates them with contextual flavor.
    All randomness comes from the injected rng so replies are reproducible.
    """

    def __init__(self, rng: random.Random = None, responses: Dict[str, List[str]] = None,
                 topics: Dict[str, List[str]] = None):
        self.rng = rng or random.Random()
        self.responses = responses or RESPONSES
        _check_tables(topics or TOPICS, self.responses)

    def candidates(self, topic: str) -> List[str]:
        """Templates eligible for a topic."""
        return self.responses.get(topic) or self.responses[DEFAULT_TOPIC]

    def render(self, topic: str) -> str:
        return self.rng.choice(self.candidates(topic))

    def add_context(self, response: str, message: str, topic: str,
                    context: ConversationContext) -> str:
        """Append topic hints and, sometimes, a bit of enthusiasm."""
        lowered = message.lower()

        if topic == 'programming':
            if 'javascript' in lowered:
                response += JAVASCRIPT_HINT
            elif 'python' in lowered:
                response += PYTHON_HINT

        if topic == 'math' and _DIGIT_RE.search(message):
            response += NUMBERS_HINT

        if context.count_user_turns(config.ENTHUSIASM_WINDOW) >= config.ENTHUSIASM_MIN_USER_TURNS:
            if self.rng.random() < config.ENTHUSIASM_PROBABILITY:
                response += self.rng.choice(ENTHUSIASM)
                logger.debug("Added enthusiasm")

        return response
