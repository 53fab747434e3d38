"""Response pipeline: orchestrates every reply strategy"""

import asyncio
import inspect
import logging
import random
from typing import NamedTuple, Optional

from .conversation import ConversationContext
from .knowledge import KnowledgeBase
from .math_eval import MathEvaluator
from .responses import DEFAULT_TOPIC, FALLBACK_REPLY, ResponseTemplates, TopicClassifier
from .search import SearchProvider, WebSearchStub

logger = logging.getLogger(__name__)

KNOWLEDGE = "knowledge"
SEARCH = "search"
TOPIC = "topic"


class Reply(NamedTuple):
    source: str                  # arithmetic | percentage | knowledge | search | topic
    text: str
    topic: Optional[str] = None  # set for topic replies only


class ResponsePipeline:
    """
    Turns a user message into a reply.

    Stages run in a fixed order and the first one that produces a reply wins:
      1. Arithmetic / percentage
      2. Knowledge base
      3. Web search (the only stage that awaits)
      4. Topic templates + contextual flavor

    Calls are serialized, so replies land in history in call order.
    """

    def __init__(self,
                 rng: random.Random = None,
                 search_provider: SearchProvider = None,
                 context: ConversationContext = None):
        self.rng = rng or random.Random()
        self.context = context or ConversationContext()

        self.math = MathEvaluator()
        self.knowledge_base = KnowledgeBase()
        self.web_search = WebSearchStub(search_provider)
        self.classifier = TopicClassifier()
        self.templates = ResponseTemplates(self.rng)

        self.stages = [
            self._math_stage,
            self._knowledge_stage,
            self._search_stage,
            self._topic_stage,
        ]

        self.last_source = ''
        self.last_topic: Optional[str] = None
        self._lock = asyncio.Lock()

    # ── Stages ────────────────────────────────────────────────────────────────

    def _math_stage(self, text: str) -> Optional[Reply]:
        result = self.math.evaluate(text)
        if result is None:
            return None
        return Reply(result.kind, result.text)

    def _knowledge_stage(self, text: str) -> Optional[Reply]:
        fact = self.knowledge_base.query(text)
        return Reply(KNOWLEDGE, fact) if fact else None

    async def _search_stage(self, text: str) -> Optional[Reply]:
        result = await self.web_search.search(text)
        return Reply(SEARCH, result) if result else None

    def _topic_stage(self, text: str) -> Reply:
        topic = self.classifier.classify(text)
        response = self.templates.render(topic)
        response = self.templates.add_context(response, text, topic, self.context)
        return Reply(TOPIC, response, topic)

    # ── Public API ────────────────────────────────────────────────────────────

    async def generate_reply(self, user_text: str) -> Reply:
        """Run the stage chain and record both turns in history."""
        async with self._lock:
            self.context.add_user_turn(user_text)

            reply = None
            for stage in self.stages:
                try:
                    reply = stage(user_text)
                    if inspect.isawaitable(reply):
                        reply = await reply
                except Exception as e:
                    logger.warning(f"Stage {stage.__name__} failed: {e}")
                    reply = None
                if reply and reply.text:
                    break

            if not reply or not reply.text:
                reply = Reply(TOPIC, FALLBACK_REPLY, DEFAULT_TOPIC)

            self.context.add_bot_turn(reply.text)
            self.last_source = reply.source
            self.last_topic = reply.topic
            logger.info(f"Reply from {reply.source} stage")
            return reply

    async def generate_response(self, user_text: str) -> str:
        """Entry point for front-ends: always resolves to a non-empty string."""
        reply = await self.generate_reply(user_text)
        return reply.text

    def clear(self):
        self.context.clear()
        self.last_source = ''
        self.last_topic = None
