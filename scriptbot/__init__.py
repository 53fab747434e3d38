"""scriptbot: scripted conversational assistant"""

__version__ = "0.1.0"
__author__ = "scriptbot contributors"
__powered_by__ = "pattern matching, not magic"

from .conversation import ConversationContext, Turn
from .knowledge import KnowledgeBase
from .math_eval import MathEvaluator
from .pipeline import ResponsePipeline, Reply
from .responses import ResponseTemplates, TopicClassifier
from .search import (
    DuckDuckGoSearchProvider,
    SearchError,
    SearchProvider,
    SimulatedSearchProvider,
    WebSearchStub,
)

__all__ = [
    "ConversationContext",
    "Turn",
    "KnowledgeBase",
    "MathEvaluator",
    "ResponsePipeline",
    "Reply",
    "ResponseTemplates",
    "TopicClassifier",
    "DuckDuckGoSearchProvider",
    "SearchError",
    "SearchProvider",
    "SimulatedSearchProvider",
    "WebSearchStub",
]
