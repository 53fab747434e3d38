import asyncio
import random

import pytest

from scriptbot import builtin_knowledge as bk
from scriptbot.math_eval import DIVISION_BY_ZERO_MESSAGE
from scriptbot.pipeline import ResponsePipeline
from scriptbot.responses import DEFAULT_TOPIC, ENTHUSIASM, FALLBACK_REPLY, RESPONSES
from scriptbot.search import SIMULATED_NOTE, SimulatedSearchProvider


def ask(pipeline, text):
    return asyncio.run(pipeline.generate_reply(text))


def test_division_by_zero(pipeline):
    reply = ask(pipeline, "5 / 0")
    assert reply.source == "arithmetic"
    assert DIVISION_BY_ZERO_MESSAGE in reply.text


def test_percentage(pipeline):
    reply = ask(pipeline, "what is 50% of 200")
    assert reply.source == "percentage"
    assert "100" in reply.text


def test_knowledge(pipeline):
    reply = ask(pipeline, "what is photosynthesis")
    assert reply.source == "knowledge"
    assert bk.DEFINITIONS['photosynthesis'] in reply.text


def test_greeting(pipeline):
    reply = ask(pipeline, "hello")
    assert reply.source == "topic"
    assert reply.topic == "greeting"
    assert reply.text in RESPONSES["greeting"]


def test_search(pipeline):
    reply = ask(pipeline, "search for python tutorials")
    assert reply.source == "search"
    assert SIMULATED_NOTE in reply.text


def test_math_runs_before_knowledge(pipeline):
    reply = ask(pipeline, "what is 3 * 3 in machine learning")
    assert reply.source == "arithmetic"
    assert "**9**" in reply.text


def test_knowledge_runs_before_search(pipeline):
    reply = ask(pipeline, "look up who is Alan Turing")
    assert reply.source == "knowledge"


def test_programming_hint_on_topic_path(pipeline):
    reply = ask(pipeline, "I'm learning javascript")
    assert reply.topic == "programming"
    assert "JavaScript is a versatile language!" in reply.text


def test_generate_response_returns_text(pipeline):
    text = asyncio.run(pipeline.generate_response("hello"))
    assert text in RESPONSES["greeting"]
    assert pipeline.last_source == "topic"
    assert pipeline.last_topic == "greeting"


def test_each_call_records_user_and_bot_turns(pipeline):
    ask(pipeline, "hello")
    ask(pipeline, "5 + 5")
    roles = [turn.role for turn in pipeline.context.get_recent()]
    assert roles == ["user", "bot", "user", "bot"]
    assert pipeline.context.get_recent()[2].text == "5 + 5"


def test_history_never_exceeds_cap(pipeline):
    for i in range(30):
        ask(pipeline, f"message number {i}")
        assert len(pipeline.context) <= 20
    assert len(pipeline.context) == 20
    assert pipeline.context.get_recent()[-1].role == "bot"


@pytest.mark.parametrize("text", ["", "   ", "?!", "purple elephants"])
def test_always_non_empty(pipeline, text):
    assert asyncio.run(pipeline.generate_response(text))


def test_same_seed_same_replies():
    messages = ["hello", "tell me a joke", "give me a fact", "thanks", "bye", "hmm"]

    def run(seed):
        bot = ResponsePipeline(rng=random.Random(seed),
                               search_provider=SimulatedSearchProvider(delay=0))
        return [asyncio.run(bot.generate_response(m)) for m in messages]

    assert run(7) == run(7)


def test_repeated_message_draws_from_same_candidates(pipeline):
    first = ask(pipeline, "tell me a joke")
    second = ask(pipeline, "tell me a joke")
    assert first.topic == second.topic == "jokes"
    for reply in (first, second):
        assert any(reply.text.startswith(c) for c in RESPONSES["jokes"])


def test_enthusiasm_after_a_few_messages(fixed_random):
    bot = ResponsePipeline(rng=fixed_random(0.0),
                           search_provider=SimulatedSearchProvider(delay=0))
    replies = [asyncio.run(bot.generate_response("hello")) for _ in range(3)]
    assert replies[0] == RESPONSES["greeting"][0]
    assert replies[1] == RESPONSES["greeting"][0]
    assert replies[2] == RESPONSES["greeting"][0] + ENTHUSIASM[0]


def test_no_enthusiasm_on_non_topic_replies(fixed_random):
    bot = ResponsePipeline(rng=fixed_random(0.0))
    for _ in range(4):
        text = asyncio.run(bot.generate_response("2 + 2"))
    assert not any(text.endswith(e) for e in ENTHUSIASM)


def test_failing_stage_is_skipped(pipeline, monkeypatch):
    def boom(text):
        raise RuntimeError("broken evaluator")

    monkeypatch.setattr(pipeline.math, "evaluate", boom)
    reply = ask(pipeline, "hello")
    assert reply.topic == "greeting"


def test_all_stages_failing_still_replies(pipeline, monkeypatch):
    def boom(text):
        raise RuntimeError("broken")

    monkeypatch.setattr(pipeline.math, "evaluate", boom)
    monkeypatch.setattr(pipeline.classifier, "classify", boom)
    reply = ask(pipeline, "hello")
    assert reply.text == FALLBACK_REPLY
    assert pipeline.context.get_recent()[-1].text == FALLBACK_REPLY


def test_fallback_reply_is_a_default_template():
    assert FALLBACK_REPLY in RESPONSES[DEFAULT_TOPIC]


def test_concurrent_calls_are_applied_in_order():
    bot = ResponsePipeline(rng=random.Random(0),
                           search_provider=SimulatedSearchProvider(delay=0.05))

    async def both():
        return await asyncio.gather(
            bot.generate_response("search for cats"),
            bot.generate_response("hello"),
        )

    asyncio.run(both())
    texts = [turn.text for turn in bot.context.get_recent()]
    assert texts[0] == "search for cats"
    assert "cats" in texts[1]
    assert texts[2] == "hello"
    assert texts[3] in RESPONSES["greeting"]


def test_clear(pipeline):
    ask(pipeline, "hello")
    pipeline.clear()
    assert len(pipeline.context) == 0
    assert pipeline.last_source == ""
