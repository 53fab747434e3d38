import pytest

from scriptbot import config
from scriptbot.conversation import BOT, USER, ConversationContext, Turn


def test_turns_are_appended_in_order():
    context = ConversationContext()
    context.add_user_turn("hi")
    context.add_bot_turn("hello!")
    assert context.get_recent() == [Turn(USER, "hi"), Turn(BOT, "hello!")]


def test_history_is_capped_with_fifo_eviction():
    context = ConversationContext(max_turns=20)
    for i in range(35):
        context.add_user_turn(f"m{i}")
        assert len(context) <= 20
    assert len(context) == 20
    assert context.get_recent()[0].text == "m15"
    assert context.get_recent()[-1].text == "m34"


def test_default_cap_comes_from_config():
    assert ConversationContext().max_turns == config.MAX_CONVERSATION_HISTORY


def test_explicit_cap_is_kept():
    context = ConversationContext(max_turns=1)
    context.add_user_turn("a")
    context.add_bot_turn("b")
    assert context.get_recent() == [Turn(BOT, "b")]


@pytest.mark.parametrize("max_turns", [0, -3])
def test_non_positive_cap_is_rejected(max_turns):
    with pytest.raises(ValueError):
        ConversationContext(max_turns=max_turns)


def test_turns_are_immutable():
    turn = Turn(USER, "hi")
    with pytest.raises(AttributeError):
        turn.text = "changed"


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        ConversationContext().add_turn("system", "nope")


def test_count_user_turns_uses_window():
    context = ConversationContext()
    for i in range(4):
        context.add_user_turn(f"q{i}")
        context.add_bot_turn(f"a{i}")
    assert context.count_user_turns(6) == 3
    assert context.count_user_turns(2) == 1
    assert context.count_user_turns(0) == 0


def test_context_string_and_summary():
    context = ConversationContext()
    context.add_user_turn("hi")
    context.add_bot_turn("hello!")
    assert context.get_context_string() == "User: hi\nBot: hello!"
    assert context.get_summary() == {
        "total_turns": 2, "user_turns": 1, "bot_turns": 1, "max_turns": 20,
    }


def test_clear():
    context = ConversationContext()
    context.add_user_turn("hi")
    context.clear()
    assert len(context) == 0
