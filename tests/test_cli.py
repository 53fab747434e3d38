import asyncio
import logging
import random
import re

import pytest
from colorama import Fore, Style

from scriptbot import cli, config
from scriptbot.cli import ChatCLI, main, render_markup
from scriptbot.config import ChatSettings
from scriptbot.pipeline import ResponsePipeline
from scriptbot.responses import RESPONSES
from scriptbot.search import SimulatedSearchProvider

_ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text):
    return _ANSI_RE.sub('', text)


@pytest.fixture
def chat(monkeypatch):
    monkeypatch.setattr(cli, "_typewrite", lambda *args, **kwargs: None)
    monkeypatch.setitem(config.RESPONSE_DELAYS, "fast", 0)
    settings = ChatSettings(response_speed="fast", show_typing_indicator=False)
    pipeline = ResponsePipeline(rng=random.Random(0),
                                search_provider=SimulatedSearchProvider(delay=0))
    return ChatCLI(settings, pipeline)


def test_render_markup_keeps_text():
    rendered = render_markup("**bold** and `code` and *soft* at https://example.com")
    assert strip_ansi(rendered) == "bold and code and soft at https://example.com"
    assert Style.BRIGHT in rendered
    assert Fore.CYAN in rendered
    assert Fore.BLUE in rendered


def test_render_markup_code_block():
    rendered = strip_ansi(render_markup("Try:\n```\nprint('hi')\n```"))
    assert rendered == "Try:\n    print('hi')"


def test_math_reply_survives_rendering():
    assert strip_ansi(render_markup("🧮 3 * 4 = **12**")) == "🧮 3 * 4 = 12"


@pytest.mark.parametrize("speed,delay", [
    ("fast", 0.5), ("normal", 1.5), ("slow", 3.0), ("warp", 1.5),
])
def test_response_delay(speed, delay):
    assert ChatSettings(response_speed=speed).response_delay == delay


def test_commands(chat):
    assert chat.handle_command("help") is True
    assert chat.handle_command("settings") is True
    assert chat.handle_command("history") is True
    assert chat.handle_command("what is 2 + 2") is None
    assert chat.handle_command("quit") is False


def test_clear_command(chat):
    asyncio.run(chat.reply_to("hello"))
    assert chat.handle_command("clear") is True
    assert len(chat.pipeline.context) == 0


def test_reply_to_uses_pipeline(chat):
    assert asyncio.run(chat.reply_to("hello")) in RESPONSES["greeting"]


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "scriptbot v" in capsys.readouterr().out


def test_stats_command(chat, capsys):
    asyncio.run(chat.reply_to("hello"))
    assert chat.handle_command("stats") is True
    out = strip_ansi(capsys.readouterr().out)
    assert "definitions" in out
    assert "total_turns" in out
    assert re.search(r"total_turns\s+2\b", out)


def test_verbose_flag_configures_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(ChatCLI, "run", lambda self: None)
    package_logger = logging.getLogger("scriptbot")
    previous = package_logger.level
    try:
        main(["--verbose", "--no-typing"])
        assert len(calls) == 1
        assert package_logger.level == logging.INFO
    finally:
        package_logger.setLevel(previous)


def test_quiet_by_default(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(ChatCLI, "run", lambda self: None)

    main([])

    assert calls == []
