"""
Simple usage example for scriptbot

Sends a few messages through the response pipeline and prints which
stage answered each one.
"""

import asyncio
import random

from scriptbot import ResponsePipeline, SimulatedSearchProvider


async def main():
    bot = ResponsePipeline(
        rng=random.Random(42),
        search_provider=SimulatedSearchProvider(delay=0.2),
    )

    for message in [
        "Hello!",
        "What is 12 * 7?",
        "what is 15% of 80",
        "Who is Ada Lovelace?",
        "Search for the latest python release",
        "Tell me a joke",
        "I'm learning javascript",
    ]:
        reply = await bot.generate_reply(message)
        print("=" * 60)
        print(f"You: {message}")
        print(f"[{reply.source}{' / ' + reply.topic if reply.topic else ''}]")
        print(reply.text)

    print("=" * 60)
    print(bot.context.get_summary())


if __name__ == "__main__":
    asyncio.run(main())
