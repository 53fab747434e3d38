"""CLI interface for scriptbot"""

import argparse
import asyncio
import logging
import re
import sys
import threading
import time
from datetime import datetime

from colorama import init, Fore, Style

from . import __version__, __author__, __powered_by__
from . import config
from .config import ChatSettings
from .pipeline import ResponsePipeline
from .search import DuckDuckGoSearchProvider

# Initialize colorama for Windows support
init(autoreset=True)

logger = logging.getLogger(__name__)


# ── Markup rendering ─────────────────────────────────────────────────────────
_CODE_BLOCK_RE = re.compile(r'```([\s\S]*?)```')
_INLINE_CODE_RE = re.compile(r'`([^`]+)`')
_BOLD_RE = re.compile(r'\*\*(.*?)\*\*')
_ITALIC_RE = re.compile(r'\*(.*?)\*')
_URL_RE = re.compile(r'(https?://[^\s]+)')


def _code_block(match) -> str:
    body = match.group(1).strip('\n')
    return '\n'.join(f"{Fore.CYAN}    {line}{Style.RESET_ALL}" for line in body.splitlines())


def render_markup(text: str) -> str:
    """Turn the reply's lightweight markup into terminal colors."""
    text = _CODE_BLOCK_RE.sub(_code_block, text)
    text = _INLINE_CODE_RE.sub(lambda m: f"{Fore.CYAN}{m.group(1)}{Fore.RESET}", text)
    text = _BOLD_RE.sub(lambda m: f"{Style.BRIGHT}{m.group(1)}{Style.NORMAL}", text)
    text = _ITALIC_RE.sub(lambda m: f"{Style.DIM}{m.group(1)}{Style.NORMAL}", text)
    text = _URL_RE.sub(lambda m: f"{Fore.BLUE}{m.group(1)}{Fore.RESET}", text)
    return text


# ── Typewriter helper ────────────────────────────────────────────────────────
def _typewrite(text: str, color: str = Fore.WHITE, delay: float = 0.013, end: str = '\n'):
    """Print text with a typewriter effect, one character at a time."""
    if len(text) > 400:
        delay = 0.005
    elif len(text) > 200:
        delay = 0.009
    sys.stdout.write(color)
    sys.stdout.flush()
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        time.sleep(delay)
    sys.stdout.write(Style.RESET_ALL + end)
    sys.stdout.flush()


# ── Spinner ──────────────────────────────────────────────────────────────────
class _Spinner:
    """Animated braille spinner that runs in a background thread."""
    _FRAMES = ('⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏')

    def __init__(self, message: str, color: str = Fore.YELLOW):
        self.message = message
        self.color = color
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._spin, daemon=True)

    def _spin(self):
        i = 0
        while not self._stop.is_set():
            frame = self._FRAMES[i % len(self._FRAMES)]
            sys.stdout.write(f"\r{self.color}  {frame}  {self.message}{Style.RESET_ALL}   ")
            sys.stdout.flush()
            time.sleep(0.09)
            i += 1

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self._stop.set()
        self._thread.join()
        sys.stdout.write('\r' + ' ' * (len(self.message) + 14) + '\r')
        sys.stdout.flush()

    def __enter__(self):
        return self.start()

    def __exit__(self, *_):
        self.stop()


class ChatCLI:
    """Interactive terminal front-end for the response pipeline"""

    def __init__(self, settings: ChatSettings = None, pipeline: ResponsePipeline = None):
        self.settings = settings or ChatSettings()
        self.pipeline = pipeline or ResponsePipeline()

    def print_banner(self):
        W = config.CLI_WIDTH
        title = f"·  {self.settings.bot_name}  ·"
        print()
        print(f"{Fore.MAGENTA}╔{'═' * W}╗{Style.RESET_ALL}")
        print(f"{Fore.MAGENTA}║{Fore.CYAN + Style.BRIGHT}{title:^{W}}{Style.RESET_ALL}{Fore.MAGENTA}║{Style.RESET_ALL}")
        print(f"{Fore.MAGENTA}║{Fore.YELLOW}{'Type a message, or help for commands':^{W}}{Style.RESET_ALL}{Fore.MAGENTA}║{Style.RESET_ALL}")
        print(f"{Fore.MAGENTA}╚{'═' * W}╝{Style.RESET_ALL}")
        print()

    def print_help(self):
        bar = f"{Fore.CYAN}{'─' * 60}{Style.RESET_ALL}"
        print(f"\n{bar}")
        print(f"{Fore.CYAN + Style.BRIGHT}  Commands{Style.RESET_ALL}")
        print(bar)
        for cmd, desc in [
            ("help",           "Show this help message"),
            ("history",        "Show the recent conversation"),
            ("settings",       "Show current settings"),
            ("stats",          "Show knowledge base and conversation statistics"),
            ("clear",          "Clear the conversation"),
            ("version",        "Show version"),
            ("quit",           "Exit the application"),
        ]:
            print(f"  {Fore.GREEN}{cmd:<15}{Style.RESET_ALL}{Fore.WHITE}{desc}{Style.RESET_ALL}")

        print(f"\n{Fore.CYAN + Style.BRIGHT}  Examples{Style.RESET_ALL}")
        for ex in ["What is 15% of 80?", "Who is Ada Lovelace?",
                   "Search for python tutorials", "Tell me a joke"]:
            print(f"  {Fore.YELLOW}›{Style.RESET_ALL} {ex}")
        print(f"{bar}\n")

    def print_response(self, text: str):
        sep = f"{Fore.GREEN}{'─' * config.CLI_WIDTH}{Style.RESET_ALL}"
        label = f"{Fore.GREEN + Style.BRIGHT}  {self.settings.bot_name}{Style.RESET_ALL}"
        if self.settings.show_timestamps:
            label += f"  {Style.DIM}{datetime.now().strftime('%H:%M')}{Style.RESET_ALL}"
        print(f"\n{sep}")
        print(label)
        print(sep)
        for line in render_markup(text).splitlines():
            _typewrite(f"  {line}", Fore.WHITE)
        print(f"{sep}\n")

    def print_stats(self):
        print(f"\n{Fore.CYAN + Style.BRIGHT}  Knowledge base{Style.RESET_ALL}")
        for table, count in self.pipeline.knowledge_base.get_stats().items():
            print(f"  {Fore.GREEN}{table:<22}{Style.RESET_ALL}{count}")
        print(f"\n{Fore.CYAN + Style.BRIGHT}  Conversation{Style.RESET_ALL}")
        for key, value in self.pipeline.context.get_summary().items():
            print(f"  {Fore.GREEN}{key:<22}{Style.RESET_ALL}{value}")
        print()

    def print_error(self, error: str):
        print(f"\n{Fore.RED}  ✗  {error}{Style.RESET_ALL}\n")

    def get_input(self) -> str:
        """Get user input with styled prompt."""
        try:
            prompt = (
                f"{Fore.LIGHTMAGENTA_EX + Style.BRIGHT} {config.CLI_PROMPT} {Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX}›{Style.RESET_ALL} "
            )
            return input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            return "quit"

    def handle_command(self, command: str):
        """
        Handle special commands.
        Returns True to continue, False to exit, None if not a command.
        """
        cmd = command.lower()

        if cmd in ('quit', 'exit', 'q'):
            _typewrite("\n  Goodbye! Have a wonderful day! 👋", Fore.MAGENTA, delay=0.022)
            return False

        if cmd == 'help':
            self.print_help()
            return True

        if cmd == 'version':
            print(f"\n  {Fore.CYAN}scriptbot v{__version__}{Style.RESET_ALL}\n")
            return True

        if cmd == 'clear':
            self.pipeline.clear()
            print(f"{Fore.GREEN}  ✓  Conversation cleared{Style.RESET_ALL}\n")
            return True

        if cmd == 'history':
            transcript = self.pipeline.context.get_context_string(n=config.MAX_CONVERSATION_HISTORY)
            print(f"\n{transcript or '  (empty)'}\n")
            return True

        if cmd in ('stats', 'statistics'):
            self.print_stats()
            return True

        if cmd == 'settings':
            for key, value in vars(self.settings).items():
                print(f"  {Fore.GREEN}{key:<22}{Style.RESET_ALL}{value}")
            print()
            return True

        return None  # Not a command

    async def reply_to(self, message: str) -> str:
        """Wait the configured delay, then ask the pipeline."""
        spinner = None
        if self.settings.show_typing_indicator:
            spinner = _Spinner(f"{self.settings.bot_name} is typing…", Fore.CYAN).start()
        try:
            await asyncio.sleep(self.settings.response_delay)
            return await self.pipeline.generate_response(message)
        finally:
            if spinner:
                spinner.stop()

    def run(self):
        """Main CLI loop."""
        self.print_banner()
        self.print_response(self.pipeline.templates.render('greeting'))

        while True:
            try:
                user_input = self.get_input()
                if not user_input:
                    continue

                result = self.handle_command(user_input)
                if result is False:
                    break
                if result is True:
                    continue

                response = asyncio.run(self.reply_to(user_input))
                self.print_response(response)

            except KeyboardInterrupt:
                print(f"\n{Fore.YELLOW}  Use 'quit' to exit.{Style.RESET_ALL}\n")
            except Exception as e:
                self.print_error(f"Unexpected error: {e}")
                logger.exception("Unexpected error in main loop")


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        prog="scriptbot",
        description="scriptbot: scripted conversational assistant",
        epilog=f"Powered by: {__powered_by__}",
    )
    parser.add_argument("--version", "-v", action="version",
                        version=f"scriptbot v{__version__} ({__author__})")
    parser.add_argument("--name", default=config.CLI_ASSISTANT,
                        help="Display name of the assistant")
    parser.add_argument("--speed", choices=sorted(config.RESPONSE_DELAYS),
                        default=config.DEFAULT_RESPONSE_SPEED,
                        help="Delay before each reply")
    parser.add_argument("--no-timestamps", action="store_true",
                        help="Hide reply timestamps")
    parser.add_argument("--no-typing", action="store_true",
                        help="Hide the typing indicator")
    parser.add_argument("--live-search", action="store_true",
                        help="Use real DuckDuckGo search instead of simulated results")
    parser.add_argument("--verbose", action="store_true",
                        help="Log pipeline decisions")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
        logging.getLogger('scriptbot').setLevel(logging.INFO)

    settings = ChatSettings(
        bot_name=args.name,
        response_speed=args.speed,
        show_timestamps=not args.no_timestamps,
        show_typing_indicator=not args.no_typing,
    )
    provider = DuckDuckGoSearchProvider() if args.live_search else None

    cli = ChatCLI(settings, ResponsePipeline(search_provider=provider))
    try:
        cli.run()
    except Exception as e:
        print(f"{Fore.RED}Fatal error: {e}{Style.RESET_ALL}")
        logging.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
