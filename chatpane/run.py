from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from chatpane.config import Settings, load_settings
from chatpane.controller import ConversationController
from chatpane.llm import build_llm
from chatpane.schema import Message, Sender
from chatpane.utils.session_log import SessionLogPaths, append_snapshot, init_session_log, make_session_id

QUIT_COMMANDS = {"/quit", "/exit"}


def configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_message(console: Console, message: Message) -> None:
    if message.sender is Sender.USER:
        console.print(f"[bold cyan]you[/bold cyan]: {escape(message.text)}")
    else:
        console.print(f"[bold green]assistant[/bold green]: {escape(message.text)}")


def exchange(
    controller: ConversationController,
    text: str,
    console: Console,
    log_paths: SessionLogPaths | None,
) -> None:
    if not controller.begin(text):
        return
    with console.status("Waiting for a reply..."):
        reply = controller.resolve()
    print_message(console, reply)
    if log_paths is not None:
        append_snapshot(log_paths, controller.state, extra={"event": "exchange"})


def build_controller(settings: Settings) -> ConversationController:
    return ConversationController(
        build_llm(settings),
        greeting=settings.greeting,
        temperature=settings.temperature,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="chatpane")
    parser.add_argument("message", nargs="?", help="send one message, print the reply and exit")
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="do not write the session log (default: logs/session_*.jsonl)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    console = Console()
    configure_logging(args.verbose, console)

    try:
        settings = load_settings()
        controller = build_controller(settings)
    except (RuntimeError, ValueError) as exc:
        console.print(f"[bold red]configuration error[/bold red]: {escape(str(exc))}")
        return 2
    logging.getLogger(__name__).debug("Loaded settings: %r", settings)

    log_paths = None
    if not args.no_log:
        log_paths = init_session_log(settings.log_dir, make_session_id())
        append_snapshot(log_paths, controller.state, extra={"event": "start"})

    if args.message is not None:
        exchange(controller, args.message, console, log_paths)
        return 0

    console.rule("chatpane")
    print_message(console, controller.messages[0])
    while True:
        try:
            line = console.input("[bold cyan]> [/bold cyan]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip() in QUIT_COMMANDS:
            break
        exchange(controller, line, console, log_paths)

    if log_paths is not None:
        console.print(f"[bold]session_log[/bold]: {log_paths.jsonl_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
