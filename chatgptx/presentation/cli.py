import argparse
import asyncio
import logging
import os
import sys

from chatgptx.config.settings import Settings, settings
from chatgptx.container import configure_container, container
from chatgptx.core.errors import ChatGPTxError
from chatgptx.core.models.action import ACTION_TITLES, ActionName
from chatgptx.core.models.host import HostContext, ModifierState
from chatgptx.core.services.dispatcher import ActionDispatcher
from chatgptx.infrastructure.host.console_host import ConsoleHost

logger = logging.getLogger(__name__)

CLEAR_COMMAND = "/clear"


def _modifiers(args: argparse.Namespace) -> ModifierState:
    """Modifiers from flags, falling back to the host's bit mask."""
    flags = ModifierState.from_flags(int(os.environ.get("POPCLIP_MODIFIER_FLAGS") or 0))
    return ModifierState(
        shift=args.shift or flags.shift,
        option=args.option or flags.option,
    )


def _context(args: argparse.Namespace) -> HostContext:
    return HostContext(
        app_identifier=args.app_id,
        app_name=args.app_name,
        can_paste=args.can_paste,
        can_copy=not args.no_copy,
    )


async def _dispatch(
    dispatcher: ActionDispatcher,
    action: str,
    text: str,
    options: Settings,
    modifiers: ModifierState,
    context: HostContext,
    host: ConsoleHost,
) -> int:
    try:
        await dispatcher.dispatch(action, text, options, modifiers, context, host)
    except ChatGPTxError as e:
        logger.error(f"{action}: {e}")
        return 2
    return 1 if host.failed else 0


def cmd_run(args: argparse.Namespace) -> int:
    """Run command - one action on one piece of text."""
    text = args.text if args.text is not None else sys.stdin.read()
    if not text.strip():
        logger.error("No input text")
        return 1

    configure_container(settings)
    dispatcher = container.resolve(ActionDispatcher)
    return asyncio.run(
        _dispatch(
            dispatcher, args.action, text, settings,
            _modifiers(args), _context(args), ConsoleHost(),
        )
    )


async def _chat_loop(dispatcher: ActionDispatcher, context: HostContext) -> int:
    host = ConsoleHost()
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            return 0
        line = line.strip()
        if not line:
            continue

        modifiers = ModifierState(shift=line == CLEAR_COMMAND)
        host.failed = False
        code = await _dispatch(
            dispatcher, ActionName.CHAT.value, line, settings, modifiers, context, host
        )
        if code == 2:
            return code


def cmd_chat(args: argparse.Namespace) -> int:
    """Chat command - interactive conversation, one turn per line."""
    configure_container(settings)
    dispatcher = container.resolve(ActionDispatcher)
    logger.info(f"Chatting as '{args.app_id}', {CLEAR_COMMAND} forgets the history")
    return asyncio.run(_chat_loop(dispatcher, _context(args)))


def cmd_actions(args: argparse.Namespace) -> int:
    """Actions command - list what can be run."""
    for action, title in ACTION_TITLES.items():
        print(f"{action.value:<10} {title}")
    return 0


def _add_host_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--app-id",
        default=os.environ.get("POPCLIP_APP_IDENTIFIER", "console"),
        help="Calling application identifier (history bucket)",
    )
    parser.add_argument(
        "--app-name",
        default=os.environ.get("POPCLIP_APP_NAME", "Terminal"),
    )
    parser.add_argument("--can-paste", action="store_true")
    parser.add_argument("--no-copy", action="store_true")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chatgptx")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run one action")
    run.add_argument("action", choices=[a.value for a in ActionName])
    run.add_argument("--text", default=os.environ.get("POPCLIP_TEXT"))
    run.add_argument("--shift", action="store_true", help="Secondary language / clear history")
    run.add_argument("--option", action="store_true", help="Force preview")
    _add_host_arguments(run)
    run.set_defaults(handler=cmd_run)

    chat = subparsers.add_parser("chat", help="Interactive chat")
    _add_host_arguments(chat)
    chat.set_defaults(handler=cmd_chat)

    actions = subparsers.add_parser("actions", help="List actions")
    actions.set_defaults(handler=cmd_actions)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
