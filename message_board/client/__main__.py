"""Terminal front end for the message board.

    message-board list
    message-board post "hello"
"""

import argparse
import asyncio
import sys

import httpx

from message_board.client.board import GATEWAY_MESSAGES_URL, MessageBoard


def render(board: MessageBoard) -> str:
    lines = []
    if board.error:
        lines.append(f"! {board.error}")
    for message in board.messages:
        lines.append(f"[{message.id}] {message.content}")
    if not board.messages and not board.error:
        lines.append("(no messages yet)")
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> int:
    async with httpx.AsyncClient() as http:
        board = MessageBoard(http, args.url)
        await board.start()
        if args.command == "post":
            board.new_message = args.text
            await board.submit()
        print(render(board))
        return 1 if board.error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="message-board")
    parser.add_argument("--url", default=GATEWAY_MESSAGES_URL, help=argparse.SUPPRESS)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="show all messages, newest first")
    post = sub.add_parser("post", help="submit a message, then show the board")
    post.add_argument("text")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
