"""
命令行入口

hostie add IP HOSTNAME / hostie remove IP HOSTNAME / hostie list
"""

import argparse
import sys
from typing import List, Optional

from hostie import __version__
from hostie.app import Hostie
from hostie.config import Config
from hostie.errors import HostieError


def build_parser() -> argparse.ArgumentParser:
    """构建参数解析器"""
    parser = argparse.ArgumentParser(
        prog="hostie",
        description="A command-line utility for managing your /etc/hosts file"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    for name, help_text in (
        ("add", "Add a new entry to your hosts file"),
        ("remove", "Remove an entry from your hosts file"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("ip", metavar="IP", help="The IP address to use")
        sub.add_argument(
            "hostname",
            metavar="HOSTNAME",
            help="The hostname to associate with the IP address"
        )

    subparsers.add_parser(
        "list",
        help="List all entries in your hosts file",
        description="List all entries in your hosts file"
    )
    return parser


def run(args: argparse.Namespace, hostie: Hostie) -> str:
    """执行子命令，返回要打印的消息"""
    if args.command == "add":
        entry = hostie.add(args.ip, args.hostname)
        return f"Added entry to hosts file: {entry}"
    if args.command == "remove":
        entry = hostie.remove(args.ip, args.hostname)
        return f"Removed entry from hosts file: {entry}"
    return "\n".join(f"{address} {hostname}" for address, hostname in hostie.list_entries())


def main(argv: Optional[List[str]] = None) -> int:
    """
    主入口点

    返回:
        进程退出码：成功为 0，任何 HostieError 为 1。
        参数错误由 argparse 以退出码 2 退出。
    """
    args = build_parser().parse_args(argv)

    try:
        hostie = Hostie(Config.from_env())
    except ValueError as e:
        print(f"初始化 Hostie 失败: {e}", file=sys.stderr)
        return 1

    try:
        message = run(args, hostie)
    except HostieError as e:
        print(e, file=sys.stderr)
        return 1

    if message:
        print(message)
    return 0


if __name__ == '__main__':
    sys.exit(main())
