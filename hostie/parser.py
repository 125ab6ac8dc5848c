"""
hosts 文件文本与 Table 之间的转换
"""

import re

from hostie.models import Blank, Comment, Entry, Line, Passthrough, Table

# <地址><空白><主机名>[<空白><其余文本>]
_ENTRY_PATTERN = re.compile(r"^\s*(\S+)\s+(\S+)(?:\s+(.*?))?\s*$")


def parse_line(raw: str) -> Line:
    """
    解析单个物理行

    参数:
        raw: 不含换行符的行文本

    返回:
        对应的 Line 对象。格式不对的行降级为 Passthrough，从不抛出异常。

    首个非空白字符为 # 的行（包括缩进的注释）一律视为 Comment，
    不会被解析成地址为 "#..." 的条目。
    """
    stripped = raw.strip()
    if not stripped:
        return Blank(raw)
    if stripped.startswith('#'):
        return Comment(raw)

    match = _ENTRY_PATTERN.match(raw)
    if match is None:
        return Passthrough(raw)

    address, hostname, trailing = match.groups()
    # "1.2.3.4 # note" 没有主机名
    if hostname.startswith('#'):
        return Passthrough(raw)

    return Entry(address=address, hostname=hostname, trailing=trailing or None)


def parse(text: str) -> Table:
    """
    将 hosts 文件内容解析为 Table

    文本末尾的换行符不产生额外的空行。
    """
    if not text:
        return Table()

    raw_lines = text.split('\n')
    if raw_lines[-1] == '':
        raw_lines.pop()

    return Table.of([parse_line(raw) for raw in raw_lines])


def serialize(table: Table) -> str:
    """
    将 Table 序列化为 hosts 文件内容

    非空 Table 以且仅以一个换行符结尾；空 Table 序列化为空字符串。
    """
    if not table:
        return ''
    return '\n'.join(line.to_hosts_line() for line in table) + '\n'
