"""
Hostie 数据模型

hosts 文件按物理行建模，每一行是以下四种之一：
Entry、Comment、Blank、Passthrough。
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Entry:
    """
    代表 hosts 文件中的单个地址映射行

    属性:
        address: 第一个字段（IP 地址，不做语法校验）
        hostname: 第二个字段（主机名）
        trailing: 主机名之后的其余文本（别名、行内注释），原样保留
    """

    address: str
    hostname: str
    trailing: Optional[str] = None

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <地址> <主机名>[ <其余文本>]
        """
        if self.trailing:
            return f"{self.address} {self.hostname} {self.trailing}"
        return f"{self.address} {self.hostname}"

    def matches(self, address: str, hostname: str) -> bool:
        """按字段完整比较地址和主机名"""
        return self.address == address and self.hostname == hostname

    def __str__(self) -> str:
        return f"{self.address} {self.hostname}"


@dataclass(frozen=True)
class Comment:
    """以 # 开头的注释行"""

    text: str

    def to_hosts_line(self) -> str:
        return self.text


@dataclass(frozen=True)
class Blank:
    """空行或只含空白的行"""

    text: str = ""

    def to_hosts_line(self) -> str:
        return self.text


@dataclass(frozen=True)
class Passthrough:
    """无法解析为条目的行，原样写回"""

    text: str

    def to_hosts_line(self) -> str:
        return self.text


Line = Union[Entry, Comment, Blank, Passthrough]


@dataclass(frozen=True)
class Table:
    """
    hosts 文件的完整内存表示，按原始顺序保存所有行

    Table 不可变：变更操作总是返回新的 Table。
    """

    lines: Tuple[Line, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, lines: List[Line]) -> "Table":
        return cls(tuple(lines))

    def entries(self) -> List[Entry]:
        """按文件顺序返回所有 Entry 行"""
        return [line for line in self.lines if isinstance(line, Entry)]

    def append(self, line: Line) -> "Table":
        return Table(self.lines + (line,))

    def without(self, index: int) -> "Table":
        return Table(self.lines[:index] + self.lines[index + 1:])

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
