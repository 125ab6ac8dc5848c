"""
hosts 条目的匹配与变更规则
"""

import logging
from typing import AbstractSet, List, Optional, Tuple

from hostie.errors import DuplicateHostname, EntryNotFound, InvalidEntry, ProtectedEntry
from hostie.models import Entry, Table

# 永远不能被删除的主机名
PROTECTED_HOSTNAMES: AbstractSet[str] = frozenset({"localhost", "broadcasthost"})


class HostsEditor:
    """
    对 Table 执行 list / add / remove 操作

    所有比较都基于解析后的字段做完整相等判断，
    不做子串或后缀匹配（"host" 与 "localhost" 不冲突）。
    传入的 Table 不会被修改：成功时返回新的 Table，失败时抛出异常。
    """

    def __init__(
        self,
        protected_hostnames: AbstractSet[str] = PROTECTED_HOSTNAMES,
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化编辑器

        参数:
            protected_hostnames: 不允许删除的主机名集合
            logger: 日志记录器实例
        """
        self.protected_hostnames = frozenset(protected_hostnames)
        self.logger = logger or logging.getLogger('hostie')

    def list_entries(self, table: Table) -> List[Tuple[str, str]]:
        """
        按文件顺序列出所有条目

        返回:
            (地址, 主机名) 列表，不包含注释和空行
        """
        return [(entry.address, entry.hostname) for entry in table.entries()]

    def add(self, table: Table, address: str, hostname: str) -> Table:
        """
        在 Table 末尾追加一个条目

        参数:
            table: 当前的 hosts 表
            address: IP 地址
            hostname: 主机名

        返回:
            追加了新条目的 Table

        异常:
            InvalidEntry: 地址或主机名不是单个合法字段
            DuplicateHostname: 已存在主机名完全相同的条目（不论地址）
        """
        self._validate(address, hostname)

        for entry in table.entries():
            if entry.hostname == hostname:
                self.logger.debug(f"主机名已存在: {entry.address} {entry.hostname}")
                raise DuplicateHostname(address, hostname)

        self.logger.debug(f"追加条目: {address} {hostname}")
        return table.append(Entry(address=address, hostname=hostname))

    def remove(self, table: Table, address: str, hostname: str) -> Table:
        """
        删除地址和主机名都完全匹配的第一个条目

        参数:
            table: 当前的 hosts 表
            address: IP 地址
            hostname: 主机名

        返回:
            删除该条目后的 Table，其它行保持原样和原顺序

        异常:
            ProtectedEntry: 主机名受保护（在查找之前检查，与地址无关）
            EntryNotFound: 没有完全匹配的条目
        """
        if hostname in self.protected_hostnames:
            raise ProtectedEntry(hostname)

        for index, line in enumerate(table):
            if isinstance(line, Entry) and line.matches(address, hostname):
                self.logger.debug(f"删除第 {index + 1} 行: {line.to_hosts_line()}")
                return table.without(index)

        raise EntryNotFound(address, hostname)

    @staticmethod
    def _validate(address: str, hostname: str) -> None:
        for value in (address, hostname):
            if not value:
                raise InvalidEntry(address, hostname, "empty field")
            if any(ch.isspace() for ch in value):
                raise InvalidEntry(address, hostname, "whitespace in field")
            if value.startswith('#'):
                raise InvalidEntry(address, hostname, "field starts with '#'")
            try:
                value.encode('utf-8')
            except UnicodeEncodeError:
                raise InvalidEntry(address, hostname, "not encodable as UTF-8") from None
