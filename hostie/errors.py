"""
Hostie 异常定义

所有异常都继承自 HostieError，由 CLI 统一渲染并映射为非零退出码。
"""


class HostieError(Exception):
    """Hostie 所有错误的基类"""


class DuplicateHostname(HostieError):
    """添加被拒绝：已存在同名主机名的条目"""

    def __init__(self, address: str, hostname: str):
        self.address = address
        self.hostname = hostname
        super().__init__(f"Entry already exists: {address} {hostname}")


class EntryNotFound(HostieError):
    """删除被拒绝：没有地址和主机名都完全匹配的条目"""

    def __init__(self, address: str, hostname: str):
        self.address = address
        self.hostname = hostname
        super().__init__(f"Entry does not exist: {address} {hostname}")


class ProtectedEntry(HostieError):
    """删除被拒绝：主机名受保护"""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"Cannot remove protected entry: {hostname}")


class InvalidEntry(HostieError):
    """地址或主机名无法作为单个字段写入 hosts 文件"""

    def __init__(self, address: str, hostname: str, reason: str):
        self.address = address
        self.hostname = hostname
        self.reason = reason
        super().__init__(f"Invalid entry: {address!r} {hostname!r} ({reason})")


class HostsFileError(HostieError):
    """
    读写 hosts 文件失败

    属性:
        path: hosts 文件路径
        reason: 底层错误描述
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"io error: {reason}")


class HostsFileNotFound(HostsFileError):
    """hosts 文件不存在"""


class HostsPermissionDenied(HostsFileError):
    """没有读写 hosts 文件的权限"""


class HostsIOError(HostsFileError):
    """其它 I/O 错误"""
