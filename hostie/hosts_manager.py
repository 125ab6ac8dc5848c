"""
Hosts 文件读写模块

每次读写都是一次性的整文件操作：打开、读完（或写完）、关闭。
"""

import logging
from pathlib import Path

from hostie.errors import HostsFileNotFound, HostsIOError, HostsPermissionDenied


class HostsFileManager:
    """
    读取和写回 hosts 文件

    底层的 OSError 被归类为 HostsFileNotFound / HostsPermissionDenied /
    HostsIOError 后重新抛出，不做重试。
    写入采用原地截断后整体写入，保留原文件的 inode、属主和权限。
    """

    def __init__(self, hosts_path: str, logger: logging.Logger):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger

    def read_text(self) -> str:
        """
        读取 hosts 文件的全部内容

        返回:
            文件文本（换行符统一为 \\n）

        异常:
            HostsFileNotFound: 文件不存在
            HostsPermissionDenied: 没有读取权限
            HostsIOError: 其它读取错误
        """
        try:
            with open(self.hosts_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError as e:
            self.logger.error(f"Hosts 文件不存在: {self.hosts_path}")
            raise HostsFileNotFound(str(self.hosts_path), str(e)) from e
        except PermissionError as e:
            self.logger.error(f"读取 hosts 文件权限被拒绝: {self.hosts_path}")
            raise HostsPermissionDenied(str(self.hosts_path), str(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"读取 hosts 文件时出错: {e}")
            raise HostsIOError(str(self.hosts_path), str(e)) from e

        self.logger.debug(f"已读取 {self.hosts_path} ({len(content)} 字符)")
        return content

    def write_text(self, content: str) -> None:
        """
        用新内容整体替换 hosts 文件

        参数:
            content: 要写入的完整文本

        异常:
            HostsPermissionDenied: 没有写入权限
            HostsFileNotFound: 所在目录不存在
            HostsIOError: 内容无法编码为 UTF-8，或其它写入错误
        """
        # 先编码，编码失败时不截断原文件
        try:
            data = content.encode('utf-8')
        except UnicodeEncodeError as e:
            self.logger.error(f"无法编码 hosts 文件内容: {e}")
            raise HostsIOError(str(self.hosts_path), str(e)) from e

        try:
            with open(self.hosts_path, 'wb') as f:
                f.write(data)
        except PermissionError as e:
            self.logger.error(
                f"写入 hosts 文件权限被拒绝: {self.hosts_path}. "
                "请使用 sudo 或管理员权限运行。"
            )
            raise HostsPermissionDenied(str(self.hosts_path), str(e)) from e
        except FileNotFoundError as e:
            self.logger.error(f"Hosts 文件所在目录不存在: {self.hosts_path}")
            raise HostsFileNotFound(str(self.hosts_path), str(e)) from e
        except OSError as e:
            self.logger.error(f"写入 hosts 文件失败: {e}")
            raise HostsIOError(str(self.hosts_path), str(e)) from e

        self.logger.info(f"已写入 {self.hosts_path}")
