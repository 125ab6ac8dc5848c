"""
Hostie 主应用模块
"""

import logging
import sys
from typing import List, Tuple

from hostie.config import Config
from hostie.editor import HostsEditor
from hostie.hosts_manager import HostsFileManager
from hostie.models import Entry
from hostie.parser import parse, serialize


class Hostie:
    """
    主应用控制器，协调所有组件

    每个操作都是一次完整的流程：
    - 读取 hosts 文件全部内容
    - 解析为 Table
    - 由 HostsEditor 执行一次变更
    - 序列化并整体写回（list 不写回）

    任何一步失败都会抛出异常，且不会写入任何内容。
    """

    def __init__(self, config: Config):
        """
        初始化 Hostie 应用

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

        self.hosts_manager = HostsFileManager(
            config.hosts_file_path,
            self.logger
        )
        self.editor = HostsEditor(
            config.protected_hostnames,
            self.logger
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志输出到 stderr，避免混入 list 命令的输出。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostie')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def list_entries(self) -> List[Tuple[str, str]]:
        """
        列出 hosts 文件中的所有条目

        返回:
            按文件顺序排列的 (地址, 主机名) 列表
        """
        table = parse(self.hosts_manager.read_text())
        entries = self.editor.list_entries(table)
        self.logger.debug(f"共 {len(entries)} 条主机记录")
        return entries

    def add(self, address: str, hostname: str) -> Entry:
        """
        添加一个条目并写回 hosts 文件

        返回:
            新添加的条目

        异常:
            DuplicateHostname, InvalidEntry, HostsFileError
        """
        table = parse(self.hosts_manager.read_text())
        updated = self.editor.add(table, address, hostname)

        self.hosts_manager.write_text(serialize(updated))
        self.logger.info(f"已添加主机记录: {address} → {hostname}")
        return Entry(address=address, hostname=hostname)

    def remove(self, address: str, hostname: str) -> Entry:
        """
        删除一个完全匹配的条目并写回 hosts 文件

        返回:
            被删除的条目

        异常:
            ProtectedEntry, EntryNotFound, HostsFileError
        """
        table = parse(self.hosts_manager.read_text())
        updated = self.editor.remove(table, address, hostname)

        self.hosts_manager.write_text(serialize(updated))
        self.logger.info(f"已移除主机记录: {address} → {hostname}")
        return Entry(address=address, hostname=hostname)
