"""
配置管理模块，支持环境变量
"""

import os
import sys
from dataclasses import dataclass, field
from typing import AbstractSet

from hostie.editor import PROTECTED_HOSTNAMES

WINDOWS_HOSTS_PATH = r"C:\Windows\System32\drivers\etc\hosts"
POSIX_HOSTS_PATH = "/etc/hosts"


def default_hosts_path() -> str:
    """返回当前平台的默认 hosts 文件路径"""
    if sys.platform == "win32":
        return WINDOWS_HOSTS_PATH
    return POSIX_HOSTS_PATH


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: str = field(default_factory=default_hosts_path)
    log_level: str = "WARNING"
    protected_hostnames: AbstractSet[str] = PROTECTED_HOSTNAMES

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTIE_HOSTS_FILE: hosts 文件路径 (默认: 平台默认路径)
            HOSTIE_LOG_LEVEL: 日志级别 (默认: WARNING)

        受保护的主机名是固定配置，不从环境变量读取。
        """
        return cls(
            hosts_file_path=os.getenv("HOSTIE_HOSTS_FILE") or default_hosts_path(),
            log_level=os.getenv("HOSTIE_LOG_LEVEL", "WARNING").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 HOSTIE_LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if not self.hosts_file_path:
            raise ValueError("hosts 文件路径不能为空")
