"""
Hostie - 管理 hosts 文件条目的命令行工具
"""

__version__ = "1.0.0"
__author__ = "Hostie Project"

from hostie.app import Hostie
from hostie.config import Config
from hostie.editor import PROTECTED_HOSTNAMES, HostsEditor
from hostie.models import Blank, Comment, Entry, Passthrough, Table
from hostie.parser import parse, serialize

__all__ = [
    "Hostie",
    "Config",
    "HostsEditor",
    "PROTECTED_HOSTNAMES",
    "Entry",
    "Comment",
    "Blank",
    "Passthrough",
    "Table",
    "parse",
    "serialize",
]
