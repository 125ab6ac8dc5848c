#!/usr/bin/env python3
"""
Hostie - 主入口点

添加、删除、列出 hosts 文件中的条目。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostie 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostie.cli import main


if __name__ == '__main__':
    sys.exit(main())
