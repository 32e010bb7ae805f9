#!/usr/bin/env python3
"""
抽象文档模式示例脚本

使用示例：
    python scripts/abstract_document_demo.py --config configs/demo.yaml
"""

import os
import sys

# 允许直接以 `python scripts/abstract_document_demo.py` 运行
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from designpatterns.demos.abstract_document import main


if __name__ == '__main__':
    main()
