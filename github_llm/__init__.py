# github_llm/__init__.py
"""
github-llm - GitHub Models 聊天补全 API 的命令行客户端。
"""

__version__ = "0.1.0"

__all__ = ['__version__']
