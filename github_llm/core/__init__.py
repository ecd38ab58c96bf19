# github_llm/core/__init__.py
"""核心模块：上下文构建、请求构建、API 客户端与响应渲染。"""
