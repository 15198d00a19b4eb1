"""
正则表达式模式定义

扩展 API 引用的提取模式。
"""

import re

# 扩展 API 的两个根命名空间
API_ROOTS: tuple[str, ...] = ("browser", "chrome")

# 根命名空间 + 点号链，遇到空白或左括号结束。
# 非贪婪匹配且不跨行；不识别字符串、注释和作用域。
API_USAGE_PATTERN: re.Pattern = re.compile(
    r"((?:" + "|".join(API_ROOTS) + r")\..*?)[\s(]"
)

# 事件监听注册方法，去掉后得到事件对象本身
LISTENER_SUFFIX = ".addListener"
