# huffkit/errors.py
# 编码引擎的错误类型；引擎内部不做恢复，直接抛给调用方

from __future__ import annotations


class HuffmanError(ValueError):
    """所有 Huffman 引擎错误的基类。"""


class SymbolNotInTableError(HuffmanError, KeyError):
    """编码时遇到码表中不存在的符号（码表与输入不匹配）。"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} is not in the code table")

    def __str__(self) -> str:
        # KeyError 默认会给消息再套一层引号
        return self.args[0]


class MalformedBitStringError(HuffmanError):
    """比特串里出现了 '0'/'1' 以外的字符。"""


class TruncatedCodeError(MalformedBitStringError):
    """比特串在某个码字中途结束，游标停在内部节点上。"""


class NoTreeAvailableError(HuffmanError):
    """还没有 build_code / encode 过，就请求解码或统计。"""
