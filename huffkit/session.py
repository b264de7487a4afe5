# huffkit/session.py
# 会话上下文 + 编码引擎；对外提供 build_code / encode / decode / 统计接口
#
# HuffmanSession 由调用方持有，一个逻辑会话一个实例，不要跨并发调用方共享。

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from huffkit.codec import huffman_decode, huffman_encode
from huffkit.codes import build_codes
from huffkit.errors import NoTreeAvailableError
from huffkit.frequency import count_frequencies
from huffkit.stats import (
    BITS_PER_SYMBOL,
    average_code_length,
    calculate_entropy,
    coding_efficiency,
    compression_ratio,
    summarize_statistics,
)
from huffkit.tree import HuffmanNode, build_huffman_tree


@dataclass
class HuffmanSession:
    """最近一次建树的结果：树、码表、频率、原文、编码输出。"""
    tree: Optional[HuffmanNode] = None
    codes: Dict[str, str] = field(default_factory=dict)
    freqs: Dict[str, int] = field(default_factory=dict)
    original: str = ""
    encoded: Optional[str] = None

    def clear(self) -> None:
        self.tree = None
        self.codes = {}
        self.freqs = {}
        self.original = ""
        self.encoded = None

    @property
    def has_tree(self) -> bool:
        return self.tree is not None


class HuffmanCoder:
    def __init__(self, session: Optional[HuffmanSession] = None):
        self.session = session if session is not None else HuffmanSession()

    # ---------- 建树 / 编解码 ----------
    def build_code(self, text: str) -> Dict[str, str]:
        """
        由 text 重新建树并生成码表，替换之前的会话状态。
        空输入：清空会话并返回空表（不报错）。
        """
        freqs = count_frequencies(text)
        self.session.clear()
        if not freqs:
            return {}
        tree = build_huffman_tree(freqs)
        self.session.tree = tree
        self.session.codes = build_codes(tree)
        self.session.freqs = freqs
        self.session.original = text
        return dict(self.session.codes)

    def encode(self, text: str) -> str:
        """
        编码 text。当前没有码表时先 build_code(text)；
        已有码表时沿用它，text 里有表外符号则抛 SymbolNotInTableError。
        """
        if not text:
            return ""
        if not self.session.codes:
            self.build_code(text)
        encoded = huffman_encode(text, self.session.codes)
        if text != self.session.original:
            self.session.original = text
            self.session.freqs = count_frequencies(text)
        self.session.encoded = encoded
        return encoded

    def decode(self, bits: str) -> str:
        return huffman_decode(bits, self._require_tree())

    def reset(self) -> None:
        self.session.clear()

    # ---------- 统计 ----------
    def entropy(self, text: Optional[str] = None) -> float:
        """给了 text 就按 text 计算；否则按当前会话的原文计算。"""
        if text is not None:
            return calculate_entropy(count_frequencies(text))
        self._require_tree()
        return calculate_entropy(self.session.freqs)

    def average_code_length(self) -> float:
        self._require_tree()
        return average_code_length(self.session.freqs, self.session.codes)

    def efficiency(self) -> float:
        return coding_efficiency(self.entropy(), self.average_code_length())

    def compression_ratio(self, bits_per_symbol: int = BITS_PER_SYMBOL) -> float:
        encoded = self._require_encoded()
        return compression_ratio(len(self.session.original), len(encoded), bits_per_symbol)

    def statistics(self, bits_per_symbol: int = BITS_PER_SYMBOL) -> Dict[str, Union[int, float]]:
        encoded = self._require_encoded()
        return summarize_statistics(self.session.freqs, self.session.codes,
                                    len(encoded), bits_per_symbol)

    # ---------- 只读访问 ----------
    @property
    def codes(self) -> Mapping[str, str]:
        return MappingProxyType(self.session.codes)

    @property
    def original(self) -> str:
        return self.session.original

    @property
    def encoded(self) -> str:
        return self.session.encoded or ""

    def _require_tree(self) -> HuffmanNode:
        if self.session.tree is None:
            raise NoTreeAvailableError("no Huffman tree yet: call build_code() or encode() first")
        return self.session.tree

    def _require_encoded(self) -> str:
        self._require_tree()
        if self.session.encoded is None:
            raise NoTreeAvailableError("nothing encoded yet: call encode() first")
        return self.session.encoded
