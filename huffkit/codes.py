# huffkit/codes.py
from __future__ import annotations
from typing import Dict

from huffkit.tree import HuffmanNode, Leaf


def build_codes(root: HuffmanNode) -> Dict[str, str]:
    """
    构建符号到 Huffman 编码的映射表（字典）

    参数:
    - root: Huffman 树根节点

    返回:
    - codes: dict, 每个符号对应的比特串，如 {'a': '010', 'b': '11'}
      向左走追加 '0'，向右走追加 '1'
    """
    # 根本身就是叶子（只有一种符号）：没有路径可走，固定给 "0"
    if isinstance(root, Leaf):
        return {root.symbol: "0"}

    codes: Dict[str, str] = {}

    def generate_code(node: HuffmanNode, current: str) -> None:
        if isinstance(node, Leaf):
            codes[node.symbol] = current
            return
        generate_code(node.left, current + "0")
        generate_code(node.right, current + "1")

    generate_code(root, "")
    return codes


def is_prefix_free(codes: Dict[str, str]) -> bool:
    """检查码表中没有任何码字是另一个码字的前缀。"""
    words = sorted(codes.values())
    # 排序后，若存在前缀关系，前缀一定紧挨在被包含的码字之前
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True
