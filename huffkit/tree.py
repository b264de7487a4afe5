# huffkit/tree.py
# Huffman 树：节点类型（Leaf / Internal 两种）+ 最小堆建树

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple, Union

import heapq
import itertools


@dataclass(frozen=True)
class Leaf:
    symbol: str
    weight: int


@dataclass(frozen=True)
class Internal:
    weight: int
    left: "HuffmanNode"
    right: "HuffmanNode"


HuffmanNode = Union[Leaf, Internal]


def build_huffman_tree(freqs: Dict[str, int]) -> HuffmanNode:
    """
    由频率表构建 Huffman 树，返回根节点。

    参数:
    - freqs: 非空 dict，符号 -> 正整数次数（空表应由上游直接短路）

    说明:
    - 堆元素为 (weight, seq, node)，seq 是入堆序号：
      同权重时先入堆的先出（叶子按频率表顺序入堆，合并出的内部节点排在后面）
    - 只有一个符号时，根就是这个 Leaf，没有内部节点
    """
    if not freqs:
        raise ValueError("build_huffman_tree: frequency table must not be empty")

    counter = itertools.count()
    heap: List[Tuple[int, int, HuffmanNode]] = []
    for sym, f in freqs.items():
        heapq.heappush(heap, (f, next(counter), Leaf(sym, f)))

    while len(heap) > 1:
        w1, _, n1 = heapq.heappop(heap)
        w2, _, n2 = heapq.heappop(heap)
        merged = Internal(w1 + w2, n1, n2)
        heapq.heappush(heap, (merged.weight, next(counter), merged))

    return heap[0][2]


def iter_leaves(root: HuffmanNode) -> Iterator[Leaf]:
    """先序遍历，从左到右依次产出所有叶子。"""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def tree_weight(root: HuffmanNode) -> int:
    """叶子权重之和（应等于根的 weight，也等于输入长度）。"""
    return sum(leaf.weight for leaf in iter_leaves(root))
