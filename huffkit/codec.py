# huffkit/codec.py
from __future__ import annotations
from typing import Dict, List

from huffkit.errors import MalformedBitStringError, SymbolNotInTableError, TruncatedCodeError
from huffkit.tree import HuffmanNode, Leaf


def huffman_encode(text: str, codes: Dict[str, str]) -> str:
    """
    对文本进行 Huffman 编码

    参数:
    - text: str，原始要编码的明文
    - codes: dict，符号 -> 比特串；必须覆盖 text 中的每个符号

    返回:
    - encoded: str，仅由 '0' 和 '1' 构成的比特流字符串

    码表里查不到的符号抛 SymbolNotInTableError，不会跳过。
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    parts: List[str] = []
    for ch in text:
        try:
            parts.append(codes[ch])
        except KeyError:
            raise SymbolNotInTableError(ch) from None
    return "".join(parts)


def huffman_decode(encoded: str, root: HuffmanNode) -> str:
    """
    沿 Huffman 树逐位解码

    参数:
    - encoded: str，Huffman 编码后的比特流
    - root: 编码时使用的树根

    返回:
    - decoded: str，解码后的明文字符串
    """
    if not isinstance(encoded, str):
        raise TypeError("encoded must be a str")

    if isinstance(root, Leaf):
        # 单符号树：每个 '0' 就是一个符号
        for i, bit in enumerate(encoded):
            if bit != "0":
                raise MalformedBitStringError(
                    f"invalid bit {bit!r} at position {i} for a single-symbol code")
        return root.symbol * len(encoded)

    decoded: List[str] = []
    node: HuffmanNode = root
    for i, bit in enumerate(encoded):
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise MalformedBitStringError(f"invalid bit {bit!r} at position {i}")
        if isinstance(node, Leaf):
            decoded.append(node.symbol)
            node = root

    if node is not root:
        raise TruncatedCodeError("bitstream ends in the middle of a code")
    return "".join(decoded)
