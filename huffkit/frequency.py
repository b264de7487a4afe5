# huffkit/frequency.py
from __future__ import annotations
from collections import Counter
from typing import Dict


def count_frequencies(text: str) -> Dict[str, int]:
    """
    统计每个符号（单个字符）的出现次数。

    参数:
    - text: str，可以为空

    返回:
    - freqs: dict，按符号首次出现的顺序排列，如 {'a': 2, 'b': 3}
      空输入返回空表（不是错误）。
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    return dict(Counter(text))
