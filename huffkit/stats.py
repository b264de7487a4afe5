# huffkit/stats.py
from __future__ import annotations
import numpy as np
from typing import Dict, Tuple, Union

from huffkit.errors import SymbolNotInTableError

__all__ = [
    "calculate_entropy",
    "average_code_length",
    "coding_efficiency",
    "compression_ratio",
    "summarize_statistics",
]

BITS_PER_SYMBOL = 8


def _probabilities(freqs: Dict[str, int]) -> Tuple[list, np.ndarray]:
    """
    频率表 -> (符号列表, 概率数组)，两者顺序一致。
    空表返回 ([], 空数组)。
    """
    symbols = list(freqs)
    counts = np.fromiter((freqs[s] for s in symbols), dtype=np.float64, count=len(symbols))
    total = counts.sum()
    if total <= 0:
        return symbols, np.zeros(0, dtype=np.float64)
    return symbols, counts / total


def calculate_entropy(freqs: Dict[str, int]) -> float:
    """
    计算 Shannon entropy（bits per symbol）：H = -Σ p·log2(p)。
    空输入返回 0。
    """
    _, p = _probabilities(freqs)
    if p.size == 0:
        return 0.0
    # 仅对 p>0 的项求和，避免 log2(0)
    m = p > 0
    H = -np.sum(p[m] * np.log2(p[m]))
    return float(H)


def average_code_length(freqs: Dict[str, int], codes: Dict[str, str]) -> float:
    """
    平均码长 L = Σ p·len(code)（bits per symbol）。
    没有输入或没有码表时返回 0。
    """
    if not freqs or not codes:
        return 0.0
    symbols, p = _probabilities(freqs)
    if p.size == 0:
        return 0.0
    missing = [s for s in symbols if s not in codes]
    if missing:
        raise SymbolNotInTableError(missing[0])
    lengths = np.array([len(codes[s]) for s in symbols], dtype=np.float64)
    return float(np.dot(p, lengths))


def coding_efficiency(entropy: float, avg_length: float) -> float:
    """效率（%）= 100·H / L；L 为 0 时按约定返回 0。"""
    if avg_length == 0:
        return 0.0
    return 100.0 * entropy / avg_length


def compression_ratio(n_symbols: int, encoded_bits: int,
                      bits_per_symbol: int = BITS_PER_SYMBOL) -> float:
    """
    压缩率（%）= 100·(1 - encoded_bits / original_bits)，
    original_bits = n_symbols * bits_per_symbol（默认按每符号 8 bit 估算）。
    original_bits 为 0 时返回 0。
    """
    original_bits = n_symbols * bits_per_symbol
    if original_bits <= 0:
        return 0.0
    return 100.0 * (1.0 - encoded_bits / original_bits)


def summarize_statistics(freqs: Dict[str, int], codes: Dict[str, str], encoded_bits: int,
                         bits_per_symbol: int = BITS_PER_SYMBOL) -> Dict[str, Union[int, float]]:
    """
    汇总全部指标，返回
    {n_symbols, entropy, avg_length, efficiency, original_bits, encoded_bits, compression_ratio}。
    """
    n_symbols = int(sum(freqs.values()))
    H = calculate_entropy(freqs)
    L = average_code_length(freqs, codes)
    return {
        "n_symbols": n_symbols,
        "entropy": H,
        "avg_length": L,
        "efficiency": coding_efficiency(H, L),
        "original_bits": n_symbols * bits_per_symbol,
        "encoded_bits": int(encoded_bits),
        "compression_ratio": compression_ratio(n_symbols, encoded_bits, bits_per_symbol),
    }
