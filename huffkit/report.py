# 负责编码结果的文本报告：符号显示名、码表行、报告格式化与 UTF-8 读写
# 提供：code_table_rows(), format_statistics(), format_report(), save_report(), parse_report_codes()
# huffkit/report.py

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Mapping, Tuple
import re

from huffkit.errors import NoTreeAvailableError
from huffkit.session import HuffmanCoder
from huffkit.stats import BITS_PER_SYMBOL

REPORT_TITLE = "=== HUFFMAN CODER ==="

SPECIAL_NAMES = {
    " ": "SPACE",
    "\n": "NEWLINE",
    "\t": "TAB",
    "\r": "CR",
}


def ensure_dir(p: Path) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)


def display_symbol(ch: str) -> str:
    """空白字符换成可读名字，其余原样显示。"""
    return SPECIAL_NAMES.get(ch, ch)


def code_table_rows(codes: Mapping[str, str]) -> List[Tuple[str, int, str, str]]:
    """
    码表 -> 按码位排序的行：(display, code_point, char, code)
    """
    return [(display_symbol(ch), ord(ch), ch, codes[ch]) for ch in sorted(codes)]


def format_statistics(stats: Mapping[str, float]) -> List[str]:
    n_chars = int(stats["n_symbols"])
    per_symbol = stats["original_bits"] // n_chars if n_chars else BITS_PER_SYMBOL
    return [
        f"Entropy: {stats['entropy']:.4f} bits/symbol",
        f"Average code length: {stats['avg_length']:.4f} bits/symbol",
        f"Efficiency: {stats['efficiency']:.2f}%",
        f"Original size: {int(stats['original_bits'])} bits ({n_chars} characters x {int(per_symbol)} bits)",
        f"Encoded size: {int(stats['encoded_bits'])} bits",
        f"Compression ratio: {stats['compression_ratio']:.2f}%",
    ]


# ---- 格式化（标题 + 四个小节）----
def format_report(coder: HuffmanCoder, bits_per_symbol: int = BITS_PER_SYMBOL) -> str:
    """
    把当前会话格式化成报告文本；还没有编码结果时抛 NoTreeAvailableError。
    """
    stats = coder.statistics(bits_per_symbol)
    lines = [REPORT_TITLE, "", "ORIGINAL MESSAGE:", coder.original, "", "CODE TABLE:"]
    for display, cp, _, code in code_table_rows(coder.codes):
        lines.append(f"{display} (ASCII {cp}) -> {code}")
    lines += ["", "ENCODED MESSAGE:", coder.encoded, "", "STATISTICS:"]
    lines += format_statistics(stats)
    return "\n".join(lines) + "\n"


# ---- 写入 ----
def save_report(path: Path, coder: HuffmanCoder, bits_per_symbol: int = BITS_PER_SYMBOL,
                encoding: str = "utf-8") -> Path:
    if not coder.encoded:
        raise NoTreeAvailableError("nothing encoded yet: encode a message before saving")
    text = format_report(coder, bits_per_symbol)
    path = Path(path)
    ensure_dir(path)
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(text)
    return path


# ---- 读取（码表小节）----
def parse_report_codes(path: Path, encoding: str = "utf-8") -> Dict[str, str]:
    """
    从报告的 CODE TABLE 小节读回码表；符号按 ASCII 码位还原，
    所以 SPACE / NEWLINE 这类显示名不影响结果。

    原文里可能出现任意内容（包括 "CODE TABLE:" 这样的行），
    所以从最后一个 "ENCODED MESSAGE:" 往回找码表行。
    """
    with Path(path).open("r", encoding=encoding, newline="") as f:
        lines = f.read().split("\n")
    try:
        end = len(lines) - 1 - lines[::-1].index("ENCODED MESSAGE:")
    except ValueError:
        raise ValueError("report has no ENCODED MESSAGE section") from None

    rows: List[str] = []
    i = end - 2  # 小节之间隔一个空行
    while i >= 0 and lines[i] != "CODE TABLE:":
        rows.append(lines[i])
        i -= 1
    if i < 0:
        raise ValueError("report has no CODE TABLE section")

    codes: Dict[str, str] = {}
    for line in reversed(rows):
        m = re.search(r"\(ASCII (\d+)\) -> ([01]+)$", line)
        if not m:
            raise ValueError(f"malformed code table row: {line!r}")
        codes[chr(int(m.group(1)))] = m.group(2)
    return codes
