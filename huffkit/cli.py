# huffkit/cli.py
# 命令行外壳：读入文本 -> 建树编码 -> 打印码表/比特流/统计 -> 可选保存报告与回环校验

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse
import sys

from huffkit.errors import HuffmanError
from huffkit.report import code_table_rows, format_statistics, save_report
from huffkit.session import HuffmanCoder
from huffkit.stats import BITS_PER_SYMBOL

# ===================== 默认配置 =====================
DEFAULT_REPORT_NAME = "huffman_output.txt"
INPUT_ENCODING = "utf-8"
# ===================================================


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="huffkit",
        description="Huffman coder: code table, encoded bits and entropy statistics for a text",
    )
    src = ap.add_mutually_exclusive_group()
    src.add_argument("text", nargs="?", help="text to encode (or use --input)")
    src.add_argument("-i", "--input", type=Path, help="read the text from a UTF-8 file")
    ap.add_argument("-s", "--save", nargs="?", type=Path, const=Path(DEFAULT_REPORT_NAME),
                    help=f"write a text report (default: {DEFAULT_REPORT_NAME})")
    ap.add_argument("--verify", action="store_true", help="decode the bits again and compare")
    ap.add_argument("--no-strip", action="store_true", help="keep leading/trailing whitespace")
    ap.add_argument("--bits-per-symbol", type=int, default=BITS_PER_SYMBOL,
                    help="uncoded cost per symbol for the compression ratio")
    return ap


def read_text(args: argparse.Namespace) -> str:
    if args.input is not None:
        with open(args.input, "r", encoding=INPUT_ENCODING) as f:
            text = f.read()
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()
    return text if args.no_strip else text.strip()


def print_code_table(coder: HuffmanCoder) -> None:
    print(f"{'Symbol':<10}{'Code point':<14}Code")
    for display, cp, ch, code in code_table_rows(coder.codes):
        shown = repr(ch) if display != ch else ch
        print(f"{display:<10}{f'{cp} ({shown})':<14}{code}")


def run(args: argparse.Namespace) -> int:
    if args.bits_per_symbol <= 0:
        print("[ERROR] --bits-per-symbol must be positive", file=sys.stderr)
        return 1

    text = read_text(args)
    if not text:
        print("[WARN] nothing to encode: the message is empty")
        return 0

    coder = HuffmanCoder()
    coder.build_code(text)
    encoded = coder.encode(text)

    print_code_table(coder)
    print()
    print("Encoded message:")
    print(encoded)
    print()
    for line in format_statistics(coder.statistics(args.bits_per_symbol)):
        print(line)

    if args.verify:
        ok = coder.decode(encoded) == text
        print(f"[INFO] round-trip check: {'ok' if ok else 'MISMATCH'}")
        if not ok:
            return 1

    if args.save is not None:
        out = save_report(args.save, coder, args.bits_per_symbol)
        print(f"[INFO] report saved to: {out.resolve()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (HuffmanError, OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
