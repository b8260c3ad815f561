#!/usr/bin/env python3
"""
creational-patterns 演示入口

运行创建型设计模式演示，并可把输出汇总为 text / markdown / json 报告。

用法:
    python run_demos.py --list
    python run_demos.py                      # 运行全部演示
    python run_demos.py builder singleton    # 运行指定演示（支持别名）
    python run_demos.py --format markdown --output reports/demo.md
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from creational.config import LOG_LEVELS, REPORT_FORMATS, get_config
from creational.demos import DemoRegistry
from creational.exceptions import CreationalError, DemoError, DemoNotFound, handle_exceptions
from utils.report_generator import ReportGenerator

logger = logging.getLogger("creational")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def setup_logging(level: str) -> None:
    """日志配置"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run creational design pattern demos")
    parser.add_argument("demos", nargs="*", help="Demo names or aliases (default: all)")
    parser.add_argument("--list", action="store_true", help="List available demos and exit")
    parser.add_argument("--format", choices=REPORT_FORMATS, default=None,
                        help="Report format (default: CREATIONAL_REPORT_FORMAT or text)")
    parser.add_argument("--output", default=None, help="Write the report to this file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="Logging level (default: CREATIONAL_LOG_LEVEL or INFO)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not echo demo output while running")
    return parser


@handle_exceptions(logger=logger, reraise=True, error_mapping={LookupError: DemoError})
def run_selected(names: List[str], quiet: bool = False) -> Dict[str, List[str]]:
    """运行选中的演示（名称需已解析）"""
    echo = None if quiet else print
    return DemoRegistry.run_all(echo=echo, names=names or None)


def list_demos() -> List[str]:
    lines = []
    for name in DemoRegistry.list_demos():
        info = DemoRegistry.get_demo_info(name)
        aliases = f" (aliases: {', '.join(info['aliases'])})" if info["aliases"] else ""
        lines.append(f"{name}{aliases} - {info['doc']}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """主入口函数"""
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except CreationalError as e:
        setup_logging("INFO")
        logger.error(f"配置加载失败: {e}")
        return EXIT_USAGE

    setup_logging(args.log_level or config.log_level)

    if args.list:
        for line in list_demos():
            print(line)
        return EXIT_OK

    format_type = args.format or config.report_format
    # 直接打印报告时不再回显演示输出
    quiet = args.quiet or (args.output is None and format_type != "text")

    try:
        names = [DemoRegistry.resolve(name) for name in args.demos]
    except DemoNotFound as e:
        logger.error(str(e))
        return EXIT_USAGE

    try:
        transcripts = run_selected(names, quiet=quiet)
    except CreationalError as e:
        logger.error(f"演示运行失败: {e}")
        return EXIT_FAILED

    generator = ReportGenerator()
    try:
        if args.output:
            generator.save(transcripts, args.output, format_type=format_type)
        elif quiet:
            print(generator.render(transcripts, format_type))
    except CreationalError as e:
        logger.error(f"报告生成失败: {e}")
        return EXIT_FAILED

    logger.info(f"已完成 {len(transcripts)} 个演示")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
