#!/usr/bin/env python3
"""环境变量查看与 shell 配置整理工具（命令行版）。

子命令:
- list / search: 查看、搜索当前进程的环境变量
- path: 列出 PATH 条目，可检查重复和不存在的目录
- export: 输出 export 行，便于 `eval "$(python env_cli.py export NAME VALUE)"` 使用
- format: 规范化 .bashrc / .zshrc，默认只预览，加 --write 才写回
- tui: 进入终端界面
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from shellenv import env_service, rc_formatter
from shellenv.errors import ShellEnvError
from shellenv.highlight import highlight_line
from shellenv.log import configure_logging
from shellenv.settings import load_dotenv, load_settings


def print_env_vars(env_vars: List[env_service.EnvVar], width: int) -> None:
    for ev in env_vars:
        print(f"{ev.name:<30} -> {env_service.display_value(ev.value, width)}")


def cmd_list(args: argparse.Namespace, settings: dict) -> int:
    env_vars = env_service.get_env_vars()
    print(f"全部环境变量 ({len(env_vars)}):")
    print("=" * 50)
    print_env_vars(env_vars, settings["value_width"])
    return 0


def cmd_search(args: argparse.Namespace, settings: dict) -> int:
    matches = env_service.search_env_vars(args.term)
    if not matches:
        print(f"未找到匹配 '{args.term}' 的变量")
        return 0
    print(f"找到 {len(matches)} 条匹配 '{args.term}'")
    print("=" * 50)
    print_env_vars(matches, settings["value_width"])
    return 0


def cmd_path(args: argparse.Namespace, settings: dict) -> int:
    entries = env_service.get_path_entries()
    print(f"PATH 条目 ({len(entries)}):")
    for i, entry in enumerate(entries, 1):
        print(f"{i:>3}. {entry}")
    if args.check:
        dups = env_service.duplicate_path_entries()
        missing = env_service.missing_path_entries()
        for entry in dups:
            print(f"[重复] {entry}")
        for entry in missing:
            print(f"[不存在] {entry}")
        if not dups and not missing:
            print("[OK] 没有重复或不存在的目录")
    return 0


def cmd_export(args: argparse.Namespace, settings: dict) -> int:
    env_service.validate_name(args.name)
    print(env_service.export_line(args.name, args.value))
    print(f"# 建议执行: eval \"$(python env_cli.py export {args.name} ...)\"")
    return 0


def resolve_format_target(args: argparse.Namespace) -> Path:
    candidates = env_service.shell_config_candidates()
    if args.bashrc:
        return candidates["bash"]
    if args.zshrc:
        return candidates["zsh"]
    if args.path:
        return Path(args.path).expanduser()
    return env_service.determine_shell_config()


def cmd_format(args: argparse.Namespace, settings: dict) -> int:
    target = resolve_format_target(args)
    if not target.exists():
        print(f"[Error] 文件不存在: {target}", file=sys.stderr)
        return 1

    result = rc_formatter.format_file(
        target,
        write=args.write,
        backup=args.backup or settings["backup"],
        force=args.force,
    )

    preview = result.plain if args.full else rc_formatter.render_preview(result.plain, settings["preview_limit"])
    preview = rc_formatter.printable_text(preview)
    use_color = settings["color"] and not args.no_color and sys.stdout.isatty()
    print(f"预览 ({result.config.file_type}):\n")
    for line in preview.split("\n"):
        print(highlight_line(line) if use_color else line)

    if result.config.multiline_functions and not args.write:
        print(
            f"\n[Warn] 存在跨多行的函数体，写回会拆散函数: {rc_formatter.printable_text(', '.join(result.config.multiline_functions))}",
            file=sys.stderr,
        )
    if result.written:
        print(f"\n已格式化: {target}")
        if result.backup_path:
            print(f"备份文件: {result.backup_path}")
    else:
        print(f"\n# 仅预览，写回请执行: python env_cli.py format {target} --write")
    return 0


def cmd_tui(args: argparse.Namespace, settings: dict) -> int:
    import tui

    tui.main()
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="环境变量与 shell 配置管理")
    parser.add_argument("--env-file", type=Path, help="启动前加载的 .env 文件")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="列出全部环境变量").set_defaults(func=cmd_list)

    p_search = sub.add_parser("search", help="按名称或值搜索环境变量")
    p_search.add_argument("term")
    p_search.set_defaults(func=cmd_search)

    p_path = sub.add_parser("path", help="列出 PATH 条目")
    p_path.add_argument("--check", action="store_true", help="检查重复和不存在的目录")
    p_path.set_defaults(func=cmd_path)

    p_export = sub.add_parser("export", help="输出 export 行")
    p_export.add_argument("name")
    p_export.add_argument("value")
    p_export.set_defaults(func=cmd_export)

    p_format = sub.add_parser("format", help="规范化 shell 配置文件")
    p_format.add_argument("path", nargs="?", help="配置文件路径（默认按 SHELL 选择）")
    which = p_format.add_mutually_exclusive_group()
    which.add_argument("--bashrc", action="store_true", help="格式化 ~/.bashrc")
    which.add_argument("--zshrc", action="store_true", help="格式化 ~/.zshrc")
    p_format.add_argument("--write", action="store_true", help="写回原文件")
    p_format.add_argument("--backup", action="store_true", help="写回前备份原文件")
    p_format.add_argument("--force", action="store_true", help="函数体跨多行时仍然写回")
    p_format.add_argument("--no-color", action="store_true", help="预览不着色")
    p_format.add_argument("--full", action="store_true", help="预览完整内容，不截断")
    p_format.set_defaults(func=cmd_format)

    sub.add_parser("tui", help="进入终端界面").set_defaults(func=cmd_tui)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.command != "tui":
        configure_logging(profile="cli")
    if args.env_file:
        load_dotenv(args.env_file)
    settings = load_settings()

    try:
        return args.func(args, settings)
    except ShellEnvError as exc:
        print(f"[Error] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
