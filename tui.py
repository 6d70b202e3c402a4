#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""终端内的环境变量管理与 shell 配置整理工具（curses）。

主菜单：
- 查看 / 搜索 / 添加 / 编辑 / 删除环境变量（仅当前进程）
- 管理 PATH：查看、删除、上移、下移
- 格式化 .bashrc / .zshrc / 自定义路径，预览后确认写回

快捷键：
- ↑/↓/k/j   ：移动选择
- Enter     ：确认
- q/Esc     ：返回上一级（主菜单中为退出）
- e / d     ：编辑 / 删除选中变量（PATH 页 d 为删除条目）
- /         ：搜索变量
- K / J     ：PATH 条目上移 / 下移
- y / n     ：预览页写回 / 取消
"""

from __future__ import annotations

import curses
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from shellenv import env_service, rc_formatter
from shellenv.errors import ShellEnvError
from shellenv.highlight import tokenize_line
from shellenv.log import configure_logging
from shellenv.settings import load_settings

KEY_ENTER = (10, 13, curses.KEY_ENTER)
KEY_ESC = 27
KEY_BACKSPACE = (curses.KEY_BACKSPACE, 127, 8)
KEY_UP = (curses.KEY_UP, ord("k"))
KEY_DOWN = (curses.KEY_DOWN, ord("j"))

MENU_ITEMS: List[Tuple[str, str]] = [
    ("view_all", "查看全部环境变量"),
    ("manage_path", "管理 PATH"),
    ("add_var", "添加环境变量"),
    ("edit_var", "编辑环境变量"),
    ("delete_var", "删除环境变量"),
    ("search_var", "搜索环境变量"),
    ("format_shell", "格式化 shell 配置 (.bashrc/.zshrc)"),
    ("exit", "退出"),
]

FORMAT_ITEMS: List[Tuple[str, str]] = [
    ("format_bashrc", "格式化 .bashrc"),
    ("format_zshrc", "格式化 .zshrc"),
    ("format_custom", "格式化自定义路径"),
    ("back", "返回主菜单"),
]

# 高亮样式 -> (颜色对, 附加属性)
STYLE_ATTRS: Dict[str, Tuple[int, int]] = {
    "keyword": (7, curses.A_BOLD),
    "string": (5, 0),
    "path": (2, 0),
    "comment": (9, 0),
}


class TUI:
    # 界面模式
    MODE_MENU = "menu"
    MODE_VARS = "vars"
    MODE_INPUT = "input"
    MODE_CONFIRM = "confirm"
    MODE_PATH = "path"
    MODE_VIEW = "view"
    MODE_FORMAT_MENU = "format_menu"
    MODE_PREVIEW = "preview"

    def __init__(self, stdscr: "curses._CursesWindow") -> None:
        self.stdscr = stdscr
        self.settings = load_settings()
        self.mode = self.MODE_MENU
        self.messages: List[str] = []
        self.menu_cursor = 0
        self.format_cursor = 0
        self.selected = 0
        self.scroll_offset = 0

        # 变量列表：view / edit / delete
        self.vars: List[env_service.EnvVar] = []
        self.vars_title = ""
        self.vars_purpose = "view"

        # 输入页：[(标签, 字段, 提示)]
        self.input_title = ""
        self.input_fields: List[Tuple[str, str, str]] = []
        self.input_values: Dict[str, str] = {}
        self.input_step = 0
        self.input_done: Optional[Callable[[Dict[str, str]], None]] = None
        self.input_return_mode = self.MODE_MENU

        # 确认页
        self.confirm_title = ""
        self.confirm_lines: List[str] = []
        self.confirm_action: Optional[Callable[[], None]] = None
        self.confirm_return_mode = self.MODE_MENU

        self.path_entries: List[str] = []

        # 只读查看页
        self.view_title = ""
        self.view_lines: List[str] = []
        self.view_return_mode = self.MODE_MENU

        # 格式化预览
        self.format_result: Optional[rc_formatter.FormatResult] = None
        self.format_path: Optional[Path] = None
        self.preview_lines: List[str] = []
        self.preview_scroll = 0

        self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        curses.init_pair(1, curses.COLOR_WHITE, -1)    # 普通
        curses.init_pair(2, curses.COLOR_CYAN, -1)     # 路径/当前
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_CYAN)  # 选中
        curses.init_pair(4, curses.COLOR_YELLOW, -1)   # 标题
        curses.init_pair(5, curses.COLOR_GREEN, -1)    # 成功/字符串
        curses.init_pair(6, curses.COLOR_RED, -1)      # 错误
        curses.init_pair(7, curses.COLOR_MAGENTA, -1)  # 关键字
        curses.init_pair(8, curses.COLOR_WHITE, curses.COLOR_BLUE)  # 输入框
        curses.init_pair(9, curses.COLOR_BLUE, -1)     # 注释

    def _msg(self, text: str) -> None:
        self.messages.append(text)
        if len(self.messages) > 50:
            self.messages = self.messages[-50:]

    def _visible_rows(self) -> int:
        max_y, _ = self.stdscr.getmaxyx()
        return max(3, max_y - 8)

    def _reset_cursor(self) -> None:
        self.selected = 0
        self.scroll_offset = 0

    # ----------------- 绘制 -----------------
    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        max_y, max_x = self.stdscr.getmaxyx()
        if y < 0 or y >= max_y or x >= max_x - 1:
            return
        self.stdscr.addnstr(y, x, text, max_x - x - 1, attr)

    def _draw_header(self, title: str, help_line: str) -> None:
        _, max_x = self.stdscr.getmaxyx()
        self._put(0, 0, f" [{title}] ", curses.color_pair(4) | curses.A_BOLD)
        self._put(1, 0, help_line, curses.color_pair(1) | curses.A_DIM)
        self._put(2, 0, "─" * (max_x - 1), curses.A_DIM)

    def _draw_items(self, items: List[str], cursor: int, start_y: int) -> None:
        for row in range(self._visible_rows()):
            i = self.scroll_offset + row
            if i >= len(items):
                break
            attr = curses.color_pair(3) | curses.A_BOLD if i == cursor else curses.color_pair(1)
            self._put(start_y + row, 0, f" {items[i]}", attr)

    def _draw_messages(self, max_y: int, max_x: int) -> None:
        self._put(max_y - 4, 0, "─" * (max_x - 1), curses.A_DIM)
        for i, msg in enumerate(self.messages[-3:]):
            attr = curses.color_pair(6) if msg.startswith("[错误]") else curses.color_pair(1)
            self._put(max_y - 3 + i, 0, msg, attr)

    def draw(self) -> None:
        self.stdscr.erase()
        max_y, max_x = self.stdscr.getmaxyx()

        drawers = {
            self.MODE_MENU: self._draw_menu,
            self.MODE_VARS: self._draw_vars,
            self.MODE_INPUT: self._draw_input,
            self.MODE_CONFIRM: self._draw_confirm,
            self.MODE_PATH: self._draw_path,
            self.MODE_VIEW: self._draw_view,
            self.MODE_FORMAT_MENU: self._draw_format_menu,
            self.MODE_PREVIEW: self._draw_preview,
        }
        drawers[self.mode](max_y, max_x)
        self._draw_messages(max_y, max_x)
        self.stdscr.refresh()

    def _draw_menu(self, max_y: int, max_x: int) -> None:
        self._draw_header("环境变量管理", "↑↓j:移动  Enter:选择  q:退出")
        for i, (_, label) in enumerate(MENU_ITEMS):
            attr = curses.color_pair(3) | curses.A_BOLD if i == self.menu_cursor else curses.color_pair(1)
            self._put(4 + i, 2, f" {label} ", attr)

    def _draw_vars(self, max_y: int, max_x: int) -> None:
        self._draw_header(self.vars_title, "↑↓j:移动  Enter:选择  e:编辑  d:删除  /:搜索  q:返回")
        width = self.settings["value_width"]
        rows = [f"{ev.name:<30} -> {env_service.display_value(ev.value, width)}" for ev in self.vars]
        if not rows:
            self._put(4, 2, "(无变量)", curses.A_DIM)
            return
        self._draw_items(rows, self.selected, 3)

    def _draw_input(self, max_y: int, max_x: int) -> None:
        self._draw_header(self.input_title, "Enter:下一步  Esc:取消")
        for i, (label, key, hint) in enumerate(self.input_fields):
            y = 4 + i * 3
            is_current = i == self.input_step
            attr = curses.color_pair(4) if is_current else curses.color_pair(1)
            self._put(y, 2, f"{label}:", attr | curses.A_BOLD)
            if hint:
                self._put(y, 24, f"({hint})", curses.A_DIM)
            value = self.input_values.get(key, "")
            if is_current:
                self._put(y + 1, 4, value + "▏", curses.color_pair(8))
            else:
                self._put(y + 1, 4, value or "(未填写)")

    def _draw_confirm(self, max_y: int, max_x: int) -> None:
        self._draw_header("确认", "Enter/y:确认  Esc/n:取消")
        y = 4
        for line in self.confirm_lines:
            self._put(y, 2, line)
            y += 1
        self._put(max_y - 6, 2, self.confirm_title, curses.color_pair(4) | curses.A_BOLD)

    def _draw_path(self, max_y: int, max_x: int) -> None:
        self._draw_header(
            f"PATH 条目 ({len(self.path_entries)})",
            "↑↓j:移动  Enter:查看  d:删除  K:上移  J:下移  q:返回",
        )
        rows = [f"{i + 1}. {entry}" for i, entry in enumerate(self.path_entries)]
        if not rows:
            self._put(4, 2, "(PATH 为空)", curses.A_DIM)
            return
        self._draw_items(rows, self.selected, 3)

    def _draw_view(self, max_y: int, max_x: int) -> None:
        self._draw_header(self.view_title, "任意键返回")
        for i, line in enumerate(self.view_lines[: max(0, max_y - 9)]):
            self._put(4 + i, 2, line, curses.color_pair(2))

    def _draw_format_menu(self, max_y: int, max_x: int) -> None:
        self._draw_header("Shell 配置格式化", "整理 .bashrc / .zshrc   ↑↓j:移动  Enter:选择  q:返回")
        for i, (_, label) in enumerate(FORMAT_ITEMS):
            attr = curses.color_pair(3) | curses.A_BOLD if i == self.format_cursor else curses.color_pair(1)
            self._put(4 + i, 2, f" {label} ", attr)

    def _draw_preview(self, max_y: int, max_x: int) -> None:
        result = self.format_result
        if not result:
            self.mode = self.MODE_FORMAT_MENU
            return
        self._draw_header(
            f"预览 {result.config.file_type}: {self.format_path}",
            "↑↓j:滚动  y:写回  n/Esc:取消",
        )
        y = 3
        if result.config.multiline_functions:
            self._put(y, 2, "注意: 存在跨多行的函数体，无法安全写回", curses.color_pair(6) | curses.A_BOLD)
            y += 1
        for line in self.preview_lines[self.preview_scroll:self.preview_scroll + self._visible_rows()]:
            x = 2
            for text, style in tokenize_line(line):
                attr = curses.color_pair(1)
                if style:
                    pair, extra = STYLE_ATTRS[style]
                    attr = curses.color_pair(pair) | extra
                self._put(y, x, text, attr)
                x += len(text)
            y += 1

    # ----------------- 操作 -----------------
    def move(self, delta: int, count: int) -> None:
        if count <= 0:
            return
        self.selected = max(0, min(self.selected + delta, count - 1))
        visible_rows = self._visible_rows()
        if self.selected < self.scroll_offset:
            self.scroll_offset = self.selected
        elif self.selected >= self.scroll_offset + visible_rows:
            self.scroll_offset = self.selected - visible_rows + 1

    def show_vars(self, env_vars: List[env_service.EnvVar], title: str, purpose: str) -> None:
        self.vars = env_vars
        self.vars_title = title
        self.vars_purpose = purpose
        self._reset_cursor()
        self.mode = self.MODE_VARS

    def current_var(self) -> Optional[env_service.EnvVar]:
        if not self.vars:
            return None
        return self.vars[min(self.selected, len(self.vars) - 1)]

    def refresh_vars(self) -> None:
        names = {ev.name for ev in self.vars}
        self.vars = [ev for ev in env_service.get_env_vars() if ev.name in names]
        self.selected = min(self.selected, max(0, len(self.vars) - 1))

    def start_input(
        self,
        title: str,
        fields: List[Tuple[str, str, str]],
        done: Callable[[Dict[str, str]], None],
        values: Optional[Dict[str, str]] = None,
    ) -> None:
        self.input_return_mode = self.mode
        self.input_title = title
        self.input_fields = fields
        self.input_values = {key: "" for _, key, _ in fields}
        self.input_values.update(values or {})
        self.input_step = 0
        self.input_done = done
        self.mode = self.MODE_INPUT

    def ask_confirm(self, title: str, lines: List[str], action: Callable[[], None]) -> None:
        self.confirm_return_mode = self.mode
        self.confirm_title = title
        self.confirm_lines = lines
        self.confirm_action = action
        self.mode = self.MODE_CONFIRM

    def show_view(self, title: str, lines: List[str]) -> None:
        self.view_return_mode = self.mode
        self.view_title = title
        self.view_lines = lines
        self.mode = self.MODE_VIEW

    # ----------------- 环境变量 -----------------
    def start_add(self) -> None:
        fields = [("变量名", "name", "MY_VARIABLE"), ("值", "value", "")]
        self.start_input("添加环境变量", fields, self._confirm_add)

    def _confirm_add(self, values: Dict[str, str]) -> None:
        name, value = values["name"], values["value"]

        def _do() -> None:
            env_service.set_env_var(name, value)
            self._msg(f"[已设置] {name}={value}")
            self._msg(f"  仅当前会话有效，永久生效请加入 shell 配置: {env_service.export_line(name, value)}")

        self.ask_confirm(f"设置 {name}={value}?", [], _do)

    def start_edit(self, ev: env_service.EnvVar) -> None:
        def _done(values: Dict[str, str]) -> None:
            new_value = values["value"]

            def _do() -> None:
                env_service.set_env_var(ev.name, new_value)
                self.refresh_vars()
                self._msg(f"[已更新] {ev.name}")

            self.ask_confirm(f"更新 {ev.name}?", [f"原值: {ev.value}", f"新值: {new_value}"], _do)

        self.start_input(f"编辑 {ev.name}", [("新值", "value", "")], _done, {"value": ev.value})

    def confirm_delete(self, ev: env_service.EnvVar) -> None:
        def _do() -> None:
            env_service.unset_env_var(ev.name)
            self.refresh_vars()
            self._msg(f"[已删除] {ev.name}（仅当前会话）")

        self.ask_confirm(f"确认删除 {ev.name}?", [f"当前值: {ev.value}"], _do)

    def start_search(self) -> None:
        def _done(values: Dict[str, str]) -> None:
            term = values["term"].strip()
            if not term:
                return
            matches = env_service.search_env_vars(term)
            if not matches:
                self._msg(f"[搜索] 未找到匹配 '{term}' 的变量")
                return
            self.show_vars(matches, f"找到 {len(matches)} 条匹配 '{term}'", "view")

        self.start_input("搜索环境变量", [("关键字", "term", "名称或值")], _done)

    # ----------------- PATH -----------------
    def enter_path(self) -> None:
        self.path_entries = env_service.get_path_entries()
        self._reset_cursor()
        self.mode = self.MODE_PATH

    def _refresh_path(self) -> None:
        self.path_entries = env_service.get_path_entries()
        self.selected = min(self.selected, max(0, len(self.path_entries) - 1))

    def confirm_delete_path(self, index: int) -> None:
        entry = self.path_entries[index]

        def _do() -> None:
            env_service.remove_path_entry(index)
            self._refresh_path()
            self._msg(f"[已删除] {entry}")
            self._msg("  仅当前进程生效，永久移除请修改 shell 配置中的 PATH")

        self.ask_confirm("确认删除此 PATH 条目?", [entry], _do)

    def move_path(self, delta: int) -> None:
        if not self.path_entries:
            return
        new_index = env_service.move_path_entry(self.selected, delta)
        self._refresh_path()
        if new_index != self.selected:
            self._msg(f"[已移动] {self.path_entries[new_index]} -> 第 {new_index + 1} 位")
        self.selected = new_index
        self.move(0, len(self.path_entries))

    # ----------------- 格式化 -----------------
    def select_format(self, action: str) -> None:
        if action == "back":
            self.mode = self.MODE_MENU
            return
        if action == "format_custom":
            fields = [("配置文件路径", "path", "/path/to/.bashrc 或 .zshrc")]
            self.start_input("格式化自定义路径", fields, self._format_custom_done)
            return
        candidates = env_service.shell_config_candidates()
        path = candidates["bash"] if action == "format_bashrc" else candidates["zsh"]
        if not path.exists():
            self._msg(f"[提示] 主目录下没有 {path.name}")
            return
        self.open_preview(path)

    def _format_custom_done(self, values: Dict[str, str]) -> None:
        raw = values["path"].strip()
        if not raw:
            return
        path = Path(raw).expanduser()
        if not path.exists():
            self._msg(f"[提示] 文件不存在: {path}")
            return
        self.open_preview(path)

    def open_preview(self, path: Path) -> None:
        try:
            result = rc_formatter.format_file(path)
        except ShellEnvError as exc:
            self._msg(f"[错误] {exc}")
            return
        self.format_result = result
        self.format_path = path
        preview = rc_formatter.render_preview(result.plain, self.settings["preview_limit"])
        self.preview_lines = rc_formatter.printable_text(preview).split("\n")
        self.preview_scroll = 0
        self.mode = self.MODE_PREVIEW

    def apply_format(self) -> None:
        result, path = self.format_result, self.format_path
        self.format_result = None
        self.mode = self.MODE_FORMAT_MENU
        if not result or not path:
            return
        try:
            rc_formatter.ensure_reformat_safe(result.config)
            backup_path = rc_formatter.write_formatted_config(path, result.plain, backup=self.settings["backup"])
        except ShellEnvError as exc:
            self._msg(f"[错误] {exc}")
            return
        self._msg(f"[已格式化] {path}")
        if backup_path:
            self._msg(f"  备份: {backup_path}")

    # ----------------- 按键处理 -----------------
    def handle_menu_key(self, ch: int) -> bool:
        if ch in (ord("q"), ord("Q"), KEY_ESC):
            return False
        if ch in KEY_UP:
            self.menu_cursor = max(0, self.menu_cursor - 1)
        elif ch in KEY_DOWN:
            self.menu_cursor = min(len(MENU_ITEMS) - 1, self.menu_cursor + 1)
        elif ch in KEY_ENTER:
            return self.select_menu(MENU_ITEMS[self.menu_cursor][0])
        return True

    def select_menu(self, action: str) -> bool:
        if action == "exit":
            return False
        if action == "view_all":
            self.show_vars(env_service.get_env_vars(), "全部环境变量", "view")
        elif action == "manage_path":
            self.enter_path()
        elif action == "add_var":
            self.start_add()
        elif action == "edit_var":
            self.show_vars(env_service.get_env_vars(), "选择要编辑的变量", "edit")
        elif action == "delete_var":
            self.show_vars(env_service.get_env_vars(), "选择要删除的变量", "delete")
        elif action == "search_var":
            self.start_search()
        elif action == "format_shell":
            self.format_cursor = 0
            self.mode = self.MODE_FORMAT_MENU
        return True

    def handle_vars_key(self, ch: int) -> bool:
        if ch in (ord("q"), ord("Q"), KEY_ESC):
            self.mode = self.MODE_MENU
            return True
        ev = self.current_var()
        if ch in KEY_UP:
            self.move(-1, len(self.vars))
        elif ch in KEY_DOWN:
            self.move(1, len(self.vars))
        elif ch == ord("/"):
            self.start_search()
        elif not ev:
            return True
        elif ch == ord("e") or (ch in KEY_ENTER and self.vars_purpose == "edit"):
            self.start_edit(ev)
        elif ch == ord("d") or (ch in KEY_ENTER and self.vars_purpose == "delete"):
            self.confirm_delete(ev)
        elif ch in KEY_ENTER:
            self.show_view(ev.name, ev.value.split("\n"))
        return True

    def handle_input_key(self, ch: int) -> bool:
        if ch == KEY_ESC:
            self.mode = self.input_return_mode
            self._msg(f"[取消] {self.input_title}")
            return True

        _, key, _ = self.input_fields[self.input_step]
        if ch in KEY_ENTER:
            if key == "name":
                try:
                    env_service.validate_name(self.input_values[key])
                except ShellEnvError as exc:
                    self._msg(f"[错误] {exc}")
                    return True
            if self.input_step < len(self.input_fields) - 1:
                self.input_step += 1
                return True
            self.mode = self.input_return_mode
            if self.input_done:
                self.input_done(dict(self.input_values))
        elif ch in KEY_BACKSPACE:
            self.input_values[key] = self.input_values[key][:-1]
        elif 32 <= ch <= 126:
            self.input_values[key] += chr(ch)
        return True

    def handle_confirm_key(self, ch: int) -> bool:
        if ch in (ord("y"), ord("Y")) or ch in KEY_ENTER:
            action = self.confirm_action
            self.confirm_action = None
            self.mode = self.confirm_return_mode
            if action:
                try:
                    action()
                except ShellEnvError as exc:
                    self._msg(f"[错误] {exc}")
        elif ch in (ord("n"), ord("N"), KEY_ESC):
            self._msg("[取消] 未做任何修改")
            self.confirm_action = None
            self.mode = self.confirm_return_mode
        return True

    def handle_path_key(self, ch: int) -> bool:
        if ch in (ord("q"), ord("Q"), KEY_ESC):
            self.mode = self.MODE_MENU
        elif ch in KEY_UP:
            self.move(-1, len(self.path_entries))
        elif ch in KEY_DOWN:
            self.move(1, len(self.path_entries))
        elif not self.path_entries:
            return True
        elif ch in KEY_ENTER:
            self.show_view("PATH 条目", [self.path_entries[self.selected]])
        elif ch == ord("d"):
            self.confirm_delete_path(self.selected)
        elif ch == ord("K"):
            self.move_path(-1)
        elif ch == ord("J"):
            self.move_path(1)
        return True

    def handle_view_key(self, ch: int) -> bool:
        self.mode = self.view_return_mode
        return True

    def handle_format_menu_key(self, ch: int) -> bool:
        if ch in (ord("q"), ord("Q"), KEY_ESC):
            self.mode = self.MODE_MENU
        elif ch in KEY_UP:
            self.format_cursor = max(0, self.format_cursor - 1)
        elif ch in KEY_DOWN:
            self.format_cursor = min(len(FORMAT_ITEMS) - 1, self.format_cursor + 1)
        elif ch in KEY_ENTER:
            self.select_format(FORMAT_ITEMS[self.format_cursor][0])
        return True

    def handle_preview_key(self, ch: int) -> bool:
        if ch in (ord("y"), ord("Y")):
            self.apply_format()
        elif ch in (ord("n"), ord("N"), ord("q"), KEY_ESC):
            self._msg("[取消] 未写回文件")
            self.format_result = None
            self.mode = self.MODE_FORMAT_MENU
        elif ch in KEY_UP:
            self.preview_scroll = max(0, self.preview_scroll - 1)
        elif ch in KEY_DOWN:
            self.preview_scroll = min(max(0, len(self.preview_lines) - 1), self.preview_scroll + 1)
        return True

    def handle_key(self, ch: Union[int, str]) -> bool:
        """分发按键，返回 False 表示退出。

        ch 可以是 get_wch 返回的字符：输入页直接插入可打印字符（含非 ASCII），
        其余情况按码点交给各模式处理。
        """
        if isinstance(ch, str):
            if self.mode == self.MODE_INPUT and ch.isprintable():
                _, key, _ = self.input_fields[self.input_step]
                self.input_values[key] += ch
                return True
            ch = ord(ch)
        handlers = {
            self.MODE_MENU: self.handle_menu_key,
            self.MODE_VARS: self.handle_vars_key,
            self.MODE_INPUT: self.handle_input_key,
            self.MODE_CONFIRM: self.handle_confirm_key,
            self.MODE_PATH: self.handle_path_key,
            self.MODE_VIEW: self.handle_view_key,
            self.MODE_FORMAT_MENU: self.handle_format_menu_key,
            self.MODE_PREVIEW: self.handle_preview_key,
        }
        return handlers[self.mode](ch)

    # ----------------- 主循环 -----------------
    def run(self) -> None:
        curses.curs_set(0)
        while True:
            self.draw()
            try:
                ch = self.stdscr.get_wch()
            except curses.error:
                continue
            if not self.handle_key(ch):
                break


def main() -> None:
    configure_logging(profile="tui")
    try:
        curses.wrapper(lambda stdscr: TUI(stdscr).run())
    except KeyboardInterrupt:
        pass  # Ctrl+C 优雅退出


if __name__ == "__main__":
    main()
