# ui/log_view.py
import flet as ft

MAX_LINES = 200


class LogView(ft.Container):
    def __init__(self, max_lines: int = MAX_LINES):
        if max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {max_lines}")
        super().__init__(expand=True, content=ft.Text("", selectable=True))
        self.max_lines = max_lines
        self.lines: list[str] = []

    def append(self, line: str):
        self.lines.append(line)
        del self.lines[:-self.max_lines]
        self.content.value = "\n".join(self.lines)
        if self.page:           # only update when mounted
            self.update()

    def log_change(self, page: int, page_size: int):
        self.append(f"page {page} (size {page_size})")
