"""
Console status lines shared by install_check() and ui_file_exists().

Each line is a check mark or a cross followed by a label and, optionally,
a dimmed detail (usually a path). Styles follow the fault palette and can be
overridden through __main__.__styles__ ("status-ok", "status-fail",
"status-label", "status-detail").

Output goes to a stderr rich console; swap `flagship.ui.console` for a
Console(file=...) to capture it.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)


def status(ok, label, detail=None, /):
    """
    print a single pass/fail line and return `ok` unchanged.
    """
    styles = defaultdict(str, {
        "status-ok": "bold #9CE19C",
        "status-fail": "bold #FF4DA6",
        "status-label": "#E6E6F0",
        "status-detail": "dim #C8C8D0",
    } | getattr(__import__("__main__"), "__styles__", {}))

    line = Text.assemble(
        ("✔" if ok else "✖", styles["status-ok" if ok else "status-fail"]),
        " ",
        (label, styles["status-label"]),
    )
    if detail is not None:
        line.append(": ")
        line.append(str(detail), styles["status-detail"])
    console.print(line, highlight=False)
    return ok


__all__ = (
    "console",
    "status",
)
