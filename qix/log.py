import logging

from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.theme import Theme


class GameLogHighlighter(RegexHighlighter):
    base_style = "qix."
    highlights = [
        r"(?P<capture>\bShape completed\b|\bcaptured \d+ cells\b)",
        r"(?P<death>\bcrossed own line\b|\bGame over\b)",
        r"(?P<level>\bLevel \d+\b)",
        r"(?P<percent>\d+(\.\d+)?%)",
    ]


THEME = Theme({
    "qix.capture": "bold #23d18b",
    "qix.death": "bold bright_red",
    "qix.level": "bold #29b8db",
    "qix.percent": "bold #f5f543",
})


def configure_logging(level: int = logging.INFO) -> None:
    """Send all log records through a rich console handler."""
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(
        console=Console(theme=THEME, stderr=True),
        show_path=False,
        show_time=False,
        highlighter=GameLogHighlighter(),
    )
    handler.setFormatter(logging.Formatter("%(name)s  %(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
