"""
Category logger

Compact, colored terminal output shared by every engine module:

[HH:MM:SS] SCHEDULER ✓ Default scheduler created
           └─ fps: 60

Modules bind a category once at import:

    log = get_category_logger(LogCategory.ANIMATION)
    log.debug("Animation defined", duration=0.5, records=3)
"""

from datetime import datetime
from typing import Iterable, List, Optional, TextIO
from autotween.models.enums import LogLevel, LogCategory


# === ANSI COLORS ===
class Colors:
    """ANSI escape codes for colored terminal output"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.PROPERTY: Colors.BRIGHT_BLUE,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.SCHEDULER: Colors.BRIGHT_CYAN,
    LogCategory.CONTEXT: Colors.MAGENTA,
    LogCategory.LOOP: Colors.BRIGHT_MAGENTA,
    LogCategory.ELEMENT: Colors.BRIGHT_GREEN,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# level -> (priority, symbol, color)
LEVELS = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

DETAIL_INDENT = " " * 11
CATEGORY_WIDTH = 9


class Logger:
    """
    Structured logger writing one header line plus tree-formatted details

    Args:
        min_level: Messages below this level are dropped
        use_colors: ANSI colors (turn off when output goes to a file)
        stream: Target stream; None means the current sys.stdout
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True,
                 stream: Optional[TextIO] = None):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVELS[level][0] >= LEVELS[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def format_header(self, category: LogCategory, message: str, level: LogLevel) -> str:
        _, symbol, level_color = LEVELS[level]
        stamp = datetime.now().strftime('[%H:%M:%S]')
        cat = self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE))
        return f"{stamp} {cat} {self._paint(symbol, level_color)} {self._paint(message, level_color)}"

    def format_details(self, details: Iterable[str]) -> List[str]:
        details = list(details)
        lines = []
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Log a message with optional details

        Args:
            category: Log category (ANIMATION, SCHEDULER, etc.)
            message: Header text
            level: DEBUG, INFO, WARN or ERROR
            details: Preformatted detail lines, printed first
            **kwargs: Printed as "key: value" detail lines
        """
        if not self.is_enabled(level):
            return

        lines = [self.format_header(category, message, level)]
        lines += self.format_details(
            list(details or []) + [f"{k}: {v}" for k, v in kwargs.items()]
        )
        for line in lines:
            print(line, file=self.stream)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a default category; log() can still override it"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


# === Global instance ===
_logger = Logger()

def get_logger() -> Logger:
    return _logger

def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)

def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Reconfigure the shared logger in place

    Bound loggers created at import time keep a reference to it, so it is
    modified rather than replaced.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
