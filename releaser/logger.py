"""
Console logger for the release pipeline.
"""
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple


class Colors:
    """ANSI escape codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"


class Logger:
    """Human-readable progress output with optional color."""

    def __init__(
        self,
        use_color: bool = True,
        verbose: bool = False,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
    ):
        self._stream = stream
        self._err_stream = err_stream
        self.use_color = use_color and self.stream.isatty()
        self.verbose = verbose

    # Looked up per write so redirected sys.stdout/sys.stderr are honoured
    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def _color(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _write(self, message: str, err: bool = False):
        stream = self.err_stream if err else self.stream
        print(message, file=stream, flush=True)

    def info(self, message: str):
        self._write(f"{self._color('[INFO]', Colors.BLUE)} {message}")

    def success(self, message: str):
        self._write(f"{self._color('[OK]', Colors.GREEN)} {message}")

    def warning(self, message: str):
        self._write(f"{self._color('[WARN]', Colors.YELLOW)} {message}", err=True)

    def error(self, message: str):
        self._write(f"{self._color('[ERROR]', Colors.RED)} {message}", err=True)

    def debug(self, message: str):
        if self.verbose:
            self._write(self._color(f"[DEBUG] {message}", Colors.DIM))

    def step(self, current: int, total: int, message: str):
        counter = self._color(f"[{current}/{total}]", Colors.CYAN)
        self._write(f"{counter} {self._color(message, Colors.BOLD)}")

    def header(self, title: str):
        line = "=" * 50
        self._write(line)
        self._write(f"  {self._color(title, Colors.BOLD)}")
        self._write(line)

    def target(self, friendly_name: str, triple: str):
        self._write(f"  - {friendly_name} ({self._color(triple, Colors.DIM)})")

    def results(self, files: List[Tuple[Path, str]]):
        """Print the final artifact listing."""
        self.newline()
        self.header("Artifacts")
        if not files:
            self.warning("No artifacts found")
            return
        width = max(len(size) for _, size in files)
        for path, size in files:
            self._write(f"  {size:>{width}}  {path}")

    def newline(self):
        self._write("")
