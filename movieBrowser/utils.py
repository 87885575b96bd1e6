import functools
import random
import threading
import time
from datetime import datetime

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieBrowser.settings import LOG_PATH, ACCENT_COLOR, IMAGE_BASE_URL


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def poster_url(poster_path: str | None, base: str = IMAGE_BASE_URL) -> str | None:
    """Join the image base URL with a TMDb relative *poster_path*."""
    if not poster_path:
        return None
    return f"{base.rstrip('/')}/{poster_path.lstrip('/')}"


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#000000"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#1b1b1d"))
    palette.setColor(QPalette.AlternateBase, QColor("#26272a"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def throttle(min_delay: float = 1.0):
    """
    Decorator that sleeps `min_delay ±0.3 s` between *network* calls on the
    same function. A `min_delay` of 0 disables the pause.

    Safe across worker threads: callers queue on a lock and each one
    reserves its start time before leaving it.
    """
    def wrap(fn):
        last_hit = 0.0
        lock = threading.Lock()
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_hit
            if min_delay > 0:
                with lock:
                    wait = min_delay - (time.time() - last_hit)
                    if wait > 0:
                        time.sleep(wait + random.uniform(0, 0.3))
                    last_hit = time.time()
            return fn(*a, **kw)
        return inner
    return wrap
