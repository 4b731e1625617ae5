import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

DEFAULT_LOG_PATH = Path.home() / "ProfileChartStudio_error.log"

_log_path: Path = DEFAULT_LOG_PATH


def set_log_path(path: Optional[str]) -> Path:
    """Redirect diagnostics to ``path``; blank restores the default location."""
    global _log_path
    text = str(path or "").strip()
    _log_path = Path(text).expanduser() if text else DEFAULT_LOG_PATH
    return _log_path


def current_log_path() -> Path:
    return _log_path


def _safe_text(value: Any, max_len: int = 800) -> str:
    try:
        text = str(value)
    except Exception:
        text = repr(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > max_len:
        return text[: max_len - 3] + "..."
    return text


def log_event(context: str, message: str, log_path: Optional[Path] = None) -> None:
    """Append one line (timestamp, context, message) to the diagnostics log."""
    target = log_path or _log_path
    try:
        with open(target, "a", encoding="utf-8") as f:
            f.write(f"{datetime.now().isoformat()}  |  {context}  |  {_safe_text(message)}\n")
    except Exception:
        pass


def log_exception(context: str, log_path: Optional[Path] = None) -> None:
    """Append the traceback of the exception being handled."""
    target = log_path or _log_path
    try:
        with open(target, "a", encoding="utf-8") as f:
            f.write("\n\n" + "=" * 80 + "\n")
            f.write(f"{datetime.now().isoformat()}  |  {context}\n")
            traceback.print_exc(file=f)
    except Exception:
        # Never crash the app due to logging failures
        pass
