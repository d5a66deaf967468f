"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the yshell log.

    Writes timestamped lines to ``log_path()`` (``state_root()/yshell.log``).
    Fully exception-safe: any IO error is silently ignored so this function
    never raises or affects the shell's output.
    """
    try:
        import time

        from ..core.paths import log_path

        path = log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
