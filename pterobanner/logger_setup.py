import logging
import logging.handlers
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(*, log_dir, console_level="WARNING", file_level="DEBUG", console=None):
    """
    Console: rich, warnings and up so the banner stays clean.
    File: rotating debug log under `log_dir`. Skipped if the directory
    cannot be created (read-only container home, for instance).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    ch.setLevel(getattr(logging, str(console_level).upper(), logging.WARNING))
    root.addHandler(ch)

    log_path = Path(log_dir) / "pterobanner.log"
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        root.warning("file logging disabled (%s): %s", log_path, e)
        return None

    fh.setLevel(getattr(logging, str(file_level).upper(), logging.DEBUG))
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    root.debug("Logging initialized. log_path=%s", log_path.resolve())
    return log_path
