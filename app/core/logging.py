# app/core/logging.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Garde la console lisible :
    - logs de l'application (app.*) : tous
    - warnings Python (capturés en 'py.warnings') : ERROR+
    - libs tierces (sqlalchemy, httpx...) : WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "app" or name.startswith("app."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    level: int | str = logging.INFO,
    log_dir: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure le logger racine :
    - Console (stderr) filtrée au niveau `level`
    - Fichier `tasks.log` dans `log_dir` (si fourni), tout au niveau `file_level`

    À appeler UNE fois, au démarrage (avant le premier logger.info).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Évite les handlers en double si on est rappelé (reload uvicorn)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "tasks.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # warnings.warn(...) -> logging ('py.warnings')
    logging.captureWarnings(True)
