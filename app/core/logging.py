"""
➡️ But : Configurer le logging une seule fois pour toute l'application.

Chaque module récupère son logger via logging.getLogger(__name__).

setup_logging() est appelé au démarrage (app.main, scripts/seed.py).
"""

from __future__ import annotations

import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Console handler unique (stderr), format homogène.
    Les handlers existants sont retirés pour éviter les doublons (reload uvicorn).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # warnings.warn(...) -> logger 'py.warnings'
    logging.captureWarnings(True)

    # SQLAlchemy echo est piloté par l'engine ; on évite le double affichage
    logging.getLogger("sqlalchemy.engine").propagate = False
