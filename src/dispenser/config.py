"""
Configuration de l'application.

Seule la verbosité des logs est lue dans l'environnement ;
l'adresse d'écoute est fixe (boucle locale).
"""

from __future__ import annotations

import logging
import os

API_HOST = "127.0.0.1"
API_PORT = 8080

LOG_LEVEL_ENV = "DISPENSER_LOG"
DEFAULT_LOG_LEVEL = "INFO"


def get_log_level() -> int:
    """Niveau de log lu dans DISPENSER_LOG ; INFO si absent ou inconnu."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
