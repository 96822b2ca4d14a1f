"""
Handlers pour les commands du distributeur.

Aucun pilote matériel n'existe encore : les handlers se contentent
de journaliser la command acceptée. C'est ici qu'un canal vers le
distributeur viendra se brancher, injecté par le bootstrap.
"""

from __future__ import annotations

import logging

from dispenser.domain import commands

logger = logging.getLogger(__name__)


def dispense_weight(cmd: commands.DispenseWeight) -> None:
    logger.info("Distribution demandée : %d", cmd.weight)


def switch_to_manual_mode(cmd: commands.SwitchToManualMode) -> None:
    logger.info("Passage en mode manuel demandé")
