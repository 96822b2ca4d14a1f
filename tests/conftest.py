"""
Configuration partagée pour les tests.

Le bus de test remplace les handlers de production par des handlers
qui enregistrent les commands reçues, pour vérifier ce que les
resolvers ont décodé.
"""

import pytest

from dispenser.domain import commands
from dispenser.entrypoints.schema import Context
from dispenser.service_layer import bootstrap


class CommandesReçues(list):
    """Capture les commands transmises par le bus."""


def enregistrer(cmd: commands.Command, reçues: CommandesReçues) -> None:
    reçues.append(cmd)


@pytest.fixture
def reçues():
    return CommandesReçues()


@pytest.fixture
def bus(reçues):
    """Message bus dont les handlers enregistrent les commands."""
    return bootstrap.bootstrap(
        command_handlers={
            commands.DispenseWeight: enregistrer,
            commands.SwitchToManualMode: enregistrer,
        },
        reçues=reçues,
    )


@pytest.fixture
def context(bus):
    return Context(bus=bus)
