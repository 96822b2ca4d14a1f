"""
Bootstrap : assemblage de l'application (Composition Root).

Ce module construit le message bus avec toutes ses dépendances.
En test, on y injecte des fakes via les paramètres.
"""

from __future__ import annotations

from typing import Any, Callable

from dispenser.domain import commands
from dispenser.service_layer import handlers, messagebus


def bootstrap(
    command_handlers: dict[type[commands.Command], Callable] | None = None,
    **extra_dependencies: Any,
) -> messagebus.MessageBus:
    """Construit et retourne un MessageBus configuré."""
    if command_handlers is None:
        command_handlers = COMMAND_HANDLERS

    return messagebus.MessageBus(
        command_handlers=command_handlers,
        dependencies=dict(extra_dependencies),
    )


COMMAND_HANDLERS: dict[type[commands.Command], Callable] = {
    commands.DispenseWeight: handlers.dispense_weight,
    commands.SwitchToManualMode: handlers.switch_to_manual_mode,
}
