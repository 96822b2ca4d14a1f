"""
Message Bus.

Le message bus reçoit les commands décodées par les entrypoints
et les transmet à leur handler respectif.

Une command a exactement UN handler ; l'erreur remonte à l'appelant.
Il n'y a pas d'events : le distributeur ne renvoie rien pour l'instant.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from dispenser.domain import commands

logger = logging.getLogger(__name__)


class MessageBus:
    """
    Message Bus avec injection de dépendances.

    Les dépendances sont injectées à la construction et transmises
    aux handlers par introspection de leurs signatures.
    """

    def __init__(
        self,
        command_handlers: dict[type[commands.Command], Callable],
        dependencies: dict[str, Any] | None = None,
    ):
        self.command_handlers = command_handlers
        self.dependencies = dependencies or {}

    def handle(self, message: commands.Command) -> list[Any]:
        """Traite une command et retourne le résultat de son handler."""
        if not isinstance(message, commands.Command):
            raise ValueError(f"Message de type inconnu : {type(message)}")
        return [self._handle_command(message)]

    def _handle_command(self, command: commands.Command) -> Any:
        logger.debug("Traitement de la command %s", command)
        handler = self.command_handlers.get(type(command))
        if handler is None:
            raise ValueError(f"Aucun handler pour la command {type(command)}")
        return self._call_handler(handler, command)

    def _call_handler(self, handler: Callable, command: commands.Command) -> Any:
        """
        Appelle un handler en injectant les dépendances nécessaires.

        Le premier paramètre est toujours la command elle-même ; les
        suivants sont résolus par nom dans le dictionnaire de dépendances.
        """
        params = list(inspect.signature(handler).parameters)
        kwargs = {
            name: self.dependencies[name]
            for name in params[1:]
            if name in self.dependencies
        }
        return handler(command, **kwargs)
