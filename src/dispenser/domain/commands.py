"""
Commands du domaine.

Une command représente une intention adressée au distributeur.
`DispenseCommand` est une union étiquetée : une command est soit
une pesée à distribuer, soit un passage en mode manuel, jamais
les deux à la fois.
"""

from dataclasses import dataclass
from typing import Optional, Union


class Command:
    """Classe de base pour toutes les commands."""
    pass


class InvalidDispenseCommand(Exception):
    """Levée quand une entrée ne se décode pas en une seule command."""
    pass


@dataclass(frozen=True)
class DispenseWeight(Command):
    """Demande de distribution d'un poids donné."""

    weight: int


@dataclass(frozen=True)
class SwitchToManualMode(Command):
    """Demande de passage du distributeur en mode manuel."""


DispenseCommand = Union[DispenseWeight, SwitchToManualMode]


def from_exclusive_fields(weight: Optional[int], manual_mode_set: bool) -> DispenseCommand:
    """
    Construit une command à partir de deux champs mutuellement exclusifs.

    Exactement un des deux champs doit être renseigné ; sinon on lève
    InvalidDispenseCommand avec un message destiné au client.
    """
    weight_set = weight is not None
    if weight_set == manual_mode_set:
        raise InvalidDispenseCommand(
            "exactly one of dispenseWeight or switchToManualMode must be set"
        )
    if weight_set:
        return DispenseWeight(weight=weight)
    return SwitchToManualMode()
