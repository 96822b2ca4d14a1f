"""
Schéma GraphQL du distributeur.

Quatre formes d'entrée concurrentes expriment la même command
`DispenseCommand`, pour comparer leur ergonomie côté client :

1. union à plat, identifiant au premier niveau ;
2. union imbriquée, identifiant répété dans chaque variante ;
3. et 4. une mutation séparée par variante.

Chaque type d'entrée sait se décoder en command (`to_command`).
C'est la frontière de décodage : une combinaison invalide y devient
une erreur GraphQL pour la requête en cours, jamais un arrêt du serveur.
"""

from __future__ import annotations

from dataclasses import dataclass

import graphene
from graphql import GraphQLError

from dispenser.domain import commands
from dispenser.service_layer import messagebus

SUCCESS = "Success"


@dataclass(frozen=True)
class Context:
    """
    Contexte GraphQL, construit une fois par requête.

    Le bus est le point d'accroche d'un futur canal vers le
    distributeur ; les resolvers n'ont pas à changer de signature.
    """

    bus: messagebus.MessageBus


# --- Union à plat ---


class DispenseCommandUnionWithIdInput(graphene.InputObjectType):
    id = graphene.Int(required=True)
    dispense_weight = graphene.Int()
    # La valeur est ignorée, seule sa présence compte
    switch_to_manual_mode = graphene.Int()

    def to_command(self) -> commands.DispenseCommand:
        return commands.from_exclusive_fields(
            weight=self.dispense_weight,
            manual_mode_set=self.switch_to_manual_mode is not None,
        )


# --- Union imbriquée ---


class DispenseCommandUnionNestedIdInputWeight(graphene.InputObjectType):
    id = graphene.Int(required=True)
    dispense_weight = graphene.Int(required=True)


class DispenseCommandUnionNestedIdInputManual(graphene.InputObjectType):
    id = graphene.Int(required=True)


class DispenseCommandUnionNestedIdInput(graphene.InputObjectType):
    dispense_weight = graphene.InputField(DispenseCommandUnionNestedIdInputWeight)
    switch_to_manual_mode = graphene.InputField(DispenseCommandUnionNestedIdInputManual)

    def to_command(self) -> commands.DispenseCommand:
        weight_input = self.dispense_weight
        return commands.from_exclusive_fields(
            weight=weight_input.dispense_weight if weight_input is not None else None,
            manual_mode_set=self.switch_to_manual_mode is not None,
        )


# --- Mutations séparées ---


class DispenseWeightCommandInput(graphene.InputObjectType):
    id = graphene.Int(required=True)
    weight = graphene.Int(required=True)

    def to_command(self) -> commands.DispenseCommand:
        return commands.DispenseWeight(weight=self.weight)


class DispenseManualModeCommandInput(graphene.InputObjectType):
    id = graphene.Int(required=True)

    def to_command(self) -> commands.DispenseCommand:
        return commands.SwitchToManualMode()


def send_command(info, input) -> str:
    """
    Décode l'entrée et transmet la command au message bus.

    InvalidDispenseCommand est convertie en GraphQLError : le client
    reçoit un tableau `errors` et le serveur continue de répondre.
    """
    try:
        cmd = input.to_command()
    except commands.InvalidDispenseCommand as e:
        raise GraphQLError(str(e)) from e
    info.context.bus.handle(cmd)
    return SUCCESS


class DispenseCommandUnionWithId(graphene.Mutation):
    class Arguments:
        input = DispenseCommandUnionWithIdInput(required=True)

    Output = graphene.NonNull(graphene.String)

    def mutate(self, info, input):
        return send_command(info, input)


class DispenseCommandUnionNestedId(graphene.Mutation):
    class Arguments:
        input = DispenseCommandUnionNestedIdInput(required=True)

    Output = graphene.NonNull(graphene.String)

    def mutate(self, info, input):
        return send_command(info, input)


class DispenseWeightCommand(graphene.Mutation):
    class Arguments:
        input = DispenseWeightCommandInput(required=True)

    Output = graphene.NonNull(graphene.String)

    def mutate(self, info, input):
        return send_command(info, input)


class DispenseManualModeCommand(graphene.Mutation):
    class Arguments:
        input = DispenseManualModeCommandInput(required=True)

    Output = graphene.NonNull(graphene.String)

    def mutate(self, info, input):
        return send_command(info, input)


class Mutation(graphene.ObjectType):
    dispense_command_union_with_id_input = DispenseCommandUnionWithId.Field()
    dispense_command_union_nested_id_input = DispenseCommandUnionNestedId.Field()
    dispense_weight_command = DispenseWeightCommand.Field()
    dispense_manual_mode_command = DispenseManualModeCommand.Field()


class Query(graphene.ObjectType):
    test = graphene.String(required=True)

    def resolve_test(self, info) -> str:
        return SUCCESS


# Pas de racine subscription : GraphQL interdit un type sans champ.
schema = graphene.Schema(query=Query, mutation=Mutation)
