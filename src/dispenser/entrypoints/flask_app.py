"""
Point d'entrée Flask.

L'API Flask est un thin adapter : la vue GraphQL de graphql-server
reçoit le document, l'exécute contre le schéma avec un contexte neuf
par requête et renvoie le résultat au format JSON `{data, errors}`.

Routes :
- GET  /          page d'accueil avec un lien vers l'explorateur
- GET  /graphiql  explorateur GraphiQL, servi par la vue de /graphql
- GET|POST /graphql  exécution des opérations GraphQL
"""

from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for
from graphql_server.flask import GraphQLView

from dispenser import config
from dispenser.entrypoints.schema import Context, schema
from dispenser.service_layer import bootstrap

logger = logging.getLogger(__name__)

app = Flask(__name__)
bus = bootstrap.bootstrap()


class DispenserGraphQLView(GraphQLView):
    """
    Vue GraphQL dont le contexte est un `Context` immuable.

    Les mutations envoyées en GET sont refusées (405) et les
    enveloppes illisibles renvoient 400, selon les conventions
    de graphql-server.
    """

    def get_context(self):
        return Context(bus=bus)


app.add_url_rule(
    "/graphql",
    view_func=DispenserGraphQLView.as_view("graphql", schema=schema, graphiql=True),
    methods=["GET", "POST"],
)


@app.after_request
def log_request(response):
    logger.info("%s %s %s", request.method, request.path, response.status_code)
    return response


@app.route("/", methods=["GET"])
def homepage():
    return render_template("index.html")


@app.route("/graphiql", methods=["GET"])
def graphiql_endpoint():
    # GraphiQL interroge l'URL qui l'a servi : on le sert donc depuis /graphql
    return redirect(url_for("graphql"))


def main() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Listening on %s:%d", config.API_HOST, config.API_PORT)
    app.run(host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
