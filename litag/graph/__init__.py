import graphlayer as g
from graphlayer import GraphError
import graphql

from ..repo import Repo
from . import agents, authors, books
from .schema import create_graphql_schema


resolvers = (
    agents.resolvers,
    authors.resolvers,
    books.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)

graphql_schema = create_graphql_schema()


def create_graph(*, repo):
    return _graph_definition.create_graph({
        Repo: repo,
    })


def execute(document_text, *, graph, variables=None, operation_name=None):
    return graphql.graphql_sync(
        graphql_schema,
        document_text,
        context_value=graph,
        variable_values=variables,
        operation_name=operation_name,
    )


__all__ = [
    "create_graph",
    "execute",
    "GraphError",
    "graphql_schema",
    "resolvers",
]
