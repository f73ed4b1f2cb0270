import graphql
from graphql import GraphQLArgument, GraphQLField, GraphQLInputField, GraphQLList, GraphQLNonNull


_ID = GraphQLNonNull(graphql.GraphQLID)
_String = GraphQLNonNull(graphql.GraphQLString)


def _list_of(graphql_type):
    return GraphQLNonNull(GraphQLList(GraphQLNonNull(graphql_type)))


def _graph_field(type_name, field_name, type_, args=None):
    def resolve(value, info, **kwargs):
        return info.context.resolve(value, kwargs, type=(type_name, field_name))

    return GraphQLField(type_, args=args, resolve=resolve)


def _graph_fields(type_name, fields):
    return lambda: {
        field_name: _graph_field(type_name, field_name, *field)
        for field_name, field in fields().items()
    }


def create_graphql_schema():
    Agent = graphql.GraphQLObjectType("Agent", fields=lambda: {
        "id": GraphQLField(_ID),
        "name": GraphQLField(_String),
        "email": GraphQLField(_String),
        "authors": _graph_field("Agent", "authors", _list_of(Author)),
    })

    Author = graphql.GraphQLObjectType("Author", fields=lambda: {
        "id": GraphQLField(_ID),
        "name": GraphQLField(_String),
        "website": GraphQLField(graphql.GraphQLString),
        "agent": _graph_field("Author", "agent", GraphQLNonNull(Agent)),
        "books": _graph_field("Author", "books", _list_of(Book)),
    })

    Book = graphql.GraphQLObjectType("Book", fields=lambda: {
        "id": GraphQLField(_ID),
        "title": GraphQLField(_String),
        "description": GraphQLField(_String),
        "cover": GraphQLField(_String),
        "authors": _graph_field("Book", "authors", _list_of(Author)),
    })

    CreateUpdateAgentInput = graphql.GraphQLInputObjectType("CreateUpdateAgentInput", fields={
        "name": GraphQLInputField(_String),
        "email": GraphQLInputField(_String),
    })

    CreateUpdateAuthorInput = graphql.GraphQLInputObjectType("CreateUpdateAuthorInput", fields={
        "name": GraphQLInputField(_String),
        "website": GraphQLInputField(graphql.GraphQLString),
        "agent_id": GraphQLInputField(_ID),
    })

    CreateUpdateBookInput = graphql.GraphQLInputObjectType("CreateUpdateBookInput", fields={
        "title": GraphQLInputField(_String),
        "description": GraphQLInputField(_String),
        "cover": GraphQLInputField(_String),
        "authorIDs": GraphQLInputField(_list_of(graphql.GraphQLID)),
    })

    def by_id():
        return {"id": GraphQLArgument(_ID)}

    def with_data(input_type, id=False):
        args = by_id() if id else {}
        args["data"] = GraphQLArgument(GraphQLNonNull(input_type))
        return args

    Query = graphql.GraphQLObjectType("Query", fields=_graph_fields("Query", lambda: {
        "agent": (Agent, by_id()),
        "agents": (_list_of(Agent), ),
        "author": (Author, by_id()),
        "authors": (_list_of(Author), ),
        "book": (Book, by_id()),
        "books": (_list_of(Book), ),
    }))

    Mutation = graphql.GraphQLObjectType("Mutation", fields=_graph_fields("Mutation", lambda: {
        "createAgent": (Agent, with_data(CreateUpdateAgentInput)),
        "updateAgent": (Agent, with_data(CreateUpdateAgentInput, id=True)),
        "deleteAgent": (Agent, by_id()),
        "createAuthor": (Author, with_data(CreateUpdateAuthorInput)),
        "updateAuthor": (Author, with_data(CreateUpdateAuthorInput, id=True)),
        "deleteAuthor": (Author, by_id()),
        "createBook": (Book, with_data(CreateUpdateBookInput)),
        "updateBook": (Book, with_data(CreateUpdateBookInput, id=True)),
        "deleteBook": (Book, by_id()),
    }))

    return graphql.GraphQLSchema(query=Query, mutation=Mutation)
