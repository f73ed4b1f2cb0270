import graphlayer as g

from ..repo import Repo
from .ids import parse_id


@g.resolver(("Author", "agent"))
@g.dependencies(repo=Repo)
def resolve_author_agent(graph, author, args, *, repo):
    return repo.queries.get_agent(author.agent_id)


@g.resolver(("Author", "books"))
@g.dependencies(repo=Repo)
def resolve_author_books(graph, author, args, *, repo):
    return repo.queries.list_books_by_author_id(author.id)


@g.resolver(("Query", "author"))
@g.dependencies(repo=Repo)
def resolve_author(graph, _, args, *, repo):
    return repo.queries.get_author(parse_id(args["id"]))


@g.resolver(("Query", "authors"))
@g.dependencies(repo=Repo)
def resolve_authors(graph, _, args, *, repo):
    return repo.queries.list_authors()


@g.resolver(("Mutation", "createAuthor"))
@g.dependencies(repo=Repo)
def resolve_create_author(graph, _, args, *, repo):
    return repo.queries.create_author(**_author_values(args["data"]))


@g.resolver(("Mutation", "updateAuthor"))
@g.dependencies(repo=Repo)
def resolve_update_author(graph, _, args, *, repo):
    return repo.queries.update_author(parse_id(args["id"]), **_author_values(args["data"]))


@g.resolver(("Mutation", "deleteAuthor"))
@g.dependencies(repo=Repo)
def resolve_delete_author(graph, _, args, *, repo):
    return repo.queries.delete_author(parse_id(args["id"]))


def _author_values(data):
    # An omitted website and an explicit null are both stored as NULL.
    return dict(
        name=data["name"],
        website=data.get("website"),
        agent_id=parse_id(data["agent_id"]),
    )


resolvers = (
    resolve_author_agent,
    resolve_author_books,
    resolve_author,
    resolve_authors,
    resolve_create_author,
    resolve_update_author,
    resolve_delete_author,
)
