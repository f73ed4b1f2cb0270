import graphlayer as g

from ..repo import Repo
from .ids import parse_id


@g.resolver(("Book", "authors"))
@g.dependencies(repo=Repo)
def resolve_book_authors(graph, book, args, *, repo):
    return repo.queries.list_authors_by_book_id(book.id)


@g.resolver(("Query", "book"))
@g.dependencies(repo=Repo)
def resolve_book(graph, _, args, *, repo):
    return repo.queries.get_book(parse_id(args["id"]))


@g.resolver(("Query", "books"))
@g.dependencies(repo=Repo)
def resolve_books(graph, _, args, *, repo):
    return repo.queries.list_books()


@g.resolver(("Mutation", "createBook"))
@g.dependencies(repo=Repo)
def resolve_create_book(graph, _, args, *, repo):
    return repo.create_book(**_book_values(args["data"]))


@g.resolver(("Mutation", "updateBook"))
@g.dependencies(repo=Repo)
def resolve_update_book(graph, _, args, *, repo):
    return repo.update_book(parse_id(args["id"]), **_book_values(args["data"]))


@g.resolver(("Mutation", "deleteBook"))
@g.dependencies(repo=Repo)
def resolve_delete_book(graph, _, args, *, repo):
    return repo.queries.delete_book(parse_id(args["id"]))


def _book_values(data):
    return dict(
        title=data["title"],
        description=data["description"],
        cover=data["cover"],
        author_ids=[parse_id(author_id) for author_id in data["authorIDs"]],
    )


resolvers = (
    resolve_book_authors,
    resolve_book,
    resolve_books,
    resolve_create_book,
    resolve_update_book,
    resolve_delete_book,
)
