from precisely import assert_that, contains_exactly, equal_to, has_attrs, is_sequence
import pytest

from litag import database, graph
from litag.errors import AssociationWriteFailed, InvalidId, NotFound
from litag.repo import create_repo


def is_success(*, data):
    return has_attrs(
        data=data,
        errors=None,
    )


class TestGraph(object):
    @pytest.fixture(autouse=True)
    def setup_data(self):
        engine = database.create_engine("sqlite://")
        database.setup(engine)
        self.repo = create_repo(engine)
        self.graph = graph.create_graph(repo=self.repo)

        self.agent = self.repo.queries.create_agent(name="Agent Smith", email="smith@example.com")
        self.wodehouse = self.repo.queries.create_author(
            name="PG Wodehouse",
            website="https://wodehouse.example",
            agent_id=self.agent.id,
        )
        self.bernieres = self.repo.queries.create_author(
            name="Louis de Bernières",
            website=None,
            agent_id=self.agent.id,
        )

    def execute(self, document_text, variables=None):
        return graph.execute(document_text, graph=self.graph, variables=variables)

    def test_can_query_agents_with_their_authors(self):
        result = self.execute("""
            query {
                agents {
                    name
                    email
                    authors { name }
                }
            }
        """)

        assert_that(result, is_success(data=equal_to({
            "agents": [
                {
                    "name": "Agent Smith",
                    "email": "smith@example.com",
                    "authors": [
                        {"name": "PG Wodehouse"},
                        {"name": "Louis de Bernières"},
                    ],
                },
            ],
        })))

    def test_website_is_null_when_absent(self):
        result = self.execute("""
            query {
                authors { name website agent { name } }
            }
        """)

        assert_that(result, is_success(data=equal_to({
            "authors": [
                {"name": "PG Wodehouse", "website": "https://wodehouse.example", "agent": {"name": "Agent Smith"}},
                {"name": "Louis de Bernières", "website": None, "agent": {"name": "Agent Smith"}},
            ],
        })))

    def test_can_create_author_with_empty_website(self):
        result = self.execute("""
            mutation ($data: CreateUpdateAuthorInput!) {
                createAuthor(data: $data) { id name website }
            }
        """, variables={"data": {"name": "Terry Pratchett", "website": "", "agent_id": str(self.agent.id)}})

        assert_that(result, is_success(data=equal_to({
            "createAuthor": {"id": "3", "name": "Terry Pratchett", "website": ""},
        })))
        assert_that(self.repo.queries.get_author(3).website, equal_to(""))

    def test_can_create_book_with_authors(self):
        result = self.execute("""
            mutation ($data: CreateUpdateBookInput!) {
                createBook(data: $data) {
                    title
                    authors { name }
                }
            }
        """, variables={"data": {
            "title": "Captain Corelli's Mandolin",
            "description": "A novel",
            "cover": "corelli.jpg",
            "authorIDs": [str(self.bernieres.id)],
        }})

        assert_that(result, is_success(data=equal_to({
            "createBook": {
                "title": "Captain Corelli's Mandolin",
                "authors": [{"name": "Louis de Bernières"}],
            },
        })))

    def test_update_book_replaces_authors(self):
        book = self.repo.create_book(
            title="Leave It to Psmith",
            description="A comedy",
            cover="psmith.jpg",
            author_ids=[self.wodehouse.id],
        )

        result = self.execute("""
            mutation ($id: ID!) {
                updateBook(id: $id, data: {
                    title: "Leave It to Psmith",
                    description: "A comedy",
                    cover: "psmith.jpg",
                    authorIDs: []
                }) {
                    authors { name }
                }
            }
        """, variables={"id": str(book.id)})

        assert_that(result, is_success(data=equal_to({
            "updateBook": {"authors": []},
        })))

    def test_author_books_are_resolved(self):
        self.repo.create_book(title="Right Ho, Jeeves", description="", cover="jeeves.jpg", author_ids=[self.wodehouse.id])

        result = self.execute("""
            query ($id: ID!) {
                author(id: $id) { books { title } }
            }
        """, variables={"id": str(self.wodehouse.id)})

        assert_that(result, is_success(data=equal_to({
            "author": {"books": [{"title": "Right Ho, Jeeves"}]},
        })))

    def test_can_update_and_delete_agent(self):
        agent = self.repo.queries.create_agent(name="Agent Jones", email="jones@example.com")

        result = self.execute("""
            mutation ($id: ID!) {
                updateAgent(id: $id, data: {name: "Agent Brown", email: "brown@example.com"}) { name }
                deleteAgent(id: $id) { email }
            }
        """, variables={"id": str(agent.id)})

        assert_that(result, is_success(data=equal_to({
            "updateAgent": {"name": "Agent Brown"},
            "deleteAgent": {"email": "brown@example.com"},
        })))

    def test_missing_entity_is_reported_as_error(self):
        result = self.execute("""
            query {
                book(id: "42") { title }
            }
        """)

        assert_that(result.data, equal_to({"book": None}))
        assert_that(result.errors, is_sequence(
            has_attrs(
                message="book 42 not found",
                path=["book"],
                original_error=has_attrs(__class__=NotFound),
            ),
        ))

    def test_failed_book_write_is_reported_as_error(self):
        result = self.execute("""
            mutation {
                createBook(data: {title: "T", description: "D", cover: "C", authorIDs: ["999"]}) { id }
            }
        """)

        assert_that(result.data, equal_to({"createBook": None}))
        assert_that(result.errors, contains_exactly(
            has_attrs(original_error=has_attrs(__class__=AssociationWriteFailed)),
        ))
        assert_that(self.repo.queries.list_books(), equal_to([]))

    def test_non_numeric_id_is_reported_as_invalid_id(self):
        result = self.execute("""
            query {
                author(id: "wodehouse") { name }
            }
        """)

        assert_that(result.data, equal_to({"author": None}))
        assert_that(result.errors, is_sequence(
            has_attrs(
                message="invalid id: 'wodehouse'",
                original_error=has_attrs(__class__=InvalidId),
            ),
        ))
