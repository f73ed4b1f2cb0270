import graphlayer as g

from ..repo import Repo
from .ids import parse_id


@g.resolver(("Agent", "authors"))
@g.dependencies(repo=Repo)
def resolve_agent_authors(graph, agent, args, *, repo):
    return repo.queries.list_authors_by_agent_id(agent.id)


@g.resolver(("Query", "agent"))
@g.dependencies(repo=Repo)
def resolve_agent(graph, _, args, *, repo):
    return repo.queries.get_agent(parse_id(args["id"]))


@g.resolver(("Query", "agents"))
@g.dependencies(repo=Repo)
def resolve_agents(graph, _, args, *, repo):
    return repo.queries.list_agents()


@g.resolver(("Mutation", "createAgent"))
@g.dependencies(repo=Repo)
def resolve_create_agent(graph, _, args, *, repo):
    data = args["data"]
    return repo.queries.create_agent(name=data["name"], email=data["email"])


@g.resolver(("Mutation", "updateAgent"))
@g.dependencies(repo=Repo)
def resolve_update_agent(graph, _, args, *, repo):
    data = args["data"]
    return repo.queries.update_agent(parse_id(args["id"]), name=data["name"], email=data["email"])


@g.resolver(("Mutation", "deleteAgent"))
@g.dependencies(repo=Repo)
def resolve_delete_agent(graph, _, args, *, repo):
    return repo.queries.delete_agent(parse_id(args["id"]))


resolvers = (
    resolve_agent_authors,
    resolve_agent,
    resolve_agents,
    resolve_create_agent,
    resolve_update_agent,
    resolve_delete_agent,
)
