"""AppSync resolvers module for GraphQL API.

Resolvers are organized into:
- mutations: Mutation resolvers (createBook, updateBook)
- queries: Query resolvers (listBooks, getBookById)
"""

from aws_cdk import aws_appsync as appsync

from ..resolver_builder import ResolverBuilder
from .mutations import create_mutation_resolvers
from .queries import create_query_resolvers

__all__ = [
    "create_resolvers",
    "create_mutation_resolvers",
    "create_query_resolvers",
]


def create_resolvers(builder: ResolverBuilder) -> list[appsync.Resolver]:
    """
    Create all AppSync resolvers for the GraphQL API.

    Args:
        builder: Resolver builder holding the Lambda data sources

    Returns:
        Every created resolver, queries first
    """
    return create_query_resolvers(builder) + create_mutation_resolvers(builder)
