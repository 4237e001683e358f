"""Mutation resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync

from ..resolver_builder import ResolverBuilder


def create_mutation_resolvers(builder: ResolverBuilder) -> list[appsync.Resolver]:
    """
    Create all AppSync mutation resolvers.

    Args:
        builder: Resolver builder holding the Lambda data sources

    Returns:
        The created resolvers
    """
    created = [
        # createBook (Lambda - unconditional put)
        builder.create_lambda_resolver(
            field_name="createBook",
            type_name="Mutation",
            lambda_datasource_name="create_book",
            id_suffix="CreateBookResolver",
        ),
        # updateBook (Lambda - partial update, returns ALL_NEW)
        builder.create_lambda_resolver(
            field_name="updateBook",
            type_name="Mutation",
            lambda_datasource_name="update_book",
            id_suffix="UpdateBookResolver",
        ),
    ]
    return created
