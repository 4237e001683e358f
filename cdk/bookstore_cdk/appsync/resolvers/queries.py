"""Query resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync

from ..resolver_builder import ResolverBuilder


def create_query_resolvers(builder: ResolverBuilder) -> list[appsync.Resolver]:
    """
    Create all AppSync query resolvers.

    Args:
        builder: Resolver builder holding the Lambda data sources

    Returns:
        The created resolvers
    """
    return builder.create_batch_resolvers(
        [
            # listBooks (Lambda - full table scan)
            {
                "type": "lambda",
                "field_name": "listBooks",
                "type_name": "Query",
                "lambda_datasource_name": "list_books",
                "id_suffix": "ListBooksResolver",
            },
            # getBookById (Lambda - point lookup)
            {
                "type": "lambda",
                "field_name": "getBookById",
                "type_name": "Query",
                "lambda_datasource_name": "get_book_by_id",
                "id_suffix": "GetBookByIdResolver",
            },
        ]
    )
