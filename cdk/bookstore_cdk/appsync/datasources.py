"""AppSync data source creation."""

from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync

if TYPE_CHECKING:
    from aws_cdk import aws_lambda as lambda_


# Function key -> data source name
LAMBDA_DATASOURCE_NAMES: dict[str, str] = {
    "list_books": "ListBooksDataSource",
    "get_book_by_id": "GetBookByIdDataSource",
    "create_book": "CreateBookDataSource",
    "update_book": "UpdateBookDataSource",
}


def create_lambda_datasources(
    api: appsync.GraphqlApi,
    lambda_functions: dict[str, "lambda_.IFunction"],
) -> dict[str, appsync.LambdaDataSource]:
    """
    Create one Lambda data source per resolver function.

    Args:
        api: The AppSync GraphQL API
        lambda_functions: Dictionary of function key to Lambda function

    Returns:
        Dictionary of function key to Lambda data source
    """
    datasources: dict[str, appsync.LambdaDataSource] = {}

    for fn_key, ds_name in LAMBDA_DATASOURCE_NAMES.items():
        if fn_key in lambda_functions:
            datasources[fn_key] = api.add_lambda_data_source(ds_name, lambda_function=lambda_functions[fn_key])

    return datasources
