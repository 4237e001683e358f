"""
AppSync GraphQL API module for the bookstore.

This module orchestrates the creation of the AppSync GraphQL API:

- api.py: API creation (API-key auth, X-Ray, optional field logging) and outputs
- datasources.py: One Lambda data source per resolver function
- resolver_builder.py: Lambda resolver attachment, one per field
- resolvers/: Resolver wiring organized by type
  - queries.py: Query resolvers
  - mutations.py: Mutation resolvers
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from aws_cdk import CfnOutput
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import create_api_outputs, create_appsync_api
from .datasources import create_lambda_datasources
from .resolver_builder import ResolverBuilder
from .resolvers import create_resolvers

if TYPE_CHECKING:
    from aws_cdk import aws_lambda as lambda_


@dataclass
class AppSyncResources:
    """Container for all AppSync resources created by setup_appsync."""

    api: appsync.GraphqlApi
    lambda_datasources: dict[str, appsync.LambdaDataSource]
    resolvers: list[appsync.Resolver]
    url_output: CfnOutput
    api_key_output: CfnOutput


def setup_appsync(
    scope: Construct,
    resource_name: Any,  # Callable[[str], str]
    lambda_functions: dict[str, "lambda_.IFunction"],
    enable_logging: bool = False,
) -> AppSyncResources:
    """
    Set up the complete AppSync GraphQL API infrastructure.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        lambda_functions: Dictionary of Lambda functions keyed by function key
        enable_logging: Turn on AppSync field-level logging

    Returns:
        AppSyncResources containing all created resources
    """
    # Create the GraphQL API
    api = create_appsync_api(scope=scope, resource_name=resource_name, enable_logging=enable_logging)

    # Create Lambda data sources
    lambda_datasources = create_lambda_datasources(api, lambda_functions)

    # Create all resolvers
    builder = ResolverBuilder(api, lambda_datasources, scope)
    resolvers = create_resolvers(builder)

    url_output, api_key_output = create_api_outputs(scope, api)

    return AppSyncResources(
        api=api,
        lambda_datasources=lambda_datasources,
        resolvers=resolvers,
        url_output=url_output,
        api_key_output=api_key_output,
    )


__all__ = ["setup_appsync", "AppSyncResources"]
