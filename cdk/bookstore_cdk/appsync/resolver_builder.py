"""
Builder for AppSync Lambda resolvers.

Every field in this API resolves through a direct Lambda data source, so the
builder only has to attach one resolver per (type, field) pair and refuse a
second attachment to the same field.
"""

from typing import Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct


class ResolverBuilder:
    """
    Fluent builder for AppSync Lambda resolvers.

    Example:
        builder = ResolverBuilder(api, lambda_datasources, scope)

        builder.create_lambda_resolver(
            field_name="listBooks",
            type_name="Query",
            lambda_datasource_name="list_books",
        )
    """

    def __init__(
        self,
        api: appsync.GraphqlApi,
        lambda_datasources: dict[str, appsync.LambdaDataSource],
        scope: Construct,
    ):
        """
        Initialize the resolver builder.

        Args:
            api: AppSync GraphQL API
            lambda_datasources: Dictionary of Lambda data sources (keyed by function key)
            scope: CDK construct scope for creating resources
        """
        self.api = api
        self.lambda_datasources = lambda_datasources
        self.scope = scope
        self.resolved_fields: set[tuple[str, str]] = set()

    def create_lambda_resolver(
        self,
        field_name: str,
        type_name: str,
        lambda_datasource_name: str,
        id_suffix: str | None = None,
    ) -> appsync.Resolver:
        """
        Create a Lambda resolver.

        Args:
            field_name: GraphQL field name
            type_name: GraphQL type name
            lambda_datasource_name: Key in lambda_datasources dict
            id_suffix: Optional custom CDK construct ID suffix

        Returns:
            The created resolver

        Raises:
            KeyError: If no data source is registered under lambda_datasource_name
            ValueError: If the field already has a resolver
        """
        field_key = (type_name, field_name)
        if field_key in self.resolved_fields:
            raise ValueError(f"Field {type_name}.{field_name} already has a resolver")

        resolver_id = id_suffix or f"{field_name}Resolver"

        lambda_ds = self.lambda_datasources[lambda_datasource_name]
        resolver: appsync.Resolver = lambda_ds.create_resolver(
            resolver_id,
            type_name=type_name,
            field_name=field_name,
        )
        self.resolved_fields.add(field_key)
        return resolver

    def create_batch_resolvers(
        self,
        resolvers: list[dict[str, Any]],
    ) -> list[appsync.Resolver]:
        """
        Create multiple resolvers from a configuration list.

        Args:
            resolvers: List of resolver configurations, each containing:
                - type: "lambda"
                - field_name: GraphQL field name
                - type_name: GraphQL type name
                - lambda_datasource_name: Key in lambda_datasources dict
                - id_suffix: (optional) Custom CDK construct ID

        Returns:
            List of created resolvers
        """
        created = []
        for config in resolvers:
            resolver_type = config["type"]

            if resolver_type == "lambda":
                resolver = self.create_lambda_resolver(
                    field_name=config["field_name"],
                    type_name=config["type_name"],
                    lambda_datasource_name=config["lambda_datasource_name"],
                    id_suffix=config.get("id_suffix"),
                )
            else:
                raise ValueError(f"Unknown resolver type: {resolver_type}")

            created.append(resolver)

        return created
