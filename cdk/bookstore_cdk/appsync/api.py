"""AppSync API creation."""

import os
from typing import Any

from aws_cdk import CfnOutput, Duration, Expiration
from aws_cdk import aws_appsync as appsync
from constructs import Construct

# GraphQL schema shipped next to the CDK app
SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "schema", "schema.graphql")

API_KEY_VALIDITY_DAYS = 365


def create_appsync_api(
    scope: Construct,
    resource_name: Any,  # Callable[[str], str]
    enable_logging: bool = False,
) -> appsync.GraphqlApi:
    """
    Create the AppSync GraphQL API with API-key authorization.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        enable_logging: Turn on field-level CloudWatch logging (ALL)

    Returns:
        The created GraphQL API
    """
    api_name = resource_name("bookstore-api")

    api = appsync.GraphqlApi(
        scope,
        "Api",
        name=api_name,
        definition=appsync.Definition.from_file(SCHEMA_PATH),
        authorization_config=appsync.AuthorizationConfig(
            default_authorization=appsync.AuthorizationMode(
                authorization_type=appsync.AuthorizationType.API_KEY,
                api_key_config=appsync.ApiKeyConfig(
                    name=resource_name("bookstore-api-key"),
                    description="API key for the bookstore GraphQL API",
                    expires=Expiration.after(Duration.days(API_KEY_VALIDITY_DAYS)),
                ),
            ),
        ),
        xray_enabled=True,
        log_config=(
            appsync.LogConfig(
                field_log_level=appsync.FieldLogLevel.ALL,
                exclude_verbose_content=False,
            )
            if enable_logging
            else None
        ),
    )

    return api


def create_api_outputs(scope: Construct, api: appsync.GraphqlApi) -> tuple[CfnOutput, CfnOutput]:
    """Expose the endpoint URL and API key as stack outputs."""
    url_output = CfnOutput(
        scope,
        "GraphQLAPIURL",
        value=api.graphql_url,
        description="AppSync GraphQL endpoint",
    )
    key_output = CfnOutput(
        scope,
        "GraphQLAPIKey",
        value=api.api_key or "",
        description="AppSync API key",
    )
    return url_output, key_output
