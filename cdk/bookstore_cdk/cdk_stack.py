from aws_cdk import RemovalPolicy, Stack
from constructs import Construct

from .appsync import setup_appsync
from .dynamodb_tables import create_books_table
from .helpers import get_context_bool, get_context_int, get_region_abbrev, make_resource_namer
from .lambdas import create_lambda_functions


class BookstoreStack(Stack):
    """
    Bookstore GraphQL API Stack

    Creates:
    - DynamoDB books table (partition key ``id``)
    - One Lambda resolver function per GraphQL field
    - AppSync GraphQL API with API-key auth, Lambda data sources and resolvers
    - Stack outputs for the API URL and API key

    Context flags (``cdk deploy -c key=value``):
    - enable_appsync_logging: field-level AppSync logging (default false)
    - get_book_delay_ms: artificial getBookById latency (default 0)
    - log_level: Lambda LOG_LEVEL (default INFO)
    """

    def __init__(self, scope: Construct, construct_id: str, env_name: str = "dev", **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name

        # Helper for consistent resource naming: {name}-{region}-{env}
        self.region_abbrev = get_region_abbrev()
        rn = make_resource_namer(self.region_abbrev, env_name)
        self.resource_name = rn

        enable_logging = get_context_bool(self.node.try_get_context("enable_appsync_logging"))
        get_book_delay_ms = get_context_int(self.node.try_get_context("get_book_delay_ms"))
        log_level = self.node.try_get_context("log_level") or "INFO"

        # ====================================================================
        # DynamoDB
        # ====================================================================

        self.books_table = create_books_table(
            self,
            rn,
            removal_policy=RemovalPolicy.RETAIN if env_name == "prod" else RemovalPolicy.DESTROY,
        )

        # ====================================================================
        # Lambda resolvers
        # ====================================================================

        self.lambda_functions = create_lambda_functions(
            self,
            rn,
            self.books_table,
            log_level=log_level,
            get_book_delay_ms=get_book_delay_ms,
        )

        # ====================================================================
        # AppSync GraphQL API
        # ====================================================================

        self.appsync = setup_appsync(
            self,
            rn,
            self.lambda_functions,
            enable_logging=enable_logging,
        )
        self.api = self.appsync.api
