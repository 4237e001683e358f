from typing import Callable, Optional

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as ddb
from constructs import Construct


def create_books_table(
    stack: Construct,
    rn: Callable[[str], str],
    removal_policy: Optional[RemovalPolicy] = None,
) -> ddb.Table:
    """Create the books table.

    Items are addressed by the caller-supplied string ``id`` alone; there is
    no sort key and no secondary index.

    Args:
        stack: CDK Construct (usually the Stack instance)
        rn: helper function to create resource names (rn(name: str) -> str)
        removal_policy: What happens to the table when the stack is deleted
            (defaults to RETAIN)

    Returns:
        The books Table construct
    """
    return ddb.Table(
        stack,
        "BooksTable",
        table_name=rn("bookstore-books"),
        partition_key=ddb.Attribute(name="id", type=ddb.AttributeType.STRING),
        billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
        removal_policy=removal_policy or RemovalPolicy.RETAIN,
    )
