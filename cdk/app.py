#!/usr/bin/env python3
import os

import aws_cdk as cdk

from bookstore_cdk.cdk_stack import BookstoreStack
from bookstore_cdk.helpers import get_region, get_region_abbrev

app = cdk.App()

# Get environment from context or environment variable (dev/prod)
env_name = app.node.try_get_context("environment") or os.getenv("ENVIRONMENT", "dev")

# Get region and its abbreviation for stack naming
region = get_region()
region_abbrev = get_region_abbrev(region)

# Configure environment
env = cdk.Environment(
    account=os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=region,
)

# Environment-specific stack name with region: bookstore-{region}-{env}
stack_name = f"bookstore-{region_abbrev}-{env_name}"

BookstoreStack(
    app,
    f"BookstoreStack-{region_abbrev}-{env_name}",
    stack_name=stack_name,
    env_name=env_name,
    env=env,
    description=f"Bookstore - GraphQL API ({region_abbrev}-{env_name})",
)

app.synth()
