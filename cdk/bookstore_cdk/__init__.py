"""CDK infrastructure for the bookstore GraphQL API."""
