"""gqlts — GraphQL to TypeScript type mapping."""

__version__ = "0.1.0"
