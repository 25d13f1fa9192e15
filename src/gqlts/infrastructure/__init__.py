"""Infrastructure layer — GraphQL schema loading via graphql-core."""
