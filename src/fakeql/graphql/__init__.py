"""GraphQL schema, types and resolvers for FakeQL."""
