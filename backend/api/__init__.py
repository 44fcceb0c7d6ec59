"""GraphQL API layer (Strawberry types, resolvers and context)."""
