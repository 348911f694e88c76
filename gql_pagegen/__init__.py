"""Next.js page helpers generated from GraphQL operations."""

__version__ = "0.1.0"
