"""Use cases and DTOs sitting between the HTTP layer and the repositories."""
