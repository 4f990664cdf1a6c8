"""vitebridge CLI command implementations."""
