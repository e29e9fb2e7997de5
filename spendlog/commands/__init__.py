"""CLI command implementations (imperative shell)."""
