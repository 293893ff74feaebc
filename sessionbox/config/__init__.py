"""Session configuration providers."""
