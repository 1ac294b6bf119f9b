"""Command-line interface for create-my-internet."""
