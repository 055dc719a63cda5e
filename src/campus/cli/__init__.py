"""Command-line interface for the campus passages service."""
