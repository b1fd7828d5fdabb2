"""Command line interface for deckart."""
