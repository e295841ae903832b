"""Madlib templating plugin for chat bots."""
