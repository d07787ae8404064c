"""Zsh domain - Oh My Zsh and plugins."""
