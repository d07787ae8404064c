"""dots - macOS dotfiles bootstrapper."""
