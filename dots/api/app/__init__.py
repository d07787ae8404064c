"""App domain - settings links for individual applications."""
