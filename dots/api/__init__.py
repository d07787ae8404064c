"""dots API - one sub-package per domain, one ``cmd_*`` module per command."""
