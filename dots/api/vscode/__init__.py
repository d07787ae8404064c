"""VSCode domain - settings/profile links and extension export."""
