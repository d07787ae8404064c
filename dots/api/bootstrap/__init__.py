"""Bootstrap domain - full install and update sequences."""
