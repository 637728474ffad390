"""Ten-pin bowling scoring service."""
