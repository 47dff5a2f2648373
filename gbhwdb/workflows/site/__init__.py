"""Site build workflows."""
