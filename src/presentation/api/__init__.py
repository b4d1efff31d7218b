"""API module - HTTP plumbing shared by the versioned routers."""
