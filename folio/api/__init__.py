"""HTTP API for serving the rendered portfolio."""
