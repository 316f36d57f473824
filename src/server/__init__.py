"""HTTP server for recordtree."""
