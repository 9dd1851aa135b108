"""Infrastructure adapters: dispatch, job backends, logging, config files."""
