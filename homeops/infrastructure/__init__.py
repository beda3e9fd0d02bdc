"""Infrastructure: persistence, engine services, external adapters."""
