"""Core contracts: error taxonomy, ports, application state."""
