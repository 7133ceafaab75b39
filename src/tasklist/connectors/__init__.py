"""Interactive front doors (console REPL)."""
