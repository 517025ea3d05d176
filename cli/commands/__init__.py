"""CLI commands. Each module exposes one ``run_*`` function returning an exit code."""
