"""cli

Command-line glue for :mod:`junit2md_cli`: argument builders and commands.
"""
