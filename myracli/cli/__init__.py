"""
CLI Module.

Typer commands for the remote API resources and the rich table
renderer used to display their records.
"""
