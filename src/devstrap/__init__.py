"""devstrap: one-shot developer workstation bootstrapper.

Installs a package catalog, applies git identity and aliases, installs editor
extensions and optionally clones a list of repositories.
"""
