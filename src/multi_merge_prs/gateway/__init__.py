"""Gateways to the external collaborators: git, the gh CLI, and the terminal prompt."""
