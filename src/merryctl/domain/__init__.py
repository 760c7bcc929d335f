"""Domain layer — pure matching and resolution rules.

Nothing here performs I/O. Domain modules must never import from
infrastructure, services, commands, or output.
"""
