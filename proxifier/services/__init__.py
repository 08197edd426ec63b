"""
Proxifier services.

Card lookup, batch reconciliation, derivation helpers and rendering.
Import from the submodules directly.
"""
