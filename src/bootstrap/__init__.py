"""Composition root for the signature state service.

Chooses store and mirror implementations from configuration and owns the
process-wide service singleton, so routes depend on the service rather
than on concrete adapters.
"""
