"""
Contract Signature State - signature consistency core for contract editing

Decides, per contract, whether a binding signature exists and therefore
whether the contract content may still be edited. The decision is kept
consistent across three tiers:

- An in-memory TTL cache (hot path for repeated edit-gate checks)
- The authoritative remote signature store
- A device-local mirror used only when the remote store is unreachable

Operating Truths:
- The remote store always wins when it answers
- A stale cache never outlives its TTL
- Read paths degrade toward "unsigned", never toward "signed"
- A mutation that did not durably land is never reported as success
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
