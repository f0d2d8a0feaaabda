"""Signature-related domain exceptions.

These exceptions are raised by signature store and mirror implementations
when persistence operations fail. The signature state service converts them
into degraded reads or failed mutation results; they never cross the
service boundary on read paths.
"""

from src.domain.exceptions import ContractSignatureError


class SignatureStoreError(ContractSignatureError):
    """Raised when the remote signature store rejects or fails an operation.

    Attributes:
        contract_id: The contract the operation targeted.
        operation: The store operation that failed (read, write, delete).
    """

    def __init__(
        self, message: str = "Signature store operation failed", contract_id: str = "", operation: str = ""
    ) -> None:
        """Initialize with operation context.

        Args:
            message: Error description.
            contract_id: The contract the operation targeted.
            operation: The store operation that failed.
        """
        super().__init__(message)
        self.contract_id = contract_id
        self.operation = operation


class SignatureStoreUnavailableError(SignatureStoreError):
    """Raised when the remote signature store cannot be reached at all.

    Covers connection failures and timeouts, as opposed to the store
    answering with an error.
    """

    pass


class SignatureMirrorError(ContractSignatureError):
    """Raised when the device-local mirror cannot be read or written."""

    pass


class UnknownSignatureRoleError(ContractSignatureError, ValueError):
    """Raised when a signature role string is not designer or client."""

    def __init__(self, role: str = "") -> None:
        """Initialize with the rejected role.

        Args:
            role: The role value that was rejected.
        """
        super().__init__(f"Unknown signature role: {role!r}")
        self.role = role
