"""Custom exception classes for rollups-connect library."""


class DeploymentError(Exception):
    """Base exception for deployment resolution errors."""

    pass


class DeploymentPathRequiredError(DeploymentError, ValueError):
    """Raised when the local chain is selected but no manifest path was given."""

    pass


class DeploymentFileNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the deployment manifest file does not exist."""

    pass


class UnsupportedNetworkError(DeploymentError, ValueError):
    """Raised when no deployment is known for the requested chain id."""

    pass


class ContractNotFoundError(DeploymentError, ValueError):
    """Raised when a deployment has no entry for the requested contract."""

    pass
