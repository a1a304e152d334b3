"""Exceptions raised by workflow clients and their configuration."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class WorkflowExecutionError(Exception):
    """Raised when a backend workflow fails.

    Attributes
    ----------
    message
        Human-readable failure reported by the workflow engine, or ``None``
        when the engine gave no usable explanation.
    status_code
        HTTP status code from the workflow engine, if one was received.

    """

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        """Initialise with an optional engine message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(message or "workflow execution failed")

    @classmethod
    def unreachable(cls) -> WorkflowExecutionError:
        """Return a message-less error for transport failures."""
        return cls(None)


class WorkflowConfigError(Exception):
    """Raised when workflow client configuration is invalid."""

    @classmethod
    def missing_backend(cls) -> WorkflowConfigError:
        """Return an error when ``GITCOINS_WORKFLOW_BACKEND`` is unset."""
        return cls("GITCOINS_WORKFLOW_BACKEND environment variable is required")

    @classmethod
    def invalid_backend(
        cls, name: str, valid_backends: cabc.Iterable[str]
    ) -> WorkflowConfigError:
        """Return an error listing the supported backends."""
        options = ", ".join(f"'{b}'" for b in sorted(valid_backends))
        return cls(f"Invalid workflow backend '{name}'. Valid options are: {options}")

    @classmethod
    def missing_engine_url(cls) -> WorkflowConfigError:
        """Return an error when the http backend has no engine URL."""
        return cls(
            "GITCOINS_WORKFLOW_ENGINE_URL is required for the 'http' workflow backend"
        )

    @classmethod
    def invalid_timeout(cls, env_var: str, value: str) -> WorkflowConfigError:
        """Return an error for a timeout that is not a finite non-negative number."""
        return cls(
            f"Invalid {env_var} '{value}'. Must be a finite non-negative number"
        )
