"""Configuration for reaching the workflow engine.

Usage
-----
>>> import os
>>> os.environ["GITCOINS_WORKFLOW_BACKEND"] = "memory"
>>> config = WorkflowEngineConfig.from_env()
>>> config.backend
'memory'
>>> config.dispatch_timeout_s
60.0

"""

from __future__ import annotations

import dataclasses
import math
import os

from gitcoins.workflows.errors import WorkflowConfigError

VALID_BACKENDS = frozenset({"http", "memory"})

_DEFAULT_REQUEST_TIMEOUT_S = 30.0
_DEFAULT_DISPATCH_TIMEOUT_S = 60.0
_DISABLED_TIMEOUT_VALUES = frozenset({"0", "none", "off"})


@dataclasses.dataclass(frozen=True, slots=True)
class WorkflowEngineConfig:
    """Settings for the workflow client and dispatcher.

    Attributes
    ----------
    backend
        ``"http"`` for a remote workflow engine or ``"memory"`` for the
        in-process engine used in development.
    engine_url
        Base URL of the remote workflow engine; required for ``"http"``.
    request_timeout_s
        Transport timeout applied to each HTTP call to the engine. ``None``
        disables it.
    dispatch_timeout_s
        Upper bound on waiting for a workflow to settle. ``None`` waits
        indefinitely.

    """

    backend: str = "memory"
    engine_url: str | None = None
    request_timeout_s: float | None = _DEFAULT_REQUEST_TIMEOUT_S
    dispatch_timeout_s: float | None = _DEFAULT_DISPATCH_TIMEOUT_S

    @staticmethod
    def _parse_timeout(env_var: str, default: float) -> float | None:
        """Read a timeout in seconds; ``0``/``none``/``off`` disable it."""
        raw = os.environ.get(env_var, "").strip()
        if not raw:
            return default
        if raw.lower() in _DISABLED_TIMEOUT_VALUES:
            return None
        try:
            value = float(raw)
        except ValueError as exc:
            raise WorkflowConfigError.invalid_timeout(env_var, raw) from exc
        if not math.isfinite(value) or value < 0:
            raise WorkflowConfigError.invalid_timeout(env_var, raw)
        return value or None

    @classmethod
    def from_env(cls) -> WorkflowEngineConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITCOINS_WORKFLOW_BACKEND``: Required. ``http`` or ``memory``.
        - ``GITCOINS_WORKFLOW_ENGINE_URL``: Engine base URL (``http`` only).
        - ``GITCOINS_WORKFLOW_REQUEST_TIMEOUT_S``: Per-call transport
          timeout. Default 30.
        - ``GITCOINS_DISPATCH_TIMEOUT_S``: Bound on awaiting a workflow.
          Default 60; ``0``, ``none`` or ``off`` waits indefinitely.

        Raises
        ------
        WorkflowConfigError
            If the backend is missing or unknown, the ``http`` backend has
            no engine URL, or a timeout is malformed.

        """
        raw_backend = os.environ.get("GITCOINS_WORKFLOW_BACKEND")
        if raw_backend is None:
            raise WorkflowConfigError.missing_backend()
        backend = raw_backend.strip().lower()
        if backend not in VALID_BACKENDS:
            raise WorkflowConfigError.invalid_backend(raw_backend, VALID_BACKENDS)

        engine_url = os.environ.get("GITCOINS_WORKFLOW_ENGINE_URL", "").strip() or None
        if backend == "http" and engine_url is None:
            raise WorkflowConfigError.missing_engine_url()

        request_timeout_s = cls._parse_timeout(
            "GITCOINS_WORKFLOW_REQUEST_TIMEOUT_S", _DEFAULT_REQUEST_TIMEOUT_S
        )
        dispatch_timeout_s = cls._parse_timeout(
            "GITCOINS_DISPATCH_TIMEOUT_S", _DEFAULT_DISPATCH_TIMEOUT_S
        )

        return cls(
            backend=backend,
            engine_url=engine_url,
            request_timeout_s=request_timeout_s,
            dispatch_timeout_s=dispatch_timeout_s,
        )
