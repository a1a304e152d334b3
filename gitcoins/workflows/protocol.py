"""WorkflowClient protocol for reaching the workflow engine."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from gitcoins.workflows.models import WorkflowName


@typ.runtime_checkable
class WorkflowClient(typ.Protocol):
    """Protocol for invoking backend workflows.

    A single client is shared by every request, so implementations must be
    safe for concurrent use.

    Examples
    --------
    >>> from gitcoins.workflows import InMemoryWorkflowClient, WorkflowClient
    >>> client: WorkflowClient = InMemoryWorkflowClient()
    >>> isinstance(client, WorkflowClient)
    True

    """

    async def invoke(self, workflow: WorkflowName, identity: str) -> None:
        """Run *workflow* for *identity* and wait for it to settle.

        Raises
        ------
        WorkflowExecutionError
            If the workflow fails. The error's ``message`` carries the
            engine's explanation when one is available.

        """
        ...
