"""In-process implementation of the WorkflowClient protocol."""

from __future__ import annotations

import asyncio
import collections

from gitcoins.workflows.errors import WorkflowExecutionError
from gitcoins.workflows.models import WorkflowName

__all__ = ["InMemoryWorkflowClient"]


class InMemoryWorkflowClient:
    """Deterministic workflow engine kept in process memory.

    Useful for development and tests when no remote engine is available.
    Rules follow the real engine's ledger constraints:

    - ``create_key`` registers a public key once per GitHub user.
    - ``push_event`` and ``pull_request_review_event`` issue one GitCoin,
      but only to users that already hold a key.

    State is guarded by an ``asyncio.Lock`` so concurrent requests observe
    a consistent ledger.

    Examples
    --------
    >>> import asyncio
    >>> client = InMemoryWorkflowClient()
    >>> asyncio.run(client.invoke(WorkflowName.CREATE_KEY, "octocat"))
    >>> asyncio.run(client.invoke(WorkflowName.PUSH_EVENT, "octocat"))
    >>> client.balance("octocat")
    1

    """

    def __init__(self) -> None:
        """Start with an empty key registry and ledger."""
        self._keys: set[str] = set()
        self._balances: collections.Counter[str] = collections.Counter()
        self._invocations: list[tuple[WorkflowName, str]] = []
        self._lock = asyncio.Lock()

    @property
    def invocations(self) -> tuple[tuple[WorkflowName, str], ...]:
        """Return every ``(workflow, identity)`` invoked so far, in order."""
        return tuple(self._invocations)

    def has_key(self, identity: str) -> bool:
        """Return whether *identity* holds a registered public key."""
        return identity in self._keys

    def balance(self, identity: str) -> int:
        """Return the GitCoins issued to *identity*."""
        return self._balances[identity]

    async def invoke(self, workflow: WorkflowName, identity: str) -> None:
        """Apply *workflow* for *identity* to the in-memory ledger.

        Raises
        ------
        WorkflowExecutionError
            If a key already exists for ``create_key``, or a reward targets a
            user without a key.

        """
        async with self._lock:
            self._invocations.append((workflow, identity))
            if workflow is WorkflowName.CREATE_KEY:
                self._create_key(identity)
            else:
                self._issue_reward(identity)

    def _create_key(self, identity: str) -> None:
        if identity in self._keys:
            msg = f"Public key already exists for GitHub user: {identity}"
            raise WorkflowExecutionError(msg)
        self._keys.add(identity)

    def _issue_reward(self, identity: str) -> None:
        if identity not in self._keys:
            msg = f"No public key found for GitHub user: {identity}"
            raise WorkflowExecutionError(msg)
        self._balances[identity] += 1
