"""Parallel predicate search over a node graph.

Every node with two children fans out into three independent units (the
test of its own payload and the searches of both subtrees) which are
gathered before the results are merged. Nodes with a single child are
walked sequentially. Predicates can be handed to a thread pool so that
slow predicates overlap.

The search only reads the tree. Running it while the same tree is being
mutated is not supported.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional

from .._common.config import SearchConfig
from .._common.errors import ConfigurationError
from ..sync.core.node import BinarySearchTreeNode
from .error_policies import ErrorPolicy, FailFastPolicy


class ParallelPredicateSearch:
    """Fan-out/fan-in predicate search.

    Each run() owns its worker pool and concurrency limit.
    """

    def __init__(self, predicate: Callable[[Any], bool], config: Optional[SearchConfig] = None):
        """
        Args:
            predicate: Function returning True for payloads to collect
            config: Scheduling options; defaults to SearchConfig()

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.predicate = predicate
        self.config = config or SearchConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self.policy: ErrorPolicy = self.config.error_policy or FailFastPolicy()
        self.nodes_tested = 0

    async def run(self, root: BinarySearchTreeNode) -> List[Any]:
        """Search the subtree rooted at root.

        Each call gets its own worker pool and concurrency limit, so one
        instance may run several searches at once. nodes_tested counts
        across all of them.

        Returns:
            Matching payloads, in no particular order
        """
        if root.is_empty() and root.is_leaf():
            return []

        semaphore: Optional[asyncio.Semaphore] = None
        if self.config.max_concurrent is not None:
            semaphore = asyncio.Semaphore(self.config.max_concurrent)

        if not self.config.use_threads:
            return await self._search(root, None, semaphore)

        executor = ThreadPoolExecutor(
            max_workers=self.config.num_workers,
            thread_name_prefix='bstreelib-where'
        )
        try:
            return await self._search(root, executor, semaphore)
        finally:
            # A cancelled run may still have predicates in flight
            executor.shutdown(wait=False)

    async def _search(self, node: BinarySearchTreeNode,
                      executor: Optional[ThreadPoolExecutor],
                      semaphore: Optional[asyncio.Semaphore]) -> List[Any]:
        matches: List[Any] = []
        while node is not None:
            if node.left is not None and node.right is not None:
                # Wait for every unit even if one fails; no partial fan-in
                results = await asyncio.gather(
                    self._test(node, executor, semaphore),
                    self._search(node.left, executor, semaphore),
                    self._search(node.right, executor, semaphore),
                    return_exceptions=True
                )
                for result in results:
                    if isinstance(result, BaseException):
                        raise result
                    matches.extend(result)
                return matches

            matches.extend(await self._test(node, executor, semaphore))
            node = node.left if node.left is not None else node.right
        return matches

    async def _test(self, node: BinarySearchTreeNode,
                    executor: Optional[ThreadPoolExecutor],
                    semaphore: Optional[asyncio.Semaphore]) -> List[Any]:
        if node.is_empty():
            return []

        value = node.value
        self.nodes_tested += 1
        try:
            if semaphore is None:
                matched = await self._call(value, executor)
            else:
                async with semaphore:
                    matched = await self._call(value, executor)
        except Exception as e:
            matched = await self.policy.handle(e, 'predicate', value)
        return [value] if matched else []

    async def _call(self, value: Any, executor: Optional[ThreadPoolExecutor]) -> bool:
        if executor is None:
            return bool(self.predicate(value))
        loop = asyncio.get_running_loop()
        return bool(await loop.run_in_executor(executor, self.predicate, value))


async def where_async(root: BinarySearchTreeNode,
                      predicate: Callable[[Any], bool],
                      config: Optional[SearchConfig] = None) -> List[Any]:
    """Collect every payload under root that satisfies predicate.

    Args:
        root: Root of the subtree to search
        predicate: Function returning True for payloads to collect
        config: Scheduling options

    Returns:
        Matching payloads, in no particular order
    """
    search = ParallelPredicateSearch(predicate, config)
    return await search.run(root)
