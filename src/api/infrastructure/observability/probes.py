"""Probe for the lifecycle of the authorization store's database engines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConnectionProbe(Protocol):
    """Records when read and write engines are created and disposed."""

    def engine_created(self, role: str, target: str, pool_size: int | None) -> None:
        ...

    def engine_disposed(self, role: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> ConnectionProbe:
        ...


class DefaultConnectionProbe:
    """structlog implementation of ConnectionProbe."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultConnectionProbe:
        return DefaultConnectionProbe(logger=self._logger, context=context)

    def engine_created(self, role: str, target: str, pool_size: int | None) -> None:
        """``pool_size`` is None when the driver chooses its own pool."""
        self._logger.info(
            "database_engine_created",
            role=role,
            target=target,
            pool_size=pool_size,
            **self._get_context_kwargs(),
        )

    def engine_disposed(self, role: str) -> None:
        self._logger.info(
            "database_engine_disposed",
            role=role,
            **self._get_context_kwargs(),
        )
