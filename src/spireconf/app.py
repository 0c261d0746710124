"""Application wiring: one registry connection shared by every component."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Self

from spireconf.adapters.spire import EntryServiceStub, SpireEntryClient, open_channel
from spireconf.config import get_registry_config
from spireconf.domain.reconciliation import EntryReconciler
from spireconf.resources import EntryDataSource, EntryResource

if TYPE_CHECKING:
    from types import TracebackType

    import grpc

    from spireconf.config import RegistryConfig
    from spireconf.domain.ports import EntryRegistry


log = getLogger(__name__)


@dataclass(slots=True)
class RegistryProvider:
    """Owns the registry channel and hands the same reconciler to every consumer.

    ``configure`` dials at most once; resources and data sources never open
    connections of their own. ``registry`` may be injected to bypass gRPC.
    """

    config: RegistryConfig = field(default_factory=get_registry_config)
    registry: EntryRegistry | None = None
    _channel: grpc.Channel | None = field(default=None, init=False)
    _reconciler: EntryReconciler | None = field(default=None, init=False)

    def configure(self) -> EntryReconciler:
        if self._reconciler is not None:
            return self._reconciler

        registry = self.registry
        if registry is None:
            log.info("Connecting to SPIRE server at %s", self.config.endpoint)
            self._channel = open_channel(self.config.endpoint)
            registry = SpireEntryClient(EntryServiceStub(self._channel))
        self._reconciler = EntryReconciler(registry=registry, timeout=self.config.timeout)
        return self._reconciler

    def entry_resource(self) -> EntryResource:
        return EntryResource(reconciler=self.configure())

    def entry_data_source(self) -> EntryDataSource:
        return EntryDataSource(reconciler=self.configure())

    def close(self) -> None:
        if self._channel is not None:
            self._channel.close()
            self._channel = None
        self._reconciler = None

    def __enter__(self) -> Self:
        self.configure()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def build_provider(
    *,
    endpoint: str | None = None,
    timeout_seconds: float | None = None,
) -> RegistryProvider:
    """Provider configured from explicit overrides, then the environment."""

    return RegistryProvider(
        config=get_registry_config(endpoint=endpoint, timeout_seconds=timeout_seconds)
    )
