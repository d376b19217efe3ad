"""BaseService — foundation for reachstat services.

Every service receives the resolved :class:`ReachSettings` at
construction time and reads its defaults (sampling bound, iteration
count, seed) from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reachstat.config.settings import ReachSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class AnalysisService(BaseService):
            def analyze(self, path: Path, ...) -> ServiceResult:
                bound = self._settings.sampling.max_node_bound
                ...
    """

    def __init__(self, settings: ReachSettings) -> None:
        self._settings = settings
