"""
Dashboard session state

One DashboardSession per browser session holds the raw records and the
current filter selections. Loading happens exactly once; filter changes
only recompute the pipeline.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import pandas as pd

from .aggregation import DashboardView, build_dashboard_view
from .errors import LoadError
from .schema import ALL_TERRITORIES, ALL_VERTICALS

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load data."


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class DashboardSession:
    status: LoadStatus = LoadStatus.IDLE
    records: pd.DataFrame | None = None
    error: str | None = None
    selected_vertical: str = ALL_VERTICALS
    selected_territory: str = ALL_TERRITORIES

    def load(self, loader: Callable[[], pd.DataFrame]) -> LoadStatus:
        """
        Run the loader if this session has never loaded.

        A failed load is terminal for the session; later calls do nothing
        and the loader is not retried. Errors other than LoadError still
        end in ERROR, then propagate.
        """
        if self.status is not LoadStatus.IDLE:
            return self.status

        self.status = LoadStatus.LOADING
        try:
            records = loader()
        except LoadError:
            logger.exception("MMM data load failed")
            self.status = LoadStatus.ERROR
            self.error = LOAD_ERROR_MESSAGE
            return self.status
        except BaseException:
            self.status = LoadStatus.ERROR
            self.error = LOAD_ERROR_MESSAGE
            raise

        self.records = records
        self.status = LoadStatus.READY
        return self.status

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY

    def _require_ready(self):
        if not self.is_ready:
            raise RuntimeError(f"Session is {self.status.value}; data is not loaded")

    def select(self, vertical: str | None = None, territory: str | None = None):
        """Update filter selections; None leaves a dimension unchanged."""
        self._require_ready()
        if vertical is not None:
            self.selected_vertical = vertical
        if territory is not None:
            self.selected_territory = territory

    def view(self) -> DashboardView:
        """Recompute the dashboard for the current selections."""
        self._require_ready()
        return build_dashboard_view(
            self.records,
            vertical=self.selected_vertical,
            territory=self.selected_territory,
        )
