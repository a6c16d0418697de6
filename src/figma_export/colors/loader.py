"""Entry point for resolving colors of all appearances."""
from __future__ import annotations

from figma_export.colors.sources import (
    DocumentClient,
    MatcherFactory,
    load_from_appearance_files,
    load_from_single_file,
)
from figma_export.filter import AssetsFilter
from figma_export.model import AppearanceSet
from figma_export.params import ColorsParams, FigmaParams


class ColorsLoader:
    """Loads light, dark and high contrast colors from Figma.

    ``colors_params.use_single_file`` selects the single file naming
    convention; otherwise every appearance is read from its own file.
    """

    def __init__(
        self,
        client: DocumentClient,
        figma_params: FigmaParams,
        colors_params: ColorsParams | None = None,
        *,
        matcher_factory: MatcherFactory = AssetsFilter,
        max_workers: int = 4,
    ) -> None:
        self._client = client
        self._figma_params = figma_params
        self._colors_params = colors_params
        self._matcher_factory = matcher_factory
        self._max_workers = max_workers

    def load(self, filter: str | None = None) -> AppearanceSet:
        if self._colors_params is not None and self._colors_params.use_single_file:
            return load_from_single_file(
                self._client,
                self._figma_params,
                self._colors_params,
                filter,
                self._matcher_factory,
            )
        return load_from_appearance_files(
            self._client,
            self._figma_params,
            filter,
            self._matcher_factory,
            max_workers=self._max_workers,
        )
