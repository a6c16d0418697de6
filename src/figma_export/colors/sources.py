"""Where the colors of each appearance come from.

Two strategies exist: one Figma file per appearance, or a single file whose
style names carry the appearance as a prefix or suffix.
"""
from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Protocol, cast

from figma_api.models import Node, Style
from figma_export.colors.correlate import correlate
from figma_export.colors.policy import is_usable
from figma_export.colors.variants import filter_colors
from figma_export.errors import NoUsableStylesError
from figma_export.filter import NamePatternMatcher
from figma_export.model import AppearanceSet, Color
from figma_export.params import (
    DEFAULT_DARK_HC_PREFIX,
    DEFAULT_DARK_HC_SUFFIX,
    DEFAULT_LIGHT_HC_PREFIX,
    DEFAULT_LIGHT_HC_SUFFIX,
    ColorsParams,
    FigmaParams,
)

MatcherFactory = Callable[[str], NamePatternMatcher]


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value


class DocumentClient(Protocol):
    """Fetches styles and nodes of a Figma file."""

    def fetch_styles(self, file_id: str) -> list[Style]: ...

    def fetch_nodes(self, file_id: str, node_ids: Sequence[str]) -> dict[str, Node]: ...


def load_file_colors(
    client: DocumentClient,
    file_id: str,
    filter: str | None,
    matcher_factory: MatcherFactory,
) -> list[Color]:
    """Fetch, filter and resolve the color styles of one file.

    Raises NoUsableStylesError when nothing survives filtering.
    """
    styles = [s for s in client.fetch_styles(file_id) if is_usable(s)]

    if filter is not None:
        matcher = matcher_factory(filter)
        styles = [s for s in styles if matcher.match(s.name)]

    if not styles:
        raise NoUsableStylesError(file_id)

    nodes = client.fetch_nodes(file_id, [s.node_id for s in styles])
    return correlate(styles, nodes)


def load_from_appearance_files(
    client: DocumentClient,
    figma: FigmaParams,
    filter: str | None,
    matcher_factory: MatcherFactory,
    *,
    max_workers: int = 4,
) -> AppearanceSet:
    """Load each configured appearance from its own file.

    Unconfigured appearances are None. With ``max_workers > 1`` the files are
    fetched in parallel; the first failure propagates.
    """
    file_ids = (
        figma.light_file_id,
        figma.dark_file_id,
        figma.light_high_contrast_file_id,
        figma.dark_high_contrast_file_id,
    )

    def load(file_id: str | None) -> list[Color] | None:
        if file_id is None:
            return None
        return load_file_colors(client, file_id, filter, matcher_factory)

    if max_workers <= 1:
        results = [load(file_id) for file_id in file_ids]
    else:
        pool = ThreadPoolExecutor(max_workers=max_workers)
        try:
            futures = [pool.submit(load, file_id) for file_id in file_ids]
            results = [future.result() for future in futures]
        except BaseException:
            # drop queued files and return without joining running fetches
            pool.shutdown(wait=False, cancel_futures=True)
            raise
        pool.shutdown()

    light, dark, light_hc, dark_hc = results
    return AppearanceSet(
        light=cast(list[Color], light),
        dark=dark,
        light_hc=light_hc,
        dark_hc=dark_hc,
    )


def load_from_single_file(
    client: DocumentClient,
    figma: FigmaParams,
    colors_params: ColorsParams,
    filter: str | None,
    matcher_factory: MatcherFactory,
) -> AppearanceSet:
    """Load the light file and split it into four appearances by name.

    Light and dark have no default prefix or suffix; without one they match
    every color. High contrast falls back to the ``lightHC_``/``darkHC_``
    conventions, and is an empty list when nothing matches.
    """
    colors = load_file_colors(client, figma.light_file_id, filter, matcher_factory)
    p = colors_params

    return AppearanceSet(
        light=filter_colors(colors, p.light_mode_prefix, p.light_mode_suffix),
        dark=filter_colors(colors, p.dark_mode_prefix, p.dark_mode_suffix),
        light_hc=filter_colors(
            colors,
            _or_default(p.light_hc_mode_prefix, DEFAULT_LIGHT_HC_PREFIX),
            _or_default(p.light_hc_mode_suffix, DEFAULT_LIGHT_HC_SUFFIX),
        ),
        dark_hc=filter_colors(
            colors,
            _or_default(p.dark_hc_mode_prefix, DEFAULT_DARK_HC_PREFIX),
            _or_default(p.dark_hc_mode_suffix, DEFAULT_DARK_HC_SUFFIX),
        ),
    )
