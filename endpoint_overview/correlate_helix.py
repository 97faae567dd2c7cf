"""Match Helix reference endpoints against the crate's helpers and modules."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping

from endpoint_overview.api_surface import ApiSurface
from endpoint_overview.coverage import HelixCoverage
from endpoint_overview.helper_distance import MAX_HELPER_DISTANCE, helper_distance
from endpoint_overview.naming import to_snake
from endpoint_overview.reference_row import HelixRow

logger = logging.getLogger(__name__)


def module_for_category(category: str, category_overrides: Mapping[str, str]) -> str:
    """Module that holds the endpoints of a reference category."""
    module_name = to_snake(category)
    return category_overrides.get(module_name, module_name)


def correlate_helix_row(
    row: HelixRow, surface: ApiSurface, overrides: Mapping[str, Mapping[str, str]]
) -> HelixCoverage:
    """Correlate a single endpoint row by exact name."""
    item_name = to_snake(row.name)
    item_name = overrides.get("items", {}).get(item_name, item_name)
    module_name = module_for_category(row.category, overrides.get("categories", {}))
    # Some endpoints live outside the module their category maps to.
    module_name = overrides.get("modules", {}).get(item_name, module_name)

    methods = (item_name,) if item_name in surface.helix_methods else ()
    module = None
    if item_name in surface.helix_modules.get(module_name, set()):
        module = f"{module_name}::{item_name}"
    else:
        logger.warning("[Helix] missing %s::%s", module_name, item_name)

    return HelixCoverage(
        row=row,
        item_name=item_name,
        module_name=module_name,
        methods=methods,
        module=module,
    )


def attach_similar_helpers(
    results: list[HelixCoverage], helix_methods: Iterable[str]
) -> list[HelixCoverage]:
    """Attach helpers without an exactly named endpoint to their closest endpoint.

    A helper goes to the endpoint with the smallest `helper_distance` below
    MAX_HELPER_DISTANCE; ties go to the endpoint listed first. Endpoints keep
    their exact helper first, the others follow by name.
    """
    taken = {m for r in results for m in r.methods}
    closest: dict[str, tuple[int, int]] = {}
    for method in sorted(set(helix_methods) - taken):
        for i, result in enumerate(results):
            distance = helper_distance(result.item_name, method)
            if distance < MAX_HELPER_DISTANCE and (
                method not in closest or distance < closest[method][0]
            ):
                closest[method] = (distance, i)

    extra: dict[int, list[str]] = {}
    for method, (_, i) in closest.items():
        logger.debug("Helper %s matches %s", method, results[i].item_name)
        extra.setdefault(i, []).append(method)
    return [
        dataclasses.replace(r, methods=r.methods + tuple(extra[i])) if i in extra else r
        for i, r in enumerate(results)
    ]


def correlate_helix(
    rows: Iterable[HelixRow],
    surface: ApiSurface,
    overrides: Mapping[str, Mapping[str, str]],
) -> list[HelixCoverage]:
    """Correlate every endpoint row, keeping the reference order."""
    results = [correlate_helix_row(row, surface, overrides) for row in rows]
    return attach_similar_helpers(results, surface.helix_methods)
