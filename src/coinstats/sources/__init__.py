"""Price history source registry."""

from __future__ import annotations

from coinstats.config import PriceSourceType
from coinstats.sources.base import BasePriceSource

# Lazy registry: actual classes imported on demand so the REST source
# doesn't pull in ``requests`` for CSV-only deployments.
SOURCE_CLASSES: dict[PriceSourceType, str] = {
    PriceSourceType.CSV: "coinstats.sources.csv.CsvPriceSource",
    PriceSourceType.REST: "coinstats.sources.rest.RestPriceSource",
    PriceSourceType.MOCK: "coinstats.sources.mock.MockPriceSource",
}


def create_source(
    source_type: PriceSourceType,
    **kwargs,
) -> BasePriceSource:
    """Instantiate a source by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = SOURCE_CLASSES[source_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BasePriceSource", "SOURCE_CLASSES", "create_source"]
