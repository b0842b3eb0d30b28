"""Right-biased merging of construct property mappings."""

from collections.abc import Mapping
from typing import Any


def merge_right(
  defaults: Mapping[str, Any],
  overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
  """Combine two property mappings, letting ``overrides`` win.

  Keys present in ``overrides`` replace the default value; every other key
  keeps its default. Nested values are replaced wholesale, never deep-merged.
  Neither input is mutated.
  """
  merged = dict(defaults)
  if overrides:
    merged.update(overrides)
  return merged
