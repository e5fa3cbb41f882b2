"""Stage column sizing and block colouring for the component table."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

STAGE_NAMES: tuple[str, ...] = ("lb", "ui", "ly", "pa", "ra", "gx", "pf")
PSEUDOS: tuple[str, ...] = ("all", "pre", "mid", "post")

MEASURE_STYLE = (
    ".sub_stage_back{border:none !important;} .block_box .description{width:min-content;}"
)
TRANSITION_STYLE = ".sub_stage_back{transition: var(--hover-stage-expand);}"

# Stages whose full width does not exceed this are treated as collapsed.
COLLAPSED_WIDTH = 32

_ALL, _PRE, _MID, _POST = range(4)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def size_stage_widths(
    stage_widths: Sequence[Sequence[int]], available_width: int
) -> list[list[int]]:
    """Turn measured ``[all, pre, mid, post]`` widths per stage into final widths.

    Each stage is first made consistent (``all`` is at least ``pre + mid + post``,
    otherwise ``mid`` absorbs the slack). If every stage is collapsed the
    available width is split evenly; otherwise spare width is shared among the
    stages that have any width at all.
    """
    sized: list[list[int]] = []
    for widths in stage_widths:
        if len(widths) != len(PSEUDOS):
            raise ValueError(
                f"each stage needs {len(PSEUDOS)} widths (all, pre, mid, post), got {list(widths)}"
            )
        all_w, pre, mid, post = (int(w) for w in widths)
        parts = pre + mid + post
        if all_w < parts:
            all_w = parts
        else:
            mid = all_w - pre - post
        sized.append([all_w, pre, mid, post])

    if not sized:
        return sized

    minimum = sum(w[_ALL] for w in sized)
    open_count = sum(1 for w in sized if w[_ALL] > COLLAPSED_WIDTH)

    if open_count == 0:
        share = _trunc_div(available_width, len(sized))
        for widths in sized:
            widths[_ALL] = share
            widths[_MID] = share
    elif available_width > minimum:
        extra = (available_width - minimum) // open_count
        for widths in sized:
            if widths[_ALL] != 0:
                widths[_ALL] += extra
                widths[_MID] += extra
    return sized


def grid_style(stage_widths: Sequence[Sequence[int]]) -> str:
    """CSS that gives every stage sub-column its width."""
    if len(stage_widths) != len(STAGE_NAMES):
        raise ValueError(f"expected widths for {len(STAGE_NAMES)} stages, got {len(stage_widths)}")
    rules = [TRANSITION_STYLE]
    for stage, widths in zip(STAGE_NAMES, stage_widths):
        if len(widths) != len(PSEUDOS):
            raise ValueError(f"stage {stage} needs {len(PSEUDOS)} widths, got {list(widths)}")
        rules.extend(
            f".ssb-{stage}-{pseudo}{{width:{width}px;}}" for pseudo, width in zip(PSEUDOS, widths)
        )
    return "".join(rules)


def owner_background(owner_name: str, light_back: str | None = None) -> str:
    """Background colour of a block: the owner's own colour, or one derived
    from a hash of the owner's name."""
    if light_back is not None:
        return light_back
    digest = hashlib.sha256(owner_name.encode("utf-8")).digest()
    red, green, blue = digest[1:4]
    return f"rgba({red}, {green}, {blue}, 0.2)"