"""
Drawing helpers for keylines and keyline matches.
"""

from contextlib import ExitStack

from ..core.mat import Mat
from ..core.types import Scalar
from ..core.vector import VectorOfDMatch, VectorOfi8
from ..types import I32, arg_container
from ._args import or_default
from ._bindings import call_draw_keylines, call_draw_line_matches
from .types import DrawLinesMatchesFlags, VectorOfKeyLine

__all__ = ["draw_keylines", "draw_line_matches"]


def _color(color: Scalar | None) -> Scalar:
    # Scalar.all(-1) lets native code pick a random color
    return Scalar.all(-1) if color is None else color


def draw_keylines(
    image: Mat,
    keylines: VectorOfKeyLine,
    out_image: Mat,
    color: Scalar | None = None,
    flags: int = DrawLinesMatchesFlags.DEFAULT,
) -> None:
    """Draw ``keylines`` of ``image`` onto ``out_image``.

    Args:
        image: Input image.
        keylines: Keylines to be drawn.
        out_image: Output image.
        color: Line color. Defaults to a random color per line.
        flags: ``DrawLinesMatchesFlags`` value.
    """
    call_draw_keylines(
        image.as_extern(),
        keylines.as_extern(),
        out_image.as_extern_mut(),
        _color(color).as_extern(),
        arg_container(I32, int(flags)).as_extern(),
    )


def draw_line_matches(
    img1: Mat,
    keylines1: VectorOfKeyLine,
    img2: Mat,
    keylines2: VectorOfKeyLine,
    matches1to2: VectorOfDMatch,
    out_img: Mat,
    match_color: Scalar | None = None,
    single_line_color: Scalar | None = None,
    matches_mask: VectorOfi8 | None = None,
    flags: int = DrawLinesMatchesFlags.DEFAULT,
) -> None:
    """Draw the matches between keylines of two images side by side.

    When both colors are left at their default, a matched pair and the line
    connecting it share one random color. ``matches_mask`` selects which
    matches are drawn (all by default).
    """
    with ExitStack() as stack:
        matches_mask = or_default(stack, matches_mask, VectorOfi8.new)
        call_draw_line_matches(
            img1.as_extern(),
            keylines1.as_extern(),
            img2.as_extern(),
            keylines2.as_extern(),
            matches1to2.as_extern(),
            out_img.as_extern_mut(),
            _color(match_color).as_extern(),
            _color(single_line_color).as_extern(),
            matches_mask.as_extern(),
            arg_container(I32, int(flags)).as_extern(),
        )
