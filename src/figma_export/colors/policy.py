"""Which styles are exported as colors."""
from __future__ import annotations

from figma_api.models import Style, StyleType

OPT_OUT_TOKEN = "none"


def is_usable(style: Style) -> bool:
    """True for fill styles that are not opted out via their description.

    An empty description marks a color shared by every platform. Any
    description containing ``none`` excludes the style from export.
    """
    if style.style_type is not StyleType.FILL:
        return False
    if not style.description:
        return True
    return OPT_OUT_TOKEN not in style.description
