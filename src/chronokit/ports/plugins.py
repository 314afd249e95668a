from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from chronokit.domain.time import Instant


@dataclass(frozen=True)
class InstantCapabilities:
    """The only view of an instant's internals that plugins receive.

    ``internal_date`` returns the naive datetime whose fields are the display-local
    calendar fields, ``offset`` the held offset in minutes. ``cast`` builds an instant
    from any accepted input and ``with_native`` derives a new instant from a naive
    display-local datetime while keeping the source's timezone context.
    """

    internal_date: Callable[["Instant"], datetime]
    offset: Callable[["Instant"], int]
    cast: Callable[[Any, str], "Instant"]
    with_native: Callable[["Instant", datetime, str], "Instant"]


Plugin = Callable[[type, InstantCapabilities], None]
