"""Framework sprawl: more than one UI framework in a single project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..models import DriftSignal
from .signals import PROJECT_LOCATION

UI_FRAMEWORKS = (
    "react", "vue", "svelte", "angular", "solid", "preact", "lit", "stencil",
    "nextjs", "nuxt", "astro", "remix", "sveltekit", "gatsby", "react-native",
    "expo", "flutter",
)


@dataclass(frozen=True)
class FrameworkInfo:
    name: str
    version: str = ""


def check_framework_sprawl(frameworks: Sequence[FrameworkInfo]) -> Optional[DriftSignal]:
    """A warning when more than one UI framework is in use; the first listed is primary."""
    ui = [f for f in frameworks if f.name in UI_FRAMEWORKS]
    if len(ui) <= 1:
        return None

    names = [f.name for f in ui]
    return DriftSignal(
        type="framework-sprawl",
        severity="warning",
        file=PROJECT_LOCATION,
        line=1,
        value="-".join(names),
        message=(
            f"Framework sprawl detected: {len(ui)} UI frameworks in use ({', '.join(names)})"
        ),
        suggestion=f"Consider consolidating to a single UI framework ({ui[0].name})",
        component_name="Project Architecture",
    )
