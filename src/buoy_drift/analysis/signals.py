"""Building DriftSignals for component-level findings.

Component findings have no single source line. They are anchored at the
component's definition (``source.path`` / ``source.line``), falling back to
line 1, and carry the component name so baseline signatures stay distinct
per component.
"""

from __future__ import annotations

from typing import Optional

from ..models import Component, DriftSignal

PROJECT_LOCATION = "package.json"


def component_signal(
    component: Component,
    type: str,
    severity: str,
    value: str,
    message: str,
    suggestion: Optional[str] = None,
) -> DriftSignal:
    return DriftSignal(
        type=type,
        severity=severity,
        file=component.source.path or component.id,
        line=component.source.line or 1,
        value=value,
        message=message,
        suggestion=suggestion,
        component_name=component.name,
    )
