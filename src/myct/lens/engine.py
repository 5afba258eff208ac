"""Style resolution: merge matching lens rules for one node in one state."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from myct.lens.models import Device, LensDocument, LensGlobals, LensTarget, NodeState, StyleProps

_PADDING_SIDES = ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft")
_BASE_FONT_WEIGHT = 400


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _node_key(node: Any) -> tuple[str | None, str | None]:
    if isinstance(node, Mapping):
        return _enum_value(node.get("type")), node.get("role")
    return _enum_value(getattr(node, "type", None)), getattr(node, "role", None)


def _device_for(is_mobile: bool) -> str:
    return Device.MOBILE.value if is_mobile else Device.DESKTOP.value


def matches_target(
    target: LensTarget,
    node_type: str | None,
    role: str | None,
    state: NodeState | str,
    is_mobile: bool,
) -> bool:
    """True when every field set on ``target`` equals the node/state/viewport value."""

    if target.type is not None and target.type != node_type:
        return False
    if target.role is not None and target.role != role:
        return False
    if target.state is not None and target.state != _enum_value(state):
        return False
    if target.device is not None and target.device != _device_for(is_mobile):
        return False
    return True


def _expand_padding(styles: Mapping[str, Any]) -> StyleProps:
    expanded = dict(styles)
    if "padding" in expanded:
        padding = expanded.pop("padding")
        for side in _PADDING_SIDES:
            expanded[side] = padding
    return expanded


def _seed_from_globals(globals_: LensGlobals | None, is_mobile: bool) -> StyleProps:
    styles: StyleProps = {}
    if globals_ is None:
        return styles

    typography = globals_.typography
    if typography is not None:
        if typography.font_size is not None:
            styles["fontSize"] = typography.font_size
        styles["fontWeight"] = _BASE_FONT_WEIGHT

    override = globals_.responsive_for(is_mobile)
    if override is not None:
        if override.spacing is not None:
            for side in _PADDING_SIDES:
                styles[side] = override.spacing
        if override.font_size is not None:
            styles["fontSize"] = override.font_size
    return styles


def resolve_style(
    node: Any,
    lens: LensDocument,
    state: NodeState | str = NodeState.NORMAL,
    is_mobile: bool = False,
) -> StyleProps:
    """Resolve the style for ``node`` under ``lens``.

    Rules are applied in declaration order and the last matching rule wins
    on conflicting keys.  ``node`` can be a MYCT node or any mapping/object
    exposing ``type`` and ``role``.
    """
    node_type, role = _node_key(node)
    styles = _seed_from_globals(getattr(lens, "globals", None), is_mobile)

    for rule in getattr(lens, "rules", None) or ():
        if matches_target(rule.target, node_type, role, state, is_mobile):
            styles.update(_expand_padding(rule.styles))
    return styles
