from __future__ import annotations

import json

from .models import IconRecord

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
VIEW_BOX = "0 0 24 24"
DEFAULT_COLOR = "currentColor"
DEFAULT_SIZE = 24

# Rendered as Svelte expressions bound to props instead of literal strings.
DYNAMIC_ATTRS = ("width", "height", "fill")

PROP_FIELDS = [
    "color?: string;",
    "size?: string | number;",
    "title?: string;",
    "class?: string;",
    "style?: string;",
    "[key: string]: any;",
]


def default_svg_attrs() -> dict[str, str]:
    return {
        "xmlns": SVG_NAMESPACE,
        "width": "size",
        "height": "size",
        "fill": "color",
        "viewBox": VIEW_BOX,
    }


def attrs_to_string(attrs: dict[str, str], *, dynamic: tuple[str, ...] = DYNAMIC_ATTRS) -> str:
    parts: list[str] = []
    for key, value in attrs.items():
        if key in dynamic:
            parts.append(f"{key}={{{value}}}")
        else:
            parts.append(f'{key}="{value}"')
    return " ".join(parts)


def js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_component(identifier: str, record: IconRecord, *, source_name: str = "Simple Icons") -> str:
    props = [f"    {field}" for field in PROP_FIELDS]
    return "\n".join(
        [
            '<script lang="ts">',
            "  /**",
            f"   * {identifier} icon from {source_name}",
            "   */",
            "  interface Props {",
            *props,
            "  }",
            "",
            "  let {",
            f"    color = '{DEFAULT_COLOR}',",
            f"    size = {DEFAULT_SIZE},",
            f"    title = {js_string(record.title)},",
            "    class: className = '',",
            "    style = '',",
            "    ...rest",
            "  }: Props = $props();",
            "</script>",
            "",
            "<svg",
            f"  {attrs_to_string(default_svg_attrs())}",
            "  class={className}",
            "  style={style}",
            "  {...rest}",
            ">",
            "  <title>{title}</title>",
            f'  <path d="{record.path_data}" />',
            "</svg>",
            "",
        ]
    )


def props_type_name(prefix: str) -> str:
    return f"{prefix}ComponentProps"


def render_props_type(prefix: str, *, source_name: str = "Simple Icons") -> str:
    fields = [f"    {field}" for field in PROP_FIELDS]
    return "\n".join(
        [
            "/**",
            f" * Type definition for {source_name} components",
            " */",
            "",
            f"export type {props_type_name(prefix)} = {{",
            *fields,
            "}",
            "",
        ]
    )


def render_export(identifier: str, module_path: str) -> str:
    return f"export {{ default as {identifier} }} from '{module_path}';\n"
