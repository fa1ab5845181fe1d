"""Renderers consuming a finished grid through ``module_count``/``is_dark``."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Union

from PIL import Image, ImageDraw


class Grid(Protocol):
    module_count: int

    def is_dark(self, row: int, col: int) -> bool:
        ...


def _check(box_size: int, border: int) -> None:
    if box_size <= 0:
        raise ValueError("box_size must be positive")
    if border < 0:
        raise ValueError("border must be zero or positive")


def render_image(qr: Grid, box_size: int = 10, border: int = 4) -> Image.Image:
    """Draw ``qr`` as black squares on a white RGB image."""
    _check(box_size, border)
    size = (qr.module_count + border * 2) * box_size
    image = Image.new("RGB", (size, size), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    for row in range(qr.module_count):
        for col in range(qr.module_count):
            if not qr.is_dark(row, col):
                continue
            left = (col + border) * box_size
            top = (row + border) * box_size
            draw.rectangle((left, top, left + box_size - 1, top + box_size - 1), fill=(0, 0, 0))
    return image


def render_svg(qr: Grid, box_size: int = 10, border: int = 4) -> str:
    _check(box_size, border)
    size = (qr.module_count + border * 2) * box_size
    parts: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}" shape-rendering="crispEdges">',
        f'<rect x="0" y="0" width="{size}" height="{size}" fill="#ffffff"/>',
    ]
    for row in range(qr.module_count):
        for col in range(qr.module_count):
            if qr.is_dark(row, col):
                parts.append(
                    f'<rect x="{(col + border) * box_size}" y="{(row + border) * box_size}" '
                    f'width="{box_size}" height="{box_size}" fill="#000000"/>'
                )
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def render_text(qr: Grid, border: int = 2, dark: str = "##", light: str = "  ") -> str:
    _check(1, border)
    width = qr.module_count + border * 2
    lines = [light * width for _ in range(border)]
    for row in range(qr.module_count):
        cells = "".join(dark if qr.is_dark(row, col) else light for col in range(qr.module_count))
        lines.append(light * border + cells + light * border)
    lines.extend(light * width for _ in range(border))
    return "\n".join(lines) + "\n"


def save(qr: Grid, path: Union[str, Path], box_size: int = 10, border: int = 4) -> Path:
    """Write ``qr`` to ``path``; the suffix picks PNG, SVG or text output."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".png":
        render_image(qr, box_size=box_size, border=border).save(path, format="PNG")
    elif suffix == ".svg":
        path.write_text(render_svg(qr, box_size=box_size, border=border), encoding="utf-8")
    elif suffix == ".txt":
        path.write_text(render_text(qr, border=border), encoding="utf-8")
    else:
        raise ValueError(f"unsupported output format: {path.suffix or path.name}")
    return path
