"""Region markers that trim a file down to the part worth showing."""

from __future__ import annotations

from typing import List

from ..config import RegionMarkers


class RegionFilter:
    """Keeps only the lines between start and end marker lines.

    A marker line is one whose stripped text equals the token. Each retained
    region is preceded by the placeholder and a final placeholder stands in
    for whatever follows the last region. Text without at least one start
    line followed by an end line passes through untouched; once a complete
    pair exists, a later start without an end keeps the rest of the file.
    """

    def __init__(self, markers: RegionMarkers | None = None) -> None:
        self.markers = markers or RegionMarkers()

    def has_regions(self, text: str) -> bool:
        opened = False
        for line in text.splitlines():
            stripped = line.strip()
            if stripped == self.markers.start:
                opened = True
            elif opened and stripped == self.markers.end:
                return True
        return False

    def apply(self, text: str) -> str:
        if not self.has_regions(text):
            return text

        output: List[str] = []
        inside = False
        for line in text.splitlines():
            stripped = line.strip()
            if stripped == self.markers.start:
                if not inside:
                    output.append(self.markers.placeholder)
                    inside = True
                continue
            if stripped == self.markers.end:
                inside = False
                continue
            if inside:
                output.append(line)
        output.append(self.markers.placeholder)
        return "\n".join(output)
