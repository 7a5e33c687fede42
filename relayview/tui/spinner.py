"""Frame-based spinner used while the relay list loads."""

from dataclasses import dataclass, replace

# name -> (frames, seconds per frame)
SPINNERS: dict[str, tuple[tuple[str, ...], float]] = {
    "line": (("|", "/", "-", "\\"), 1 / 10),
    "dot": (("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"), 1 / 10),
    "minidot": (("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"), 1 / 12),
    "pulse": (("█", "▓", "▒", "░"), 1 / 8),
    "globe": (("🌍", "🌎", "🌏"), 1 / 4),
    "moon": (("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘"), 1 / 8),
    "ellipsis": (("", ".", "..", "..."), 1 / 3),
}


@dataclass(frozen=True)
class Spinner:
    """Immutable spinner position."""

    frames: tuple[str, ...]
    interval: float
    frame: int = 0

    @classmethod
    def named(cls, name: str) -> "Spinner":
        frames, interval = SPINNERS[name]
        return cls(frames=frames, interval=interval)

    @property
    def glyph(self) -> str:
        return self.frames[self.frame]

    def advance(self) -> "Spinner":
        """Return the spinner moved on by one frame."""
        return replace(self, frame=(self.frame + 1) % len(self.frames))
