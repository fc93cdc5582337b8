"""Home/guest point pairs, as used for ball points, set points and sets won."""


class PointResult:
    """Points of the home and the guest side.

    Missing points are None and count as zero when adding, ordering and in
    :meth:`compare`. Equality is strict, ``PointResult(None, None) != PointResult(0, 0)``,
    and ``<=``/``>=`` follow it, so those two results are neither ``<=`` nor ``>=``
    each other.
    """

    def __init__(self, home: int | None = None, guest: int | None = None, separator: str = ':'):
        self.home = home
        self.guest = guest
        self.separator = separator

    @classmethod
    def parse(cls, text: str, separator: str = ':') -> 'PointResult':
        """Parse a result like ``"25:23"``. Anything with fewer than two parts gives an empty result."""
        parts = [part.strip() for part in (text or '').split(separator) if part.strip()]
        if len(parts) < 2:
            return cls(None, None, separator)
        return cls(int(parts[0]), int(parts[1]), separator)

    def format(self, template: str) -> str:
        """Render with a two-placeholder template, e.g. ``"Home: {0} - Guest: {1}"``."""
        return template.format(
            self.home if self.home is not None else '-',
            self.guest if self.guest is not None else '-',
        )

    def __str__(self):
        return self.format(f'{{0}}{self.separator}{{1}}')

    def __repr__(self):  # pragma: no cover - debug helper
        return f"<PointResult {self}>"

    def __add__(self, other: 'PointResult') -> 'PointResult':
        return PointResult(
            (self.home or 0) + (other.home or 0),
            (self.guest or 0) + (other.guest or 0),
            self.separator,
        )

    def __sub__(self, other: 'PointResult') -> 'PointResult':
        home = (self.home or 0) - (other.home or 0)
        guest = (self.guest or 0) - (other.guest or 0)
        if home < 0 or guest < 0:
            raise ValueError(f'Subtracting {other} from {self} would lead to negative points')
        return PointResult(home, guest, self.separator)

    def _compare(self, other: 'PointResult') -> int:
        if (self.home or 0) != (other.home or 0):
            return -1 if (self.home or 0) < (other.home or 0) else 1
        # equal home points: fewer guest points is the better result
        if (self.guest or 0) != (other.guest or 0):
            return 1 if (self.guest or 0) < (other.guest or 0) else -1
        return 0

    def __eq__(self, other):
        if not isinstance(other, PointResult):
            return NotImplemented
        return (self.home, self.guest, self.separator) == (other.home, other.guest, other.separator)

    def __hash__(self):
        return hash((self.home, self.guest, self.separator))

    def __lt__(self, other):
        if not isinstance(other, PointResult):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, PointResult):
            return NotImplemented
        return self._compare(other) < 0 or self == other

    def __gt__(self, other):
        if not isinstance(other, PointResult):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, PointResult):
            return NotImplemented
        return self._compare(other) > 0 or self == other

    def compare(self, other: 'PointResult | None') -> int:
        """-1, 0 or 1. Any result is greater than a missing one."""
        if other is None:
            return 1
        return self._compare(other)
