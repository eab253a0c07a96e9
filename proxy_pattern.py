from abc import ABC, abstractmethod
from typing import Iterable, Optional


class Image(ABC):
    @abstractmethod
    def display(self) -> str:
        pass


class RealImage(Image):
    """Expensive to create: loads from disk in the constructor"""

    loads = 0

    def __init__(self, filename: str):
        self.filename = filename
        self._load()

    def _load(self):
        RealImage.loads += 1

    def display(self):
        return f"Displaying {self.filename}"


class LazyImageProxy(Image):
    """Virtual proxy: defers loading until the first display"""

    def __init__(self, filename: str):
        self.filename = filename
        self._real: Optional[RealImage] = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def display(self):
        if self._real is None:
            self._real = RealImage(self.filename)
        return self._real.display()


class ProtectedImageProxy(Image):
    """Protection proxy: only allowed roles reach the real image"""

    def __init__(self, image: Image, role: str, allowed_roles: Iterable[str] = ("admin",)):
        self._image = image
        self._role = role
        self._allowed = set(allowed_roles)

    def display(self):
        if self._role not in self._allowed:
            raise PermissionError(f"Role '{self._role}' may not view this image")
        return self._image.display()


def main():
    print("=== Proxy Demo ===\n")

    photo = LazyImageProxy("holiday.png")
    print(f"Loaded before display: {photo.loaded}")
    print(photo.display())
    print(photo.display())
    print(f"Real loads: {RealImage.loads}")

    for role in ("admin", "guest"):
        proxy = ProtectedImageProxy(LazyImageProxy("payroll.png"), role)
        try:
            print(f"{role}: {proxy.display()}")
        except PermissionError as e:
            print(f"{role}: denied ({e})")


if __name__ == "__main__":
    main()
