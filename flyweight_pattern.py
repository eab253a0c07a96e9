from dataclasses import dataclass
from typing import Dict, List, Tuple

import structlog


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TreeType:
    """Intrinsic state shared by every tree of the same kind"""
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"{self.name} ({self.color}, {self.texture}) at ({x}, {y})"


class TreeTypeFactory:
    _types: Dict[Tuple[str, str, str], TreeType] = {}

    @classmethod
    def get(cls, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in cls._types:
            logger.debug("flyweight_created", name=name, color=color)
            cls._types[key] = TreeType(name, color, texture)
        return cls._types[key]

    @classmethod
    def count(cls) -> int:
        return len(cls._types)

    @classmethod
    def clear(cls):
        cls._types.clear()


@dataclass
class Tree:
    """Extrinsic state only: position plus a reference to the shared type"""
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self):
        self.trees: List[Tree] = []

    def plant(self, x, y, name, color, texture) -> Tree:
        tree = Tree(x, y, TreeTypeFactory.get(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self) -> List[str]:
        return [tree.draw() for tree in self.trees]


def main():
    print("=== Flyweight Demo ===\n")

    forest = Forest()
    for i in range(6):
        if i % 2:
            forest.plant(i, i * 2, "Oak", "green", "rough")
        else:
            forest.plant(i, i * 3, "Birch", "white", "smooth")

    for line in forest.draw():
        print(line)
    print(f"\nTrees planted: {len(forest.trees)}, tree types in memory: {TreeTypeFactory.count()}")


if __name__ == "__main__":
    main()
